"""Tests for HolidaySet."""

from datetime import date, datetime, timedelta, timezone

import pandas as pd
import pytest

from calshift import HolidaySet, InvalidArgumentError, utc


class TestHolidaySet:
    """Test HolidaySet membership and set behaviour."""

    def test_membership_ignores_time(self):
        holidays = HolidaySet([datetime(2024, 7, 4, 8)])
        assert datetime(2024, 7, 4, 23, 59) in holidays
        assert date(2024, 7, 4) in holidays

    def test_membership_ignores_mode(self):
        holidays = HolidaySet([utc(2024, 12, 25)])
        assert datetime(2024, 12, 25, 17) in holidays

    def test_aware_holiday_in_other_zone(self):
        tokyo = timezone(timedelta(hours=9))
        holidays = HolidaySet([datetime(2024, 1, 1, 1, tzinfo=tokyo)])
        assert date(2024, 1, 1) in holidays
        assert utc(2024, 1, 1) in holidays
        assert date(2023, 12, 31) not in holidays

    def test_non_member(self):
        holidays = HolidaySet([date(2024, 7, 4)])
        assert date(2024, 7, 5) not in holidays
        assert date(2023, 7, 4) not in holidays

    def test_non_date_is_not_member(self):
        assert "2024-07-04" not in HolidaySet([date(2024, 7, 4)])

    def test_duplicates_collapse(self):
        holidays = HolidaySet([date(2024, 1, 1), datetime(2024, 1, 1, 12)])
        assert len(holidays) == 1

    def test_iterates_sorted_dates(self):
        holidays = HolidaySet([date(2024, 12, 25), utc(2024, 1, 1)])
        assert list(holidays) == [date(2024, 1, 1), date(2024, 12, 25)]

    def test_empty_is_falsy(self):
        assert not HolidaySet()
        assert HolidaySet([date(2024, 1, 1)])

    def test_union(self, us_holidays_2024):
        combined = HolidaySet(us_holidays_2024) | [date(2024, 12, 24)]
        assert len(combined) == len(us_holidays_2024) + 1
        assert date(2024, 12, 24) in combined

    def test_equality_and_hash(self):
        a = HolidaySet([date(2024, 1, 1)])
        b = HolidaySet([datetime(2024, 1, 1, 9)])
        assert a == b
        assert hash(a) == hash(b)

    def test_coerce_reuses_instance(self):
        holidays = HolidaySet([date(2024, 1, 1)])
        assert HolidaySet.coerce(holidays) is holidays
        assert len(HolidaySet.coerce(None)) == 0

    def test_accepts_generator(self):
        holidays = HolidaySet(date(2024, 1, d) for d in (1, 15))
        assert len(holidays) == 2

    def test_invalid_entry(self):
        with pytest.raises(InvalidArgumentError):
            HolidaySet([date(2024, 1, 1), None])

    def test_accepts_pandas_dates(self):
        holidays = HolidaySet.coerce(pd.to_datetime(["2024-07-04", "2024-12-25"]))
        assert date(2024, 7, 4) in holidays
        assert len(holidays) == 2
