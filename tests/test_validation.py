"""Tests for argument validation."""

from datetime import date, datetime

import numpy as np
import pandas as pd
import pytest

from calshift import configure_calshift
from calshift.validation import InvalidArgumentError, validate_count, validate_instant


class TestValidateInstant:
    """Test validate_instant function."""

    def test_accepts_dates_and_datetimes(self):
        for value in (date(2024, 1, 1), datetime(2024, 1, 1), pd.Timestamp("2024-01-01")):
            assert validate_instant(value) is value

    def test_rejects_nat(self):
        with pytest.raises(InvalidArgumentError, match="must not be NaT"):
            validate_instant(pd.NaT)

    def test_rejects_strings(self):
        with pytest.raises(InvalidArgumentError, match="start must be a date"):
            validate_instant("2024-01-01", "start")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            validate_instant(None)


class TestValidateCount:
    """Test validate_count function."""

    def test_accepts_ints(self):
        assert validate_count(0) == 0
        assert validate_count(-12) == -12

    def test_accepts_numpy_integers(self):
        result = validate_count(np.int64(5))
        assert result == 5
        assert type(result) is int

    @pytest.mark.parametrize("value", [1.0, np.float64(2.0), True, "1", None])
    def test_rejects_non_integers(self, value):
        with pytest.raises(InvalidArgumentError, match="must be an integer"):
            validate_count(value)

    def test_max_count(self):
        configure_calshift(max_count=5)
        assert validate_count(-5) == -5
        with pytest.raises(InvalidArgumentError, match="abs\\(periods\\) must be <= 5"):
            validate_count(6, "periods")
