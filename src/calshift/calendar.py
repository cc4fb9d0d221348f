"""Calendar implementations for stepping through and offsetting dates."""

from abc import ABC, abstractmethod
from datetime import date, timedelta
from typing import Iterable, Iterator, TypeVar

from calshift.business_days import add_business_days, is_weekend
from calshift.fields import mode_of
from calshift.holidays import HolidaySet
from calshift.months import add_months
from calshift.validation import InvalidArgumentError, validate_count

D = TypeVar("D", bound=date)


def _check_bounds(start_dt: date, end_dt: date) -> None:
    if mode_of(start_dt) is not mode_of(end_dt):
        raise InvalidArgumentError("start_dt and end_dt must share a mode")


class Calendar(ABC):
    """Abstract base class for calendars."""

    @abstractmethod
    def dt_range(self, start_dt: D, end_dt: D) -> Iterator[D]:
        """Generate valid dates in range [start_dt, end_dt]."""
        pass

    @abstractmethod
    def dt_offset(self, dt: D, periods: int) -> D:
        """Shift datetime by N calendar periods."""
        pass


class DateCalendar(Calendar):
    """Calendar that includes all dates."""

    def dt_range(self, start_dt: D, end_dt: D) -> Iterator[D]:
        _check_bounds(start_dt, end_dt)
        current = start_dt
        while current <= end_dt:
            yield current
            current += timedelta(days=1)

    def dt_offset(self, dt: D, periods: int) -> D:
        mode_of(dt)
        periods = validate_count(periods, "periods")
        try:
            return dt + timedelta(days=periods)
        except (OverflowError, ValueError) as err:
            raise InvalidArgumentError(
                f"result out of range: {dt!r} + {periods} days"
            ) from err


class BDateCalendar(Calendar):
    """Business date calendar - excludes weekends (Sat/Sun)."""

    def is_session(self, dt: date) -> bool:
        """Return True if dt is a valid date on this calendar."""
        return not is_weekend(dt)

    def dt_range(self, start_dt: D, end_dt: D) -> Iterator[D]:
        _check_bounds(start_dt, end_dt)
        current = start_dt
        while current <= end_dt:
            if self.is_session(current):
                yield current
            current += timedelta(days=1)

    def dt_offset(self, dt: D, periods: int) -> D:
        return add_business_days(dt, periods)


class HolidayCalendar(BDateCalendar):
    """Business date calendar that also excludes the given holidays."""

    def __init__(self, holidays: Iterable[date] | HolidaySet = ()) -> None:
        self._holidays = HolidaySet(holidays)

    @property
    def holidays(self) -> HolidaySet:
        return self._holidays

    def is_session(self, dt: date) -> bool:
        return super().is_session(dt) and dt not in self._holidays

    def dt_offset(self, dt: D, periods: int) -> D:
        return add_business_days(dt, periods, self._holidays)

    def __repr__(self) -> str:
        return f"HolidayCalendar(holidays={len(self._holidays)})"


class MonthCalendar(Calendar):
    """Calendar stepping in whole months with end-of-month clamping."""

    def dt_range(self, start_dt: D, end_dt: D) -> Iterator[D]:
        """Generate start_dt + k months for k = 0, 1, ... up to end_dt.

        Each date is offset from start_dt, not from the previous date, so a
        range starting Jan 31 yields Feb 29 and then Mar 31.
        """
        _check_bounds(start_dt, end_dt)
        k = 0
        current = start_dt
        while current <= end_dt:
            yield current
            k += 1
            current = add_months(start_dt, k)

    def dt_offset(self, dt: D, periods: int) -> D:
        return add_months(dt, periods)
