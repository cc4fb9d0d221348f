"""Month arithmetic with end-of-month clamping."""

from calendar import isleap, monthrange
from datetime import date
from typing import TypeVar

from dateutil.relativedelta import relativedelta

from calshift.fields import mode_of
from calshift.validation import InvalidArgumentError, validate_count, validate_instant

D = TypeVar("D", bound=date)


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return isleap(year)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in month (1-12) of year."""
    if not 1 <= month <= 12:
        raise InvalidArgumentError(f"month must be in 1..12, got {month}")
    return monthrange(year, month)[1]


def add_months(start: D, count: int) -> D:
    """Add count months to start.

    The day of month is clamped to the last day of the target month, so
    Jan 31 + 1 month is Feb 29 in a leap year and Feb 28 otherwise. Fields
    are read and written in start's own mode; time of day, type and tzinfo
    are preserved.

    Raises:
        InvalidArgumentError: If start is not a usable date, count is not an
            integer, or the result falls outside the supported year range.
    """
    validate_instant(start, "start")
    count = validate_count(count)
    mode_of(start)  # rejects non-UTC aware datetimes

    if count == 0:
        return start

    try:
        return start + relativedelta(months=count)
    except (OverflowError, ValueError) as err:
        raise InvalidArgumentError(
            f"result out of range: {start!r} + {count} months"
        ) from err


def subtract_months(start: D, count: int) -> D:
    """Subtract count months from start."""
    return add_months(start, -validate_count(count))


def add_years(start: D, count: int) -> D:
    """Add count years to start. Feb 29 clamps to Feb 28 in common years."""
    return add_months(start, validate_count(count) * 12)
