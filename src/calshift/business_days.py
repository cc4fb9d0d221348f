"""Business day arithmetic.

A business day is a Monday-Friday date that is not in the supplied holiday
set. Holidays are passed per call; there is no persisted holiday calendar.
"""

from datetime import date, timedelta
from typing import Iterable, TypeVar

from calshift.config import get_calshift_config
from calshift.fields import FRIDAY, MONDAY, WEEKEND, weekday_of
from calshift.holidays import HolidaySet
from calshift.logging import get_logger, timed_block
from calshift.validation import InvalidArgumentError, validate_count, validate_instant

D = TypeVar("D", bound=date)

_log = get_logger(__name__)


def is_weekend(instant: date) -> bool:
    """Return True if instant falls on a Saturday or Sunday."""
    return weekday_of(instant) in WEEKEND


def is_business_day(
    instant: date, holidays: Iterable[date] | HolidaySet = ()
) -> bool:
    """Return True if instant is a weekday that is not a holiday."""
    return not is_weekend(instant) and instant not in HolidaySet.coerce(holidays)


def _step_weekday(current: D, direction: int) -> D:
    """Move one weekday in direction, skipping Saturday and Sunday."""
    current += timedelta(days=direction)
    while weekday_of(current) in WEEKEND:
        current += timedelta(days=direction)
    return current


def _offset_weekdays(start: D, count: int) -> D:
    """Move count weekdays from start, ignoring holidays.

    Whole weeks are jumped in one step; only the remainder is walked.
    """
    direction = 1 if count > 0 else -1
    weeks, rest = divmod(abs(count), 5)
    current = start + timedelta(weeks=direction * weeks)
    for _ in range(rest):
        current = _step_weekday(current, direction)

    # A whole-week jump from a weekend start lands on a weekend. Walking
    # would have stopped on the last weekday reached instead.
    weekday = weekday_of(current)
    if weekday in WEEKEND:
        if direction > 0:
            back = (weekday - FRIDAY) % 7
            current -= timedelta(days=back)
        else:
            ahead = (MONDAY - weekday) % 7
            current += timedelta(days=ahead)
    return current


def add_business_days(
    start: D,
    count: int,
    holidays: Iterable[date] | HolidaySet = (),
) -> D:
    """Add count business days to start.

    Each step moves to the next weekday in the direction of count. Steps that
    land on a holiday are skipped without consuming any of count, so neither
    the result nor any date stepped through on the way counts a holiday or
    weekend as a business day.

    A count of zero returns start unchanged, even if start is itself a
    weekend or holiday.

    Args:
        start: Date or datetime to move from. Time of day, type and tzinfo
            are preserved.
        count: Signed number of business days. Negative moves backward.
        holidays: Dates to skip, compared by (year, month, day) only.

    Returns:
        The resulting business day.

    Raises:
        InvalidArgumentError: If start is not a usable date or count is not
            an integer within the configured cap, or the result falls
            outside the supported year range.

    Example:
        >>> add_business_days(datetime(2024, 7, 1), 3, [date(2024, 7, 4)])
        datetime.datetime(2024, 7, 8, 0, 0)
    """
    validate_instant(start, "start")
    count = validate_count(count)
    weekday_of(start)  # rejects non-UTC aware datetimes

    if count == 0:
        return start

    threshold = get_calshift_config().large_count_warning
    if threshold is not None and abs(count) >= threshold:
        _log.warning("large_business_day_count", count=count, threshold=threshold)

    holiday_set = HolidaySet.coerce(holidays)
    try:
        if not holiday_set:
            return _offset_weekdays(start, count)
        with timed_block(_log, "business_days_added", count=count):
            current, skipped = _walk_business_days(start, count, holiday_set)
    except (OverflowError, ValueError) as err:
        raise InvalidArgumentError(
            f"result out of range: {start!r} + {count} business days"
        ) from err

    if skipped:
        _log.debug("holidays_skipped", count=count, skipped=skipped)
    return current


def _walk_business_days(start: D, count: int, holiday_set: HolidaySet) -> tuple[D, int]:
    """Step weekdays until count non-holidays are consumed.

    Returns the final date and the number of holidays stepped over.
    """
    direction = 1 if count > 0 else -1
    remaining = abs(count)
    skipped = 0
    current = start
    while remaining > 0:
        current = _step_weekday(current, direction)
        if current in holiday_set:
            skipped += 1
            continue
        remaining -= 1
    return current, skipped


def subtract_business_days(
    start: D,
    count: int,
    holidays: Iterable[date] | HolidaySet = (),
) -> D:
    """Subtract count business days from start."""
    return add_business_days(start, -validate_count(count), holidays)
