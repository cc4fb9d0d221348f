"""Calendar field access for local and UTC dates.

Every value handled by calshift carries its own frame of reference:

* naive ``datetime`` and plain ``date`` values are local wall-clock values;
* aware ``datetime`` values in UTC are UTC values.

Fields are always read in the value's own frame, so a UTC value can never be
read back through local fields (or the other way round). Aware values in any
other zone are rejected rather than converted.
"""

from datetime import date, datetime, timedelta, timezone
from enum import Enum
from typing import NamedTuple, TypeVar

from calshift.validation import InvalidArgumentError, validate_instant

D = TypeVar("D", bound=date)

SUNDAY = 0
MONDAY = 1
FRIDAY = 5
SATURDAY = 6
WEEKEND = frozenset({SATURDAY, SUNDAY})

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


class Mode(str, Enum):
    """Frame of reference used to read or build calendar fields."""

    LOCAL = "local"
    UTC = "utc"


class CalendarFields(NamedTuple):
    """Date fields of a value read in its own mode.

    month is 1-12; weekday is 0=Sunday..6=Saturday (the ``%w`` convention).
    """

    year: int
    month: int
    day: int
    weekday: int


def mode_of(instant: date) -> Mode:
    """Return the mode a value was constructed in.

    Raises:
        InvalidArgumentError: If instant is not a date, is NaT, or is aware
            in a zone other than UTC.
    """
    validate_instant(instant)
    if not isinstance(instant, datetime) or instant.tzinfo is None:
        return Mode.LOCAL

    offset = instant.utcoffset()
    if offset is None:
        return Mode.LOCAL
    if offset == timedelta(0) and instant.tzname() == "UTC":
        return Mode.UTC
    raise InvalidArgumentError(
        f"only naive or UTC datetimes are supported, got tzinfo={instant.tzinfo!r}"
    )


def _as_mode(mode: Mode | str) -> Mode:
    try:
        return Mode(mode)
    except ValueError as err:
        raise InvalidArgumentError(f"unknown mode: {mode!r}") from err


def _check_mode(instant: date, mode: Mode | None) -> Mode:
    actual = mode_of(instant)
    if mode is not None and _as_mode(mode) is not actual:
        raise InvalidArgumentError(
            f"cannot read {_as_mode(mode).value} fields from a {actual.value} value"
        )
    return actual


def _weekday(instant: date) -> int:
    return instant.isoweekday() % 7


def get_fields(instant: date, mode: Mode | None = None) -> CalendarFields:
    """Extract (year, month, day, weekday) from instant.

    Args:
        instant: Date or datetime to read.
        mode: Expected mode. None reads in the value's own mode; any other
            value must match it.

    Raises:
        InvalidArgumentError: If mode does not match how instant was built.
    """
    _check_mode(instant, mode)
    return CalendarFields(instant.year, instant.month, instant.day, _weekday(instant))


def weekday_of(instant: date, mode: Mode | None = None) -> int:
    """Return the weekday of instant, 0=Sunday..6=Saturday."""
    _check_mode(instant, mode)
    return _weekday(instant)


def _normalize_month(year: int, month: int) -> tuple[int, int]:
    """Roll an out-of-range month into the neighbouring years."""
    index = year * 12 + (month - 1)
    return index // 12, index % 12 + 1


def with_fields(instant: D, year: int, month: int, day: int) -> D:
    """Rebuild instant with new date fields.

    Out-of-range month and day values roll over the way a calendar does
    (month 13 is January of the next year, day 0 is the last day of the
    previous month). Type, time of day and tzinfo are preserved.

    Raises:
        InvalidArgumentError: If the resulting year is out of range.
    """
    year, month = _normalize_month(year, month)
    try:
        anchor = instant.replace(year=year, month=month, day=1)
        return anchor + timedelta(days=day - 1)
    except (TypeError, ValueError, OverflowError) as err:
        raise InvalidArgumentError(
            f"date out of range: year={year}, month={month}, day={day}"
        ) from err


def construct_instant(
    year: int,
    month: int,
    day: int,
    mode: Mode = Mode.LOCAL,
    *,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
) -> datetime:
    """Build a datetime from calendar fields in the given mode.

    Month and day overflow is normalized as in with_fields. LOCAL values are
    naive; UTC values carry ``timezone.utc``.
    """
    tzinfo = timezone.utc if _as_mode(mode) is Mode.UTC else None
    try:
        anchor = datetime(
            2000, 1, 1, hour, minute, second, microsecond, tzinfo=tzinfo
        )
    except (TypeError, ValueError) as err:
        raise InvalidArgumentError(f"invalid time of day: {err}") from err
    return with_fields(anchor, year, month, day)


def local(year: int, month: int, day: int, **time_fields: int) -> datetime:
    """Build a naive local wall-clock datetime."""
    return construct_instant(year, month, day, Mode.LOCAL, **time_fields)


def utc(year: int, month: int, day: int, **time_fields: int) -> datetime:
    """Build a UTC datetime."""
    return construct_instant(year, month, day, Mode.UTC, **time_fields)


def from_epoch_ms(ms: int) -> datetime:
    """Build a UTC datetime from milliseconds since the Unix epoch."""
    if isinstance(ms, bool) or not isinstance(ms, int):
        raise InvalidArgumentError(f"ms must be an integer, got {type(ms).__name__}")
    try:
        return _EPOCH + ms * _ONE_MS
    except OverflowError as err:
        raise InvalidArgumentError(f"epoch milliseconds out of range: {ms}") from err


def to_epoch_ms(instant: date) -> int:
    """Return milliseconds since the Unix epoch.

    LOCAL datetimes are interpreted in the system zone, as
    ``datetime.timestamp()`` does. Plain dates are read as local midnight.
    """
    mode = mode_of(instant)
    if mode is Mode.UTC:
        return (instant - _EPOCH) // _ONE_MS
    if not isinstance(instant, datetime):
        instant = datetime(instant.year, instant.month, instant.day)
    return round(instant.timestamp() * 1000)
