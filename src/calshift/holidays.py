"""Holiday sets keyed by calendar date."""

from datetime import date
from typing import Iterable, Iterator

from calshift.validation import validate_instant

DateKey = tuple[int, int, int]


def date_key(instant: date) -> DateKey:
    """Return the (year, month, day) of instant on its own wall clock.

    Aware holidays in any zone are accepted; only their calendar date is kept.
    """
    validate_instant(instant, "holiday")
    return instant.year, instant.month, instant.day


class HolidaySet:
    """Immutable set of holiday dates.

    Membership compares (year, month, day) only. Time of day and mode are
    ignored, so a UTC midnight holiday matches a local 3pm candidate on the
    same calendar date.
    """

    __slots__ = ("_keys",)

    def __init__(self, holidays: Iterable[date] = ()) -> None:
        if isinstance(holidays, HolidaySet):
            self._keys: frozenset[DateKey] = holidays._keys
        else:
            self._keys = frozenset(date_key(h) for h in holidays)

    @classmethod
    def coerce(cls, holidays: "Iterable[date] | HolidaySet | None") -> "HolidaySet":
        """Return holidays as a HolidaySet, reusing it if it already is one."""
        if isinstance(holidays, HolidaySet):
            return holidays
        return cls(() if holidays is None else holidays)

    def __contains__(self, instant: object) -> bool:
        if not isinstance(instant, date):
            return False
        return date_key(instant) in self._keys

    def __iter__(self) -> Iterator[date]:
        for year, month, day in sorted(self._keys):
            yield date(year, month, day)

    def __len__(self) -> int:
        return len(self._keys)

    def __bool__(self) -> bool:
        return bool(self._keys)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HolidaySet):
            return NotImplemented
        return self._keys == other._keys

    def __hash__(self) -> int:
        return hash(self._keys)

    def __or__(self, other: "Iterable[date] | HolidaySet") -> "HolidaySet":
        result = HolidaySet()
        result._keys = self._keys | HolidaySet.coerce(other)._keys
        return result

    def __repr__(self) -> str:
        return f"HolidaySet({len(self._keys)} dates)"
