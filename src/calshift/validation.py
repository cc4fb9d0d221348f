"""Input validation for calshift arithmetic."""

from datetime import date
from numbers import Integral
from typing import Any

import pandas as pd

from calshift.config import get_calshift_config


class InvalidArgumentError(ValueError):
    """Raised when an argument violates a precondition."""
    pass


def validate_instant(value: Any, name: str = "instant") -> date:
    """Check that value is a usable date or datetime.

    pandas.Timestamp is accepted (it subclasses datetime) but NaT is not.

    Raises:
        InvalidArgumentError: If value is not a date/datetime or is NaT.
    """
    if value is pd.NaT:
        raise InvalidArgumentError(f"{name} must not be NaT")
    if not isinstance(value, date):
        raise InvalidArgumentError(
            f"{name} must be a date or datetime, got {type(value).__name__}"
        )
    return value


def validate_count(value: Any, name: str = "count") -> int:
    """Check that value is a signed integer count within the configured cap.

    Booleans and floats are rejected, even when integral, since they are
    almost always a caller mistake.

    Raises:
        InvalidArgumentError: If value is not an integer or exceeds max_count.
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidArgumentError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    count = int(value)

    max_count = get_calshift_config().max_count
    if max_count is not None and abs(count) > max_count:
        raise InvalidArgumentError(
            f"abs({name}) must be <= {max_count}, got {count}"
        )
    return count
