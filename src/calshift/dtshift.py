"""Shift date columns of pandas and polars objects through a calendar."""

from datetime import date
from typing import Any

import pandas as pd

from calshift.calendar import BDateCalendar, Calendar
from calshift.logging import get_logger
from calshift.validation import InvalidArgumentError, validate_count

_log = get_logger(__name__)


def _is_polars(data: Any) -> bool:
    """Check if data is a polars DataFrame or Series."""
    try:
        import polars as pl
        return isinstance(data, (pl.DataFrame, pl.Series))
    except ImportError:
        return False


def _is_pandas(data: Any) -> bool:
    """Check if data is a pandas DataFrame or Series."""
    return isinstance(data, (pd.DataFrame, pd.Series))


def shift_dates(
    data: Any,
    periods: int,
    calendar: Calendar | None = None,
    column: str = "as_of_date",
) -> Any:
    """Shift every date in data by N calendar periods.

    Args:
        data: pandas Series/DataFrame or polars Series/DataFrame. For
            DataFrames the dates are read from ``column``; pandas DataFrames
            may hold it as a column or as an index level.
        periods: Signed number of periods, passed to calendar.dt_offset.
        calendar: Calendar to shift with. Defaults to BDateCalendar.
        column: Name of the date column for DataFrame inputs.

    Returns:
        A new object of the same type with shifted dates. Nulls are kept.

    Raises:
        InvalidArgumentError: If data is not a supported type or the column
            is missing.
    """
    periods = validate_count(periods, "periods")
    calendar = calendar or BDateCalendar()

    if _is_polars(data):
        result = _shift_polars(data, periods, calendar, column)
    elif _is_pandas(data):
        result = _shift_pandas(data, periods, calendar, column)
    else:
        raise InvalidArgumentError(f"Unsupported data type: {type(data)}")

    _log.debug(
        "dates_shifted",
        rows=len(data),
        periods=periods,
        calendar=type(calendar).__name__,
    )
    return result


def _offset_map(values: list[Any], periods: int, calendar: Calendar) -> dict[date, date]:
    """Map each distinct non-null date to its shifted value."""
    return {
        v: calendar.dt_offset(v, periods)
        for v in set(values)
        if v is not None and not pd.isna(v)
    }


def _shift_pandas_series(series: pd.Series, periods: int, calendar: Calendar) -> pd.Series:
    """Shift a pandas Series of dates."""
    if series.empty:
        return series.copy()
    mapping = _offset_map(series.tolist(), periods, calendar)
    shifted = [mapping.get(v, v) if not pd.isna(v) else v for v in series.tolist()]
    return pd.Series(shifted, index=series.index, name=series.name, dtype=series.dtype)


def _shift_pandas(
    data: pd.Series | pd.DataFrame, periods: int, calendar: Calendar, column: str
) -> pd.Series | pd.DataFrame:
    """Shift dates for a pandas Series or DataFrame."""
    if isinstance(data, pd.Series):
        return _shift_pandas_series(data, periods, calendar)

    index_names = [n for n in data.index.names if n is not None]
    if column in data.columns:
        result = data.copy()
        result[column] = _shift_pandas_series(data[column], periods, calendar)
        return result

    if column in index_names:
        # Reset index to modify the date level, then restore it
        result = data.reset_index()
        result[column] = _shift_pandas_series(result[column], periods, calendar)
        return result.set_index(index_names)

    raise InvalidArgumentError(f"DataFrame missing '{column}' in index or columns")


def _shift_polars(data: Any, periods: int, calendar: Calendar, column: str) -> Any:
    """Shift dates for a polars Series or DataFrame."""
    import polars as pl

    if isinstance(data, pl.Series):
        values = data.to_list()
        mapping = _offset_map(values, periods, calendar)
        shifted = [mapping.get(v) if v is not None else None for v in values]
        return pl.Series(data.name, shifted, dtype=data.dtype)

    if column not in data.columns:
        raise InvalidArgumentError(f"DataFrame missing '{column}' column")

    if data.height == 0:
        return data.clone()

    return data.with_columns(
        _shift_polars(data.get_column(column), periods, calendar, column)
    )
