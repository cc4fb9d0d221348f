"""calshift - Calendar-aware business day and month arithmetic."""

from calshift.business_days import (
    add_business_days,
    is_business_day,
    is_weekend,
    subtract_business_days,
)
from calshift.calendar import (
    BDateCalendar,
    Calendar,
    DateCalendar,
    HolidayCalendar,
    MonthCalendar,
)
from calshift.config import (
    CalshiftConfig,
    configure_calshift,
    get_calshift_config,
    reset_calshift_config,
)
from calshift.dtshift import shift_dates
from calshift.fields import (
    CalendarFields,
    Mode,
    construct_instant,
    from_epoch_ms,
    get_fields,
    local,
    mode_of,
    to_epoch_ms,
    utc,
    weekday_of,
    with_fields,
)
from calshift.holidays import HolidaySet
from calshift.logging import configure_logging, get_logger
from calshift.months import (
    add_months,
    add_years,
    days_in_month,
    is_leap_year,
    subtract_months,
)
from calshift.validation import InvalidArgumentError

__all__ = [
    # Business days
    "add_business_days",
    "subtract_business_days",
    "is_business_day",
    "is_weekend",
    "HolidaySet",
    # Months
    "add_months",
    "subtract_months",
    "add_years",
    "days_in_month",
    "is_leap_year",
    # Fields
    "CalendarFields",
    "Mode",
    "construct_instant",
    "from_epoch_ms",
    "get_fields",
    "local",
    "mode_of",
    "to_epoch_ms",
    "utc",
    "weekday_of",
    "with_fields",
    # Calendar
    "Calendar",
    "BDateCalendar",
    "DateCalendar",
    "HolidayCalendar",
    "MonthCalendar",
    # DataFrames
    "shift_dates",
    # Errors
    "InvalidArgumentError",
    # Logging
    "configure_logging",
    "get_logger",
    # Config
    "CalshiftConfig",
    "configure_calshift",
    "get_calshift_config",
    "reset_calshift_config",
]
__version__ = "0.1.0"
