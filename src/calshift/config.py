"""Module-level configuration for calshift defaults."""

import threading
from dataclasses import dataclass


@dataclass
class CalshiftConfig:
    """Configuration for calshift defaults."""

    max_count: int | None = None  # None = no cap on abs(count)
    large_count_warning: int | None = 100_000  # None = never warn


# Module-level singleton
_calshift_config: CalshiftConfig | None = None
_config_lock = threading.Lock()

_UNSET = object()


def get_calshift_config() -> CalshiftConfig:
    """Get the global calshift configuration singleton."""
    global _calshift_config
    if _calshift_config is None:
        with _config_lock:
            if _calshift_config is None:
                _calshift_config = CalshiftConfig()
    return _calshift_config


def _check_limit(name: str, value: object) -> None:
    # Imported here: validation reads this module's singleton.
    from calshift.validation import InvalidArgumentError

    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidArgumentError(
            f"{name} must be a non-negative int or None, got {value!r}"
        )


def configure_calshift(
    max_count: int | None | object = _UNSET,
    large_count_warning: int | None | object = _UNSET,
) -> None:
    """Configure default calshift settings.

    Args:
        max_count: Largest abs(count) accepted by the business day and month
            advancers. Pass None to remove the cap (the default).
        large_count_warning: abs(count) at which the business day advancer
            logs a warning. Pass None to disable the warning.

    Example:
        from calshift import configure_calshift

        # Reject requests for more than ten years of business days
        configure_calshift(max_count=2_610)
    """
    if max_count is not _UNSET:
        _check_limit("max_count", max_count)
    if large_count_warning is not _UNSET:
        _check_limit("large_count_warning", large_count_warning)

    config = get_calshift_config()
    with _config_lock:
        if max_count is not _UNSET:
            config.max_count = max_count
        if large_count_warning is not _UNSET:
            config.large_count_warning = large_count_warning


def reset_calshift_config() -> None:
    """Reset configuration to defaults. Useful for testing."""
    global _calshift_config
    with _config_lock:
        _calshift_config = CalshiftConfig()
