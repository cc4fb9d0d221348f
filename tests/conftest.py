"""Pytest configuration and shared fixtures."""

from datetime import datetime

import pytest

from calshift.config import reset_calshift_config


@pytest.fixture(autouse=True)
def reset_config_for_all_tests():
    """Reset the calshift configuration before and after each test.

    The configuration is a module-level singleton that persists across tests.
    """
    reset_calshift_config()
    yield
    reset_calshift_config()


@pytest.fixture
def us_holidays_2024():
    """US federal holidays for 2024 as local datetimes."""
    return [
        datetime(2024, 1, 1),    # New Year's Day
        datetime(2024, 1, 15),   # Martin Luther King Jr. Day
        datetime(2024, 2, 19),   # Presidents' Day
        datetime(2024, 5, 27),   # Memorial Day
        datetime(2024, 6, 19),   # Juneteenth
        datetime(2024, 7, 4),    # Independence Day
        datetime(2024, 9, 2),    # Labor Day
        datetime(2024, 10, 14),  # Columbus Day
        datetime(2024, 11, 11),  # Veterans Day
        datetime(2024, 11, 28),  # Thanksgiving
        datetime(2024, 12, 25),  # Christmas
    ]
