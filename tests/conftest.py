"""
Pytest fixtures for testing
"""
from datetime import date

import pytest

from fundcalc.config import get_settings
from fundcalc.domain.budget import Expense, Income
from fundcalc.domain.period import PERIOD_MONTHLY, PERIOD_WEEKLY
from fundcalc.domain.wealth import Creditor, Debtor, Saving


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; drop them around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def monthly_rent():
    """Rent of 1200 due on the 15th of every month from 2024-01-15"""
    return Expense("Rent", 1200, 1, PERIOD_MONTHLY, start_date=date(2024, 1, 15))


@pytest.fixture
def fortnightly_salary():
    """Salary of 100 paid every 2 weeks from 2024-01-01"""
    return Income("Salary", 100, 2, PERIOD_WEEKLY, start_date=date(2024, 1, 1))


@pytest.fixture
def sample_wealth():
    return (
        Saving("Bank", "Everyday account", 500),
        Debtor("Card", "Credit card balance", 200),
        Creditor("Alex", "Loan to a friend", 50),
    )
