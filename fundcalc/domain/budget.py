"""
Budget domain entity - recurring income or expense commitments

A budget is a fixed amount due every `frequency` periods between start_date and
end_date (both inclusive). The entity answers three questions for any reference
date:

- last_due: most recent payment date on or before the date (None before start)
- next_due: nearest payment date after the date (None after end)
- accrued: share of the current payment "owed so far", linear in elapsed days

Budget kinds:
- INCOME: money expected to come in
- EXPENSE: money expected to go out
"""
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import ClassVar

from fundcalc.domain.period import (
    PERIOD_DAYS, PERIOD_MONTHLY, VALID_PERIODS,
    PeriodOverflowError, add_period,
)
from fundcalc.utils import clock

BUDGET_KIND_INCOME = "INCOME"
BUDGET_KIND_EXPENSE = "EXPENSE"


class BudgetValidationError(ValueError):
    """Invalid budget configuration"""
    pass


@dataclass(frozen=True)
class Budget:
    """
    Recurring payment schedule.

    weekdays_only is stored but not applied: due dates are never shifted off
    weekends.
    """
    kind: ClassVar[str] = ""

    reference: str
    amount: Decimal
    frequency: int
    period: str
    start_date: date | None = None
    end_date: date | None = None
    weekdays_only: bool = False

    def __post_init__(self):
        object.__setattr__(self, "amount", Decimal(str(self.amount)))
        if self.start_date is None:
            object.__setattr__(self, "start_date", date.min)
        if self.end_date is None:
            object.__setattr__(self, "end_date", date.max)

        if self.period not in VALID_PERIODS:
            raise BudgetValidationError(f"invalid period: {self.period}")
        if self.frequency < 1:
            raise BudgetValidationError(f"invalid frequency: {self.frequency} (must be >= 1)")
        if self.start_date > self.end_date:
            raise BudgetValidationError("start_date must be <= end_date")

    def _occurrence(self, payments: int) -> date:
        """Date of the payment number `payments` counted from start_date (0 = first)."""
        return add_period(self.start_date, self.frequency * payments, self.period)

    def _payments(self, from_date: date) -> int:
        """Index of the last payment on or before from_date (from_date >= start_date)."""
        start = self.start_date
        if self.period in PERIOD_DAYS:
            step = self.frequency * PERIOD_DAYS[self.period]
            return (from_date - start).days // step

        if self.period == PERIOD_MONTHLY:
            elapsed = (from_date.month - start.month) + (from_date.year - start.year) * 12
            not_yet_paid = from_date.day < start.day
        else:
            elapsed = from_date.year - start.year
            not_yet_paid = from_date.timetuple().tm_yday < start.timetuple().tm_yday
        payments = elapsed // self.frequency
        # Still a payment to make this month/year? Only when it is a payment month/year.
        if not_yet_paid and elapsed % self.frequency == 0:
            payments -= 1
        # Day-of-year shifts by one across leap years
        if self._occurrence(payments) > from_date:
            payments -= 1
        return payments

    def last_due(self, from_date: date) -> date | None:
        """Last payment date on or before from_date, or None if payments have not begun."""
        if from_date < self.start_date:
            return None
        if from_date > self.end_date:
            return self.end_date
        return self._occurrence(self._payments(from_date))

    def next_due(self, from_date: date) -> date | None:
        """
        Next payment date after from_date, or None if payments have finished.

        One period after last_due, so a clipped month end carries forward
        (Jan 31 -> Feb 29 -> Mar 29). Capped at end_date, including when the
        step would pass date.max.
        """
        if from_date < self.start_date:
            return self.start_date
        if from_date > self.end_date:
            return None
        try:
            pay_date = add_period(self.last_due(from_date), self.frequency, self.period)
        except PeriodOverflowError:
            return self.end_date
        return min(pay_date, self.end_date)

    def accrued(self, to_date: date) -> Decimal:
        """
        Amount accrued up to to_date if the commitment is to be paid on time.

        Measured from the last payment date. Before the first payment the
        saving window opens one period ahead of start_date. A zero-length
        period (to_date is the final payment on end_date) accrues nothing.
        """
        start = self.last_due(to_date)
        if start is None:
            start = self._occurrence(-1)
            if start > to_date:
                return Decimal("0")

        due = self.next_due(to_date)
        if due is None:
            return Decimal("0")

        period_days = (due - start).days
        if period_days <= 0:
            return Decimal("0")
        elapsed_days = (to_date - start).days
        return self.amount * elapsed_days / period_days

    def last_due_today(self) -> date | None:
        return self.last_due(clock.today())

    def next_due_today(self) -> date | None:
        return self.next_due(clock.today())

    def accrued_today(self) -> Decimal:
        return self.accrued(clock.today())


@dataclass(frozen=True)
class Income(Budget):
    """Expected source of income"""
    kind: ClassVar[str] = BUDGET_KIND_INCOME


@dataclass(frozen=True)
class Expense(Budget):
    """Expected commitment to pay"""
    kind: ClassVar[str] = BUDGET_KIND_EXPENSE
