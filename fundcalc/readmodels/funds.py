"""
Funds read models - totals computed from Wealth and Budget entities

- CurrentFunds: what the user holds right now (savings - debtors + creditors)
- AllocatedFunds: what must be set aside to pay budgeted items on time
  (accrued expenses - accrued incomes)
- AvailableFunds: current minus allocated

Totals are recomputed only when calculate_funds*() is called. Changing a child
entity or list does not touch `amount` until the caller recomputes.
"""
import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from fundcalc.domain.budget import Budget, Expense, Income
from fundcalc.domain.wealth import Creditor, Debtor, Saving, Wealth
from fundcalc.utils import clock

logger = logging.getLogger(__name__)


@dataclass
class CurrentFunds:
    """All Wealth contributing to currently held funds."""
    savings: list[Saving] = field(default_factory=list)
    debtors: list[Debtor] = field(default_factory=list)
    creditors: list[Creditor] = field(default_factory=list)
    amount: Decimal = field(init=False, default=Decimal("0"))

    def __post_init__(self):
        self.calculate_funds()

    def _list_for(self, item: Wealth) -> list:
        if isinstance(item, Saving):
            return self.savings
        if isinstance(item, Debtor):
            return self.debtors
        if isinstance(item, Creditor):
            return self.creditors
        raise TypeError(f"unsupported wealth type: {type(item).__name__}")

    def add(self, item: Wealth) -> None:
        """Append to the matching list. Does not recompute."""
        self._list_for(item).append(item)

    def remove(self, item: Wealth) -> None:
        """Remove from the matching list (ValueError if absent). Does not recompute."""
        self._list_for(item).remove(item)

    def calculate_funds(self) -> Decimal:
        amt = Decimal("0")
        amt += sum((w.amount for w in self.savings), Decimal("0"))
        amt -= sum((w.amount for w in self.debtors), Decimal("0"))
        amt += sum((w.amount for w in self.creditors), Decimal("0"))
        self.amount = amt

        logger.debug(
            "Current funds: %s (savings=%d, debtors=%d, creditors=%d)",
            amt, len(self.savings), len(self.debtors), len(self.creditors),
        )
        return amt


@dataclass
class AllocatedFunds:
    """All Budget items expected to need funds set aside."""
    revenue: list[Income] = field(default_factory=list)
    expenditure: list[Expense] = field(default_factory=list)
    amount: Decimal = field(init=False, default=Decimal("0"))

    def __post_init__(self):
        self.calculate_funds()

    def _list_for(self, item: Budget) -> list:
        if isinstance(item, Income):
            return self.revenue
        if isinstance(item, Expense):
            return self.expenditure
        raise TypeError(f"unsupported budget type: {type(item).__name__}")

    def add(self, item: Budget) -> None:
        """Append to the matching list. Does not recompute."""
        self._list_for(item).append(item)

    def remove(self, item: Budget) -> None:
        """Remove from the matching list (ValueError if absent). Does not recompute."""
        self._list_for(item).remove(item)

    def calculate_funds_as_of(self, as_of: date) -> Decimal:
        """Sum accrued expenses minus accrued incomes as of `as_of`."""
        amt = Decimal("0")
        amt += sum((b.accrued(as_of) for b in self.expenditure), Decimal("0"))
        amt -= sum((b.accrued(as_of) for b in self.revenue), Decimal("0"))
        self.amount = amt

        logger.debug(
            "Allocated funds as of %s: %s (revenue=%d, expenditure=%d)",
            as_of.isoformat(), amt, len(self.revenue), len(self.expenditure),
        )
        return amt

    def calculate_funds(self) -> Decimal:
        return self.calculate_funds_as_of(clock.today())


@dataclass
class AvailableFunds:
    """Current funds left after allocating for budgeted commitments."""
    current: CurrentFunds = field(default_factory=CurrentFunds)
    allocated: AllocatedFunds = field(default_factory=AllocatedFunds)
    amount: Decimal = field(init=False, default=Decimal("0"))

    def __post_init__(self):
        self.calculate_funds()

    def calculate_funds_as_of(self, as_of: date) -> Decimal:
        """Recompute both children as of `as_of`, then the difference."""
        self.current.calculate_funds()
        self.allocated.calculate_funds_as_of(as_of)
        self.amount = self.current.amount - self.allocated.amount

        logger.debug("Available funds as of %s: %s", as_of.isoformat(), self.amount)
        return self.amount

    def calculate_funds(self) -> Decimal:
        return self.calculate_funds_as_of(clock.today())
