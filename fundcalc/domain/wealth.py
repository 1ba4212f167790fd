"""
Wealth domain entity - balances that make up current funds

Wealth kinds:
- SAVING: money held by the user (bank account, cash)
- DEBTOR: obligation of the user to an entity (loan, card balance)
- CREDITOR: obligation of an entity to the user (money lent out)
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar

WEALTH_KIND_SAVING = "SAVING"
WEALTH_KIND_DEBTOR = "DEBTOR"
WEALTH_KIND_CREDITOR = "CREDITOR"


@dataclass
class Wealth:
    """
    Balance holder.

    entity: where the wealth sits or who the counterparty is (bank, person)
    reference: short description
    amount: current balance, no bounds checking
    """
    kind: ClassVar[str] = ""

    entity: str
    reference: str
    amount: Decimal = Decimal("0")

    def __post_init__(self):
        self.amount = Decimal(str(self.amount))

    def add_amount(self, delta) -> None:
        self.amount += Decimal(str(delta))

    def clear_amount(self) -> None:
        self.amount = Decimal("0")


@dataclass
class Saving(Wealth):
    kind: ClassVar[str] = WEALTH_KIND_SAVING


@dataclass
class Debtor(Wealth):
    kind: ClassVar[str] = WEALTH_KIND_DEBTOR


@dataclass
class Creditor(Wealth):
    kind: ClassVar[str] = WEALTH_KIND_CREDITOR
