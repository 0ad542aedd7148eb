"""Data models for ``sms_transactions``.

Three layers of records flow through a run:

- :class:`RawMessage`: one SMS as delivered (sender, body, epoch millis).
  Immutable.
- :class:`Extraction`: what one sender-specific extractor could read out of a
  message body. Immutable; ``Extraction.empty()`` means "not a transaction".
- :class:`Transaction`: the record under construction. Populated from exactly
  one extraction, classified once, then handed to the aggregator and never
  touched again.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import StrEnum

# ---------------------------------------------------------------------------
# Enumerations (values are the exact labels written to CSV)
# ---------------------------------------------------------------------------


class Direction(StrEnum):
    EXPENSE = "Expense"
    INCOME = "Income"


class Category(StrEnum):
    FOOD = "Food & Drink"
    SHOPPING = "Shopping"
    HOUSING = "Housing"
    TRANSPORTATION = "Transportation"
    VEHICLE = "Vehicle"
    LIFE = "Life & Entertainment"
    COMMUNICATIONS = "Communication, PC"
    FINANCIAL = "Financial expenses"
    INCOME = "Income"
    GENERAL = "General"


class CategoryStatus(StrEnum):
    """Where a transaction's category came from.

    ``DEFAULT`` is the only state from which the keyword classifier may run.
    ``OVERRIDDEN`` marks a category chosen by an extractor for a specific
    message kind (e.g., card repayments), which the classifier must keep.
    """

    UNSET = "unset"
    DEFAULT = "default"
    OVERRIDDEN = "overridden"
    CLASSIFIED = "classified"


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class RawMessage:
    sender: str
    body: str
    timestamp_millis: int


def dedupe_key(message: RawMessage) -> str:
    """Return the delivery signature ``timestamp|sender|body``."""

    return f"{message.timestamp_millis}|{message.sender}|{message.body}"


@dataclass(frozen=True, slots=True)
class Extraction:
    """Fields produced by a single extractor invocation.

    ``amount`` is already signed; handlers build the sign and ``direction``
    together so the two always agree.
    """

    account_group: str = ""
    amount: Decimal = Decimal("0")
    currency: str = ""
    counterparty: str = ""
    direction: Direction = Direction.EXPENSE
    category_override: Category | None = None

    @classmethod
    def empty(cls, account_group: str = "") -> Extraction:
        """Return a zero-amount extraction (discarded downstream)."""

        return cls(account_group=account_group)

    @property
    def is_transaction(self) -> bool:
        return bool(self.account_group) and self.amount != 0


@dataclass(slots=True)
class Transaction:
    timestamp: datetime
    note: str
    currency: str
    counterparty: str = ""
    amount: Decimal = Decimal("0")
    direction: Direction = Direction.EXPENSE
    category: Category = Category.GENERAL
    category_status: CategoryStatus = CategoryStatus.UNSET
    account_group: str = ""

    @property
    def is_emittable(self) -> bool:
        """True when the record should reach the aggregator."""

        return bool(self.account_group) and self.amount != 0

    def apply(self, extraction: Extraction) -> None:
        """Copy one extractor's output onto this transaction.

        Blank currency keeps the transaction's default (the home currency).
        """

        if self.category_status is not CategoryStatus.UNSET:
            raise RuntimeError("transaction was already populated by an extractor")
        self.account_group = extraction.account_group
        self.amount = extraction.amount
        self.counterparty = extraction.counterparty
        self.direction = extraction.direction
        if extraction.currency:
            self.currency = extraction.currency
        if extraction.category_override is not None:
            self.category = extraction.category_override
            self.category_status = CategoryStatus.OVERRIDDEN
        else:
            self.category = Category.GENERAL
            self.category_status = CategoryStatus.DEFAULT


__all__ = [
    "Category",
    "CategoryStatus",
    "Direction",
    "Extraction",
    "RawMessage",
    "Transaction",
    "dedupe_key",
]
