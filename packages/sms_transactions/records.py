"""Output row view handed to the CSV writer.

A :class:`TransactionRow` is a frozen ``dataclass`` with explicit field order
matching the CSV columns:

    - date: string (``YYYY-MM-DD HH:MM:SS``, local time)
    - counterparty: string (written under the ``payee`` header)
    - amount: string (2 decimal places, ASCII dot, leading minus for outflows)
    - currency: string (canonical code)
    - direction: string (``Expense`` / ``Income``, written under ``type``)
    - category: string (category label)
    - note: string (raw SMS body, prefixed with ``[<category>] `` unless the
      category is ``General``)
"""

from __future__ import annotations

from dataclasses import astuple, dataclass
from decimal import ROUND_HALF_UP, Decimal

from .models import Category, Transaction

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CSV_HEADER: tuple[str, ...] = (
    "date",
    "payee",
    "amount",
    "currency",
    "type",
    "category",
    "note",
)


@dataclass(frozen=True, slots=True)
class TransactionRow:
    date: str
    counterparty: str
    amount: str
    currency: str
    direction: str
    category: str
    note: str

    def as_tuple(self) -> tuple[str, ...]:
        return astuple(self)


def _fmt_amount(d: Decimal) -> str:
    q = d.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{q:.2f}"


def tagged_note(category: Category, note: str) -> str:
    if category is Category.GENERAL:
        return note
    return f"[{category}] {note}"


def to_row(tx: Transaction) -> TransactionRow:
    """Render a finalized transaction as an output row."""

    return TransactionRow(
        date=tx.timestamp.strftime(DATE_FORMAT),
        counterparty=tx.counterparty,
        amount=_fmt_amount(tx.amount),
        currency=tx.currency,
        direction=str(tx.direction),
        category=str(tx.category),
        note=tagged_note(tx.category, tx.note),
    )


__all__ = ["CSV_HEADER", "DATE_FORMAT", "TransactionRow", "tagged_note", "to_row"]
