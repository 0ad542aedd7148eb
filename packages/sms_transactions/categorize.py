"""Deterministic category assignment.

Public API:
    - :func:`categorize`
    - :func:`classify_transaction`

Rules are evaluated in order and the first hit wins: positive amounts are
always Income, then the keyword groups from :mod:`sms_transactions.rules`,
then General.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from .models import Category, CategoryStatus, Transaction
from .names import clean_counterparty
from .rules import CATEGORY_RULES, KeywordGroup


def categorize(
    counterparty: str,
    note: str,
    amount: Decimal,
    *,
    rules: Sequence[KeywordGroup] = CATEGORY_RULES,
) -> Category:
    if amount > 0:
        return Category.INCOME

    text = f"{clean_counterparty(counterparty)} {note}".lower()
    for group in rules:
        if group.matches(text):
            return group.category
    return Category.GENERAL


def classify_transaction(tx: Transaction) -> bool:
    """Assign ``tx.category`` when it still holds the default placeholder.

    Returns ``True`` when the classifier ran. Transactions whose category was
    overridden by an extractor, or that were already classified, are left
    untouched.
    """

    if tx.category_status is not CategoryStatus.DEFAULT:
        return False
    tx.category = categorize(tx.counterparty, tx.note, tx.amount)
    tx.category_status = CategoryStatus.CLASSIFIED
    return True


__all__ = ["categorize", "classify_transaction"]
