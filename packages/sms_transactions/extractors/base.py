"""Extractor contract and message-kind dispatch.

A :class:`SenderExtractor` turns one message body from a single institution
into an :class:`~sms_transactions.models.Extraction`. Internally each
extractor classifies the message kind (purchase, refund, transfer, ...) by
walking an ordered tuple of :class:`KindRule` entries; the first rule whose
predicate accepts the body handles it, and later rules are not consulted even
when the chosen handler finds nothing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from decimal import Decimal

from ..config import HOME_CURRENCY
from ..currency import normalize_currency
from ..models import Category, Direction, Extraction

Handler = Callable[[str], Extraction | None]


@dataclass(frozen=True, slots=True)
class KindRule:
    name: str
    matches: Callable[[str], bool]
    handle: Handler


def dispatch_kind(rules: Sequence[KindRule], body: str) -> tuple[str, Extraction | None]:
    """Run the handler of the first matching rule.

    Returns ``(kind_name, extraction)``; ``("", None)`` when no rule matches.
    """

    for rule in rules:
        if rule.matches(body):
            return rule.name, rule.handle(body)
    return "", None


def outflow(
    amount: Decimal,
    *,
    currency: str,
    counterparty: str,
    category_override: Category | None = None,
) -> Extraction:
    return Extraction(
        amount=-abs(amount),
        currency=currency,
        counterparty=counterparty,
        direction=Direction.EXPENSE,
        category_override=category_override,
    )


def inflow(
    amount: Decimal,
    *,
    currency: str,
    counterparty: str,
    category_override: Category | None = None,
) -> Extraction:
    return Extraction(
        amount=abs(amount),
        currency=currency,
        counterparty=counterparty,
        direction=Direction.INCOME,
        category_override=category_override,
    )


class SenderExtractor(ABC):
    """Base class for one institution's message format."""

    sender: str = ""
    home_currency: str = HOME_CURRENCY
    suppression_keywords: tuple[str, ...] = ()

    def is_suppressed(self, body: str) -> bool:
        """True for non-transactional notices (OTP, login alerts).

        Case-sensitive substring check; stops at the first hit.
        """

        return any(word in body for word in self.suppression_keywords)

    def currency(self, token: str | None) -> str:
        return normalize_currency(token, home=self.home_currency)

    @abstractmethod
    def extract(self, body: str) -> Extraction:
        """Return the extraction for ``body``.

        Never raises for unrecognized text: misses come back with a zero
        amount (and possibly an empty account group).
        """

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"{type(self).__name__}(sender={self.sender!r})"


__all__ = [
    "Handler",
    "KindRule",
    "SenderExtractor",
    "dispatch_kind",
    "inflow",
    "outflow",
]
