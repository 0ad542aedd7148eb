"""Regex building blocks shared by the sender extractors.

Every concept appears in both scripts: currency tokens (``EGP``, ``L.E.``,
``جنيه``), amounts, and the anchor words around a merchant name. Helpers here
return the first pattern that matches, never the best one.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from decimal import Decimal, InvalidOperation

# Three-letter code, L.E / L.E., or an Arabic pound marker.
CURRENCY = r"[A-Za-z]{3}|L\.E\.?|ج\.م|جنيه|جم"

# Amount with grouping commas and exactly two decimals, e.g. ``1,250.00``.
AMOUNT_2DP = r"[\d,]+\.\d{2}"

# Amount whose decimal part is optional, e.g. ``500`` or ``1,500.75``.
AMOUNT_ANY = r"[\d,]+(?:\.\d+)?"


def parse_amount(raw: str | None) -> Decimal:
    """Convert a numeral with grouping commas to an unsigned ``Decimal``.

    Unparseable input yields ``Decimal(0)`` so the message is dropped later.
    """

    if not raw:
        return Decimal("0")
    try:
        return abs(Decimal(raw.replace(",", "").strip()))
    except InvalidOperation:
        return Decimal("0")


def first_match(patterns: Iterable[re.Pattern[str]], body: str) -> re.Match[str] | None:
    for pattern in patterns:
        m = pattern.search(body)
        if m is not None:
            return m
    return None


def contains_any(body: str, *needles: str) -> bool:
    return any(n in body for n in needles)


def capture(pattern: re.Pattern[str], body: str) -> str:
    """Return the stripped first group of ``pattern`` in ``body`` or ``""``."""

    m = pattern.search(body)
    if m is None:
        return ""
    return (m.group(1) or "").strip()


__all__ = [
    "AMOUNT_2DP",
    "AMOUNT_ANY",
    "CURRENCY",
    "capture",
    "contains_any",
    "first_match",
    "parse_amount",
]
