"""Counterparty name cleanup.

Card terminals and payment gateways prepend their own name to the merchant
(``FAWRY Carrefour``, ``PAYMOB-Talabat``) and often append a terminal or
branch number. Both are removed so the classifier and the output see the
merchant itself.
"""

from __future__ import annotations

import re

# Order matters: only the first matching prefix is stripped.
PROCESSOR_PREFIXES: tuple[str, ...] = (
    "PAYMOB-",
    "PAYMOB ",
    "PAYMOBS ",
    "GEIDEA ",
    "GEIDEAE ",
    "FAWRY ",
    "FAWRYPF ",
    "MY FAWRY",
    "AFS-",
    "AFS ",
    "POS ",
    "NGOV_UNI ",
    "BEE ",
    "KASHIER ",
)

_TRAILING_DIGITS_RE = re.compile(r"\s*\d+$")


def strip_processor_prefix(name: str) -> str:
    upper = name.upper()
    for prefix in PROCESSOR_PREFIXES:
        if upper.startswith(prefix):
            return name[len(prefix) :].strip()
    return name


def clean_counterparty(raw: str | None) -> str:
    """Return ``raw`` without a processor prefix or trailing digits.

    >>> clean_counterparty("FAWRY Carrefour 1234")
    'Carrefour'
    """

    if not raw:
        return ""
    clean = strip_processor_prefix(raw.strip())
    clean = _TRAILING_DIGITS_RE.sub("", clean)
    return clean.strip()


__all__ = ["PROCESSOR_PREFIXES", "clean_counterparty", "strip_processor_prefix"]
