"""Currency token normalization.

Bank messages name currencies in several ways: ISO codes (``EGP``, ``USD``),
Latin abbreviations (``LE``, ``L.E.``) and Arabic words (``جنيه``, ``ج.م``).
:func:`normalize_currency` maps all of them onto canonical codes.
"""

from __future__ import annotations

from types import MappingProxyType

from .config import HOME_CURRENCY

CURRENCY_ALIASES: MappingProxyType[str, str] = MappingProxyType(
    {
        "LE": "EGP",
        "L.E": "EGP",
        "L.E.": "EGP",
        "EGP": "EGP",
        "ج.م": "EGP",
        "جم": "EGP",
        "جنيه": "EGP",
        "USD": "USD",
        "EUR": "EUR",
        "GBP": "GBP",
        "TRY": "TRY",
        "JPY": "JPY",
        "SAR": "SAR",
        "AED": "AED",
        "KWD": "KWD",
    }
)


def normalize_currency(token: str | None, *, home: str = HOME_CURRENCY) -> str:
    """Return the canonical code for ``token``.

    Empty input means the message did not name a currency, so the
    institution's home currency applies. Unknown tokens pass through
    uppercased. The function is idempotent.
    """

    if token is None:
        return home
    clean = token.strip().upper()
    if not clean:
        return home
    return CURRENCY_ALIASES.get(clean, clean)


__all__ = ["CURRENCY_ALIASES", "normalize_currency"]
