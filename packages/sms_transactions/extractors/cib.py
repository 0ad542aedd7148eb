"""CIB (Commercial International Bank) SMS extractor.

CIB sends notifications for three kinds of instrument from one sender id:

- the debit card (configured suffix, ``SMS_CIB_DEBIT_CARD_SUFFIX``),
- the current account (configured suffix, ``SMS_CIB_ACCOUNT_SUFFIX``),
- any number of credit cards, recognised by a four-digit card suffix that is
  neither of the two above.

Debit card and current account share the ``CIB_Current_Debit`` bucket. Each
credit card gets its own ``CIB_Credit_Card_<suffix>`` bucket.

Message samples (abridged)::

    Your credit card ending with 4321 was charged for EGP 1,250.00 at
    AMAZON EG on 05/03 at 14:02. Available limit ...
    تم خصم EGP 150.00 من بطاقة الخصم المنتهية بـ7759 عند CARREFOUR في 05/03
    Your account 2373 was credited with IPN Inward for EGP 3,000.00 from
    AHMED ALI with reference 998877
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import replace

from ..config import (
    CIB_ACCOUNT_SUFFIX,
    CIB_CREDIT_CARD_GROUP_PREFIX,
    CIB_CURRENT_DEBIT_GROUP,
    CIB_DEBIT_CARD_SUFFIX,
    CIB_SENDER,
    HOME_CURRENCY,
)
from ..models import Category, Extraction
from ..names import clean_counterparty
from .base import KindRule, SenderExtractor, dispatch_kind, inflow, outflow
from .patterns import (
    AMOUNT_2DP,
    CURRENCY,
    capture,
    contains_any,
    first_match,
    parse_amount,
)

# ---- Patterns ---------------------------------------------------------------

_INSTRUMENT_RE = re.compile(
    r"(?:credit card|ending with|card|بـ)\s*[#*]*\s*(\d{4})", re.IGNORECASE
)

_CARD_CHARGE_RE = re.compile(
    rf"charged for\s*({CURRENCY})?\s*({AMOUNT_2DP})\s*at\s*(.*?)(?:\s+on|\s+at|\. Available)",
    re.IGNORECASE,
)
_REFUND_RE = re.compile(
    rf"(?:refunded|red|rd|رد)\s*({CURRENCY})?\s*({AMOUNT_2DP})", re.IGNORECASE
)
_REPAYMENT_RES = (
    re.compile(rf"مبلغ\s*(?:({CURRENCY})\s*)?({AMOUNT_2DP})"),
    re.compile(rf"payment\s+(?:of\s+)?(?:({CURRENCY})\s*)?({AMOUNT_2DP})", re.IGNORECASE),
)

# Debit card: Arabic charge, English charge, Arabic ATM withdrawal.
_DEBIT_CHARGE_RES = (
    re.compile(rf"خصم\s*({CURRENCY})?\s*({AMOUNT_2DP})\s*من.*?عند\s*(.*?)(?:\s+في|$)"),
    re.compile(
        rf"charged for\s*({CURRENCY})?\s*({AMOUNT_2DP})\s*at\s*(.*?)(?:\s+on|\s+at)",
        re.IGNORECASE,
    ),
)
_WITHDRAWAL_RE = re.compile(rf"سحب\s*(?:مبلغ)?\s*({CURRENCY})?\s*({AMOUNT_2DP})")

_ACCOUNT_DEBIT_RE = re.compile(
    rf"(?:amount|for)\s*({CURRENCY})?\s*({AMOUNT_2DP})", re.IGNORECASE
)
_PAYEE_RE = re.compile(r"to\s+(.*?)\s+with reference")
_IPN_RE = re.compile(
    rf"credited with IPN Inward for\s*({CURRENCY})?\s*({AMOUNT_2DP})", re.IGNORECASE
)
_PAYER_RE = re.compile(r"from\s+(.*?)\s+with reference")
_SALARY_RE = re.compile(rf"تحويل مبلغ\s*({CURRENCY})?\s*({AMOUNT_2DP}).*?جهة العمل")

# ---- Kind keywords ----------------------------------------------------------

_REPAYMENT_AR = "تم سداد"
_PURCHASE_WORDS = ("charged for", "purchasing transaction")
_REFUND_WORDS = ("refunded", "rad", "رد")
_DEBIT_CARD_WORDS = ("charged for", "خصم", "withdrawal", "سحب")
_ACCOUNT_OUT_WORDS = ("debited", "charged with", "تم تحويل")
_ACCOUNT_IN_WORDS = ("credited", "تحويل مبلغ", "add")
_OWN_TRANSFER = "transfer to another account"

# ---- Fallback counterparty labels ------------------------------------------

CARD_PURCHASE = "Card Purchase"
REFUND = "Refund"
REPAYMENT = "CIB Repayment"
ATM_WITHDRAWAL = "ATM Withdrawal"
OWN_TRANSFER = "Transfer to Account / CC"
TRANSFER_OUT = "Transfer Out"
TRANSFER_IN = "Transfer In"
SALARY = "Salary / Work"


def _is_repayment(body: str) -> bool:
    return _REPAYMENT_AR in body or ("payment" in body and "received" in body)


class CibExtractor(SenderExtractor):
    sender = CIB_SENDER
    suppression_keywords = ("OTP",)

    def __init__(
        self,
        *,
        debit_card_suffix: str = CIB_DEBIT_CARD_SUFFIX,
        account_suffix: str = CIB_ACCOUNT_SUFFIX,
        home_currency: str = HOME_CURRENCY,
    ) -> None:
        self.debit_card_suffix = debit_card_suffix
        self.account_suffix = account_suffix
        self.home_currency = home_currency

        # Repayment first: repayment notices may also mention a refund word.
        self.credit_card_rules: tuple[KindRule, ...] = (
            KindRule("repayment", _is_repayment, self._repayment),
            KindRule("purchase", lambda b: contains_any(b, *_PURCHASE_WORDS), self._card_purchase),
            KindRule("refund", lambda b: contains_any(b, *_REFUND_WORDS), self._refund),
        )
        self.current_debit_rules: tuple[KindRule, ...] = (
            KindRule("debit-card", self._is_debit_card_spend, self._debit_card_spend),
            KindRule("account-out", self._is_account_out, self._account_out),
            KindRule("account-in", self._is_account_in, self._account_in),
        )

    # ---- Instrument routing -------------------------------------------------

    def instrument_suffix(self, body: str) -> str | None:
        """Return the card/account suffix named in ``body``, if any."""

        m = _INSTRUMENT_RE.search(body)
        return m.group(1) if m else None

    def route(self, body: str) -> tuple[str, Sequence[KindRule]] | None:
        """Pick the output bucket and kind rules for ``body``.

        Returns ``None`` when the message names none of the known instruments.
        """

        suffix = self.instrument_suffix(body)
        if suffix is not None and suffix not in (self.debit_card_suffix, self.account_suffix):
            return f"{CIB_CREDIT_CARD_GROUP_PREFIX}{suffix}", self.credit_card_rules
        if self.debit_card_suffix in body or self.account_suffix in body:
            return CIB_CURRENT_DEBIT_GROUP, self.current_debit_rules
        return None

    def extract(self, body: str) -> Extraction:
        if self.is_suppressed(body):
            return Extraction.empty()
        routed = self.route(body)
        if routed is None:
            return Extraction.empty()
        group, rules = routed
        _kind, extraction = dispatch_kind(rules, body)
        if extraction is None:
            return Extraction.empty(group)
        return replace(extraction, account_group=group)

    # ---- Credit cards -------------------------------------------------------

    def _repayment(self, body: str) -> Extraction | None:
        m = first_match(_REPAYMENT_RES, body)
        if m is None:
            return None
        return inflow(
            parse_amount(m.group(2)),
            currency=self.currency(m.group(1)),
            counterparty=REPAYMENT,
            category_override=Category.FINANCIAL,
        )

    def _card_purchase(self, body: str) -> Extraction | None:
        m = _CARD_CHARGE_RE.search(body)
        if m is None:
            return None
        return outflow(
            parse_amount(m.group(2)),
            currency=self.currency(m.group(1)),
            counterparty=clean_counterparty(m.group(3)) or CARD_PURCHASE,
        )

    def _refund(self, body: str) -> Extraction | None:
        m = _REFUND_RE.search(body)
        if m is None:
            return None
        return inflow(
            parse_amount(m.group(2)), currency=self.currency(m.group(1)), counterparty=REFUND
        )

    # ---- Debit card ---------------------------------------------------------

    def _is_debit_card_spend(self, body: str) -> bool:
        return self.debit_card_suffix in body and contains_any(body, *_DEBIT_CARD_WORDS)

    def _debit_card_spend(self, body: str) -> Extraction | None:
        m = first_match(_DEBIT_CHARGE_RES, body)
        if m is not None:
            return outflow(
                parse_amount(m.group(2)),
                currency=self.currency(m.group(1)),
                counterparty=clean_counterparty(m.group(3)) or CARD_PURCHASE,
            )
        m = _WITHDRAWAL_RE.search(body)
        if m is not None:
            return outflow(
                parse_amount(m.group(2)),
                currency=self.currency(m.group(1)),
                counterparty=ATM_WITHDRAWAL,
            )
        return None

    # ---- Current account ----------------------------------------------------

    def _is_account_out(self, body: str) -> bool:
        return self.account_suffix in body and contains_any(body, *_ACCOUNT_OUT_WORDS)

    def _is_account_in(self, body: str) -> bool:
        return self.account_suffix in body and contains_any(body, *_ACCOUNT_IN_WORDS)

    def _account_out(self, body: str) -> Extraction | None:
        m = _ACCOUNT_DEBIT_RE.search(body)
        if m is None:
            return None
        amount = parse_amount(m.group(2))
        currency = self.currency(m.group(1))
        if _OWN_TRANSFER in body:
            return outflow(
                amount,
                currency=currency,
                counterparty=OWN_TRANSFER,
                category_override=Category.FINANCIAL,
            )
        payee = clean_counterparty(capture(_PAYEE_RE, body))
        return outflow(amount, currency=currency, counterparty=payee or TRANSFER_OUT)

    def _account_in(self, body: str) -> Extraction | None:
        m = _IPN_RE.search(body)
        if m is not None:
            payer = clean_counterparty(capture(_PAYER_RE, body))
            return inflow(
                parse_amount(m.group(2)),
                currency=self.currency(m.group(1)),
                counterparty=payer or TRANSFER_IN,
            )
        m = _SALARY_RE.search(body)
        if m is not None:
            return inflow(
                parse_amount(m.group(2)),
                currency=self.currency(m.group(1)),
                counterparty=SALARY,
            )
        return None


__all__ = ["CibExtractor"]
