"""Banque Misr SMS extractor.

All Banque Misr notifications land in a single ``Banque_Misr`` bucket. The
bank also uses the same sender id for OTPs and login alerts; those are
suppressed.

Message samples (abridged)::

    تم تحويل مبلغ 1,000 جنيه من حساب رقم ***123 يوم 05/03
    تم اضافة مبلغ 500 جنيه الى حساب رقم ***123 يوم 05/03
    تم الخصم مبلغ EGP 245.50 من بطاقة رقم ***9876 BM TALABAT EG يوم 05/03
"""

from __future__ import annotations

import re
from dataclasses import replace

from ..config import BANQUE_MISR_GROUP, BANQUE_MISR_SENDER, HOME_CURRENCY
from ..models import Extraction
from ..names import clean_counterparty
from .base import KindRule, SenderExtractor, dispatch_kind, inflow, outflow
from .patterns import AMOUNT_2DP, AMOUNT_ANY, CURRENCY, capture, contains_any, parse_amount

# Currency may come before or after the numeral; decimals are optional.
_TRANSFER_RE = re.compile(
    rf"مبلغ\s*(?:({CURRENCY})\s*)?({AMOUNT_ANY})(?:\s*({CURRENCY}))?"
)
_PURCHASE_RE = re.compile(rf"(?:مبلغ|amount)\s*({CURRENCY})?\s*({AMOUNT_2DP})")
_MERCHANT_RE = re.compile(r"BM (.*?) (?:يوم|on)")

_TRANSFER_WORDS = ("تم تحويل مبلغ", "تم اضافة مبلغ")
_PURCHASE_WORDS = ("تم الخصم", "transaction")
_FROM_ACCOUNT = "من حساب"
_TO_ACCOUNT = "الى حساب"

TRANSFER_OUT = "Transfer Out"
TRANSFER_IN = "Transfer In"
CARD_PURCHASE = "Card Purchase"


class BanqueMisrExtractor(SenderExtractor):
    sender = BANQUE_MISR_SENDER
    suppression_keywords = ("OTP", "password", "تسجيل الدخول", "code")

    def __init__(self, *, home_currency: str = HOME_CURRENCY) -> None:
        self.home_currency = home_currency
        self.rules: tuple[KindRule, ...] = (
            KindRule("transfer", lambda b: contains_any(b, *_TRANSFER_WORDS), self._transfer),
            KindRule("purchase", lambda b: contains_any(b, *_PURCHASE_WORDS), self._purchase),
        )

    def extract(self, body: str) -> Extraction:
        if self.is_suppressed(body):
            return Extraction.empty()
        _kind, extraction = dispatch_kind(self.rules, body)
        if extraction is None:
            return Extraction.empty(BANQUE_MISR_GROUP)
        return replace(extraction, account_group=BANQUE_MISR_GROUP)

    def _transfer(self, body: str) -> Extraction | None:
        m = _TRANSFER_RE.search(body)
        if m is None:
            return None
        amount = parse_amount(m.group(2))
        currency = self.currency(m.group(1) or m.group(3))
        if _FROM_ACCOUNT in body:
            return outflow(amount, currency=currency, counterparty=TRANSFER_OUT)
        if _TO_ACCOUNT in body:
            return inflow(amount, currency=currency, counterparty=TRANSFER_IN)
        return None

    def _purchase(self, body: str) -> Extraction | None:
        m = _PURCHASE_RE.search(body)
        if m is None:
            return None
        merchant = clean_counterparty(capture(_MERCHANT_RE, body))
        return outflow(
            parse_amount(m.group(2)),
            currency=self.currency(m.group(1)),
            counterparty=merchant or CARD_PURCHASE,
        )


__all__ = ["BanqueMisrExtractor"]
