from decimal import Decimal

from sms_transactions.extractors import CibExtractor
from sms_transactions.models import Category, Direction, Extraction


def _cib() -> CibExtractor:
    return CibExtractor(debit_card_suffix="7759", account_suffix="2373", home_currency="EGP")


# ---- Debit card ---------------------------------------------------------------


def test_arabic_debit_card_charge():
    body = "تم خصم EGP 150.00 من بطاقة الخصم المنتهية بـ7759 عند CARREFOUR MAADI في 2024-05-01"

    assert _cib().extract(body) == Extraction(
        account_group="CIB_Current_Debit",
        amount=Decimal("-150.00"),
        currency="EGP",
        counterparty="CARREFOUR MAADI",
        direction=Direction.EXPENSE,
    )


def test_english_debit_card_charge_cleans_merchant():
    body = (
        "Your card ending with 7759 was charged for EGP 85.50 at "
        "POS COSTA COFFEE 0012 on 01/05 at 09:15"
    )

    ex = _cib().extract(body)
    assert ex.account_group == "CIB_Current_Debit"
    assert ex.amount == Decimal("-85.50")
    assert ex.counterparty == "COSTA COFFEE"


def test_atm_withdrawal():
    body = "تم سحب مبلغ EGP 2,000.00 من بطاقة الخصم المنتهية بـ7759 من ماكينة ATM"

    ex = _cib().extract(body)
    assert ex.account_group == "CIB_Current_Debit"
    assert ex.amount == Decimal("-2000.00")
    assert ex.counterparty == "ATM Withdrawal"


# ---- Current account ----------------------------------------------------------


def test_account_transfer_out_to_named_payee():
    body = (
        "Your account 2373 was debited for EGP 750.00 transfer to "
        "AHMED ALI with reference 123456"
    )

    ex = _cib().extract(body)
    assert ex.account_group == "CIB_Current_Debit"
    assert ex.amount == Decimal("-750.00")
    assert ex.direction is Direction.EXPENSE
    assert ex.counterparty == "AHMED ALI"
    assert ex.category_override is None


def test_own_account_transfer_is_financial():
    body = "Your account 2373 was debited for EGP 1,000.00 transfer to another account"

    ex = _cib().extract(body)
    assert ex.amount == Decimal("-1000.00")
    assert ex.counterparty == "Transfer to Account / CC"
    assert ex.category_override is Category.FINANCIAL


def test_account_ipn_inward_credit():
    body = (
        "Your account 2373 was credited with IPN Inward for EGP 3,000.00 "
        "from SARA MOHAMED with reference 998877"
    )

    ex = _cib().extract(body)
    assert ex.amount == Decimal("3000.00")
    assert ex.direction is Direction.INCOME
    assert ex.counterparty == "SARA MOHAMED"


def test_salary_credit():
    body = "تم استلام تحويل مبلغ EGP 25,000.00 من جهة العمل الى حسابك رقم 2373"

    ex = _cib().extract(body)
    assert ex.account_group == "CIB_Current_Debit"
    assert ex.amount == Decimal("25000.00")
    assert ex.direction is Direction.INCOME
    assert ex.counterparty == "Salary / Work"


# ---- Credit cards -------------------------------------------------------------


def test_credit_card_purchase_gets_its_own_bucket():
    body = (
        "Your credit card ending with 4321 was charged for USD 19.99 at "
        "AMAZON EG on 05/03 at 14:02. Available limit EGP 20,000.00"
    )

    assert _cib().extract(body) == Extraction(
        account_group="CIB_Credit_Card_4321",
        amount=Decimal("-19.99"),
        currency="USD",
        counterparty="AMAZON EG",
        direction=Direction.EXPENSE,
    )


def test_credit_card_refund():
    body = "Your credit card ending with 4321 was refunded EGP 300.00 from AMAZON EG on 06/03"

    ex = _cib().extract(body)
    assert ex.account_group == "CIB_Credit_Card_4321"
    assert ex.amount == Decimal("300.00")
    assert ex.direction is Direction.INCOME
    assert ex.counterparty == "Refund"


def test_arabic_credit_card_repayment_overrides_category():
    body = "تم سداد مبلغ EGP 5,000.00 لبطاقة الائتمان المنتهية بـ4321"

    assert _cib().extract(body) == Extraction(
        account_group="CIB_Credit_Card_4321",
        amount=Decimal("5000.00"),
        currency="EGP",
        counterparty="CIB Repayment",
        direction=Direction.INCOME,
        category_override=Category.FINANCIAL,
    )


def test_english_credit_card_repayment():
    body = "We received your payment of EGP 2,000.00 for credit card ending with 4321"

    ex = _cib().extract(body)
    assert ex.account_group == "CIB_Credit_Card_4321"
    assert ex.amount == Decimal("2000.00")
    assert ex.category_override is Category.FINANCIAL


# ---- Misses -------------------------------------------------------------------


def test_otp_is_not_a_transaction():
    body = "Your OTP is 482913. Do not share it. Card ending with 4321 charged for EGP 10.00 at X on"

    ex = _cib().extract(body)
    assert not ex.is_transaction
    assert ex.account_group == ""


def test_unknown_instrument_without_suffix():
    ex = _cib().extract("Welcome to CIB online banking")
    assert ex == Extraction.empty()


def test_recognized_instrument_with_unparsed_text_keeps_bucket():
    # Credit card named, but no kind keyword matches.
    ex = _cib().extract("Your credit card ending with 4321 statement is ready")
    assert ex == Extraction.empty("CIB_Credit_Card_4321")
    assert not ex.is_transaction


def test_configured_suffixes_route_messages():
    cib = CibExtractor(debit_card_suffix="1111", account_suffix="2222", home_currency="EGP")
    body = "Your card ending with 1111 was charged for EGP 40.00 at KIOSK on 01/05"

    assert cib.route(body)[0] == "CIB_Current_Debit"
    # The default debit suffix is now just another credit card.
    assert cib.route("Your card ending with 7759 was charged")[0] == "CIB_Credit_Card_7759"
