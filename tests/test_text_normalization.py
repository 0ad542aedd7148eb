from sms_transactions.currency import normalize_currency
from sms_transactions.names import clean_counterparty, strip_processor_prefix


def test_currency_aliases_map_to_canonical_codes():
    assert normalize_currency("L.E.") == "EGP"
    assert normalize_currency("le") == "EGP"
    assert normalize_currency("جنيه") == "EGP"
    assert normalize_currency("ج.م") == "EGP"
    assert normalize_currency(" usd ") == "USD"


def test_currency_empty_means_home_currency():
    assert normalize_currency("") == "EGP"
    assert normalize_currency(None) == "EGP"
    assert normalize_currency("   ", home="USD") == "USD"


def test_currency_unknown_token_passes_through_uppercased():
    assert normalize_currency("chf") == "CHF"


def test_currency_normalization_is_idempotent():
    for token in ("L.E", "جم", "eur", "xyz", ""):
        once = normalize_currency(token)
        assert normalize_currency(once) == once


def test_clean_counterparty_strips_prefix_and_trailing_digits():
    assert clean_counterparty("FAWRY Carrefour 1234") == "Carrefour"
    assert clean_counterparty("PAYMOB-Talabat") == "Talabat"
    assert clean_counterparty("  pos  Zara Mall  ") == "Zara Mall"


def test_clean_counterparty_empty_input():
    assert clean_counterparty("") == ""
    assert clean_counterparty(None) == ""


def test_clean_counterparty_keeps_inner_digits():
    assert clean_counterparty("7 ELEVEN 02") == "7 ELEVEN"


def test_only_first_processor_prefix_is_stripped():
    assert strip_processor_prefix("POS FAWRY Vodafone") == "FAWRY Vodafone"
    assert strip_processor_prefix("Vodafone") == "Vodafone"
