"""Configuration constants for ``sms_transactions``.

Values are read from the environment once, at import time. The CLI loads a
local ``.env`` before importing the parsing modules, so entries there take
effect as well.

Environment variables:
    SMS_CIB_DEBIT_CARD_SUFFIX - last four digits of the CIB debit card
    SMS_CIB_ACCOUNT_SUFFIX    - last four digits of the CIB current account
    SMS_HOME_CURRENCY         - currency assumed when a message names none
    SMS_OUTPUT_DIR            - default output directory for CSV files
"""

from __future__ import annotations

import os

# Sender identifiers exactly as they appear in the backup ``address`` field.
CIB_SENDER = "CIB"
BANQUE_MISR_SENDER = "Banque Misr"

CIB_DEBIT_CARD_SUFFIX = os.environ.get("SMS_CIB_DEBIT_CARD_SUFFIX", "7759")
CIB_ACCOUNT_SUFFIX = os.environ.get("SMS_CIB_ACCOUNT_SUFFIX", "2373")

HOME_CURRENCY = os.environ.get("SMS_HOME_CURRENCY", "EGP").strip().upper() or "EGP"

DEFAULT_OUTPUT_DIR = os.environ.get("SMS_OUTPUT_DIR", ".")

# Output bucket names. Part of the output contract: each becomes a file name.
CIB_CURRENT_DEBIT_GROUP = "CIB_Current_Debit"
BANQUE_MISR_GROUP = "Banque_Misr"
CIB_CREDIT_CARD_GROUP_PREFIX = "CIB_Credit_Card_"

BASE_GROUPS: tuple[str, ...] = (CIB_CURRENT_DEBIT_GROUP, BANQUE_MISR_GROUP)


__all__ = [
    "BANQUE_MISR_GROUP",
    "BANQUE_MISR_SENDER",
    "BASE_GROUPS",
    "CIB_ACCOUNT_SUFFIX",
    "CIB_CREDIT_CARD_GROUP_PREFIX",
    "CIB_CURRENT_DEBIT_GROUP",
    "CIB_DEBIT_CARD_SUFFIX",
    "CIB_SENDER",
    "DEFAULT_OUTPUT_DIR",
    "HOME_CURRENCY",
]
