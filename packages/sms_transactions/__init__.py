"""Bank notification SMS to categorized transaction CSVs.

Entry points live in submodules: :mod:`sms_transactions.pipeline` for parsing,
:mod:`sms_transactions.writer` for output and :mod:`sms_transactions.cli` for
the console interface. Nothing is imported here so that environment-backed
settings in :mod:`sms_transactions.config` are read only after the CLI has
loaded ``.env``.
"""
