"""Fatal error types.

Only input acquisition problems are errors. Anything that goes wrong with a
single message (unknown sender, OTP, pattern miss, duplicate, bad timestamp)
is skipped and counted in :class:`sms_transactions.pipeline.ParseReport`.
"""

from __future__ import annotations


class BackupReadError(RuntimeError):
    """The SMS backup could not be read or decoded."""


class InvalidStartDateError(ValueError):
    """A start-date filter was not in ``YYYY-MM-DD`` format."""


__all__ = ["BackupReadError", "InvalidStartDateError"]
