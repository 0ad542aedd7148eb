"""Input adapters: turn backup containers into :class:`SmsRecord` items."""

from .backup import SmsRecord, iter_backup_records, load_backup_records

__all__ = ["SmsRecord", "iter_backup_records", "load_backup_records"]
