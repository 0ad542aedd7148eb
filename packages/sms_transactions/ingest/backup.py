"""Reader for "SMS Backup & Restore" style XML exports.

Contract
--------
- Root element must be ``<smses>``; its direct ``<sms>`` children are the
  messages, in file order.
- Each ``<sms>`` contributes three attributes, validated into
  :class:`SmsRecord`:

  ``address`` (sender id), ``body`` (message text), ``date`` (epoch
  milliseconds as a string).

  Missing attributes become empty strings; every other attribute (``type``,
  ``read``, ``contact_name``, ...) is ignored.

Failure mode
------------
An unreadable file, malformed XML or an unexpected root element raises
:class:`~sms_transactions.errors.BackupReadError`. Per-record problems such
as a non-numeric ``date`` are not checked here; the pipeline skips those
messages.
"""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from os import PathLike

from pydantic import BaseModel, ConfigDict, ValidationError

from ..errors import BackupReadError
from ..logging_setup import get_logger

ROOT_TAG = "smses"
MESSAGE_TAG = "sms"

_logger = get_logger("sms_transactions.ingest.backup")


class SmsRecord(BaseModel):
    """One ``<sms>`` element exactly as stored in the backup."""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    address: str = ""
    body: str = ""
    date: str = ""


def _load_root(source: str | PathLike[str] | bytes) -> ET.Element:
    try:
        if isinstance(source, bytes):
            return ET.fromstring(source)
        return ET.parse(os.fspath(source)).getroot()
    except OSError as e:
        raise BackupReadError(f"error reading file: {e}") from e
    except ET.ParseError as e:
        raise BackupReadError(f"error parsing XML: {e}") from e


def iter_backup_records(source: str | PathLike[str] | bytes) -> Iterator[SmsRecord]:
    """Yield :class:`SmsRecord` items from a backup path or raw XML bytes.

    The whole document is parsed before the first record is yielded, so
    decoding errors surface on the first ``next()``.
    """

    root = _load_root(source)
    if root.tag != ROOT_TAG:
        raise BackupReadError(f"expected <{ROOT_TAG}> root element, found <{root.tag}>")

    for pos, el in enumerate(root.iterfind(MESSAGE_TAG)):
        try:
            yield SmsRecord.model_validate(
                {k: el.attrib[k] for k in ("address", "body", "date") if k in el.attrib}
            )
        except ValidationError as e:  # pragma: no cover - attributes are always str
            raise BackupReadError(f"invalid <{MESSAGE_TAG}> element at position {pos}: {e}") from e


def load_backup_records(source: str | PathLike[str] | bytes) -> list[SmsRecord]:
    records = list(iter_backup_records(source))
    _logger.debug("loaded %d sms records", len(records))
    return records


__all__ = ["SmsRecord", "iter_backup_records", "load_backup_records"]
