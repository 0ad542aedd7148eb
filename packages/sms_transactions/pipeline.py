"""Message → transaction pipeline.

Public API:
    - :func:`process_message`: one message through dedup, dispatch,
      extraction, classification and aggregation.
    - :func:`parse_messages` / :func:`parse_records` /
      :func:`parse_backup_file`: whole-run entry points returning a
      :class:`ParseResult`.

Run state (seen-set, buckets, counters) lives in a :class:`ParseContext`
owned by the caller; nothing here keeps module-level mutable state. A run is
sequential. Splitting one run across threads would need one context per
partition (e.g., per sender) and a merge of the finalized buckets afterward.

Per-message problems never raise. They are counted in :class:`ParseReport`
and logged at ``DEBUG``.
"""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import StrEnum
from os import PathLike

from .aggregate import Aggregator
from .categorize import classify_transaction
from .dispatch import SUPPRESSED, classify
from .duplicates import Deduplicator
from .errors import InvalidStartDateError
from .extractors import DEFAULT_REGISTRY, ExtractorRegistry
from .ingest.backup import SmsRecord, load_backup_records
from .logging_setup import get_logger
from .models import RawMessage, Transaction
from .records import TransactionRow

_logger = get_logger("sms_transactions.pipeline")

_MILLIS_RE = re.compile(r"[+-]?\d+")


# ---- Options ----------------------------------------------------------------


def parse_start_date(value: str | None) -> date | None:
    """Parse a ``YYYY-MM-DD`` filter value; blank means no filter."""

    if value is None or not value.strip():
        return None
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError as e:
        raise InvalidStartDateError(
            f"invalid date format (use YYYY-MM-DD): {value!r}"
        ) from e


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Caller-supplied filters.

    sender:
        Keep only messages whose sender equals this value exactly.
    start_date:
        Drop messages whose resolved local time is before midnight of this
        date.
    """

    sender: str | None = None
    start_date: date | None = None

    @classmethod
    def from_strings(
        cls, *, sender: str | None = None, start_date: str | None = None
    ) -> ParseOptions:
        return cls(sender=sender or None, start_date=parse_start_date(start_date))

    @property
    def start_datetime(self) -> datetime | None:
        if self.start_date is None:
            return None
        return datetime.combine(self.start_date, time.min)


# ---- Run state --------------------------------------------------------------


class SkipReason(StrEnum):
    SENDER_FILTER = "sender_filter"
    DUPLICATE = "duplicate"
    BAD_TIMESTAMP = "bad_timestamp"
    BEFORE_START = "before_start"
    UNKNOWN_SENDER = "unknown_sender"
    SUPPRESSED = "suppressed"
    UNRECOGNIZED = "unrecognized"


@dataclass(slots=True)
class ParseReport:
    """Counters describing what happened to every input message."""

    received: int = 0
    emitted: int = 0
    skipped: Counter[SkipReason] = field(default_factory=Counter)

    def skip(self, reason: SkipReason, message: RawMessage | SmsRecord) -> None:
        self.skipped[reason] += 1
        if isinstance(message, RawMessage):
            sender, stamp = message.sender, message.timestamp_millis
        else:
            sender, stamp = message.address, message.date
        _logger.debug("skip %s: sender=%r date=%r", reason, sender, stamp)

    def as_dict(self) -> dict[str, int]:
        out = {"received": self.received, "emitted": self.emitted}
        out.update({str(r): self.skipped.get(r, 0) for r in SkipReason})
        return out


@dataclass(slots=True)
class ParseContext:
    deduplicator: Deduplicator = field(default_factory=Deduplicator)
    aggregator: Aggregator = field(default_factory=Aggregator)
    report: ParseReport = field(default_factory=ParseReport)


@dataclass(frozen=True, slots=True)
class ParseResult:
    groups: dict[str, list[TransactionRow]]
    report: ParseReport


# ---- Helpers ----------------------------------------------------------------


def parse_timestamp_millis(raw: str) -> int | None:
    """Return epoch milliseconds from the backup's string field, or ``None``."""

    if not _MILLIS_RE.fullmatch(raw):
        return None
    return int(raw)


def resolve_timestamp(millis: int) -> datetime | None:
    """Convert epoch milliseconds to a local, second-precision ``datetime``."""

    seconds = int(millis / 1000) if millis < 0 else millis // 1000
    try:
        return datetime.fromtimestamp(seconds)
    except (OverflowError, OSError, ValueError):
        return None


def to_raw_message(record: SmsRecord) -> RawMessage | None:
    millis = parse_timestamp_millis(record.date)
    if millis is None:
        return None
    return RawMessage(sender=record.address, body=record.body, timestamp_millis=millis)


# ---- Pipeline ---------------------------------------------------------------


def process_message(
    message: RawMessage,
    context: ParseContext,
    options: ParseOptions | None = None,
    *,
    registry: ExtractorRegistry = DEFAULT_REGISTRY,
) -> Transaction | None:
    """Run one message through the pipeline.

    Returns the transaction appended to the aggregator, or ``None`` when the
    message was skipped for any reason.
    """

    opts = options or ParseOptions()
    report = context.report
    report.received += 1

    if opts.sender is not None and message.sender != opts.sender:
        report.skip(SkipReason.SENDER_FILTER, message)
        return None

    if context.deduplicator.seen(message):
        report.skip(SkipReason.DUPLICATE, message)
        return None

    timestamp = resolve_timestamp(message.timestamp_millis)
    if timestamp is None:
        report.skip(SkipReason.BAD_TIMESTAMP, message)
        return None

    start = opts.start_datetime
    if start is not None and timestamp < start:
        report.skip(SkipReason.BEFORE_START, message)
        return None

    extractor = classify(message.sender, message.body, registry)
    if extractor is SUPPRESSED:
        reason = (
            SkipReason.SUPPRESSED if message.sender in registry else SkipReason.UNKNOWN_SENDER
        )
        report.skip(reason, message)
        return None

    tx = Transaction(timestamp=timestamp, note=message.body, currency=extractor.home_currency)
    tx.apply(extractor.extract(message.body))
    if not tx.is_emittable:
        report.skip(SkipReason.UNRECOGNIZED, message)
        return None

    classify_transaction(tx)
    context.aggregator.add(tx)
    report.emitted += 1
    return tx


def parse_messages(
    messages: Iterable[RawMessage],
    options: ParseOptions | None = None,
    *,
    context: ParseContext | None = None,
    registry: ExtractorRegistry = DEFAULT_REGISTRY,
) -> ParseResult:
    ctx = context or ParseContext()
    for message in messages:
        process_message(message, ctx, options, registry=registry)
    return ParseResult(groups=ctx.aggregator.finalize(), report=ctx.report)


def parse_records(
    records: Iterable[SmsRecord],
    options: ParseOptions | None = None,
    *,
    context: ParseContext | None = None,
    registry: ExtractorRegistry = DEFAULT_REGISTRY,
) -> ParseResult:
    """Parse backup records; records with a non-numeric ``date`` are skipped."""

    ctx = context or ParseContext()
    for record in records:
        message = to_raw_message(record)
        if message is None:
            ctx.report.received += 1
            ctx.report.skip(SkipReason.BAD_TIMESTAMP, record)
            continue
        process_message(message, ctx, options, registry=registry)
    result = ParseResult(groups=ctx.aggregator.finalize(), report=ctx.report)
    _logger.debug("parse finished: %s", result.report.as_dict())
    return result


def parse_backup_file(
    path: str | PathLike[str],
    options: ParseOptions | None = None,
    *,
    registry: ExtractorRegistry = DEFAULT_REGISTRY,
) -> ParseResult:
    """Read an XML backup and parse every message in it.

    Raises :class:`~sms_transactions.errors.BackupReadError` when the file
    cannot be read or decoded.
    """

    return parse_records(load_backup_records(path), options, registry=registry)


__all__ = [
    "ParseContext",
    "ParseOptions",
    "ParseReport",
    "ParseResult",
    "SkipReason",
    "parse_backup_file",
    "parse_messages",
    "parse_records",
    "parse_start_date",
    "parse_timestamp_millis",
    "process_message",
    "resolve_timestamp",
    "to_raw_message",
]
