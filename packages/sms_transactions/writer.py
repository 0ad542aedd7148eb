"""CSV output: one file per non-empty account group.

Files are UTF-8 with a BOM (spreadsheet apps detect Arabic text reliably),
``;`` separated, ``\\n`` terminated, named ``<group>.csv``.
"""

from __future__ import annotations

import csv
from collections.abc import Mapping, Sequence
from os import PathLike
from pathlib import Path

from .logging_setup import get_logger
from .records import CSV_HEADER, TransactionRow

_logger = get_logger("sms_transactions.writer")


def write_group(path: Path, rows: Sequence[TransactionRow]) -> None:
    with open(path, "w", encoding="utf-8-sig", newline="") as f:
        writer = csv.writer(f, delimiter=";", lineterminator="\n")
        writer.writerow(CSV_HEADER)
        writer.writerows(row.as_tuple() for row in rows)


def write_groups(
    groups: Mapping[str, Sequence[TransactionRow]],
    output_dir: str | PathLike[str],
) -> list[tuple[Path, int]]:
    """Write every non-empty group and return ``(path, row_count)`` pairs.

    ``output_dir`` is created when missing. ``OSError`` propagates.
    """

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    written: list[tuple[Path, int]] = []
    for group, rows in groups.items():
        if not rows:
            _logger.debug("group %s is empty; no file written", group)
            continue
        path = out / f"{group}.csv"
        write_group(path, rows)
        written.append((path, len(rows)))
    return written


__all__ = ["write_group", "write_groups"]
