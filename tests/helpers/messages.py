"""Shared builders for SMS fixtures used across tests."""

from __future__ import annotations

import textwrap
from datetime import datetime
from xml.sax.saxutils import quoteattr


def millis(year: int, month: int, day: int, hour: int = 12, minute: int = 0) -> int:
    """Epoch milliseconds for a local wall-clock time."""

    return int(datetime(year, month, day, hour, minute).timestamp()) * 1000


def backup_xml(*messages: tuple[str, str, int | str]) -> bytes:
    """Render ``(address, body, date)`` triples as an SMS backup document."""

    rows = "\n".join(
        f"  <sms protocol=\"0\" address={quoteattr(a)} date=\"{d}\" type=\"1\" "
        f"body={quoteattr(b)} read=\"1\" />"
        for a, b, d in messages
    )
    doc = textwrap.dedent(
        """\
        <?xml version='1.0' encoding='UTF-8' standalone='yes' ?>
        <smses count="{count}">
        {rows}
        </smses>
        """
    ).format(count=len(messages), rows=rows)
    return doc.encode("utf-8")
