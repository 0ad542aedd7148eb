"""Pytest configuration for test isolation.

Package logging is configured at most once per process, and the
CLI's root callback does configure it. An autouse fixture resets it after
each test so one CLI invocation cannot change what later tests observe.

The CLI also loads ``.env`` from the working directory; tests run from a
per-test temporary directory so a developer's local ``.env`` never leaks in.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from sms_transactions.logging_setup import reset_logging
from sms_transactions.models import RawMessage
from tests.helpers.messages import millis

MessageFactory = Callable[..., RawMessage]


@pytest.fixture(autouse=True)
def _isolate_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SMS_TRANSACTIONS_LOG_LEVEL", raising=False)
    yield
    reset_logging()


@pytest.fixture
def msg() -> MessageFactory:
    """Build a :class:`RawMessage`; timestamp defaults to 2024-05-01 12:00 local."""

    def _make(sender: str, body: str, when: int | None = None) -> RawMessage:
        return RawMessage(
            sender=sender,
            body=body,
            timestamp_millis=millis(2024, 5, 1) if when is None else when,
        )

    return _make
