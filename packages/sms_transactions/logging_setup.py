"""Centralized logging configuration for the ``sms_transactions`` package.

This module provides two public helpers:

- ``configure_logging(...)``: attach a single ``StreamHandler`` to the package
  root logger (``"sms_transactions"``). Intended to be called once by
  entrypoints (e.g., the CLI) at process startup.
- ``get_logger(name)``: acquire a logger by name, ensuring that the package
  root logger has at least a ``NullHandler`` attached when not configured so
  library use stays silent.

Library modules must never attach their own handlers. Per-message skip
reasons are reported at ``DEBUG`` so a default run prints nothing about
messages that did not become transactions.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "sms_transactions"
_LEVEL_ENV_VAR = "SMS_TRANSACTIONS_LOG_LEVEL"
_CONFIGURED = False


def _level_from_name(name: str) -> int | None:
    # Accept numeric strings or standard level names (INFO/DEBUG/etc.).
    name = name.strip().upper()
    if name.isdigit():
        return int(name)
    numeric = getattr(logging, name, None)
    return numeric if isinstance(numeric, int) else None


def _parse_level(level: int | str | None) -> int:
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        numeric = _level_from_name(level)
        if numeric is not None:
            return numeric
    # Env override when explicit ``level`` is None or unusable
    env_val = os.getenv(_LEVEL_ENV_VAR)
    if env_val:
        numeric = _level_from_name(env_val)
        if numeric is not None:
            return numeric
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Configure the package root logger exactly once.

    Parameters
    ----------
    level:
        Logging level as ``int`` or level-name string (e.g., ``"DEBUG"``). If
        ``None``, defaults to the ``SMS_TRANSACTIONS_LOG_LEVEL`` environment
        variable when set, otherwise ``logging.INFO``.
    fmt:
        Optional logging format string. Defaults to
        ``"%(asctime)s %(name)s %(levelname)s %(message)s"``.
    stream:
        The output stream for the single ``StreamHandler`` (defaults to
        ``sys.stderr``).
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)

    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    numeric = _parse_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(numeric)
    handler.setFormatter(
        logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s")
    )

    logger.setLevel(numeric)
    logger.addHandler(handler)
    # Avoid double emission via the root logger.
    logger.propagate = False

    _CONFIGURED = True


def reset_logging() -> None:
    """Detach handlers installed by :func:`configure_logging`.

    Used by tests and by hosts that re-run the CLI in-process.
    """

    global _CONFIGURED
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
    _CONFIGURED = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name, ensuring safe defaults for library use."""

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "reset_logging"]
