"""CLI for the ``sms_transactions`` package.

A Typer console interface over :mod:`sms_transactions.pipeline` and
:mod:`sms_transactions.writer`. The root callback loads a local ``.env``
using ``python-dotenv`` and configures logging before any command runs.
Parsing modules are imported inside the command so values from ``.env``
reach :mod:`sms_transactions.config`.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from typer.models import OptionInfo

from .logging_setup import configure_logging

app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Turn bank notification SMS messages from an XML backup into "
        "categorized per-account transaction CSV files."
    ),
)


# Module-level option objects to satisfy ruff B008 (no calls in parameter
# defaults).
OUTPUT_OPTION: OptionInfo = typer.Option(
    None,
    "--output",
    "-o",
    help="Directory for the CSV files (falls back to SMS_OUTPUT_DIR, then '.').",
    file_okay=False,
    dir_okay=True,
)
SENDER_OPTION: OptionInfo = typer.Option(
    None, "--sender", "-s", help="Only parse messages from this exact sender id."
)
FROM_OPTION: OptionInfo = typer.Option(
    None, "--from", "-f", help="Only parse messages on or after this date (YYYY-MM-DD)."
)
REPORT_OPTION: OptionInfo = typer.Option(
    False, "--report", help="Print per-reason message counters after parsing."
)
VERBOSE_OPTION: OptionInfo = typer.Option(
    False, "--verbose", "-v", help="Log every skipped message (DEBUG level)."
)


def _fail(message: str) -> typer.Exit:
    print(f"Error: {message}", file=sys.stderr)
    return typer.Exit(1)


@app.command("parse")
def parse_cmd(
    xml_file: Annotated[Path, typer.Argument(help="SMS backup XML file.", dir_okay=False)],
    output: Path | None = OUTPUT_OPTION,
    sender: str | None = SENDER_OPTION,
    start_date: str | None = FROM_OPTION,
    report: bool = REPORT_OPTION,
) -> None:
    """Parse XML_FILE and write one CSV per account group."""

    # Deferred so configuration is read after .env is loaded
    from .config import DEFAULT_OUTPUT_DIR
    from .errors import BackupReadError, InvalidStartDateError
    from .pipeline import ParseOptions, parse_backup_file
    from .writer import write_groups

    try:
        options = ParseOptions.from_strings(sender=sender, start_date=start_date)
    except InvalidStartDateError as e:
        raise _fail(str(e)) from e

    try:
        result = parse_backup_file(xml_file, options)
    except BackupReadError as e:
        raise _fail(str(e)) from e

    try:
        written = write_groups(result.groups, output or DEFAULT_OUTPUT_DIR)
    except OSError as e:
        raise _fail(f"error writing output: {e}") from e

    for path, count in written:
        typer.echo(f"Created {path} with {count} transactions.")

    if report:
        for name, value in result.report.as_dict().items():
            typer.echo(f"{name}\t{value}")


@app.callback()
def _root(verbose: bool = VERBOSE_OPTION) -> None:
    """Root command.

    Loads ``.env`` from the current working directory (without overriding any
    already-set environment variables) and configures package logging.
    """

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging("DEBUG" if verbose else None)


if __name__ == "__main__":  # pragma: no cover
    app()
