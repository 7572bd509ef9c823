"""Classify command for Encore CLI.

Runs a failure value through the parser and the retry policy and shows
the result: the resolved descriptor, whether the failure is retryable and
the waits a retry loop would use.
"""

from __future__ import annotations

from typing import Any

import typer
from rich.markup import escape

from encore.core.errors import parse_error
from encore.core.errors.codes import ERROR_CODE_HEADER
from encore.execution import backoff_schedule, is_retryable

from ..helpers import configure_global_logging, get_config
from ..output import (
    console,
    create_key_value_table,
    format_category,
    format_delays,
    format_flag,
    print_json,
)


def build_failure(value: str, status: int | None, status_text: str | None) -> Any:
    """Turn CLI arguments into a failure value.

    Without ``status`` the value is a bare code string. With it, the value
    becomes the error-code header of a response-like failure.
    """
    if status is None:
        return value
    return {
        "response": {
            "status": status,
            "statusText": status_text or "",
            "headers": {ERROR_CODE_HEADER: value} if value else {},
        }
    }


def classify(
    value: str = typer.Argument(
        ...,
        help="Error code (or free text) to classify",
    ),
    status: int | None = typer.Option(
        None,
        "--status",
        "-s",
        help="Treat VALUE as the error header of an HTTP response with this status",
    ),
    status_text: str | None = typer.Option(
        None,
        "--status-text",
        help="Response status text (with --status)",
    ),
    max_attempts: int | None = typer.Option(
        None,
        "--max-attempts",
        "-n",
        min=1,
        help="Total attempts for the backoff schedule (default from config)",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output as JSON",
    ),
) -> None:
    """Classify a failure and show its retry behaviour."""
    configure_global_logging(console)
    retry_config = get_config(console).retry

    parsed = parse_error(build_failure(value, status, status_text))
    retryable = is_retryable(parsed)
    schedule = backoff_schedule(parsed, max_attempts, retry_config)
    attempts = retry_config.max_attempts if max_attempts is None else max_attempts

    if json_output:
        output = parsed.to_dict()
        output["retryable"] = retryable
        output["maxAttempts"] = attempts
        output["backoffMs"] = schedule
        print_json(output)
        return

    table = create_key_value_table()
    table.add_row("Code", f"[cyan]{escape(parsed.code)}[/cyan]")
    table.add_row("Category", format_category(parsed.category))
    table.add_row("Status", str(parsed.status_code))
    if parsed.http_status is not None:
        table.add_row("HTTP status", str(parsed.http_status))
    table.add_row("Message", escape(parsed.message))
    table.add_row("User message", escape(parsed.user_message))
    table.add_row("Actionable", format_flag(parsed.actionable))
    table.add_row("Contact support", format_flag(parsed.contact_support))
    table.add_row("Retryable", format_flag(retryable))
    table.add_row(f"Backoff ({attempts} attempts)", format_delays(schedule))
    console.print(table)
