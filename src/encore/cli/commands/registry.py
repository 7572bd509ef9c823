"""Registry commands for Encore CLI.

This module implements:
- ``encore codes``: list registered error codes
- ``encore explain``: show the error page for a code
"""

from __future__ import annotations

import typer
from rich.markup import escape

from encore.core.errors import REGISTRY, ErrorCategory, HandledErrorResult, handle_error

from ..helpers import configure_global_logging, parse_category
from ..output import (
    console,
    create_codes_table,
    create_error_panel,
    format_category,
    print_json,
)

# Shown when no failure value is supplied.
NOT_FOUND_PAGE = HandledErrorResult(
    code="NOT_FOUND",
    message="The page you're looking for doesn't exist.",
    category=ErrorCategory.DEPLOYMENT,
    status_code=404,
    actionable=True,
    contact_support=False,
)


def codes(
    category: str | None = typer.Option(
        None,
        "--category",
        "-c",
        help="Only list codes in this category (e.g. Function, DNS)",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output as JSON",
    ),
) -> None:
    """List registered error codes."""
    configure_global_logging(console)
    selected = parse_category(category)

    if selected is None:
        entries = list(REGISTRY.values())
    else:
        entries = REGISTRY.codes_in(selected)

    if json_output:
        print_json([entry.to_dict() for entry in entries])
        return

    title = f"Error Codes ({selected.value})" if selected else "Error Codes"
    table = create_codes_table(title)
    for entry in entries:
        table.add_row(
            entry.code,
            format_category(entry.category),
            str(entry.status_code),
            "[yellow]yes[/yellow]" if entry.contact_support else "",
            escape(entry.message),
        )
    console.print(table)
    console.print(f"\n[dim]{len(entries)} code(s)[/dim]")


def explain(
    code: str | None = typer.Argument(
        None,
        help="Error code to explain (omit for the default not-found page)",
    ),
    details: bool = typer.Option(
        False,
        "--details",
        "-d",
        help="Include description and technical message",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        "-j",
        help="Output as JSON",
    ),
) -> None:
    """Show how an error is presented to users."""
    configure_global_logging(console)

    if code is None:
        result = NOT_FOUND_PAGE
    else:
        result = handle_error(code, log_diagnostics=False, show_details=details)

    if json_output:
        print_json(result.to_dict())
        return

    console.print(create_error_panel(result))
