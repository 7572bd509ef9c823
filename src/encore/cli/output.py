"""Rich output formatting for Encore CLI.

This module centralizes the Rich-based formatting used by commands:
- Color scheme for error categories
- Table builders with consistent styling
- The error display panel rendered by ``encore explain``
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from encore.core.errors import UNKNOWN_ERROR, ErrorCategory

if TYPE_CHECKING:
    from collections.abc import Sequence

    from encore.core.errors import HandledErrorResult

# =============================================================================
# Shared console instance
# =============================================================================

console = Console()

SUPPORT_NOTICE = (
    "This appears to be a platform issue. "
    "Please contact support if this problem persists."
)
RETRY_HINT = "Try again, or reload the page."


# =============================================================================
# Color schemes
# =============================================================================


class CategoryColors:
    """Color mappings for error categories."""

    CATEGORY: dict[ErrorCategory, str] = {
        ErrorCategory.FUNCTION: "magenta",
        ErrorCategory.DEPLOYMENT: "blue",
        ErrorCategory.DNS: "cyan",
        ErrorCategory.CACHE: "cyan",
        ErrorCategory.RUNTIME: "magenta",
        ErrorCategory.IMAGE: "blue",
        ErrorCategory.REQUEST: "yellow",
        ErrorCategory.ROUTING: "yellow",
        ErrorCategory.SANDBOX: "blue",
        ErrorCategory.INTERNAL: "red",
        ErrorCategory.HTTP: "yellow",
        ErrorCategory.UNKNOWN: "dim",
    }

    @classmethod
    def get(cls, category: ErrorCategory) -> str:
        return cls.CATEGORY.get(category, "white")


def format_category(category: ErrorCategory) -> str:
    color = CategoryColors.get(category)
    return f"[{color}]{category.value}[/{color}]"


def format_flag(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


def format_delays(delays_ms: Sequence[int]) -> str:
    """Format a backoff schedule (e.g. ``"1.0s, 2.0s"``); ``"-"`` when empty."""
    if not delays_ms:
        return "-"
    return ", ".join(f"{ms / 1000:.1f}s" for ms in delays_ms)


# =============================================================================
# Table builders
# =============================================================================


def create_codes_table(title: str = "Error Codes") -> Table:
    """Create the table listed by ``encore codes``."""
    table = Table(title=title)
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Category")
    table.add_column("Status", justify="right")
    table.add_column("Support", justify="center")
    table.add_column("Message")
    return table


def create_key_value_table() -> Table:
    """Two-column table without header, for field listings."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Field", style="bold")
    table.add_column("Value")
    return table


# =============================================================================
# Panels
# =============================================================================


def create_error_panel(details: HandledErrorResult) -> Panel:
    """Render a handled error the way the error page shows it.

    The code line is omitted for ``UNKNOWN_ERROR``. The support notice
    appears only when ``contact_support`` is set, the retry hint only when
    the error is actionable.
    """
    lines: list[str] = [f"[bold]{escape(details.message)}[/bold]"]

    if details.code and details.code != UNKNOWN_ERROR:
        lines.extend(
            [
                "",
                f"Error Code: [cyan]{escape(details.code)}[/cyan]",
                f"Category: {format_category(details.category)}",
            ]
        )

    if details.description:
        lines.extend(["", f"[dim]{escape(details.description)}[/dim]"])
    if details.technical_message:
        lines.append(f"[dim]Technical: {escape(details.technical_message)}[/dim]")

    if details.contact_support:
        lines.extend(["", f"[yellow]{SUPPORT_NOTICE}[/yellow]"])
    if details.actionable:
        lines.extend(["", f"[green]{RETRY_HINT}[/green]"])

    border = "yellow" if details.contact_support else "red"
    return Panel("\n".join(lines), title="Something went wrong", border_style=border)


def print_json(data: Any, console_instance: Console | None = None) -> None:
    """Print data as JSON without wrapping or markup processing."""
    out = console_instance or console
    out.print_json(data=data, highlight=False)
