"""Utility functions for terminal output."""

from datetime import datetime
from rich.console import Console
from rich.table import Table

from ..client.models import (
    FailedStatus,
    ProblemStatus,
    StatusLabel,
    SuccessStatus,
    WarningStatus,
)

console = Console()
err_console = Console(stderr=True)

STATUS_NAMES = {
    StatusLabel.SUCCESS: "Solved",
    StatusLabel.FAILED: "Rival solved",
    StatusLabel.WARNING: "Tried",
    StatusLabel.NONE: "-",
}


def create_table(title: str, headers: list) -> Table:
    """Create a formatted table for display."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    for header in headers:
        table.add_column(header)
    return table


def format_epoch(epoch_second: int) -> str:
    """Format a Unix timestamp as local date and time."""
    return datetime.fromtimestamp(epoch_second).strftime("%Y-%m-%d %H:%M:%S")


def format_result_color(result: str) -> str:
    """Format a verdict code with appropriate color."""
    result_upper = result.upper()

    if result_upper == "AC":
        return f"[green]{result}[/green]"
    elif result_upper in ["WA", "RE", "CE", "OLE", "IE"]:
        return f"[red]{result}[/red]"
    elif result_upper in ["TLE", "MLE", "QLE"]:
        return f"[magenta]{result}[/magenta]"
    elif result_upper in ["WJ", "WR"] or "/" in result_upper:
        return f"[yellow]{result}[/yellow]"
    else:
        return result


def format_status(status: ProblemStatus) -> str:
    """Short name of a status label."""
    return STATUS_NAMES[status.label]


def format_status_detail(status: ProblemStatus) -> str:
    """One-line summary of the data carried by a status."""
    if isinstance(status, SuccessStatus):
        detail = (
            f"{format_epoch(status.first_accepted_epoch)} "
            f"({', '.join(sorted(status.solved_languages))})"
        )
        if status.rejected_epochs:
            detail += f", {len(status.rejected_epochs)} rejected before"
        return detail
    if isinstance(status, FailedStatus):
        detail = f"by {', '.join(sorted(status.solved_rivals))}"
        if status.rejected_epochs:
            detail += f", {len(status.rejected_epochs)} rejected"
        return detail
    if isinstance(status, WarningStatus):
        return (
            f"{format_result_color(status.last_failure_result)} at "
            f"{format_epoch(status.last_failure_epoch)}, "
            f"{len(status.rejected_epochs)} rejected "
            f"({', '.join(sorted(status.attempted_languages))})"
        )
    return ""
