"""Rich terminal rendering of a lint report."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from commitguard.results.models import Report

_SEVERITY_STYLE = {
    "error": "bold white on red",
    "warning": "bold black on yellow",
}

_SEVERITY_ICON = {
    "error": "✖",
    "warning": "⚠",
}


def _severity_pill(severity: str) -> Text:
    style = _SEVERITY_STYLE.get(severity, "")
    icon = _SEVERITY_ICON.get(severity, "")
    return Text(f" {icon} {severity.upper()} ", style=style)


def render(
    report: Report,
    *,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    """Print a lint report to the terminal using Rich."""
    console = console or Console(stderr=True)

    if report.input:
        console.print(Text.assemble(("⧗   input: ", "dim"), report.input))

    if report.status == "pass":
        console.print("[bold green]✔   Commit message is clean.[/bold green]")
        return

    table = Table(
        title="commitguard",
        show_lines=False,
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Severity", justify="center", width=13)
    table.add_column("Rule", style="cyan", min_width=18)
    table.add_column("Message")

    # errors first, then warnings, evaluation order kept in each group
    for outcome in [*report.errors, *report.warnings]:
        table.add_row(
            _severity_pill(outcome.severity),
            outcome.rule_name,
            Text(outcome.message),
        )

    console.print(table)

    if show_summary:
        console.print()
        console.print(
            f"[dim]Rules run:[/dim]  {len(report.outcomes)}   "
            f"[dim]Errors:[/dim] {len(report.errors)}   "
            f"[dim]Warnings:[/dim] {len(report.warnings)}"
        )

    console.print()
    if report.status == "fail":
        console.print("[bold red]✖   REJECTED — commit message has errors.[/bold red]")
    else:
        console.print(
            "[bold yellow]⚠   Warnings found but no errors. Commit allowed.[/bold yellow]"
        )
