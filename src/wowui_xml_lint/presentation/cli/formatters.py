"""Rich formatting utilities for the CLI.

Everything the validator prints goes through the shared ``console``. This
module knows how to render reports, not how they are produced.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from wowui_xml_lint.domain.models.finding import FileStatus, Severity
from wowui_xml_lint.domain.models.tally import RunStatus

if TYPE_CHECKING:
    from wowui_xml_lint.domain.models.finding import FileReport, Finding
    from wowui_xml_lint.domain.models.tally import RunTally
    from wowui_xml_lint.rules.base import BaseRule

console = Console(highlight=False, soft_wrap=True)


# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/]")


def notice(message: str) -> None:
    """Print a yellow informational message."""
    console.print(f"[yellow]{escape(message)}[/]")


def banner(directory: Path) -> None:
    console.print("[cyan]=== WoW Addon XML Validator ===[/]\n")
    console.print(f"Scanning: {escape(str(directory))}\n")


# ---------------------------------------------------------------------------
# Per-file report
# ---------------------------------------------------------------------------


_STATUS_MARKERS = {
    FileStatus.PASSED: ("green", "✓"),
    FileStatus.PASSED_WITH_WARNINGS: ("yellow", "⚠"),
    FileStatus.FAILED: ("red", "✗"),
}


def _finding_lines(finding: Finding) -> list[str]:
    color, label = ("red", "Error") if finding.is_error else ("yellow", "Warning")
    lines = [f"  [{color}]{label}:[/] {escape(finding.message)}"]
    if finding.location:
        lines.append(f"  {finding.location}")
    return lines


def file_report(report: FileReport) -> None:
    """Print the status line of one file followed by its findings."""
    color, marker = _STATUS_MARKERS[report.status]
    console.print(f"[{color}]{marker} {escape(report.name)}[/]")
    # Errors first, then warnings, each in evaluation order
    for finding in report.errors + report.warnings:
        for line in _finding_lines(finding):
            console.print(line)


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------


def run_summary(tally: RunTally) -> None:
    """Print the totals and the overall verdict."""
    console.print("\n[cyan]=== Validation Summary ===[/]")
    console.print(f"Files checked: {tally.files}")
    console.print(f"Errors: [red]{tally.errors}[/]")
    console.print(f"Warnings: [yellow]{tally.warnings}[/]")

    if tally.status == RunStatus.FAILED:
        console.print("\n[red]✗ Validation failed[/]")
    elif tally.status == RunStatus.PASSED_WITH_WARNINGS:
        console.print("\n[yellow]⚠ Validation passed with warnings[/]")
    else:
        console.print("\n[green]✓ All XML files are valid[/]")


# ---------------------------------------------------------------------------
# Rule catalog / config rendering
# ---------------------------------------------------------------------------


def rules_table(rules: list[BaseRule]) -> None:
    """Print the dialect rule catalog in evaluation order."""
    table = Table(title="WoW UI XML Rules", show_header=True, border_style="blue")
    table.add_column("#", justify="right", width=3)
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Severity", no_wrap=True)
    table.add_column("Description")

    for i, rule in enumerate(rules, start=1):
        style = "red" if rule.severity == Severity.ERROR else "yellow"
        table.add_row(
            str(i),
            rule.code.value,
            f"[{style}]{rule.severity.value}[/]",
            escape(rule.description),
        )

    console.print(table)


def json_panel(raw_json: str, title: str = "Active configuration") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


def success_panel(message: str, title: str = "WoW UI XML Lint") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))
