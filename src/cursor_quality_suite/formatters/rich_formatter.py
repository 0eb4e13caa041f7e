"""Rich terminal formatter for scan reports."""

import io
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule

from ..config import ScanConfig
from ..models import FileReport, Issue, PatternFinding, ScanResult, Severity, Verdict
from .base import BaseFormatter

_VERDICT_LINES = {
    Verdict.FAILED: "[red]FAILED: Critical issues must be addressed[/red]",
    Verdict.PASSED_WITH_WARNINGS: "[yellow]PASSED with warnings[/yellow]",
    Verdict.PASSED: "[green]PASSED: All checks passed[/green]",
}


def _issue_line(issue: Issue) -> str:
    text = f"{issue.metric.label}: {issue.value} ({issue.severity.value} > {issue.threshold})"
    if issue.severity is Severity.CRITICAL:
        return f"  [red]✗ {text}[/red]"
    return f"  [yellow]⚠ {text}[/yellow]"


class RichFormatter(BaseFormatter):
    """Header, component size check, anti-pattern check and summary."""

    def __init__(self, console: Optional[Console] = None, config: Optional[ScanConfig] = None):
        self.console = console or Console()
        self.config = config or ScanConfig()

    def render(self, result: ScanResult) -> None:
        self._print_header(self.console, result)
        self._print_size_check(self.console, result)
        self._print_patterns(self.console, result)
        self._print_summary(self.console, result)

    def format(self, result: ScanResult) -> str:
        buffer = io.StringIO()
        plain = Console(file=buffer, no_color=True, highlight=False, width=120)
        saved, self.console = self.console, plain
        try:
            self.render(result)
        finally:
            self.console = saved
        return buffer.getvalue()

    def _print_header(self, console: Console, result: ScanResult) -> None:
        console.print(Rule("[bold cyan]CODE QUALITY CHECK[/bold cyan]"))
        console.print()
        console.print(f"Scanned {result.files_scanned} components in {escape(result.root)}")
        console.print()

    def _print_size_check(self, console: Console, result: ScanResult) -> None:
        console.print("[bold]COMPONENT SIZE CHECK[/bold]")
        console.print()
        if not result.file_reports:
            console.print("[green]✓ All components within size limits[/green]")
            console.print()
            return
        for report in result.file_reports:
            self._print_file(console, report)

    def _print_file(self, console: Console, report: FileReport) -> None:
        console.print(f"[bold]{escape(report.path)}[/bold]", emoji=False)
        for issue in report.issues:
            console.print(_issue_line(issue))
        console.print()

    def _print_patterns(self, console: Console, result: ScanResult) -> None:
        console.print("[bold]ANTI-PATTERN CHECK[/bold]")
        console.print()
        for finding in result.pattern_findings:
            self._print_finding(console, finding)
        console.print()

    def _print_finding(self, console: Console, finding: PatternFinding) -> None:
        if not finding.found:
            console.print(f"[green]✓ No {escape(finding.description)}[/green]")
            return
        label = finding.description
        if finding.advice:
            label = f"{label} ({finding.advice})"
        console.print(f"[yellow]⚠ Found {escape(label)}:[/yellow]")
        limit = self.config.max_pattern_locations
        for location in finding.locations[:limit]:
            console.print(f"  {escape(str(location))}", emoji=False)
        hidden = len(finding.locations) - limit
        if hidden > 0:
            console.print(f"  [dim]... and {hidden} more[/dim]")

    def _print_summary(self, console: Console, result: ScanResult) -> None:
        console.print(Rule("[bold cyan]SUMMARY[/bold cyan]"))
        console.print()
        console.print(f"Critical issues: {result.critical_count}")
        console.print(f"Warnings: {result.warning_count}")
        console.print()
        console.print(_VERDICT_LINES[result.verdict])
