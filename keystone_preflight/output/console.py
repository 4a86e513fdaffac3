"""
Console Report

Renders a Report to the terminal with rich.
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape

from ..preflight.models import CheckStatus, Report

RULE = "━" * 40

STATUS_STYLES = {
    CheckStatus.PASS: ("✓", "green"),
    CheckStatus.FAIL: ("✗", "red"),
    CheckStatus.WARN: ("⚠", "yellow"),
}


def print_header(console: Console, environment: str, timestamp: str) -> None:
    """Print the run banner."""
    console.print("[bold blue]🚀 Keystone Preflight Check[/bold blue]")
    console.print(f"Environment: [cyan]{escape(environment)}[/cyan]")
    console.print(f"Timestamp: {timestamp}")
    console.print()


def print_report(report: Report, console: Optional[Console] = None) -> None:
    """
    Print each check's status, the summary line and the deploy verdict.

    Args:
        report: Report to render
        console: Rich console (default: a new stdout console)
    """
    console = console or Console()

    console.print(RULE)
    console.print("[bold]Preflight Check Results[/bold]")
    console.print(RULE)

    for check in report.checks:
        symbol, color = STATUS_STYLES[check.status]
        console.print(f"[{color}]{symbol}[/{color}] {escape(check.result.message)}")
        if check.result.details:
            console.print(f"  → {escape(check.result.details)}", style="dim")

    console.print(RULE)
    console.print(report.summary())
    console.print(RULE)

    if report.can_deploy:
        console.print("[green]✓ Ready to deploy[/green]")
    else:
        console.print("[red]✗ Not ready to deploy - fix required checks[/red]")
