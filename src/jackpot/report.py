"""Rendering of verification reports.

render_report prints the human-readable walkthrough of a round;
report_json serialises the same report for machine consumers.
"""

from __future__ import annotations

import json
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from jackpot.config import Settings
from jackpot.engine.verifier import (
    CHECK_CLIENT_SEED,
    CHECK_RESULT,
    CHECK_SERVER_HASH,
    CHECK_WINNER,
    CheckResult,
    VerificationReport,
)
from jackpot.engine.winner_selector import WinnerRange

SEPARATOR = "=" * 60

_CHECK_TITLES = {
    CHECK_SERVER_HASH: ("1️⃣", "Verifying Server Hash...", "Server hash"),
    CHECK_CLIENT_SEED: ("2️⃣", "Verifying Client Seed...", "Client seed"),
    CHECK_RESULT: ("3️⃣", "Verifying Result Calculation...", "Result"),
    CHECK_WINNER: ("4️⃣", "Verifying Winner Selection...", "Winner"),
}

# Hash-valued checks only show a prefix when they match.
_PREFIXED_CHECKS = {CHECK_SERVER_HASH, CHECK_CLIENT_SEED}


def make_console(settings: Settings) -> Console:
    return Console(no_color=settings.no_color, highlight=False, emoji=False, soft_wrap=True)


def shorten_address(address: str) -> str:
    """Shorten long addresses to first4...last4 for display."""
    if len(address) > 8:
        return f"{address[:4]}...{address[-4:]}"
    return address


def render_header(report: VerificationReport, console: Console, settings: Settings) -> None:
    record = report.record
    console.print(Panel(
        f"[bold]🎰 Verifying Jackpot Round #{record.round_number} ({escape(record.round_id)})[/bold]\n"
        f"📊 Total Pot: {record.total_pot:.2f} {escape(settings.currency)}\n"
        f"🎯 Claimed Result: {record.result:.3f}\n"
        f"🏆 Claimed Winner: {escape(record.winner_address)}",
        border_style="cyan",
    ))
    console.print(SEPARATOR)


def render_check(check: CheckResult, console: Console) -> None:
    icon, heading, label = _CHECK_TITLES.get(check.name, ("•", check.name, check.name))
    console.print(f"{icon}  {heading}")
    if check.passed:
        shown = check.claimed
        if check.name in _PREFIXED_CHECKS:
            shown = shown[:16] + "..."
        console.print(f"    [green]✅ {label} matches: {escape(shown)}[/green]")
        return

    console.print(f"    [red]❌ {label} mismatch![/red]")
    console.print(f"       Calculated: {escape(check.calculated)}")
    console.print(f"       Claimed:    {escape(check.claimed)}")


def render_ranges(
    ranges: Sequence[WinnerRange],
    result: float,
    console: Console,
    settings: Settings,
) -> None:
    console.print("5️⃣  Winner Ranges:")
    if not ranges:
        console.print("    No bets to show")
        return

    for entry in ranges:
        marker = "🏆" if entry.is_winner else "  "
        console.print(
            f"    {marker} {escape(shorten_address(entry.player_address))}: "
            f"{entry.range_start:.3f} - {entry.range_end:.3f} "
            f"({entry.percentage:.1f}% chance, {entry.amount:.2f} {escape(settings.currency)})"
        )
    console.print(f"    🎯 Result {result:.3f} falls in winner's range")


def render_verdict(report: VerificationReport, console: Console) -> None:
    console.print(SEPARATOR)
    if report.passed:
        console.print("[bold green]🎉 VERIFICATION PASSED! This round is provably fair.[/bold green]")
    else:
        console.print("[bold red]💀 VERIFICATION FAILED! This round may not be fair.[/bold red]")


def render_report(
    report: VerificationReport,
    console: Optional[Console] = None,
    settings: Optional[Settings] = None,
) -> None:
    """Print the full verification walkthrough."""
    settings = settings or Settings()
    console = console or make_console(settings)

    render_header(report, console, settings)
    for check in report.checks:
        render_check(check, console)
    render_ranges(report.ranges, report.record.result, console, settings)
    render_verdict(report, console)


def report_json(report: VerificationReport) -> str:
    return json.dumps(report.to_dict(), indent=2)
