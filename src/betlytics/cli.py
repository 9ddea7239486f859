"""betlytics command-line interface (Typer).

Usage::

    betlytics calc kelly 2.10 0.55 --bankroll 1000 [--fraction 0.25]
    betlytics calc ev 2.10 0.55 --stake 50
    betlytics calc clv 2.10 2.25
    betlytics report summary bets.csv [--start 2024-01-01] [--end 2024-03-31]
    betlytics report breakdown bets.csv [--window 30]
    betlytics report bankroll bets.csv [--starting-bankroll 1000] [--as-of 2024-03-31]
    betlytics api serve [--port 8000]
"""

from __future__ import annotations

import math
from datetime import datetime

import typer
from rich.console import Console
from rich.table import Table

from betlytics.analytics.errors import InvalidInputError
from betlytics.utils.logging import configure_logging, get_logger

log = get_logger(__name__)

app = typer.Typer(name="betlytics", help="Betting performance analytics")
console = Console()


@app.callback()
def main(
    log_level: str = typer.Option(None, help="Log level (default: config)"),
    json_logs: bool = typer.Option(None, "--json-logs/--console-logs", help="Log format"),
) -> None:
    """Betting performance analytics."""
    if log_level is not None or json_logs is not None:
        configure_logging(log_level, json_logs)


def _fail(exc: Exception) -> None:
    console.print(f"[red]{exc}[/red]")
    raise typer.Exit(1)


def _parse_date(value: str | None):
    if value is None:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise typer.BadParameter(f"expected YYYY-MM-DD, got {value!r}") from None


def _format_factor(value: float) -> str:
    return "∞" if math.isinf(value) else f"{value:.2f}"


# ── Single-wager calculators ───────────────────────────────────────────

calc_app = typer.Typer(help="Single-wager calculators")
app.add_typer(calc_app, name="calc")


@calc_app.command("kelly")
def calc_kelly(
    odds: float = typer.Argument(..., help="Decimal odds (>= 1.0)"),
    win_probability: float = typer.Argument(..., help="Win probability in [0, 1]"),
    bankroll: float = typer.Option(1000.0, help="Current bankroll"),
    fraction: float = typer.Option(None, help="Kelly fraction (default: config)"),
) -> None:
    """Recommend a fractional Kelly stake."""
    from betlytics.analytics.evaluator import calculate_kelly

    try:
        result = calculate_kelly(odds, win_probability, bankroll, fraction)
    except InvalidInputError as exc:
        _fail(exc)

    color = {"no_edge": "dim", "safe": "green", "high": "yellow"}[result.classification.value]
    console.print(f"Kelly: [{color}]{result.kelly_percentage:.2f}%[/{color}] of bankroll")
    console.print(f"Recommended stake: {result.recommended_stake:.2f}")
    if result.warning:
        console.print(f"[yellow]{result.warning}[/yellow]")


@calc_app.command("ev")
def calc_ev(
    odds: float = typer.Argument(..., help="Decimal odds (>= 1.0)"),
    win_probability: float = typer.Argument(..., help="Win probability in [0, 1]"),
    stake: float = typer.Option(100.0, help="Stake"),
) -> None:
    """Expected value of a wager."""
    from betlytics.analytics.evaluator import calculate_ev

    try:
        result = calculate_ev(odds, win_probability, stake)
    except InvalidInputError as exc:
        _fail(exc)

    color = "green" if result.is_positive_ev else "red"
    console.print(
        f"EV: [{color}]{result.expected_value:+.2f}[/{color}] "
        f"({result.expected_value_percentage:+.2f}%)"
    )
    console.print(f"Break-even probability: {result.break_even_probability:.2f}%")


@calc_app.command("clv")
def calc_clv(
    opening_odds: float = typer.Argument(..., help="Odds taken"),
    closing_odds: float = typer.Argument(..., help="Closing odds"),
) -> None:
    """Closing-line value of a wager."""
    from betlytics.analytics.evaluator import calculate_clv

    try:
        result = calculate_clv(opening_odds, closing_odds)
    except InvalidInputError as exc:
        _fail(exc)

    color = "green" if result.is_beating_closing else "red"
    console.print(f"CLV: [{color}]{result.clv_percentage:+.2f}%[/{color}]")
    console.print(f"Odds movement: {result.odds_improvement:+.2f}")


# ── Report commands ───────────────────────────────────────────────────

report_app = typer.Typer(help="Performance reports over an exported wager history")
app.add_typer(report_app, name="report")


@report_app.command("summary")
def report_summary(
    path: str = typer.Argument(..., help="CSV or JSON export of wagers"),
    start: str = typer.Option(None, help="First date (YYYY-MM-DD)"),
    end: str = typer.Option(None, help="Last date (YYYY-MM-DD)"),
) -> None:
    """Headline stats, streaks, drawdown and risk metrics."""
    from betlytics.analytics.report import build_report
    from betlytics.io import load_wagers

    try:
        report = build_report(load_wagers(path), _parse_date(start), _parse_date(end))
    except (InvalidInputError, ValueError, FileNotFoundError) as exc:
        _fail(exc)

    s = report.stats
    table = Table(title="Performance")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Bets", f"{s.total_bets} ({s.winning_bets}W / {s.losing_bets}L / {s.pending_bets}P)")
    table.add_row("Staked", f"{s.total_staked:.2f}")
    table.add_row("Net profit", f"{s.net_profit:+.2f}")
    table.add_row("ROI", f"{s.roi:.2f}%")
    table.add_row("Win rate", f"{s.win_rate:.2f}%")
    table.add_row("Avg odds", f"{s.avg_odds:.2f}")
    cur = report.streaks.current_streak
    table.add_row("Current streak", f"{cur.count} {cur.type.value}")
    table.add_row("Longest win / loss streak",
                  f"{report.streaks.longest_win_streak} / {report.streaks.longest_loss_streak}")
    table.add_row("Max drawdown",
                  f"{report.drawdown.max_drawdown:.2f} ({report.drawdown.max_drawdown_percentage:.2f}%)")
    table.add_row("Std deviation", f"{report.risk.standard_deviation:.2f}")
    table.add_row("Risk ratio", f"{report.risk.risk_ratio:.2f}")
    table.add_row("Profit factor", _format_factor(report.profit_factor))
    table.add_row("Avg hold time", f"{report.avg_hold_time_days:.1f} days")
    console.print(table)


@report_app.command("breakdown")
def report_breakdown(
    path: str = typer.Argument(..., help="CSV or JSON export of wagers"),
    window: int = typer.Option(None, min=1, help="Rolling ROI window (default: config)"),
) -> None:
    """Odds-range, weekly, weekday, sport and rolling-ROI breakdowns."""
    from betlytics.analytics.summary import (
        odds_distribution,
        profit_by_week,
        profit_by_weekday,
        roi_by_sport,
        rolling_roi,
    )
    from betlytics.io import load_wagers

    try:
        snapshot = load_wagers(path)
        points = rolling_roi(snapshot, window)
    except (InvalidInputError, ValueError, FileNotFoundError) as exc:
        _fail(exc)

    table = Table(title="By Odds Range")
    for col in ("Odds", "Wins", "Losses", "Win %"):
        table.add_column(col, justify="right")
    for b in odds_distribution(snapshot):
        table.add_row(b.label, str(b.wins), str(b.losses), f"{b.win_rate:.1f}")
    console.print(table)

    table = Table(title="By Week")
    for col in ("Week of", "Bets", "Profit", "Running"):
        table.add_column(col, justify="right")
    for w in profit_by_week(snapshot):
        table.add_row(str(w.week_start), str(w.count), f"{w.profit:+.2f}", f"{w.cumulative_profit:+.2f}")
    console.print(table)

    table = Table(title="By Weekday")
    for col in ("Day", "Bets", "Profit", "Avg"):
        table.add_column(col, justify="right")
    for d in profit_by_weekday(snapshot):
        table.add_row(d.day[:3], str(d.count), f"{d.profit:+.2f}", f"{d.avg_profit:+.2f}")
    console.print(table)

    table = Table(title="By Sport")
    for col in ("Sport", "Bets", "Staked", "Profit", "ROI %"):
        table.add_column(col, justify="right")
    for r in roi_by_sport(snapshot):
        table.add_row(r.sport, str(r.bets), f"{r.total_staked:.2f}", f"{r.net_profit:+.2f}", f"{r.roi:.2f}")
    console.print(table)

    if points:
        last = points[-1]
        console.print(f"\nRolling ROI ({len(points)} points), latest {last.date}: {last.roi:.2f}%")
    else:
        console.print("\n[dim]Not enough settled wagers for rolling ROI[/dim]")


@report_app.command("bankroll")
def report_bankroll(
    path: str = typer.Argument(..., help="CSV or JSON export of wagers"),
    starting_bankroll: float = typer.Option(1000.0, help="Bankroll before the first wager"),
    as_of: str = typer.Option(None, help="Staking totals end date (YYYY-MM-DD, default: today)"),
) -> None:
    """Bankroll growth and recent staking totals."""
    from betlytics.analytics.bankroll import bankroll_history, staking_totals
    from betlytics.io import load_wagers

    try:
        snapshot = load_wagers(path)
        history = bankroll_history(snapshot, starting_bankroll)
        staking = staking_totals(snapshot, _parse_date(as_of))
    except (InvalidInputError, ValueError, FileNotFoundError) as exc:
        _fail(exc)

    color = "green" if history.growth >= 0 else "red"
    table = Table(title="Bankroll")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Starting", f"{history.starting_bankroll:.2f}")
    table.add_row("Current", f"{history.current_bankroll:.2f}")
    table.add_row("Growth", f"[{color}]{history.growth:+.2f} ({history.growth_percentage:+.2f}%)[/{color}]")
    table.add_row(f"Staked, 7 days to {staking.as_of}", f"{staking.last_7_days:.2f}")
    table.add_row(f"Staked, 30 days to {staking.as_of}", f"{staking.last_30_days:.2f}")
    console.print(table)


# ── API commands ──────────────────────────────────────────────────────

api_app = typer.Typer(help="API server commands")
app.add_typer(api_app, name="api")


@api_app.command("serve")
def api_serve(
    host: str = typer.Option(None, help="Bind host (default: config)"),
    port: int = typer.Option(None, help="Port (default: config)"),
    reload: bool = typer.Option(False, help="Auto-reload on file changes"),
) -> None:
    """Start the FastAPI analytics server."""
    import uvicorn

    from betlytics.config import settings

    host = host or settings.api_host
    port = port or settings.api_port
    log.info("api_serve", host=host, port=port, reload=reload)
    console.print("\n[bold green]Starting betlytics API server[/bold green]")
    console.print(f"  Host: {host}:{port}")
    console.print(f"  Docs: http://{host}:{port}/docs\n")

    uvicorn.run(
        "betlytics.api.app:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    app()
