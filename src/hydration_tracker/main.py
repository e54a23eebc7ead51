"""Command-line entrypoint for the hydration tracker."""

import argparse
from collections.abc import Sequence

from hydration_tracker.app_logging import configure_logging
from hydration_tracker.config import Settings
from hydration_tracker.containers import AppContainer, build_container
from hydration_tracker.domain.stats import DailyStats, MonthlyStats


def main(argv: Sequence[str] | None = None) -> int:
    """Run a single tracker command and print the result."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    settings = Settings()
    configure_logging(settings.log_level)
    container = build_container(settings)
    try:
        _run(container, args)
    finally:
        container.close_resources()
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hydration-tracker")
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("status", help="show today's progress")
    add = commands.add_parser("add", help="log an amount in ml")
    add.add_argument("amount_ml", type=int)
    month = commands.add_parser("month", help="show a month rollup")
    month.add_argument("year", type=int)
    month.add_argument("month", type=int, choices=range(1, 13), metavar="MONTH")
    return parser


def _run(container: AppContainer, args: argparse.Namespace) -> None:
    if args.command == "add":
        entry = container.entry_service.add_entry(args.amount_ml)
        print(f"Logged {entry.amount_ml} ml at {entry.timestamp}")
    if args.command == "month":
        print(_format_month(container.stats_service.get_month(args.year, args.month)))
        return
    print(_format_today(container.stats_service.get_today()))


def _format_today(stats: DailyStats) -> str:
    return (
        f"Hydration Tracker - {stats.date}\n"
        f"{stats.total_ml}/{stats.goal_ml} ml ({stats.percentage:.1f}%), "
        f"{stats.entries_count} entries"
    )


def _format_month(stats: MonthlyStats) -> str:
    lines = [
        f"Hydration Tracker - {stats.month} {stats.year}",
        f"Total: {stats.total_ml} ml, average {stats.average_ml:.0f} ml/day",
        f"Goal met on {stats.days_goal_met} of {len(stats.days)} tracked days",
        f"Streak: {stats.current_streak} (best {stats.best_streak})",
    ]
    lines.extend(
        f"  {day.date}: {day.total_ml} ml ({day.percentage:.0f}%)" for day in stats.days
    )
    return "\n".join(lines)


if __name__ == "__main__":
    raise SystemExit(main())
