"""Command line entry point printing the dashboard for a date range."""

from __future__ import annotations

import argparse
import json
import logging
from datetime import date, datetime, time
from typing import Optional, Sequence

from pydantic import ValidationError

from lab_throughput_dashboard.config import DatasetSettings, get_settings
from lab_throughput_dashboard.services import DateRange, SampleFilters, quick_range
from lab_throughput_dashboard.storage import build_data_context
from lab_throughput_dashboard.ui import DashboardConfig, DashboardView

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Show lab sample throughput metrics for a date range")
    parser.add_argument("--start", help="First day of the range (YYYY-MM-DD)")
    parser.add_argument("--end", help="Last day of the range (YYYY-MM-DD)")
    parser.add_argument("--last", type=int, metavar="DAYS", help="Use the last N days ending today")
    parser.add_argument("--today-vs-yesterday", action="store_true", help="Compare today with yesterday instead of a range")
    parser.add_argument("--location", action="append", dest="locations", help="Location id (repeatable)")
    parser.add_argument("--sample-type", action="append", dest="sample_types", help="Sample type (repeatable)")
    parser.add_argument("--priority", action="append", dest="priorities", help="Priority (repeatable)")
    parser.add_argument("--status", action="append", dest="statuses", help="Status (repeatable)")
    parser.add_argument("--seed", type=int, help="Seed for the generated dataset")
    parser.add_argument("--days", type=int, help="Days of generated history")
    parser.add_argument("--today", help="Override today's date (YYYY-MM-DD)")
    parser.add_argument("--format", choices=("text", "json"), default="text", help="Output format")
    parser.add_argument("--log-level", help="Logging level (default from LAB_DASHBOARD_LOG_LEVEL)")
    return parser


def _resolve_range(parser: argparse.ArgumentParser, args: argparse.Namespace, today: Optional[date]) -> Optional[DateRange]:
    if args.last is not None:
        if args.start or args.end:
            parser.error("--last cannot be combined with --start/--end")
        try:
            return quick_range(args.last, today=today)
        except ValueError as exc:
            parser.error(str(exc))
    if args.start or args.end:
        if not (args.start and args.end):
            parser.error("--start and --end must be given together")
        try:
            return DateRange(start_date=args.start, end_date=args.end)
        except ValidationError as exc:
            parser.error(f"invalid date range: {exc.errors()[0]['msg']}")
    return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()

    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    today: Optional[date] = None
    if args.today:
        try:
            today = date.fromisoformat(args.today)
        except ValueError as exc:
            parser.error(f"invalid --today: {exc}")

    try:
        filters = SampleFilters.build(
            location_ids=args.locations,
            sample_types=args.sample_types,
            priorities=args.priorities,
            statuses=args.statuses,
        )
    except ValueError as exc:
        parser.error(str(exc))

    date_range = _resolve_range(parser, args, today)
    if args.today_vs_yesterday:
        if date_range is not None:
            parser.error("--today-vs-yesterday cannot be combined with a date range")
    elif date_range is None:
        date_range = quick_range(settings.metrics.default_range_days, today=today)

    try:
        dataset = DatasetSettings(
            seed=args.seed if args.seed is not None else settings.dataset.seed,
            days=args.days if args.days is not None else settings.dataset.days,
        )
    except ValidationError as exc:
        parser.error(f"invalid dataset options: {exc.errors()[0]['msg']}")
    now = datetime.combine(today, time(12, 0)) if today else None
    context = build_data_context(dataset, now=now)
    view = DashboardView(
        context,
        config=DashboardConfig(
            default_days=settings.metrics.default_range_days,
            on_time_minutes=settings.metrics.on_time_minutes,
        ),
        date_range=date_range,
        filters=filters,
        today=today,
    )
    payload = view.refresh()
    LOGGER.info("Dashboard ready for %s days", payload.current_period.days)

    if args.format == "json":
        print(json.dumps(payload.model_dump(mode="json"), indent=2))
    else:
        print(view.as_text())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
