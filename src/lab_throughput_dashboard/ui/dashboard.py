"""Dashboard state: date range, filters, cards, trend points and breakdown tables."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence, Union

from lab_throughput_dashboard.storage import DataContext
from ..schemas.metrics import ChartPoint, DashboardResponse, LocationMetric, TypeMetric
from ..services.aggregation import DEFAULT_ON_TIME_MINUTES
from ..services.dashboard import get_dashboard
from ..services.filters import SampleFilters
from ..services.periods import DateRange, quick_range
from .cards import MetricCard, build_metric_cards, format_count, format_hour_label, format_minutes
from .tables import SortableTable, location_metrics_table, type_metrics_table

LOGGER = logging.getLogger(__name__)

SERIES_ALIGNS = ("left", "right", "right", "right")


class _ConfiguredRange:
    """Marker for "use the configured quick range"; ``None`` means today vs yesterday."""

    def __repr__(self) -> str:
        return "CONFIGURED_RANGE"


CONFIGURED_RANGE = _ConfiguredRange()


@dataclass
class DashboardConfig:
    title: str = "Lab Throughput Dashboard"
    subtitle: str = "Laboratory sample processing and performance metrics"
    default_days: int = 30
    on_time_minutes: int = DEFAULT_ON_TIME_MINUTES


class DashboardView:
    """Holds what the dashboard shows for the selected range and filters."""

    def __init__(
        self,
        context: DataContext,
        *,
        config: Optional[DashboardConfig] = None,
        date_range: Union[DateRange, None, _ConfiguredRange] = CONFIGURED_RANGE,
        filters: Optional[SampleFilters] = None,
        today: Optional[date] = None,
    ) -> None:
        self.context = context
        self.config = config or DashboardConfig()
        self.today = today
        if isinstance(date_range, _ConfiguredRange):
            date_range = quick_range(self.config.default_days, today=today)
        self.date_range: Optional[DateRange] = date_range
        self.filters = filters or SampleFilters()

        self.cards: list[MetricCard] = []
        self.series: list[ChartPoint] = []
        self.location_table: SortableTable[LocationMetric] = location_metrics_table()
        self.type_table: SortableTable[TypeMetric] = type_metrics_table()
        self.payload: Optional[DashboardResponse] = None

    # ------------------------------------------------------------ Controls --

    def set_date_range(self, date_range: Optional[DateRange]) -> DashboardResponse:
        self.date_range = date_range
        return self.refresh()

    def apply_quick_range(self, days: int) -> DashboardResponse:
        return self.set_date_range(quick_range(days, today=self.today))

    def set_filters(self, filters: SampleFilters) -> DashboardResponse:
        self.filters = filters
        return self.refresh()

    def sort_locations(self, key: str) -> None:
        self.location_table.sort_by(key)

    def sort_types(self, key: str) -> None:
        self.type_table.sort_by(key)

    def refresh(self) -> DashboardResponse:
        payload = get_dashboard(
            self.context,
            date_range=self.date_range,
            filters=self.filters,
            on_time_minutes=self.config.on_time_minutes,
            today=self.today,
        )
        self._handle_payload(payload)
        return payload

    # ------------------------------------------------------------ Handlers --

    def _handle_payload(self, payload: DashboardResponse) -> None:
        self.payload = payload
        self.cards = build_metric_cards(payload.summary, payload.changes)
        self.series = list(payload.series)
        # update_rows keeps the active sort of each table
        self.location_table.update_rows(payload.locations)
        self.type_table.update_rows(payload.types)
        LOGGER.debug(
            "Dashboard refreshed: %s series points, %s locations, %s sample types",
            len(self.series),
            len(payload.locations),
            len(payload.types),
        )

    # -------------------------------------------------------------- Output --

    def as_text(self) -> str:
        payload = self.payload or self.refresh()
        lines = [self.config.title, self.config.subtitle, ""]
        period = payload.current_period
        lines.append(f"Period: {period.start.date().isoformat()} to {period.end.date().isoformat()} ({period.days} days)")
        lines.append("")

        for card in self.cards:
            change = f"  {card.change.label}" if card.change else ""
            lines.append(f"{card.title:<22}{card.value:>10}{change}")
        lines.append("")

        lines.append("Sample Volume Over Time")
        lines.extend(
            _format_table(
                ["Date", "Submitted", "Completed", "Avg Processing Time"],
                [
                    [
                        point.date.isoformat(),
                        format_count(point.submitted_count),
                        format_count(point.completed_count),
                        format_minutes(point.avg_processing_minutes),
                    ]
                    for point in self.series
                ],
                SERIES_ALIGNS,
            )
        )
        lines.append("")

        for title, table in (("Location Metrics", self.location_table), ("Sample Type Metrics", self.type_table)):
            lines.append(title)
            if table.is_empty:
                lines.append(table.empty_message)
            else:
                headers = [
                    f"{column.label} {table.sort_indicator(column.key)}" if column.sortable else column.label
                    for column in table.columns
                ]
                lines.extend(_format_table(headers, table.render_rows(), [column.align for column in table.columns]))
            lines.append("")

        stats = payload.quick_stats
        lines.append("Quick Stats")
        lines.append(f"Peak Processing Hour: {format_hour_label(stats.peak_submission_hour)}")
        lines.append(f"Most Active Location: {stats.most_active_location or '--'}")
        lines.append(f"Top Sample Type: {stats.top_sample_type or '--'}")
        return "\n".join(lines)


def _justify(text: str, width: int, align: str) -> str:
    if align == "right":
        return text.rjust(width)
    if align == "center":
        return text.center(width)
    return text.ljust(width)


def _format_table(headers: list[str], rows: list[list[str]], aligns: Sequence[str]) -> list[str]:
    widths = [len(header) for header in headers]
    for row in rows:
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], len(cell))

    def _line(cells: Sequence[str]) -> str:
        return "  ".join(_justify(cell, widths[index], aligns[index]) for index, cell in enumerate(cells)).rstrip()

    formatted = [_line(headers)]
    formatted.append("  ".join("-" * width for width in widths))
    formatted.extend(_line(row) for row in rows)
    return formatted


__all__ = ["CONFIGURED_RANGE", "DashboardConfig", "DashboardView"]
