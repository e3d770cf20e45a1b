"""Metric card values and the formatting helpers shared by the dashboard views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..schemas.metrics import Change, ChangeDirection, Summary, SummaryChanges
from ..services.aggregation import round_half_up

PERIOD_LABEL = "vs previous period"


def format_count(value: Optional[int]) -> str:
    if value is None:
        return "--"
    return f"{int(value):,}"


def format_minutes(value: Optional[float]) -> str:
    if value is None:
        return "--"
    return f"{int(value)} min"


def format_percent(value: Optional[float]) -> str:
    if value is None:
        return "--"
    return f"{round_half_up(value)}%"


def format_hour_label(hour: Optional[int]) -> str:
    """Convert a 0-23 hour to a ``2:00 PM`` style label."""

    if hour is None:
        return "--"
    suffix = "AM" if hour < 12 else "PM"
    display = hour % 12 or 12
    return f"{display}:00 {suffix}"


def _invert(direction: ChangeDirection) -> ChangeDirection:
    return "decrease" if direction == "increase" else "increase"


@dataclass(frozen=True)
class CardChange:
    magnitude_percent: int
    direction: ChangeDirection
    period: str = PERIOD_LABEL

    @property
    def arrow(self) -> str:
        return "↗" if self.direction == "increase" else "↘"

    @property
    def label(self) -> str:
        return f"{self.arrow} {self.magnitude_percent}% {self.period}"


@dataclass(frozen=True)
class MetricCard:
    title: str
    value: str
    change: Optional[CardChange] = None


def _card_change(change: Change, *, inverted: bool = False) -> CardChange:
    direction = _invert(change.direction) if inverted else change.direction
    return CardChange(magnitude_percent=change.magnitude_percent, direction=direction)


def build_metric_cards(summary: Summary, changes: SummaryChanges) -> list[MetricCard]:
    """Return the four overview cards; processing time reads lower-is-better."""

    return [
        MetricCard("Total Samples", format_count(summary.total_count), _card_change(changes.total_count)),
        MetricCard("Completed", format_count(summary.completed_count), _card_change(changes.completed_count)),
        MetricCard(
            "Avg Processing Time",
            format_minutes(summary.avg_processing_minutes),
            _card_change(changes.avg_processing_minutes, inverted=True),
        ),
        MetricCard("On-Time Rate", format_percent(summary.on_time_rate_percent), _card_change(changes.on_time_rate_percent)),
    ]
