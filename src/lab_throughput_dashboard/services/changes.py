"""Period-over-period change classification."""

from __future__ import annotations

from ..schemas.metrics import Change, SummaryChanges
from .aggregation import SummaryMeasures, round_half_up


def compute_change(current: float, previous: float) -> Change:
    """Compare ``current`` with ``previous`` as a rounded percentage and direction.

    A zero previous value yields a 0% change instead of an infinite one, and a
    zero change counts as an increase.
    """

    if previous == 0:
        percent_change = 0.0
    else:
        percent_change = (current - previous) / previous * 100
    return Change(
        magnitude_percent=round_half_up(abs(percent_change)),
        direction="increase" if percent_change >= 0 else "decrease",
    )


def build_summary_changes(current: SummaryMeasures, previous: SummaryMeasures) -> SummaryChanges:
    return SummaryChanges(
        total_count=compute_change(current.total_count, previous.total_count),
        completed_count=compute_change(current.completed_count, previous.completed_count),
        avg_processing_minutes=compute_change(current.avg_processing_minutes, previous.avg_processing_minutes),
        on_time_rate_percent=compute_change(current.on_time_rate_percent, previous.on_time_rate_percent),
    )
