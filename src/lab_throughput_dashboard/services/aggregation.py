"""Aggregations behind the summary cards, trend chart and breakdown tables."""

from __future__ import annotations

from collections import Counter, defaultdict
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import DefaultDict, Iterable, Optional, Sequence

from lab_throughput_dashboard.storage import Location, Sample
from ..schemas.metrics import ChartPoint, LocationMetric, QuickStats, Summary, TypeMetric
from .periods import TimeWindow

DEFAULT_ON_TIME_MINUTES = 120


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero (``2.5 -> 3``, ``-2.5 -> -3``)."""

    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _completed(samples: Iterable[Sample]) -> list[Sample]:
    return [sample for sample in samples if sample.is_completed]


def _mean_processing_minutes(completed: Sequence[Sample]) -> float:
    if not completed:
        return 0.0
    return sum(sample.processing_minutes or 0 for sample in completed) / len(completed)


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SummaryMeasures:
    """Unrounded summary values; the change calculator compares these."""

    total_count: int
    completed_count: int
    avg_processing_minutes: float
    on_time_rate_percent: float


def summary_measures(samples: Sequence[Sample], on_time_minutes: int = DEFAULT_ON_TIME_MINUTES) -> SummaryMeasures:
    completed = _completed(samples)
    on_time = sum(1 for sample in completed if (sample.processing_minutes or 0) <= on_time_minutes)
    # max(x, 1) reports 0% rather than undefined when nothing completed
    on_time_rate = on_time / max(len(completed), 1) * 100
    return SummaryMeasures(
        total_count=len(samples),
        completed_count=len(completed),
        avg_processing_minutes=_mean_processing_minutes(completed),
        on_time_rate_percent=on_time_rate,
    )


def build_summary(samples: Sequence[Sample], on_time_minutes: int = DEFAULT_ON_TIME_MINUTES) -> Summary:
    measures = summary_measures(samples, on_time_minutes)
    return Summary(
        total_count=measures.total_count,
        completed_count=measures.completed_count,
        avg_processing_minutes=round_half_up(measures.avg_processing_minutes),
        on_time_rate_percent=round_half_up(measures.on_time_rate_percent),
    )


# ---------------------------------------------------------------------------
# Daily series
# ---------------------------------------------------------------------------


def build_series(samples: Iterable[Sample], window: TimeWindow) -> list[ChartPoint]:
    """Return one point per calendar day of ``window``, zero-filled for empty days."""

    by_day: DefaultDict[date, list[Sample]] = defaultdict(list)
    for sample in samples:
        if window.contains(sample.submission_timestamp):
            by_day[sample.submission_timestamp.date()].append(sample)

    points: list[ChartPoint] = []
    for day in window.days():
        day_samples = by_day.get(day, [])
        completed = _completed(day_samples)
        points.append(
            ChartPoint(
                date=day,
                submitted_count=len(day_samples),
                completed_count=len(completed),
                avg_processing_minutes=round_half_up(_mean_processing_minutes(completed)),
            )
        )
    return points


# ---------------------------------------------------------------------------
# Breakdowns
# ---------------------------------------------------------------------------


def build_location_metrics(samples: Iterable[Sample], locations: Iterable[Location]) -> list[LocationMetric]:
    """Return completed-sample metrics for every active location, in catalog order."""

    completed_by_location: DefaultDict[str, list[Sample]] = defaultdict(list)
    for sample in samples:
        if sample.is_completed:
            completed_by_location[sample.location.id].append(sample)

    metrics: list[LocationMetric] = []
    for location in locations:
        if not location.is_active:
            continue
        processed = completed_by_location.get(location.id, [])
        utilization = round_half_up(len(processed) / max(location.capacity, 1) * 100)
        metrics.append(
            LocationMetric(
                location_id=location.id,
                location_name=location.name,
                samples_processed=len(processed),
                avg_processing_minutes=round_half_up(_mean_processing_minutes(processed)),
                utilization_percent=min(utilization, 100),
            )
        )
    return metrics


def build_type_metrics(samples: Iterable[Sample], known_types: Iterable[str]) -> list[TypeMetric]:
    """Return per-type metrics for catalog types present in ``samples``."""

    by_type: DefaultDict[str, list[Sample]] = defaultdict(list)
    for sample in samples:
        by_type[sample.sample_type].append(sample)

    metrics: list[TypeMetric] = []
    for sample_type in known_types:
        type_samples = by_type.get(sample_type, [])
        if not type_samples:
            continue
        completed = _completed(type_samples)
        completion_rate = len(completed) / len(type_samples) * 100 if type_samples else 0.0
        metrics.append(
            TypeMetric(
                sample_type=sample_type,
                count=len(type_samples),
                completed_count=len(completed),
                avg_processing_minutes=round_half_up(_mean_processing_minutes(completed)),
                completion_rate_percent=round_half_up(completion_rate),
            )
        )
    return metrics


# ---------------------------------------------------------------------------
# Quick stats
# ---------------------------------------------------------------------------


def _first_max(items: Iterable[tuple[str, int]]) -> Optional[str]:
    best_label: Optional[str] = None
    best_value = 0
    for label, value in items:
        if value > best_value:
            best_label, best_value = label, value
    return best_label


def build_quick_stats(
    samples: Iterable[Sample],
    location_metrics: Sequence[LocationMetric],
    type_metrics: Sequence[TypeMetric],
) -> QuickStats:
    hours = Counter(sample.submission_timestamp.hour for sample in samples)
    peak_hour = min(hours, key=lambda hour: (-hours[hour], hour)) if hours else None
    return QuickStats(
        peak_submission_hour=peak_hour,
        most_active_location=_first_max((item.location_name, item.samples_processed) for item in location_metrics),
        top_sample_type=_first_max((item.sample_type, item.count) for item in type_metrics),
    )
