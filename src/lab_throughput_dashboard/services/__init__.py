"""Metrics services: period resolution, filtering, aggregation and comparison."""

from .aggregation import (
    DEFAULT_ON_TIME_MINUTES,
    SummaryMeasures,
    build_location_metrics,
    build_quick_stats,
    build_series,
    build_summary,
    build_type_metrics,
    round_half_up,
    summary_measures,
)
from .changes import build_summary_changes, compute_change
from .dashboard import get_dashboard
from .filters import SampleFilters, apply_sample_filters, filter_by_window
from .periods import DateRange, ResolvedPeriods, TimeWindow, quick_range, resolve_periods

__all__ = [
    "DEFAULT_ON_TIME_MINUTES",
    "DateRange",
    "ResolvedPeriods",
    "SampleFilters",
    "SummaryMeasures",
    "TimeWindow",
    "apply_sample_filters",
    "build_location_metrics",
    "build_quick_stats",
    "build_series",
    "build_summary",
    "build_summary_changes",
    "build_type_metrics",
    "compute_change",
    "filter_by_window",
    "get_dashboard",
    "quick_range",
    "resolve_periods",
    "round_half_up",
    "summary_measures",
]
