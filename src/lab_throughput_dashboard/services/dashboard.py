"""Combine the period, filter and aggregation steps into one dashboard payload."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from lab_throughput_dashboard.storage import DataContext
from ..schemas.metrics import DashboardResponse
from .aggregation import (
    DEFAULT_ON_TIME_MINUTES,
    build_location_metrics,
    build_quick_stats,
    build_series,
    build_summary,
    build_type_metrics,
    summary_measures,
)
from .changes import build_summary_changes
from .filters import SampleFilters, apply_sample_filters, filter_by_window
from .periods import DateRange, resolve_periods

LOGGER = logging.getLogger(__name__)


def get_dashboard(
    context: DataContext,
    *,
    date_range: Optional[DateRange] = None,
    filters: Optional[SampleFilters] = None,
    on_time_minutes: int = DEFAULT_ON_TIME_MINUTES,
    today: Optional[date] = None,
) -> DashboardResponse:
    periods = resolve_periods(date_range, today=today)
    LOGGER.info(
        "Building dashboard for %s..%s (previous %s..%s)",
        periods.current.first_day,
        periods.current.last_day,
        periods.previous.first_day,
        periods.previous.last_day,
    )

    scoped = apply_sample_filters(context.samples, filters)
    current_samples = filter_by_window(scoped, periods.current)
    previous_samples = filter_by_window(scoped, periods.previous)
    LOGGER.debug(
        "Selected %s current and %s previous samples out of %s",
        len(current_samples),
        len(previous_samples),
        len(context.samples),
    )

    locations = context.locations
    if filters is not None and filters.location_ids:
        locations = tuple(location for location in locations if location.id in filters.location_ids)

    current_measures = summary_measures(current_samples, on_time_minutes)
    previous_measures = summary_measures(previous_samples, on_time_minutes)
    location_metrics = build_location_metrics(current_samples, locations)
    type_metrics = build_type_metrics(current_samples, context.sample_types)

    return DashboardResponse(
        current_period=periods.current.to_schema(),
        previous_period=periods.previous.to_schema(),
        summary=build_summary(current_samples, on_time_minutes),
        previous_summary=build_summary(previous_samples, on_time_minutes),
        changes=build_summary_changes(current_measures, previous_measures),
        series=build_series(current_samples, periods.current),
        locations=location_metrics,
        types=type_metrics,
        quick_stats=build_quick_stats(current_samples, location_metrics, type_metrics),
        generated_at=context.generated_at,
    )
