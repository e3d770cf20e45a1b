"""Schema exports."""

from .metrics import (
    Change,
    ChangeDirection,
    ChartPoint,
    DashboardResponse,
    LocationMetric,
    PeriodWindow,
    QuickStats,
    Summary,
    SummaryChanges,
    TypeMetric,
)

__all__ = [
    "Change",
    "ChangeDirection",
    "ChartPoint",
    "DashboardResponse",
    "LocationMetric",
    "PeriodWindow",
    "QuickStats",
    "Summary",
    "SummaryChanges",
    "TypeMetric",
]
