"""Presentation-facing models: metric cards, sortable tables and the dashboard view."""

from .cards import MetricCard, build_metric_cards
from .dashboard import DashboardConfig, DashboardView
from .tables import Column, SortableTable, location_metrics_table, type_metrics_table

__all__ = [
    "Column",
    "DashboardConfig",
    "DashboardView",
    "MetricCard",
    "SortableTable",
    "build_metric_cards",
    "location_metrics_table",
    "type_metrics_table",
]
