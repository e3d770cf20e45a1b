"""Sortable table models for the breakdown tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Literal, Optional, Sequence, TypeVar

from ..schemas.metrics import LocationMetric, TypeMetric
from .cards import format_count, format_minutes, format_percent

RowT = TypeVar("RowT")

SortDirection = Literal["asc", "desc"]
Align = Literal["left", "right", "center"]

MISSING_VALUE = "-"


def _default_render(value: Any, row: Any) -> str:
    if value is None or value == "":
        return MISSING_VALUE
    return str(value)


@dataclass(frozen=True)
class Column(Generic[RowT]):
    """Describes one table column: which attribute it reads and how it renders."""

    key: str
    label: str
    sortable: bool = False
    render: Callable[[Any, RowT], str] = _default_render
    align: Align = "left"

    def value(self, row: RowT) -> Any:
        return getattr(row, self.key, None)


def _sort_key(value: Any) -> tuple[int, Any]:
    if value is None:
        return (2, "")
    if isinstance(value, bool):
        return (1, str(value))
    if isinstance(value, (int, float)):
        return (0, value)
    if isinstance(value, str):
        return (1, value.casefold())
    return (1, str(value))


class SortableTable(Generic[RowT]):
    """Rows of a fixed record shape plus column descriptors and the active sort."""

    def __init__(
        self,
        columns: Sequence[Column[RowT]],
        rows: Iterable[RowT] = (),
        *,
        empty_message: str = "No data available",
    ) -> None:
        self.columns = list(columns)
        self.empty_message = empty_message
        self._rows = list(rows)
        self.sort_field: Optional[str] = None
        self.sort_direction: SortDirection = "asc"

    def column(self, key: str) -> Column[RowT]:
        for column in self.columns:
            if column.key == key:
                return column
        raise ValueError(f"Unknown column '{key}'. Allowed values: {[column.key for column in self.columns]}")

    @property
    def headers(self) -> list[str]:
        return [column.label for column in self.columns]

    @property
    def is_empty(self) -> bool:
        return not self._rows

    def update_rows(self, rows: Iterable[RowT]) -> None:
        self._rows = list(rows)

    def sort_by(self, key: str) -> None:
        """Sort by ``key``; repeating the same key flips the direction."""

        column = self.column(key)
        if not column.sortable:
            raise ValueError(f"Column '{key}' is not sortable")
        if self.sort_field == key:
            self.sort_direction = "desc" if self.sort_direction == "asc" else "asc"
        else:
            self.sort_field = key
            self.sort_direction = "asc"

    def sort_indicator(self, key: str) -> str:
        if self.sort_field != key:
            return "↕"
        return "↑" if self.sort_direction == "asc" else "↓"

    def rows(self) -> list[RowT]:
        if self.sort_field is None:
            return list(self._rows)
        column = self.column(self.sort_field)
        return sorted(
            self._rows,
            key=lambda row: _sort_key(column.value(row)),
            reverse=self.sort_direction == "desc",
        )

    def render_rows(self) -> list[list[str]]:
        return [[column.render(column.value(row), row) for column in self.columns] for row in self.rows()]


def utilization_level(percent: float) -> str:
    """Progress bar band for a utilization or completion percentage."""

    if percent >= 90:
        return "critical"
    if percent >= 70:
        return "warning"
    return "ok"


def _render_bar(value: Any, row: Any) -> str:
    percent = min(float(value or 0), 100.0)
    return f"{format_percent(percent)} ({utilization_level(percent)})"


def location_metrics_table(metrics: Iterable[LocationMetric] = ()) -> SortableTable[LocationMetric]:
    columns: list[Column[LocationMetric]] = [
        Column("location_name", "Location", sortable=True),
        Column("samples_processed", "Samples Processed", sortable=True, render=lambda value, row: format_count(value), align="right"),
        Column("avg_processing_minutes", "Avg Processing Time", sortable=True, render=lambda value, row: format_minutes(value), align="right"),
        Column("utilization_percent", "Utilization Rate", sortable=True, render=_render_bar),
    ]
    return SortableTable(columns, metrics, empty_message="No location data available")


def type_metrics_table(metrics: Iterable[TypeMetric] = ()) -> SortableTable[TypeMetric]:
    columns: list[Column[TypeMetric]] = [
        Column("sample_type", "Sample Type", sortable=True),
        Column("count", "Total Count", sortable=True, render=lambda value, row: format_count(value), align="right"),
        Column("avg_processing_minutes", "Avg Processing Time", sortable=True, render=lambda value, row: format_minutes(value), align="right"),
        Column("completion_rate_percent", "Completion Rate", sortable=True, render=_render_bar),
    ]
    return SortableTable(columns, metrics, empty_message="No sample type data available")
