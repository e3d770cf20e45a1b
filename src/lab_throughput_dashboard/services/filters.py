"""Sample selection by submission window and record attributes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from lab_throughput_dashboard.storage import ALLOWED_PRIORITIES, ALLOWED_STATUSES, Sample
from .periods import TimeWindow


def filter_by_window(samples: Iterable[Sample], window: TimeWindow) -> list[Sample]:
    """Return samples submitted within ``window``, keeping their original order."""

    return [sample for sample in samples if window.start <= sample.submission_timestamp <= window.end]


def _normalise_choices(values: Optional[Iterable[str]], allowed: set[str], label: str) -> frozenset[str]:
    if not values:
        return frozenset()
    normalised = frozenset(value.strip().lower() for value in values)
    unknown = normalised - allowed
    if unknown:
        raise ValueError(f"Unsupported {label} {sorted(unknown)}. Allowed values: {sorted(allowed)}")
    return normalised


@dataclass(frozen=True)
class SampleFilters:
    """Attribute filters applied before aggregation; empty criteria match everything."""

    location_ids: frozenset[str] = frozenset()
    sample_types: frozenset[str] = frozenset()
    priorities: frozenset[str] = frozenset()
    statuses: frozenset[str] = frozenset()

    @classmethod
    def build(
        cls,
        *,
        location_ids: Optional[Sequence[str]] = None,
        sample_types: Optional[Sequence[str]] = None,
        priorities: Optional[Sequence[str]] = None,
        statuses: Optional[Sequence[str]] = None,
    ) -> "SampleFilters":
        return cls(
            location_ids=frozenset(location_ids or ()),
            sample_types=frozenset(sample_types or ()),
            priorities=_normalise_choices(priorities, ALLOWED_PRIORITIES, "priority"),
            statuses=_normalise_choices(statuses, ALLOWED_STATUSES, "status"),
        )

    @property
    def is_empty(self) -> bool:
        return not (self.location_ids or self.sample_types or self.priorities or self.statuses)

    def matches(self, sample: Sample) -> bool:
        if self.location_ids and sample.location.id not in self.location_ids:
            return False
        if self.sample_types and sample.sample_type not in self.sample_types:
            return False
        if self.priorities and sample.priority not in self.priorities:
            return False
        if self.statuses and sample.status not in self.statuses:
            return False
        return True


def apply_sample_filters(samples: Iterable[Sample], filters: Optional[SampleFilters]) -> list[Sample]:
    if filters is None or filters.is_empty:
        return list(samples)
    return [sample for sample in samples if filters.matches(sample)]
