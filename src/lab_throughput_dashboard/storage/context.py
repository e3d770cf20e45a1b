"""Explicitly constructed dataset shared by the metrics services."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional

from lab_throughput_dashboard.config import DatasetSettings
from .mock import DEFAULT_LOCATIONS, DEFAULT_SAMPLE_TYPES, generate_mock_samples
from .models import Location, Sample

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class DataContext:
    """Read-only samples, locations and the known sample type catalog."""

    locations: tuple[Location, ...]
    samples: tuple[Sample, ...]
    sample_types: tuple[str, ...]
    generated_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def from_records(
        cls,
        *,
        locations: Iterable[Location],
        samples: Iterable[Sample],
        sample_types: Iterable[str],
        generated_at: Optional[datetime] = None,
    ) -> "DataContext":
        return cls(
            locations=tuple(locations),
            samples=tuple(samples),
            sample_types=tuple(sample_types),
            generated_at=generated_at or datetime.now(),
        )

    @property
    def active_locations(self) -> tuple[Location, ...]:
        return tuple(location for location in self.locations if location.is_active)

    def location_by_id(self, location_id: str) -> Optional[Location]:
        for location in self.locations:
            if location.id == location_id:
                return location
        return None


def build_data_context(settings: DatasetSettings, *, now: Optional[datetime] = None) -> DataContext:
    """Build the demonstration dataset from the seeded mock generator."""

    now = now or datetime.now()
    rng = random.Random(settings.seed)
    samples = generate_mock_samples(
        DEFAULT_LOCATIONS,
        DEFAULT_SAMPLE_TYPES,
        days=settings.days,
        now=now,
        rng=rng,
    )
    LOGGER.info(
        "Built data context with %s samples across %s locations (seed=%s, days=%s)",
        len(samples),
        len(DEFAULT_LOCATIONS),
        settings.seed,
        settings.days,
    )
    return DataContext.from_records(
        locations=DEFAULT_LOCATIONS,
        samples=samples,
        sample_types=DEFAULT_SAMPLE_TYPES,
        generated_at=now,
    )
