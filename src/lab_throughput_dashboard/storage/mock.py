"""Seeded generator for the demonstration sample dataset."""

from __future__ import annotations

import random
from datetime import datetime, timedelta
from typing import Optional, Sequence

from .models import Location, Sample

DEFAULT_LOCATIONS: tuple[Location, ...] = (
    Location(id="loc-001", name="Main Laboratory", code="MAIN", department="Clinical Chemistry", capacity=500),
    Location(id="loc-002", name="Microbiology Lab", code="MICRO", department="Microbiology", capacity=200),
    Location(id="loc-003", name="Hematology Lab", code="HEMA", department="Hematology", capacity=300),
    Location(id="loc-004", name="Emergency Lab", code="EMRG", department="Emergency", capacity=100),
    Location(
        id="loc-005",
        name="Research Lab A",
        code="RESA",
        department="Research",
        capacity=150,
        is_active=False,
    ),
)

DEFAULT_SAMPLE_TYPES: tuple[str, ...] = (
    "Blood Chemistry",
    "Complete Blood Count",
    "Urinalysis",
    "Microbiology Culture",
    "Immunology",
    "Molecular Diagnostics",
    "Cytology",
    "Histology",
    "Toxicology",
    "Serology",
)

TECHNICIANS: tuple[str, ...] = (
    "Dr. Sarah Johnson",
    "Mike Chen",
    "Emily Rodriguez",
    "David Kim",
    "Lisa Thompson",
    "Alex Martinez",
    "Jessica Brown",
    "Tom Wilson",
)

_MIN_SAMPLES_PER_DAY = 20
_MAX_SAMPLES_PER_DAY = 79
_MIN_PROCESSING_MINUTES = 30
_MAX_PROCESSING_MINUTES = 269


def _pick_priority(rng: random.Random) -> str:
    if rng.random() < 0.1:
        return "urgent"
    if rng.random() < 0.25:
        return "high"
    if rng.random() < 0.75:
        return "normal"
    return "low"


def _pick_status(rng: random.Random, finished_by_now: bool) -> str:
    roll = rng.random()
    if finished_by_now:
        if roll < 0.85:
            return "completed"
        if roll < 0.95:
            return "in_progress"
        return "on_hold"
    return "in_progress" if roll < 0.7 else "received"


def generate_mock_samples(
    locations: Sequence[Location] = DEFAULT_LOCATIONS,
    sample_types: Sequence[str] = DEFAULT_SAMPLE_TYPES,
    *,
    days: int = 90,
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None,
) -> list[Sample]:
    """Generate ``days`` days of samples ending the day before ``now``.

    Only active locations receive samples. A sample whose processing would have
    finished by ``now`` is usually completed; otherwise it is still received or
    in progress. Pass a seeded ``rng`` for reproducible output.
    """

    rng = rng or random.Random()
    now = now or datetime.now()
    active_locations = [location for location in locations if location.is_active]
    type_choices = list(sample_types)
    if not active_locations or not type_choices:
        return []

    first_day = (now - timedelta(days=days)).replace(hour=0, minute=0, second=0, microsecond=0)
    samples: list[Sample] = []
    for day in range(days):
        current_day = first_day + timedelta(days=day)
        per_day = rng.randint(_MIN_SAMPLES_PER_DAY, _MAX_SAMPLES_PER_DAY)
        for index in range(per_day):
            submitted = current_day + timedelta(hours=rng.randrange(24), minutes=rng.randrange(60))
            location = rng.choice(active_locations)
            sample_type = rng.choice(type_choices)
            technician = rng.choice(TECHNICIANS)
            processing = rng.randint(_MIN_PROCESSING_MINUTES, _MAX_PROCESSING_MINUTES)
            completed_at = submitted + timedelta(minutes=processing)
            status = _pick_status(rng, completed_at <= now)
            priority = _pick_priority(rng)
            done = status == "completed"
            samples.append(
                Sample(
                    id=f"sample-{day}-{index}",
                    sample_number=f"S{current_day:%Y%m%d}-{index + 1:03d}",
                    submission_timestamp=submitted,
                    completion_timestamp=completed_at if done else None,
                    priority=priority,
                    status=status,
                    sample_type=sample_type,
                    location=location,
                    processing_minutes=processing if done else None,
                    technician=technician,
                    department=location.department,
                )
            )
    return samples
