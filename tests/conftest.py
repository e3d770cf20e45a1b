from __future__ import annotations

import sys
from datetime import datetime, timedelta
from pathlib import Path
from typing import Optional

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from lab_throughput_dashboard.storage import DataContext, Location, Sample  # noqa: E402

MAIN_LAB = Location(id="loc-001", name="Main Laboratory", code="MAIN", department="Clinical Chemistry", capacity=500)
EMERGENCY_LAB = Location(id="loc-004", name="Emergency Lab", code="EMRG", department="Emergency", capacity=2)
RESEARCH_LAB = Location(
    id="loc-005",
    name="Research Lab A",
    code="RESA",
    department="Research",
    capacity=150,
    is_active=False,
)

SAMPLE_TYPES = ("Blood Chemistry", "Complete Blood Count", "Urinalysis")

_counter = {"value": 0}


def build_sample(
    submitted: datetime,
    *,
    status: str = "received",
    minutes: Optional[int] = None,
    sample_type: str = "Blood Chemistry",
    location: Location = MAIN_LAB,
    priority: str = "normal",
    sample_id: Optional[str] = None,
) -> Sample:
    _counter["value"] += 1
    completed = status == "completed"
    if completed and minutes is None:
        minutes = 60
    return Sample(
        id=sample_id or f"sample-{_counter['value']}",
        sample_number=f"S{submitted:%Y%m%d}-{_counter['value']:03d}",
        submission_timestamp=submitted,
        completion_timestamp=submitted + timedelta(minutes=minutes) if completed else None,
        priority=priority,
        status=status,
        sample_type=sample_type,
        location=location,
        processing_minutes=minutes if completed else None,
        technician="Mike Chen",
        department=location.department,
    )


@pytest.fixture
def make_sample():
    return build_sample


@pytest.fixture
def locations():
    return (MAIN_LAB, EMERGENCY_LAB, RESEARCH_LAB)


@pytest.fixture
def small_context(locations):
    samples = [
        build_sample(datetime(2024, 3, 7, 9, 0), status="completed", minutes=100, sample_id="prev-1"),
        build_sample(datetime(2024, 3, 9, 14, 0), status="completed", minutes=200, sample_id="prev-2"),
        build_sample(datetime(2024, 3, 10, 8, 30), status="completed", minutes=60, sample_id="cur-1"),
        build_sample(datetime(2024, 3, 10, 8, 45), status="completed", minutes=90, sample_id="cur-2",
                     location=EMERGENCY_LAB, sample_type="Urinalysis"),
        build_sample(datetime(2024, 3, 12, 16, 0), status="in_progress", sample_id="cur-3",
                     location=RESEARCH_LAB, priority="urgent"),
        build_sample(datetime(2024, 3, 13, 0, 0), status="received", sample_id="after-1"),
    ]
    return DataContext.from_records(
        locations=locations,
        samples=samples,
        sample_types=SAMPLE_TYPES,
        generated_at=datetime(2024, 3, 13, 12, 0),
    )
