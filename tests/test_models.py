from __future__ import annotations

from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError

from lab_throughput_dashboard.storage import Location, Sample

LAB = Location(id="loc-001", name="Main Laboratory", code="MAIN", department="Clinical Chemistry", capacity=500)
SUBMITTED = datetime(2024, 3, 10, 8, 0)


def _payload(**overrides):
    payload = dict(
        id="sample-1",
        sample_number="S20240310-001",
        submission_timestamp=SUBMITTED,
        completion_timestamp=SUBMITTED + timedelta(minutes=45),
        priority="normal",
        status="completed",
        sample_type="Urinalysis",
        location=LAB,
        processing_minutes=45,
        technician="Emily Rodriguez",
        department="Clinical Chemistry",
    )
    payload.update(overrides)
    return payload


def test_completed_sample_is_valid():
    sample = Sample(**_payload())

    assert sample.is_completed
    assert sample.location == LAB


def test_pending_sample_has_no_completion_fields():
    sample = Sample(**_payload(status="in_progress", completion_timestamp=None, processing_minutes=None))

    assert not sample.is_completed


@pytest.mark.parametrize(
    "overrides",
    [
        {"completion_timestamp": None, "processing_minutes": None},
        {"processing_minutes": None},
        {"status": "in_progress"},
        {"processing_minutes": 44},
        {"technician": "   "},
        {"priority": "critical"},
        {"status": "done"},
    ],
)
def test_invalid_samples_are_rejected(overrides):
    with pytest.raises(ValidationError):
        Sample(**_payload(**overrides))


def test_records_are_immutable():
    sample = Sample(**_payload())

    with pytest.raises(ValidationError):
        sample.status = "cancelled"


def test_negative_capacity_is_rejected():
    with pytest.raises(ValidationError):
        Location(id="loc-x", name="Broken", code="BRK", department="None", capacity=-1)


def test_processing_minutes_uses_whole_minute_difference():
    submitted = datetime(2024, 3, 10, 8, 0, 30)
    sample = Sample(
        **_payload(
            submission_timestamp=submitted,
            completion_timestamp=datetime(2024, 3, 10, 8, 45),
            processing_minutes=44,
        )
    )

    assert sample.processing_minutes == 44


@pytest.mark.parametrize(
    "overrides",
    [
        {"submission_timestamp": "2024-03-10T08:00:00Z"},
        {"submission_timestamp": "2024-03-10T08:00:00+02:00", "completion_timestamp": "2024-03-10T08:45:00+02:00"},
    ],
)
def test_timezone_aware_timestamps_are_rejected(overrides):
    with pytest.raises(ValidationError, match="naive"):
        Sample(**_payload(**overrides))


@pytest.mark.parametrize(
    ("status", "expected"),
    [("completed", True), ("cancelled", True), ("received", False), ("on_hold", False)],
)
def test_terminal_statuses(status, expected):
    overrides = {} if status == "completed" else {"completion_timestamp": None, "processing_minutes": None}
    sample = Sample(**_payload(status=status, **overrides))

    assert sample.is_terminal is expected
