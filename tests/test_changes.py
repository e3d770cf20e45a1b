from __future__ import annotations

import pytest

from lab_throughput_dashboard.services.aggregation import SummaryMeasures
from lab_throughput_dashboard.services.changes import build_summary_changes, compute_change


def test_equal_values_count_as_increase():
    change = compute_change(10, 10)

    assert change.magnitude_percent == 0
    assert change.direction == "increase"


@pytest.mark.parametrize("current", [0, 5, 50])
def test_zero_previous_value_reports_no_change(current):
    change = compute_change(current, 0)

    assert change.model_dump() == {"magnitude_percent": 0, "direction": "increase"}


@pytest.mark.parametrize(
    ("current", "previous", "magnitude", "direction"),
    [
        (15, 10, 50, "increase"),
        (5, 10, 50, "decrease"),
        (0, 10, 100, "decrease"),
        (1, 8, 88, "decrease"),
        (9, 8, 13, "increase"),
        (30, 10, 200, "increase"),
    ],
)
def test_percentage_change(current, previous, magnitude, direction):
    change = compute_change(current, previous)

    assert change.magnitude_percent == magnitude
    assert change.direction == direction


def test_summary_changes_compare_unrounded_measures():
    current = SummaryMeasures(total_count=12, completed_count=9, avg_processing_minutes=80.0, on_time_rate_percent=75.0)
    previous = SummaryMeasures(total_count=10, completed_count=9, avg_processing_minutes=100.0, on_time_rate_percent=0.0)

    changes = build_summary_changes(current, previous)

    assert changes.total_count.model_dump() == {"magnitude_percent": 20, "direction": "increase"}
    assert changes.completed_count.model_dump() == {"magnitude_percent": 0, "direction": "increase"}
    assert changes.avg_processing_minutes.model_dump() == {"magnitude_percent": 20, "direction": "decrease"}
    assert changes.on_time_rate_percent.model_dump() == {"magnitude_percent": 0, "direction": "increase"}
