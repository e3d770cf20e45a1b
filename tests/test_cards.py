from __future__ import annotations

import pytest

from lab_throughput_dashboard.schemas import Change, Summary, SummaryChanges
from lab_throughput_dashboard.ui.cards import (
    build_metric_cards,
    format_count,
    format_hour_label,
    format_minutes,
    format_percent,
)


def test_metric_cards_invert_processing_time_direction():
    summary = Summary(total_count=1234, completed_count=1000, avg_processing_minutes=95, on_time_rate_percent=88)
    changes = SummaryChanges(
        total_count=Change(magnitude_percent=12, direction="increase"),
        completed_count=Change(magnitude_percent=3, direction="decrease"),
        avg_processing_minutes=Change(magnitude_percent=5, direction="increase"),
        on_time_rate_percent=Change(magnitude_percent=0, direction="increase"),
    )

    cards = build_metric_cards(summary, changes)

    assert [(card.title, card.value) for card in cards] == [
        ("Total Samples", "1,234"),
        ("Completed", "1,000"),
        ("Avg Processing Time", "95 min"),
        ("On-Time Rate", "88%"),
    ]
    assert [card.change.direction for card in cards] == ["increase", "decrease", "decrease", "increase"]
    assert cards[0].change.label == "↗ 12% vs previous period"
    assert cards[2].change.label == "↘ 5% vs previous period"


@pytest.mark.parametrize(
    ("hour", "label"),
    [(0, "12:00 AM"), (9, "9:00 AM"), (12, "12:00 PM"), (14, "2:00 PM"), (23, "11:00 PM"), (None, "--")],
)
def test_format_hour_label(hour, label):
    assert format_hour_label(hour) == label


def test_value_formatters():
    assert format_count(0) == "0"
    assert format_count(None) == "--"
    assert format_minutes(75) == "75 min"
    assert format_percent(12.5) == "13%"
    assert format_percent(None) == "--"
