"""Pydantic schemas for the dashboard metrics."""

from __future__ import annotations

from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

ChangeDirection = Literal["increase", "decrease"]


class PeriodWindow(BaseModel):
    start: datetime = Field(..., description="First instant of the window (inclusive)")
    end: datetime = Field(..., description="Last instant of the window (inclusive)")
    days: int


class ChartPoint(BaseModel):
    date: date
    submitted_count: int
    completed_count: int
    avg_processing_minutes: int


class Summary(BaseModel):
    total_count: int = Field(..., description="Samples submitted within the window")
    completed_count: int = Field(..., description="Submitted samples that reached completed status")
    avg_processing_minutes: int
    on_time_rate_percent: int = Field(..., description="Completed samples within the on-time threshold")


class LocationMetric(BaseModel):
    location_id: str
    location_name: str
    samples_processed: int
    avg_processing_minutes: int
    utilization_percent: int


class TypeMetric(BaseModel):
    sample_type: str
    count: int
    completed_count: int
    avg_processing_minutes: int
    completion_rate_percent: int


class Change(BaseModel):
    magnitude_percent: int
    direction: ChangeDirection


class SummaryChanges(BaseModel):
    total_count: Change
    completed_count: Change
    avg_processing_minutes: Change
    on_time_rate_percent: Change


class QuickStats(BaseModel):
    peak_submission_hour: Optional[int] = Field(None, ge=0, le=23)
    most_active_location: Optional[str] = None
    top_sample_type: Optional[str] = None


class DashboardResponse(BaseModel):
    current_period: PeriodWindow
    previous_period: PeriodWindow
    summary: Summary
    previous_summary: Summary
    changes: SummaryChanges
    series: list[ChartPoint]
    locations: list[LocationMetric]
    types: list[TypeMetric]
    quick_stats: QuickStats
    generated_at: datetime
