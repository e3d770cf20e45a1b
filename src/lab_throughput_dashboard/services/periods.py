"""Resolve the current and comparison periods for a requested date range."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional

from pydantic import BaseModel, model_validator

from ..schemas.metrics import PeriodWindow


class DateRange(BaseModel):
    """Calendar date range selected in the dashboard header (both ends inclusive)."""

    start_date: date
    end_date: date

    @model_validator(mode="after")
    def _check_order(self) -> "DateRange":
        if self.end_date < self.start_date:
            raise ValueError(
                f"end_date {self.end_date.isoformat()} is before start_date {self.start_date.isoformat()}"
            )
        return self


@dataclass(frozen=True)
class TimeWindow:
    """Instant bounds of a filter window, inclusive at both ends."""

    start: datetime
    end: datetime

    @classmethod
    def for_days(cls, first_day: date, last_day: date) -> "TimeWindow":
        return cls(
            start=datetime.combine(first_day, time.min),
            end=datetime.combine(last_day, time.max),
        )

    @property
    def first_day(self) -> date:
        return self.start.date()

    @property
    def last_day(self) -> date:
        return self.end.date()

    @property
    def length_days(self) -> int:
        return (self.last_day - self.first_day).days + 1

    def days(self) -> list[date]:
        return [self.first_day + timedelta(days=offset) for offset in range(self.length_days)]

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end

    def to_schema(self) -> PeriodWindow:
        return PeriodWindow(start=self.start, end=self.end, days=self.length_days)


@dataclass(frozen=True)
class ResolvedPeriods:
    current: TimeWindow
    previous: TimeWindow


def resolve_periods(requested: Optional[DateRange], *, today: Optional[date] = None) -> ResolvedPeriods:
    """Return the requested window and the equally long window right before it.

    Without a requested range the dashboard compares today with yesterday.
    """

    if requested is None:
        today = today or date.today()
        yesterday = today - timedelta(days=1)
        return ResolvedPeriods(
            current=TimeWindow.for_days(today, today),
            previous=TimeWindow.for_days(yesterday, yesterday),
        )

    current = TimeWindow.for_days(requested.start_date, requested.end_date)
    span_days = current.length_days
    previous_end = requested.start_date - timedelta(days=1)
    previous_start = previous_end - timedelta(days=span_days - 1)
    return ResolvedPeriods(current=current, previous=TimeWindow.for_days(previous_start, previous_end))


def quick_range(days: int, *, today: Optional[date] = None) -> DateRange:
    """Return the preset range covering the last ``days`` calendar days, today included."""

    if days < 1:
        raise ValueError(f"Quick range must cover at least one day, got {days}")
    today = today or date.today()
    return DateRange(start_date=today - timedelta(days=days - 1), end_date=today)
