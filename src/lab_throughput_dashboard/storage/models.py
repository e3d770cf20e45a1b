"""Immutable record types for laboratory samples and locations."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

SamplePriority = Literal["urgent", "high", "normal", "low"]
SampleStatus = Literal["received", "in_progress", "completed", "on_hold", "cancelled"]

ALLOWED_PRIORITIES = {"urgent", "high", "normal", "low"}
ALLOWED_STATUSES = {"received", "in_progress", "completed", "on_hold", "cancelled"}
TERMINAL_STATUSES = {"completed", "cancelled"}


class Location(BaseModel):
    """A laboratory facility."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    code: str
    department: str
    capacity: int = Field(..., ge=0, description="Samples the location can process in the metrics window")
    is_active: bool = True


class Sample(BaseModel):
    """One lab test record."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    sample_number: str
    submission_timestamp: datetime
    completion_timestamp: Optional[datetime] = None
    priority: SamplePriority
    status: SampleStatus
    sample_type: str
    location: Location
    processing_minutes: Optional[int] = Field(None, ge=0)
    technician: str
    department: str

    @field_validator("submission_timestamp", "completion_timestamp")
    def _require_naive(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is not None and value.tzinfo is not None:
            raise ValueError("timestamps must be naive local datetimes")
        return value

    @field_validator("technician", "department")
    def _require_text(cls, value: str) -> str:
        trimmed = value.strip()
        if not trimmed:
            raise ValueError("must not be empty")
        return trimmed

    @model_validator(mode="after")
    def _check_completion_fields(self) -> "Sample":
        completed = self.status == "completed"
        has_completion = self.completion_timestamp is not None
        has_minutes = self.processing_minutes is not None
        if has_completion != has_minutes:
            raise ValueError("completion_timestamp and processing_minutes must be set together")
        if completed != has_completion:
            raise ValueError("completion_timestamp and processing_minutes are required only for completed samples")
        if completed:
            elapsed = self.completion_timestamp - self.submission_timestamp
            if int(elapsed.total_seconds() // 60) != self.processing_minutes:
                raise ValueError(
                    f"processing_minutes={self.processing_minutes} does not match "
                    f"completion_timestamp - submission_timestamp ({elapsed})"
                )
        return self

    @property
    def is_completed(self) -> bool:
        return self.status == "completed"

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES
