"""Storage package exports."""

from .context import DataContext, build_data_context
from .mock import DEFAULT_LOCATIONS, DEFAULT_SAMPLE_TYPES, generate_mock_samples
from .models import (
    ALLOWED_PRIORITIES,
    ALLOWED_STATUSES,
    TERMINAL_STATUSES,
    Location,
    Sample,
    SamplePriority,
    SampleStatus,
)

__all__ = [
    "ALLOWED_PRIORITIES",
    "ALLOWED_STATUSES",
    "TERMINAL_STATUSES",
    "DEFAULT_LOCATIONS",
    "DEFAULT_SAMPLE_TYPES",
    "DataContext",
    "Location",
    "Sample",
    "SamplePriority",
    "SampleStatus",
    "build_data_context",
    "generate_mock_samples",
]
