"""Application configuration helpers for environment-driven settings."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError


class DatasetSettings(BaseModel):
    """Controls how the in-memory sample dataset is produced."""

    seed: int = 42
    days: int = Field(90, ge=1)


class MetricsSettings(BaseModel):
    """Thresholds and defaults used by the metrics services."""

    on_time_minutes: int = Field(120, ge=0)
    default_range_days: int = Field(30, ge=1)


class AppSettings(BaseModel):
    """Aggregated application settings."""

    dataset: DatasetSettings = DatasetSettings()
    metrics: MetricsSettings = MetricsSettings()
    log_level: str = "INFO"


def _load_from_environment() -> AppSettings:
    """Load settings using environment variables and .env file."""

    module_path = Path(__file__).resolve()
    project_root = module_path.parents[2]
    dotenv_path = project_root / ".env"
    load_dotenv(dotenv_path=dotenv_path, override=False, encoding="utf-8-sig")
    load_dotenv(override=False)  # Secondary search path (current working dir)
    try:
        dataset = DatasetSettings(
            seed=int(os.getenv("LAB_DASHBOARD_SEED", "42")),
            days=int(os.getenv("LAB_DASHBOARD_MOCK_DAYS", "90")),
        )
        metrics = MetricsSettings(
            on_time_minutes=int(os.getenv("LAB_DASHBOARD_ON_TIME_MINUTES", "120")),
            default_range_days=int(os.getenv("LAB_DASHBOARD_DEFAULT_RANGE_DAYS", "30")),
        )
        log_level = os.getenv("LAB_DASHBOARD_LOG_LEVEL", "INFO").upper()
    except ValidationError as exc:
        raise RuntimeError(f"Environment configuration is invalid: {exc}") from exc
    except ValueError as exc:
        raise RuntimeError(f"Environment configuration has invalid numeric value: {exc}") from exc
    return AppSettings(dataset=dataset, metrics=metrics, log_level=log_level)


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return cached application settings."""

    return _load_from_environment()
