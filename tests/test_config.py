from __future__ import annotations

import pytest

from lab_throughput_dashboard import config


@pytest.fixture(autouse=True)
def clear_cache():
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


def test_settings_defaults(monkeypatch):
    for name in (
        "LAB_DASHBOARD_SEED",
        "LAB_DASHBOARD_MOCK_DAYS",
        "LAB_DASHBOARD_ON_TIME_MINUTES",
        "LAB_DASHBOARD_DEFAULT_RANGE_DAYS",
        "LAB_DASHBOARD_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "load_dotenv", lambda *args, **kwargs: False)

    settings = config.get_settings()

    assert settings.dataset.seed == 42
    assert settings.dataset.days == 90
    assert settings.metrics.on_time_minutes == 120
    assert settings.metrics.default_range_days == 30
    assert settings.log_level == "INFO"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setattr(config, "load_dotenv", lambda *args, **kwargs: False)
    monkeypatch.setenv("LAB_DASHBOARD_SEED", "7")
    monkeypatch.setenv("LAB_DASHBOARD_MOCK_DAYS", "30")
    monkeypatch.setenv("LAB_DASHBOARD_ON_TIME_MINUTES", "90")
    monkeypatch.setenv("LAB_DASHBOARD_LOG_LEVEL", "debug")

    settings = config.get_settings()

    assert settings.dataset.seed == 7
    assert settings.dataset.days == 30
    assert settings.metrics.on_time_minutes == 90
    assert settings.log_level == "DEBUG"
    assert config.get_settings() is settings


@pytest.mark.parametrize(
    ("name", "value"),
    [("LAB_DASHBOARD_MOCK_DAYS", "many"), ("LAB_DASHBOARD_MOCK_DAYS", "0"), ("LAB_DASHBOARD_ON_TIME_MINUTES", "-5")],
)
def test_invalid_settings_raise_runtime_error(monkeypatch, name, value):
    monkeypatch.setattr(config, "load_dotenv", lambda *args, **kwargs: False)
    monkeypatch.setenv(name, value)

    with pytest.raises(RuntimeError):
        config.get_settings()
