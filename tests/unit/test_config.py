"""Tests for configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from lif.core.config import Settings


def test_defaults() -> None:
    """Test settings fall back to defaults with no environment."""
    settings = Settings(_env_file=None)

    assert settings.data_file == Path.home() / ".config" / "lif" / "config.json"
    assert settings.tick_interval_seconds == 1.0
    assert settings.notification_webhook_url is None
    assert settings.enable_notifications is True


def test_reads_prefixed_environment(monkeypatch, tmp_path) -> None:
    """Test LIF_-prefixed environment variables override defaults."""
    monkeypatch.setenv("LIF_DATA_FILE", str(tmp_path / "data.json"))
    monkeypatch.setenv("LIF_TICK_INTERVAL_SECONDS", "2.5")

    settings = Settings(_env_file=None)

    assert settings.data_file == tmp_path / "data.json"
    assert settings.tick_interval_seconds == 2.5


def test_tick_interval_must_be_positive() -> None:
    """Test a zero tick interval is rejected."""
    with pytest.raises(ValidationError, match="tick_interval_seconds"):
        Settings(tick_interval_seconds=0, _env_file=None)
