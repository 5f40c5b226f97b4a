"""Configuration management for lif."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_data_file() -> Path:
    return Path.home() / ".config" / "lif" / "config.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LIF_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Storage Configuration
    data_file: Path = Field(default_factory=_default_data_file, description="JSON file holding dashboard data")

    # Tick Configuration
    tick_interval_seconds: float = Field(default=1.0, gt=0, description="Cadence of the daily reset / expiry tick")

    # Pydantic Logfire Configuration (optional)
    logfire_token: str | None = Field(default=None, description="Pydantic Logfire token for observability")
    environment: str = Field(default="local", description="Deployment environment reported to Logfire")

    # Notification Configuration
    enable_notifications: bool = Field(default=True, description="Enable/disable reminder notifications")
    notification_webhook_url: str | None = Field(
        default=None, description="If set, fired reminders are POSTed to this URL instead of only being logged"
    )
    notification_timeout_seconds: float = Field(default=5.0, gt=0, description="Webhook request timeout")


# Application Constants
class Constants:
    """Application-wide constants."""

    # Day Boundary
    DAY_BOUNDARY_HOUR: int = 3  # logical day turns over at 03:00 local time

    # Duration Formatting
    PRECISE_FORMAT_MAX_HOURS: int = 8  # above this, remaining time is rounded to hours

    # Gamification
    TASK_COMPLETION_POINTS: int = 10
    ACHIEVEMENT_BONUS_POINTS: int = 50
    LOGIN_BONUS_POINTS: int = 5
    POINTS_PER_LEVEL: int = 100

    # Notifications
    NOTIFICATION_MAX_RETRIES: int = 3
    NOTIFICATION_RETRY_DELAY_SECONDS: float = 1.0

    # Scheduler
    TICK_JOB_ID: str = "dashboard_tick"


def get_settings() -> Settings:
    """Get application settings (singleton pattern)."""
    return Settings()


# Global settings instance
settings = get_settings()
constants = Constants()
