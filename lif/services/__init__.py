from lif.services import (
    daily_reset_service,
    dashboard_service,
    gamification_service,
    reminder_service,
    streak_service,
)


__all__ = [
    "daily_reset_service",
    "dashboard_service",
    "gamification_service",
    "reminder_service",
    "streak_service",
]
