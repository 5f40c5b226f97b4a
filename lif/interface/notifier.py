"""Reminder notification sinks with retry logic using httpx."""

import asyncio
import logging
from collections.abc import Iterable
from typing import Protocol

import httpx

from lif.core.config import Settings, constants
from lif.core.logging import log_with_context
from lif.models.service_models import NotificationResult, ReminderFired


logger = logging.getLogger(__name__)


# HTTP status code constants for error handling
HTTP_CLIENT_ERROR_START = 400
HTTP_CLIENT_ERROR_END = 500

# Strong references so fire-and-forget tasks are not garbage collected mid-flight
_background_tasks: set[asyncio.Task[NotificationResult]] = set()


class Notifier(Protocol):
    """One-way sink for fired reminders."""

    async def notify(self, event: ReminderFired) -> NotificationResult: ...


class LogNotifier:
    """Writes fired reminders to the log."""

    async def notify(self, event: ReminderFired) -> NotificationResult:
        log_with_context(
            logger,
            "info",
            f"Reminder: {event.label}",
            reminder_id=event.reminder_id,
            note=event.note,
            target_time=event.target_time.isoformat(),
        )
        return NotificationResult(reminder_id=event.reminder_id, success=True)


class WebhookNotifier:
    """POSTs fired reminders as JSON to a webhook URL."""

    def __init__(
        self,
        url: str,
        *,
        timeout: float,
        max_retries: int = constants.NOTIFICATION_MAX_RETRIES,
        retry_delay: float = constants.NOTIFICATION_RETRY_DELAY_SECONDS,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_delay = retry_delay

    async def notify(self, event: ReminderFired) -> NotificationResult:
        """Deliver one event, retrying server errors with exponential backoff."""
        payload = {
            "title": "Reminder",
            "message": event.label,
            **event.model_dump(mode="json"),
        }

        for attempt in range(self.max_retries):
            try:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(self.url, json=payload)

                    if response.is_success:
                        return NotificationResult(reminder_id=event.reminder_id, success=True)

                    if HTTP_CLIENT_ERROR_START <= response.status_code < HTTP_CLIENT_ERROR_END:
                        return NotificationResult(
                            reminder_id=event.reminder_id,
                            success=False,
                            error=f"Client error: {response.status_code}",
                        )

                    raise httpx.HTTPStatusError(
                        f"Server error: {response.status_code}", request=response.request, response=response
                    )
            except httpx.HTTPError as e:
                if attempt < self.max_retries - 1:
                    await asyncio.sleep(self.retry_delay * (2**attempt))
                else:
                    return NotificationResult(
                        reminder_id=event.reminder_id,
                        success=False,
                        error=f"Failed after retries: {e!s}",
                    )

        return NotificationResult(reminder_id=event.reminder_id, success=False, error="Max retries exceeded")


def build_notifier(settings: Settings) -> Notifier:
    """Pick the notification sink from settings."""
    if settings.enable_notifications and settings.notification_webhook_url:
        logger.info("Reminder notifications will be posted to webhook")
        return WebhookNotifier(settings.notification_webhook_url, timeout=settings.notification_timeout_seconds)
    return LogNotifier()


async def _deliver(notifier: Notifier, event: ReminderFired) -> NotificationResult:
    try:
        result = await notifier.notify(event)
    except Exception as e:
        logger.error(f"Notifier crashed for reminder {event.reminder_id}: {e}")
        return NotificationResult(reminder_id=event.reminder_id, success=False, error=str(e))

    if not result.success:
        logger.warning(f"Failed to notify reminder {event.reminder_id}: {result.error}")
    return result


def dispatch(notifier: Notifier, events: Iterable[ReminderFired]) -> list[asyncio.Task[NotificationResult]]:
    """Schedule one background delivery per event without awaiting them.

    Must be called from a running event loop. Delivery failures are logged
    and never propagate to the caller.
    """
    tasks = []
    for event in events:
        task = asyncio.create_task(_deliver(notifier, event))
        _background_tasks.add(task)
        task.add_done_callback(_background_tasks.discard)
        tasks.append(task)
    return tasks
