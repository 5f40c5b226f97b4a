"""In-memory collaborators for runtime and router tests."""

from lif.core.errors import StoreError
from lif.domain.app_data import AppData
from lif.models.service_models import NotificationResult, ReminderFired


class InMemoryStore:
    """Store that keeps the last saved ``AppData`` in memory.

    Set ``fail_saves`` to simulate a disk that cannot be written.
    """

    def __init__(self, data: AppData | None = None):
        self.data = data or AppData()
        self.save_count = 0
        self.fail_saves = False

    def load(self) -> AppData:
        return self.data.model_copy(deep=True)

    def save(self, data: AppData) -> None:
        if self.fail_saves:
            raise StoreError("disk full")
        self.save_count += 1
        self.data = data.model_copy(deep=True)


class RecordingNotifier:
    """Notifier that remembers every event it was asked to deliver."""

    def __init__(self):
        self.events: list[ReminderFired] = []

    async def notify(self, event: ReminderFired) -> NotificationResult:
        self.events.append(event)
        return NotificationResult(reminder_id=event.reminder_id, success=True)
