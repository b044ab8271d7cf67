from cadence.infrastructure.notifications.in_memory_notification_scheduler import (
    InMemoryNotificationScheduler,
)

__all__ = ["InMemoryNotificationScheduler"]
