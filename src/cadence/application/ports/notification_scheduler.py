"""Notification scheduler port."""

from datetime import date
from typing import Protocol
from uuid import UUID


class NotificationScheduler(Protocol):
    """Port for reminders about transactions waiting on a date or a user.

    Delivery is somebody else's problem; the engine only decides when a
    reminder should exist.
    """

    async def schedule(self, transaction_id: UUID, on: date) -> None:
        """Schedule (or move) the reminder for ``transaction_id`` to ``on``."""
        ...

    async def cancel(self, transaction_id: UUID) -> None:
        """Cancel the reminder for ``transaction_id``.

        Cancelling an id without a reminder is a no-op.
        """
        ...
