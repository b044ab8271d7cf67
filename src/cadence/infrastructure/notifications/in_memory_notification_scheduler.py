"""Notification scheduler that only records reminders."""

from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Optional
from uuid import UUID

logger = logging.getLogger(__name__)


class InMemoryNotificationScheduler:
    """Keeps one reminder date per transaction, for tests and the CLI."""

    def __init__(self):
        self._reminders: Dict[UUID, date] = {}

    async def schedule(self, transaction_id: UUID, on: date) -> None:
        self._reminders[transaction_id] = on
        logger.debug("Reminder for %s set to %s", transaction_id, on)

    async def cancel(self, transaction_id: UUID) -> None:
        if self._reminders.pop(transaction_id, None) is not None:
            logger.debug("Reminder for %s cancelled", transaction_id)

    def scheduled_for(self, transaction_id: UUID) -> Optional[date]:
        return self._reminders.get(transaction_id)

    @property
    def reminders(self) -> Dict[UUID, date]:
        return dict(self._reminders)
