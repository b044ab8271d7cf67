"""Application services."""

from cadence.application.services.ledger_sync_service import LedgerSyncService
from cadence.application.services.reference_check_service import (
    ReferenceCheckService,
)

__all__ = [
    "LedgerSyncService",
    "ReferenceCheckService",
]
