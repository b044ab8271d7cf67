"""Application ports - interfaces the engine drives but does not implement."""

from cadence.application.ports.balance_recomputer import AccountBalanceRecomputer
from cadence.application.ports.currency_converter import CurrencyConverter
from cadence.application.ports.notification_scheduler import NotificationScheduler

__all__ = [
    "AccountBalanceRecomputer",
    "CurrencyConverter",
    "NotificationScheduler",
]
