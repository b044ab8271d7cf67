"""Entities referenced by scheduled transactions."""

from cadence.domain.scheduling.entities.account import Account
from cadence.domain.scheduling.entities.category import Category

__all__ = ["Account", "Category"]
