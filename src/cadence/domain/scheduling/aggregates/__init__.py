"""Aggregates of the scheduling domain."""

from cadence.domain.scheduling.aggregates.transaction import Transaction

__all__ = ["Transaction"]
