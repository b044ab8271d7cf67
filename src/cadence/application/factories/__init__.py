"""Factories for wiring application components."""

from cadence.application.factories.scheduling_context import SchedulingContext

__all__ = ["SchedulingContext"]
