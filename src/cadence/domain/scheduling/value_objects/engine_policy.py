"""Tunable policy for detection and materialization.

These are product decisions rather than invariants, so they are passed in
from configuration instead of being hard-coded in the services.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class DetectionPolicy(BaseModel):
    """Parameters of the recurring pattern heuristic."""

    model_config = ConfigDict(frozen=True)

    window_days: int = Field(default=5, ge=1, le=366)
    min_occurrences: int = Field(default=3, ge=2)
    amount_bucket: Decimal = Field(default=Decimal("0.01"), gt=0)


class MaterializationPolicy(BaseModel):
    """Parameters of the occurrence materializer."""

    model_config = ConfigDict(frozen=True)

    lookahead_days: int = Field(default=0, ge=0)
    max_occurrences_per_run: int = Field(default=1000, ge=1)
