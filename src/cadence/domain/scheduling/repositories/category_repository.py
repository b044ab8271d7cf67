"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from cadence.domain.scheduling.entities import Category


class CategoryRepository(ABC):
    """Repository interface for transaction categories."""

    @abstractmethod
    async def save(self, category: Category) -> None:
        """Save a category."""

    @abstractmethod
    async def find_by_id(self, category_id: UUID) -> Optional[Category]:
        """Find category by ID."""
