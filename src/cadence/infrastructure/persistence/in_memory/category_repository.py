"""In-memory implementation of CategoryRepository."""

from typing import Dict, List, Optional
from uuid import UUID

from cadence.domain.scheduling.entities import Category
from cadence.domain.scheduling.repositories import CategoryRepository


class InMemoryCategoryRepository(CategoryRepository):
    def __init__(self, categories: Optional[List[Category]] = None):
        self._categories: Dict[UUID, Category] = {c.id: c for c in categories or []}

    async def save(self, category: Category) -> None:
        self._categories[category.id] = category

    async def find_by_id(self, category_id: UUID) -> Optional[Category]:
        return self._categories.get(category_id)

    async def remove(self, category_id: UUID) -> None:
        self._categories.pop(category_id, None)
