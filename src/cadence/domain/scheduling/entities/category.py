"""Category entity reference."""

from typing import Optional
from uuid import UUID, uuid4


class Category:
    """Spending or income category a transaction is filed under."""

    def __init__(self, name: str, id: Optional[UUID] = None):
        self._id = id if id is not None else uuid4()
        self._name = name

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    def __eq__(self, other) -> bool:
        if not isinstance(other, Category):
            return False
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __str__(self) -> str:
        return f"Category[{self._name}]"
