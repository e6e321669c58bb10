"""Generic repository port — one CRUD contract for every entity type."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Port for entity persistence — implemented in the infrastructure layer.

    Absence is a normal outcome: lookups return ``None`` and mutations
    return an affected count of ``0`` instead of raising. Backend errors
    propagate unchanged.
    """

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> T | None:
        """Retrieve a single entity by its ID, or None if it does not exist."""
        ...

    @abstractmethod
    async def get_all(self, skip: int = 0, limit: int | None = None) -> list[T]:
        """Retrieve every persisted entity, ordered by ID. ``limit=None`` means no limit."""
        ...

    @abstractmethod
    async def add(self, entity: T) -> int:
        """Persist a new entity, set its ``id`` and return the assigned ID."""
        ...

    @abstractmethod
    async def update(self, entity: T) -> int:
        """Replace the persisted state of ``entity.id``. Returns 1, or 0 if not found."""
        ...

    @abstractmethod
    async def delete(self, entity_id: int) -> int:
        """Delete an entity by ID. Returns 1, or 0 if not found."""
        ...
