"""Generic repository implementation backed by SQLAlchemy async sessions."""

from abc import abstractmethod
from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.application.interfaces import Repository
from catalog.infrastructure.database.base import Base

EntityT = TypeVar("EntityT")
ModelT = TypeVar("ModelT", bound=Base)

# Primary keys are signed 64-bit integers on every supported backend.
_MIN_ID = -(2**63)
_MAX_ID = 2**63 - 1


def _storable(entity_id: int | None) -> bool:
    return entity_id is not None and _MIN_ID <= entity_id <= _MAX_ID


class SQLAlchemyRepository(Repository[EntityT], Generic[EntityT, ModelT]):
    """CRUD over one ORM model, written once for every entity type.

    Subclasses set ``model_class`` and provide the entity ↔ model mapping.
    The repository only flushes; the session owner commits or rolls back.
    """

    model_class: type[ModelT]

    def __init__(self, session: AsyncSession):
        self._session = session

    @abstractmethod
    def _to_entity(self, model: ModelT) -> EntityT:
        """Map ORM model → domain entity."""
        ...

    @abstractmethod
    def _to_model(self, entity: EntityT) -> ModelT:
        """Map domain entity → ORM model (for creation)."""
        ...

    @abstractmethod
    def _apply(self, model: ModelT, entity: EntityT) -> None:
        """Copy the entity's mutable fields onto an existing ORM model."""
        ...

    async def get_by_id(self, entity_id: int) -> EntityT | None:
        if not _storable(entity_id):
            return None
        result = await self._session.get(self.model_class, entity_id)
        return self._to_entity(result) if result else None

    async def get_all(self, skip: int = 0, limit: int | None = None) -> list[EntityT]:
        stmt = select(self.model_class).order_by(self.model_class.id).offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def add(self, entity: EntityT) -> int:
        model = self._to_model(entity)
        self._session.add(model)
        await self._session.flush()
        entity.id = model.id
        return model.id

    async def update(self, entity: EntityT) -> int:
        if not _storable(entity.id):
            return 0
        model = await self._session.get(self.model_class, entity.id)
        if model is None:
            return 0
        self._apply(model, entity)
        await self._session.flush()
        return 1

    async def delete(self, entity_id: int) -> int:
        if not _storable(entity_id):
            return 0
        model = await self._session.get(self.model_class, entity_id)
        if model is None:
            return 0
        await self._session.delete(model)
        await self._session.flush()
        return 1
