"""Concrete repository implementation for Product backed by SQLAlchemy."""

from datetime import datetime, timezone

from sqlalchemy import select

from catalog.application.interfaces import ProductRepository
from catalog.domain.entities import Product
from catalog.infrastructure.database.models import ProductModel
from catalog.infrastructure.database.repositories.sqlalchemy_repository import SQLAlchemyRepository


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo; stored values are always UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLAlchemyProductRepository(SQLAlchemyRepository[Product, ProductModel], ProductRepository):
    """Implements the ProductRepository port using SQLAlchemy async sessions."""

    model_class = ProductModel

    def _to_entity(self, model: ProductModel) -> Product:
        return Product(
            id=model.id,
            name=model.name,
            description=model.description,
            barcode=model.barcode,
            rate=model.rate,
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )

    def _to_model(self, entity: Product) -> ProductModel:
        return ProductModel(
            name=entity.name,
            description=entity.description,
            barcode=entity.barcode,
            rate=entity.rate,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def _apply(self, model: ProductModel, entity: Product) -> None:
        model.name = entity.name
        model.description = entity.description
        model.barcode = entity.barcode
        model.rate = entity.rate
        model.updated_at = entity.updated_at

    async def get_by_barcode(self, barcode: str) -> Product | None:
        stmt = select(ProductModel).where(ProductModel.barcode == barcode)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None
