"""Application service (use case) for Product operations."""

import logging

from catalog.application.schemas import ProductCreate, ProductUpdate
from catalog.application.unit_of_work import UnitOfWork
from catalog.domain.entities import Product
from catalog.domain.exceptions import DuplicateEntityError, EntityNotFoundError

logger = logging.getLogger(__name__)


class ProductService:
    """Orchestrates product business logic. Depends on the unit of work (DI)."""

    def __init__(self, uow: UnitOfWork):
        self._uow = uow

    async def get_product(self, product_id: int) -> Product:
        product = await self._uow.products.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)
        return product

    async def list_products(self, skip: int = 0, limit: int | None = None) -> list[Product]:
        return await self._uow.products.get_all(skip=skip, limit=limit)

    async def create_product(self, data: ProductCreate) -> Product:
        await self._ensure_barcode_free(data.barcode)
        product = Product(
            name=data.name,
            description=data.description,
            barcode=data.barcode,
            rate=data.rate,
        )
        product_id = await self._uow.products.add(product)
        logger.info("Created product %d (barcode=%s)", product_id, product.barcode)
        return product

    async def update_product(self, product_id: int, data: ProductUpdate) -> Product:
        product = await self.get_product(product_id)
        if data.barcode is not None and data.barcode != product.barcode:
            await self._ensure_barcode_free(data.barcode)

        product.update(
            name=data.name,
            description=data.description,
            barcode=data.barcode,
            rate=data.rate,
        )
        if await self._uow.products.update(product) == 0:
            raise EntityNotFoundError("Product", product_id)
        logger.info("Updated product %d", product_id)
        return product

    async def delete_product(self, product_id: int) -> None:
        if await self._uow.products.delete(product_id) == 0:
            raise EntityNotFoundError("Product", product_id)
        logger.info("Deleted product %d", product_id)

    async def _ensure_barcode_free(self, barcode: str) -> None:
        if await self._uow.products.get_by_barcode(barcode) is not None:
            raise DuplicateEntityError("Product", "barcode", barcode)
