"""Unit tests for the ProductService."""

import pytest

from catalog.application.interfaces import ProductRepository
from catalog.application.schemas import ProductCreate, ProductUpdate
from catalog.application.services import ProductService
from catalog.application.unit_of_work import UnitOfWork
from catalog.domain.entities import Product
from catalog.domain.exceptions import DuplicateEntityError, EntityNotFoundError


class FakeProductRepository(ProductRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._products: dict[int, Product] = {}
        self._next_id = 1

    async def get_by_id(self, product_id: int) -> Product | None:
        return self._products.get(product_id)

    async def get_all(self, skip: int = 0, limit: int | None = None) -> list[Product]:
        products = [self._products[k] for k in sorted(self._products)]
        end = None if limit is None else skip + limit
        return products[skip:end]

    async def add(self, product: Product) -> int:
        product.id = self._next_id
        self._next_id += 1
        self._products[product.id] = product
        return product.id

    async def update(self, product: Product) -> int:
        if product.id not in self._products:
            return 0
        self._products[product.id] = product
        return 1

    async def delete(self, product_id: int) -> int:
        if product_id in self._products:
            del self._products[product_id]
            return 1
        return 0

    async def get_by_barcode(self, barcode: str) -> Product | None:
        for product in self._products.values():
            if product.barcode == barcode:
                return product
        return None


class VanishingProductRepository(FakeProductRepository):
    """Simulates a row deleted by another request between read and write."""

    async def update(self, product: Product) -> int:
        return 0


def _widget(**overrides) -> ProductCreate:
    data = {"name": "Widget", "barcode": "W-001", "rate": 9.99}
    data.update(overrides)
    return ProductCreate(**data)


@pytest.fixture
def service() -> ProductService:
    return ProductService(UnitOfWork(products=FakeProductRepository()))


@pytest.mark.asyncio
async def test_create_product(service: ProductService):
    product = await service.create_product(_widget())
    assert product.id == 1
    assert product.name == "Widget"
    assert product.rate == 9.99
    assert product.description == ""


@pytest.mark.asyncio
async def test_create_product_duplicate_barcode(service: ProductService):
    await service.create_product(_widget())
    with pytest.raises(DuplicateEntityError):
        await service.create_product(_widget(name="Other"))


@pytest.mark.asyncio
async def test_get_product(service: ProductService):
    created = await service.create_product(_widget())
    fetched = await service.get_product(created.id)
    assert fetched == created


@pytest.mark.asyncio
async def test_get_product_not_found(service: ProductService):
    with pytest.raises(EntityNotFoundError):
        await service.get_product(999)


@pytest.mark.asyncio
async def test_list_products_empty(service: ProductService):
    assert await service.list_products() == []


@pytest.mark.asyncio
async def test_list_products(service: ProductService):
    await service.create_product(_widget(barcode="A"))
    await service.create_product(_widget(barcode="B"))
    await service.create_product(_widget(barcode="C"))
    assert len(await service.list_products()) == 3
    page = await service.list_products(skip=1, limit=1)
    assert [p.barcode for p in page] == ["B"]


@pytest.mark.asyncio
async def test_update_product(service: ProductService):
    created = await service.create_product(_widget())
    before = created.updated_at
    updated = await service.update_product(created.id, ProductUpdate(rate=12.5))
    assert updated.rate == 12.5
    assert updated.name == "Widget"
    assert updated.updated_at >= before


@pytest.mark.asyncio
async def test_update_product_not_found(service: ProductService):
    with pytest.raises(EntityNotFoundError):
        await service.update_product(42, ProductUpdate(name="Nope"))


@pytest.mark.asyncio
async def test_update_product_barcode_taken(service: ProductService):
    await service.create_product(_widget(barcode="A"))
    second = await service.create_product(_widget(barcode="B"))
    with pytest.raises(DuplicateEntityError):
        await service.update_product(second.id, ProductUpdate(barcode="A"))


@pytest.mark.asyncio
async def test_update_product_keeps_own_barcode(service: ProductService):
    created = await service.create_product(_widget(barcode="A"))
    updated = await service.update_product(created.id, ProductUpdate(barcode="A", name="Renamed"))
    assert updated.name == "Renamed"


@pytest.mark.asyncio
async def test_update_product_vanished_during_write():
    repository = VanishingProductRepository()
    service = ProductService(UnitOfWork(products=repository))
    created = await service.create_product(_widget())
    with pytest.raises(EntityNotFoundError):
        await service.update_product(created.id, ProductUpdate(name="Late"))


@pytest.mark.asyncio
async def test_delete_product(service: ProductService):
    created = await service.create_product(_widget())
    await service.delete_product(created.id)
    with pytest.raises(EntityNotFoundError):
        await service.get_product(created.id)


@pytest.mark.asyncio
async def test_delete_product_not_found(service: ProductService):
    with pytest.raises(EntityNotFoundError):
        await service.delete_product(7)
