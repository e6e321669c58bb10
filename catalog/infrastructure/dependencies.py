"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.application.services import ProductService
from catalog.application.unit_of_work import UnitOfWork
from catalog.infrastructure.database.session import get_db_session
from catalog.infrastructure.database.repositories import SQLAlchemyProductRepository


async def get_unit_of_work(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[UnitOfWork, None]:
    """Provides a UnitOfWork whose repositories share the request session."""
    yield UnitOfWork(products=SQLAlchemyProductRepository(session))


async def get_product_service(
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> AsyncGenerator[ProductService, None]:
    """Provides a ProductService instance with its unit of work wired up."""
    yield ProductService(uow)
