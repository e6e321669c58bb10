from .sqlalchemy_repository import SQLAlchemyRepository
from .product_repository import SQLAlchemyProductRepository

__all__ = [
    "SQLAlchemyRepository",
    "SQLAlchemyProductRepository",
]
