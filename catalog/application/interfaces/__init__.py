from .repository import Repository
from .product_repository import ProductRepository

__all__ = [
    "Repository",
    "ProductRepository",
]
