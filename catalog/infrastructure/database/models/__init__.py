from .product import ProductModel

__all__ = [
    "ProductModel",
]
