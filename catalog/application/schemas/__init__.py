from .product import ProductCreate, ProductUpdate, ProductResponse

__all__ = [
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
]
