"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import abstractmethod

from catalog.application.interfaces.repository import Repository
from catalog.domain.entities import Product


class ProductRepository(Repository[Product]):
    """Port for product persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_barcode(self, barcode: str) -> Product | None:
        """Retrieve a product by its barcode."""
        ...
