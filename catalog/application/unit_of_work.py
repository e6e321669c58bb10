"""Unit of work — a single handle bundling every repository a use case needs."""

from catalog.application.interfaces import ProductRepository


class UnitOfWork:
    """Aggregates the per-entity repositories behind one injected dependency.

    Repositories are built by the caller and handed in; the unit of work only
    exposes them. Commit and rollback belong to the session that backs the
    repositories, not to this object.
    """

    def __init__(self, products: ProductRepository):
        self._products = products

    @property
    def products(self) -> ProductRepository:
        return self._products
