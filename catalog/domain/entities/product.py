"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Product:
    """Core domain entity representing a catalog product."""

    name: str
    barcode: str
    rate: float
    description: str = ""
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(
        self,
        name: str | None = None,
        description: str | None = None,
        barcode: str | None = None,
        rate: float | None = None,
    ) -> None:
        """Update product fields and refresh the updated_at timestamp."""
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if barcode is not None:
            self.barcode = barcode
        if rate is not None:
            self.rate = rate
        self.updated_at = datetime.now(timezone.utc)
