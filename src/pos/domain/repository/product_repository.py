"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.catalog import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in insertion order."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Replace the product with the same ID, or append a new one."""

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove a product. Unknown IDs are ignored."""

    @abstractmethod
    def replace_all(self, products: list[Product]) -> None:
        """Overwrite the whole product list."""

    @abstractmethod
    def clear(self) -> None:
        """Forget the stored product list entirely."""
