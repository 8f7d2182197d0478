"""Application service: Save Product use case (create or replace)."""

from __future__ import annotations

from pos.domain.model.catalog import Product
from pos.domain.model.value_objects import Money, new_id
from pos.domain.repository.product_repository import ProductRepository


class SaveProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        category_id: str,
        price: str | None,
        image: str = "",
        product_id: str | None = None,
    ) -> Product:
        """Replace the product with *product_id*, or add a new one.

        The whole record is replaced; fields not passed are reset to their
        defaults. ``category_id`` is stored as given, even if no such
        category exists. A negative or non-numeric price raises
        ValidationError.
        """
        product = Product(
            id=product_id or new_id(),
            name=(name or "").strip(),
            category_id=category_id,
            price=Money.of(price or 0),
            image=(image or "").strip(),
        )
        self._product_repo.save(product)
        return product
