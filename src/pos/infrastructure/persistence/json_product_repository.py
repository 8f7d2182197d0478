"""Key-value-store implementation of ProductRepository."""

from __future__ import annotations

from pos.domain.model.catalog import Product
from pos.domain.model.value_objects import Money
from pos.domain.repository.product_repository import ProductRepository
from pos.infrastructure.persistence.key_value_store import (
    PRODUCTS_KEY,
    KeyValueStore,
    read_records,
)


class JsonProductRepository(ProductRepository):

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for product in self.list_all():
            if product.id == product_id:
                return product
        return None

    def list_all(self) -> list[Product]:
        return read_records(self._store, PRODUCTS_KEY, self._to_domain)

    def save(self, product: Product) -> None:
        products = self.list_all()
        for i, existing in enumerate(products):
            if existing.id == product.id:
                products[i] = product
                break
        else:
            products.append(product)
        self.replace_all(products)

    def delete(self, product_id: str) -> None:
        self.replace_all([p for p in self.list_all() if p.id != product_id])

    def replace_all(self, products: list[Product]) -> None:
        self._store.write(PRODUCTS_KEY, [self._to_raw(p) for p in products])

    def clear(self) -> None:
        self._store.remove(PRODUCTS_KEY)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "categoryId": product.category_id,
            "price": str(product.price.amount),
            "image": product.image,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            category_id=raw.get("categoryId", ""),
            price=Money.of(raw.get("price", 0)),
            image=raw.get("image") or "",
        )
