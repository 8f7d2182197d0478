"""Key-value-store implementation of CategoryRepository."""

from __future__ import annotations

from pos.domain.model.catalog import Category
from pos.domain.repository.category_repository import CategoryRepository
from pos.infrastructure.persistence.key_value_store import (
    CATEGORIES_KEY,
    KeyValueStore,
    read_records,
)


class JsonCategoryRepository(CategoryRepository):

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    # --- CategoryRepository interface -----------------------------------------

    def get_by_id(self, category_id: str) -> Category | None:
        for category in self.list_all():
            if category.id == category_id:
                return category
        return None

    def list_all(self) -> list[Category]:
        return read_records(self._store, CATEGORIES_KEY, self._to_domain)

    def save(self, category: Category) -> None:
        categories = self.list_all()
        for i, existing in enumerate(categories):
            if existing.id == category.id:
                categories[i] = category
                break
        else:
            categories.append(category)
        self.replace_all(categories)

    def delete(self, category_id: str) -> None:
        self.replace_all([c for c in self.list_all() if c.id != category_id])

    def replace_all(self, categories: list[Category]) -> None:
        self._store.write(
            CATEGORIES_KEY, [{"id": c.id, "name": c.name} for c in categories]
        )

    def clear(self) -> None:
        self._store.remove(CATEGORIES_KEY)

    @staticmethod
    def _to_domain(raw: dict) -> Category:
        return Category(id=raw["id"], name=raw["name"])
