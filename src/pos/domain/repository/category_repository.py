"""Abstract repository for Category aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.catalog import Category


class CategoryRepository(ABC):

    @abstractmethod
    def get_by_id(self, category_id: str) -> Category | None:
        """Return a category by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Category]:
        """Return every category, in insertion order."""

    @abstractmethod
    def save(self, category: Category) -> None:
        """Replace the category with the same ID, or append a new one."""

    @abstractmethod
    def delete(self, category_id: str) -> None:
        """Remove a category. Unknown IDs are ignored."""

    @abstractmethod
    def replace_all(self, categories: list[Category]) -> None:
        """Overwrite the whole category list."""

    @abstractmethod
    def clear(self) -> None:
        """Forget the stored category list entirely."""
