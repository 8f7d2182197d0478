"""Application service: Rename Category use case."""

from __future__ import annotations

import logging

from pos.domain.exceptions import ValidationError
from pos.domain.model.catalog import Category
from pos.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class RenameCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, category_id: str, new_name: str) -> Category | None:
        """Rename a category in place; its id never changes.

        Raises ValidationError for a blank name or one already used by
        another category (case-insensitive). Unknown ids are ignored.
        """
        new_name = (new_name or "").strip()
        if not new_name:
            raise ValidationError("Category name cannot be empty")

        categories = self._category_repo.list_all()
        if any(c.id != category_id and c.has_name(new_name) for c in categories):
            raise ValidationError("A category with this name already exists")

        category = self._category_repo.get_by_id(category_id)
        if category is None:
            logger.debug("rename: no category %s", category_id)
            return None

        category.name = new_name
        self._category_repo.save(category)
        return category
