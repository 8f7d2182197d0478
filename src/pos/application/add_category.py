"""Application service: Add Category use case."""

from __future__ import annotations

import logging

from pos.domain.model.catalog import Category
from pos.domain.model.value_objects import new_id
from pos.domain.repository.category_repository import CategoryRepository

logger = logging.getLogger(__name__)


class AddCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, name: str) -> Category | None:
        """Append a new category.

        A blank name is ignored (returns None) rather than rejected, the
        same way an empty form submit does nothing.
        """
        name = (name or "").strip()
        if not name:
            logger.debug("Ignoring blank category name")
            return None

        category = Category(id=new_id(), name=name)
        self._category_repo.save(category)
        return category
