"""Application service: Delete Category use case.

A category can only go once nothing in the catalog points at it;
products are never deleted or moved implicitly.
"""

from __future__ import annotations

from pos.domain.exceptions import ValidationError
from pos.domain.repository.category_repository import CategoryRepository
from pos.domain.repository.product_repository import ProductRepository


class DeleteCategoryHandler:

    def __init__(
        self,
        category_repo: CategoryRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._category_repo = category_repo
        self._product_repo = product_repo

    def handle(self, category_id: str) -> None:
        in_use = [p for p in self._product_repo.list_all() if p.category_id == category_id]
        if in_use:
            raise ValidationError(
                f"Remove or move products in this category first "
                f"({len(in_use)} product(s) still use it)"
            )
        self._category_repo.delete(category_id)
