"""Application service: Browse Catalog use case (read-only query).

Backs the customer-facing catalog and the cashier's product list.
"""

from __future__ import annotations

from pos.application.dto import CatalogDTO, CategoryCountDTO, ProductDTO
from pos.domain.repository.category_repository import CategoryRepository
from pos.domain.repository.product_repository import ProductRepository


class BrowseCatalogHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo

    def handle(
        self,
        category_id: str | None = None,
        search: str | None = None,
    ) -> CatalogDTO:
        """List products, optionally narrowed down.

        A non-blank *search* matches product names case-insensitively and
        takes precedence over *category_id*, as typing in the search box
        does in the catalog view.
        """
        products = self._product_repo.list_all()
        categories = self._category_repo.list_all()
        names = {c.id: c.name for c in categories}

        counts = [
            CategoryCountDTO(
                id=c.id,
                name=c.name,
                product_count=sum(1 for p in products if p.category_id == c.id),
            )
            for c in categories
        ]

        query = (search or "").strip().lower()
        if query:
            shown = [p for p in products if query in p.name.lower()]
        elif category_id:
            shown = [p for p in products if p.category_id == category_id]
        else:
            shown = products

        return CatalogDTO(
            categories=counts,
            total_products=len(products),
            products=[
                ProductDTO(
                    id=p.id,
                    name=p.name,
                    category_id=p.category_id,
                    category_name=names.get(p.category_id, "-"),
                    price=str(p.price),
                    image=p.image,
                )
                for p in shown
            ],
        )
