"""Catalog aggregates: Category and Product.

Products reference their category by id only. Products live independently
of carts and orders: prices change, products come and go, and anything that
points at a product must cope with it having disappeared.
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.model.value_objects import Money


@dataclass
class Category:
    """A named product group.

    ``id`` never changes once assigned; ``name`` is unique among categories,
    compared case-insensitively (enforced by the catalog handlers, which can
    see every category).
    """

    id: str
    name: str

    def has_name(self, name: str) -> bool:
        return self.name.strip().lower() == name.strip().lower()


@dataclass
class Product:
    """A product in the catalog.

    Saved wholesale: an edit replaces every field at once, so there are no
    per-field mutators here.
    """

    id: str
    name: str
    category_id: str
    price: Money
    image: str = ""
