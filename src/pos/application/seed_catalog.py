"""Application service: Seed Catalog use case.

Fills an empty store with the demo CCTV shop catalog so the register is
usable on first run.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from pos.domain.model.catalog import Category, Product
from pos.domain.model.value_objects import Money, new_id
from pos.domain.repository.cart_repository import CartRepository
from pos.domain.repository.category_repository import CategoryRepository
from pos.domain.repository.order_repository import OrderRepository
from pos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

DEMO_CATEGORIES = [
    ("cat-cctv", "CCTV Cameras"),
    ("cat-dvr", "DVR"),
    ("cat-monitors", "Monitors"),
    ("cat-hdmi", "HDMI Cables"),
    ("cat-connectors", "Connectors"),
]

# (name, category id, price, image)
DEMO_PRODUCTS = [
    ("Dome Camera 2MP", "cat-cctv", "1499.00",
     "https://images.unsplash.com/photo-1587476482538-517f6a60f1f0?q=80&w=600"),
    ("Bullet Camera 5MP", "cat-cctv", "2499.00",
     "https://images.unsplash.com/photo-1564257631407-0e3ca97b7d2a?q=80&w=600"),
    ("DVR 4-Channel", "cat-dvr", "3999.00",
     "https://images.unsplash.com/photo-1517336714731-489689fd1ca8?q=80&w=600"),
    ("DVR 8-Channel", "cat-dvr", "5499.00",
     "https://images.unsplash.com/photo-1518779578993-ec3579fee39f?q=80&w=600"),
    ('LED Monitor 22"', "cat-monitors", "7999.00",
     "https://images.unsplash.com/photo-1517336714731-489689fd1ca8?q=80&w=600"),
    ("HDMI Cable 2m", "cat-hdmi", "299.00",
     "https://images.unsplash.com/photo-1596991924191-53debd31a8a8?q=80&w=600"),
    ("BNC Connector", "cat-connectors", "49.00",
     "https://images.unsplash.com/photo-1563986768711-b3bde3dc821e?q=80&w=600"),
]


class SeedCatalogHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        cart_repo: CartRepository,
        order_repo: OrderRepository,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo
        self._cart_repo = cart_repo
        self._order_repo = order_repo

    def seed_if_empty(self) -> bool:
        """Write the demo data unless both products and categories exist.

        Seeding also empties the cart and the sales ledger. Returns True if
        anything was written.
        """
        if self._product_repo.list_all() and self._category_repo.list_all():
            return False

        self._category_repo.replace_all(
            [Category(id=cid, name=name) for cid, name in DEMO_CATEGORIES]
        )
        self._product_repo.replace_all(
            [
                Product(
                    id=new_id(),
                    name=name,
                    category_id=cid,
                    price=Money(Decimal(price)),
                    image=image,
                )
                for name, cid, price, image in DEMO_PRODUCTS
            ]
        )
        self._cart_repo.save(())
        self._order_repo.clear()
        logger.info(
            "Seeded %d categories and %d products",
            len(DEMO_CATEGORIES),
            len(DEMO_PRODUCTS),
        )
        return True

    def reset(self) -> None:
        """Drop all stored data, then seed from scratch."""
        self._product_repo.clear()
        self._category_repo.clear()
        self._cart_repo.clear()
        self._order_repo.clear()
        self.seed_if_empty()
