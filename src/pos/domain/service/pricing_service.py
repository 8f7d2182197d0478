"""Domain service: Pricing.

Resolves cart lines against the catalog to compute totals and to build the
price-locked items of an order. It lives in the domain layer because it
spans two aggregates (Cart and Product) without belonging to either.

Lines whose product has been deleted from the catalog are tolerated: they
contribute nothing to the subtotal and never raise.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable

from pos.domain.model.cart import CartLine
from pos.domain.model.catalog import Product
from pos.domain.model.order import OrderItem
from pos.domain.model.value_objects import Money, Totals
from pos.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

# Flat rate applied to the subtotal. Kept at zero; ``tax`` stays a separate
# field on Totals so a non-zero rate needs no format change.
TAX_RATE = Decimal("0")


class PricingService:

    def __init__(self, product_repo: ProductRepository, tax_rate: Decimal = TAX_RATE) -> None:
        self._product_repo = product_repo
        self._tax_rate = tax_rate

    def compute_totals(self, lines: Iterable[CartLine]) -> Totals:
        """Sum current prices times quantities.

        Deterministic and side-effect free; the order of *lines* does not
        matter.
        """
        products = self._products_by_id()
        subtotal = Money.zero()
        for line in lines:
            product = products.get(line.product_id)
            if product is None:
                continue
            subtotal = subtotal + product.price * line.qty
        return Totals.from_subtotal(subtotal, self._tax_rate)

    def price_lines(self, lines: Iterable[CartLine]) -> list[OrderItem]:
        """Snapshot each line at the product's *current* name and price.

        An orphaned line keeps its product id and quantity but carries an
        empty name and a zero price.
        """
        products = self._products_by_id()
        items: list[OrderItem] = []
        for line in lines:
            product = products.get(line.product_id)
            if product is None:
                logger.warning(
                    "Cart line %s references missing product %s", line.id, line.product_id
                )
                items.append(
                    OrderItem(product_id=line.product_id, name="", price=Money.zero(), qty=line.qty)
                )
                continue
            items.append(
                OrderItem(
                    product_id=product.id,
                    name=product.name,
                    price=product.price,  # <-- price snapshot
                    qty=line.qty,
                )
            )
        return items

    def _products_by_id(self) -> dict[str, Product]:
        return {p.id: p for p in self._product_repo.list_all()}
