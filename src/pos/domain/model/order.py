"""Order — an immutable record derived from the cart at a point in time.

Orders copy every product name and price they mention, so later catalog
edits never change what an invoice or the sales ledger says.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from pos.domain.model.cart import Customer
from pos.domain.model.value_objects import Money, Totals, new_id

ORDER_ID_PREFIX = "ORD-"


class OrderStatus(Enum):
    DRAFT = "DRAFT"  # printed preview, never recorded by checkout
    PAID = "PAID"


@dataclass(frozen=True)
class OrderItem:
    """Captures the product name and price at order time."""

    product_id: str
    name: str
    price: Money  # locked at materialization time
    qty: int

    @property
    def line_total(self) -> Money:
        return self.price * self.qty


@dataclass(frozen=True)
class Order:
    """A finalized (PAID) or preview (DRAFT) order.

    Use ``Order.materialize()`` for new orders; the plain constructor exists
    so the repository can reconstitute persisted orders verbatim.
    """

    id: str
    items: tuple[OrderItem, ...]
    totals: Totals
    status: OrderStatus
    customer: Customer = field(default_factory=Customer)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def materialize(
        items: list[OrderItem],
        totals: Totals,
        customer: Customer,
        status: OrderStatus,
        now: datetime | None = None,
    ) -> Order:
        return Order(
            id=ORDER_ID_PREFIX + new_id().upper(),
            items=tuple(items),
            totals=totals,
            status=status,
            customer=customer,
            created_at=now or datetime.now(timezone.utc),
        )

    @property
    def total(self) -> Money:
        return self.totals.total

    def created_in(self, prefix: str) -> bool:
        """True if the ISO-8601 creation timestamp starts with *prefix*."""
        return self.created_at.isoformat().startswith(prefix)
