"""Key-value-store implementation of the append-only sales ledger."""

from __future__ import annotations

from datetime import datetime

from pos.domain.model.cart import Customer
from pos.domain.model.order import Order, OrderItem, OrderStatus
from pos.domain.model.value_objects import Money, Totals
from pos.domain.repository.order_repository import OrderRepository
from pos.infrastructure.persistence.key_value_store import (
    SALES_KEY,
    KeyValueStore,
    read_records,
)


class JsonOrderRepository(OrderRepository):

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    # --- OrderRepository interface --------------------------------------------

    def list_all(self) -> list[Order]:
        return read_records(self._store, SALES_KEY, self._to_domain)

    def append(self, order: Order) -> None:
        raw = self._store.read(SALES_KEY, [])
        if not isinstance(raw, list):
            raw = []
        raw.append(self._to_raw(order))
        self._store.write(SALES_KEY, raw)

    def clear(self) -> None:
        self._store.remove(SALES_KEY)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "createdAt": order.created_at.isoformat(),
            "items": [
                {
                    "productId": item.product_id,
                    "name": item.name,
                    "price": str(item.price.amount),
                    "qty": item.qty,
                }
                for item in order.items
            ],
            "totals": {
                "subtotal": str(order.totals.subtotal.amount),
                "tax": str(order.totals.tax.amount),
                "total": str(order.totals.total.amount),
            },
            "status": order.status.value,
            "customer": {
                "name": order.customer.name,
                "address": order.customer.address,
                "phone": order.customer.phone,
            },
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = tuple(
            OrderItem(
                product_id=i["productId"],
                name=i.get("name") or "",
                price=Money.of(i.get("price", 0)),
                qty=int(i["qty"]),
            )
            for i in raw.get("items", [])
        )
        totals = raw["totals"]
        customer = raw.get("customer") or {}
        return Order(
            id=raw["id"],
            items=items,
            totals=Totals(
                subtotal=Money.of(totals["subtotal"]),
                tax=Money.of(totals.get("tax", 0)),
                total=Money.of(totals["total"]),
            ),
            status=OrderStatus(raw["status"]),
            customer=Customer.of(
                customer.get("name"), customer.get("address"), customer.get("phone")
            ),
            created_at=datetime.fromisoformat(raw["createdAt"].replace("Z", "+00:00")),
        )
