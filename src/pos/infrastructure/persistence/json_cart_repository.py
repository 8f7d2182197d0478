"""Key-value-store implementation of CartRepository."""

from __future__ import annotations

from pos.domain.model.cart import CartLine
from pos.domain.model.value_objects import Quantity
from pos.domain.repository.cart_repository import CartRepository
from pos.infrastructure.persistence.key_value_store import (
    CART_KEY,
    KeyValueStore,
    read_records,
)


class JsonCartRepository(CartRepository):

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def load(self) -> tuple[CartLine, ...]:
        return tuple(read_records(self._store, CART_KEY, self._to_domain))

    def save(self, lines: tuple[CartLine, ...]) -> None:
        self._store.write(
            CART_KEY,
            [
                {"id": line.id, "productId": line.product_id, "qty": line.qty}
                for line in lines
            ],
        )

    def clear(self) -> None:
        self._store.remove(CART_KEY)

    @staticmethod
    def _to_domain(raw: dict) -> CartLine:
        return CartLine(
            id=raw["id"],
            product_id=raw["productId"],
            quantity=Quantity.clamped(raw.get("qty")),
        )
