"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from pos.application.pos_session import POSSession
from pos.infrastructure.persistence.json_cart_repository import JsonCartRepository
from pos.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from pos.infrastructure.persistence.json_order_repository import JsonOrderRepository
from pos.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from pos.infrastructure.persistence.key_value_store import JsonFileStore

DATA_DIR_ENV = "POS_DATA_DIR"
DEFAULT_DATA_DIR = Path("data")


def default_data_dir() -> Path:
    return Path(os.environ.get(DATA_DIR_ENV) or DEFAULT_DATA_DIR)


@dataclass
class Container:
    """Repositories sharing one key-value store."""

    store: JsonFileStore

    def product_repository(self) -> JsonProductRepository:
        return JsonProductRepository(self.store)

    def category_repository(self) -> JsonCategoryRepository:
        return JsonCategoryRepository(self.store)

    def cart_repository(self) -> JsonCartRepository:
        return JsonCartRepository(self.store)

    def order_repository(self) -> JsonOrderRepository:
        return JsonOrderRepository(self.store)

    def session(self) -> POSSession:
        return POSSession(
            cart_repo=self.cart_repository(),
            product_repo=self.product_repository(),
            order_repo=self.order_repository(),
        )


def build_container(data_dir: Path | None = None) -> Container:
    return Container(store=JsonFileStore(data_dir or default_data_dir()))
