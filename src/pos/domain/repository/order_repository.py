"""Abstract repository for the sales ledger.

The ledger is append-only: orders are never updated or deleted.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every recorded order, oldest first."""

    @abstractmethod
    def append(self, order: Order) -> None:
        """Record an order at the end of the ledger."""

    @abstractmethod
    def clear(self) -> None:
        """Forget the stored ledger entirely (used only by a catalog reset)."""
