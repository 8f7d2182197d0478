"""Abstract repository for the persisted cart lines.

Only the lines survive a restart; customer details and undo history are
session state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.cart import CartLine


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> tuple[CartLine, ...]:
        """Return the stored cart lines (empty if none)."""

    @abstractmethod
    def save(self, lines: tuple[CartLine, ...]) -> None:
        """Overwrite the stored cart lines."""

    @abstractmethod
    def clear(self) -> None:
        """Forget the stored cart entirely."""
