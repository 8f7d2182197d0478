"""Cart aggregate — the draft order being rung up at the counter.

The Cart owns its line items, the customer details typed alongside them,
and a bounded undo history. Lines and customers are immutable values, so a
history snapshot is just a reference to the tuple that was current before
a mutation; nothing is ever copied or mutated in place.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field, replace

from pos.domain.model.value_objects import Quantity, new_id

logger = logging.getLogger(__name__)

MAX_HISTORY = 50


@dataclass(frozen=True)
class CartLine:
    """One product on the draft order.

    ``id`` identifies the line itself and is distinct from ``product_id``.
    """

    id: str
    product_id: str
    quantity: Quantity

    @property
    def qty(self) -> int:
        return self.quantity.value


@dataclass(frozen=True)
class Customer:
    """Billing details entered at the counter. Every field may be blank."""

    name: str = ""
    address: str = ""
    phone: str = ""

    @staticmethod
    def of(name: str | None = "", address: str | None = "", phone: str | None = "") -> Customer:
        return Customer(
            name=(name or "").strip(),
            address=(address or "").strip(),
            phone=(phone or "").strip(),
        )


@dataclass(frozen=True)
class HistorySnapshot:
    """Cart lines and customer as they were before one mutation."""

    lines: tuple[CartLine, ...]
    customer: Customer


@dataclass(frozen=True)
class CartCheckpoint:
    state: HistorySnapshot
    history: tuple[HistorySnapshot, ...]


@dataclass
class Cart:
    """Aggregate root for the draft order.

    Invariants:
    - at most one line per product
    - every line holds a quantity >= 1
    - every mutation except ``undo`` pushes exactly one snapshot; the
      history keeps the newest ``MAX_HISTORY`` snapshots and drops the
      oldest on overflow
    """

    lines: tuple[CartLine, ...] = ()
    customer: Customer = field(default_factory=Customer)
    history: deque[HistorySnapshot] = field(
        default_factory=lambda: deque(maxlen=MAX_HISTORY), repr=False, compare=False
    )

    # --- Mutations (each one is undoable) -------------------------------------

    def add(self, product_id: str) -> CartLine:
        """Add one unit of *product_id*, merging into its existing line."""
        self._push_history()
        existing = self.line_for_product(product_id)
        if existing is not None:
            line = replace(existing, quantity=existing.quantity.increment())
            self._replace_line(line)
        else:
            line = CartLine(id=new_id(), product_id=product_id, quantity=Quantity(1))
            self.lines = self.lines + (line,)
        return line

    def set_qty(self, line_id: str, raw_qty: object) -> CartLine | None:
        """Set a line's quantity; anything below 1 (or unparseable) becomes 1."""
        self._push_history()
        existing = self.find_line(line_id)
        if existing is None:
            logger.debug("set_qty: no cart line %s", line_id)
            return None
        line = replace(existing, quantity=Quantity.clamped(raw_qty))
        self._replace_line(line)
        return line

    def remove_line(self, line_id: str) -> None:
        self._push_history()
        if self.find_line(line_id) is None:
            logger.debug("remove_line: no cart line %s", line_id)
            return
        self.lines = tuple(line for line in self.lines if line.id != line_id)

    def clear(self) -> None:
        """Empty the cart and blank the customer details."""
        self._push_history()
        self.lines = ()
        self.customer = Customer()

    # --- Undo -----------------------------------------------------------------

    def undo(self) -> bool:
        """Restore the state before the most recent mutation.

        Returns False when there is nothing to undo. Undo itself is not
        recorded, so it cannot be undone.
        """
        if not self.history:
            return False
        snapshot = self.history.pop()
        self.lines = snapshot.lines
        self.customer = snapshot.customer
        return True

    @property
    def can_undo(self) -> bool:
        return bool(self.history)

    # --- Checkpoints ----------------------------------------------------------

    def checkpoint(self) -> CartCheckpoint:
        """Capture lines, customer and history so a failed save can be reverted."""
        return CartCheckpoint(
            state=HistorySnapshot(lines=self.lines, customer=self.customer),
            history=tuple(self.history),
        )

    def rollback(self, checkpoint: CartCheckpoint) -> None:
        """Return to *checkpoint*, dropping any snapshot pushed since."""
        self.lines = checkpoint.state.lines
        self.customer = checkpoint.state.customer
        self.history.clear()
        self.history.extend(checkpoint.history)

    # --- Queries --------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def find_line(self, line_id: str) -> CartLine | None:
        for line in self.lines:
            if line.id == line_id:
                return line
        return None

    def line_for_product(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    # --- Internal helpers -----------------------------------------------------

    def _push_history(self) -> None:
        self.history.append(HistorySnapshot(lines=self.lines, customer=self.customer))

    def _replace_line(self, updated: CartLine) -> None:
        self.lines = tuple(updated if line.id == updated.id else line for line in self.lines)
