"""Application service: the cashier's register session.

One POSSession owns one Cart for its whole lifetime. Every mutator follows
the same sequence: the Cart aggregate records an undo snapshot and applies
the change, then the session persists the resulting lines. If the save
fails the change is rolled back and PersistenceError is raised. Customer
details and undo history live only as long as the session.

Sessions are plain objects: create as many as needed (one per terminal,
one per test) and they will not share in-memory state.
"""

from __future__ import annotations

import logging

from pos.application.dto import CartDTO, CartLineDTO
from pos.domain.exceptions import PersistenceError, ValidationError
from pos.domain.model.cart import Cart, CartCheckpoint, CartLine, Customer
from pos.domain.model.order import Order, OrderStatus
from pos.domain.model.value_objects import Totals
from pos.domain.repository.cart_repository import CartRepository
from pos.domain.repository.order_repository import OrderRepository
from pos.domain.repository.product_repository import ProductRepository
from pos.domain.service.pricing_service import PricingService

logger = logging.getLogger(__name__)


class POSSession:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
        order_repo: OrderRepository,
        pricing: PricingService | None = None,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo
        self._order_repo = order_repo
        self._pricing = pricing or PricingService(product_repo)
        self._cart = Cart(lines=cart_repo.load())

    # --- State accessors ------------------------------------------------------

    @property
    def lines(self) -> tuple[CartLine, ...]:
        return self._cart.lines

    @property
    def customer(self) -> Customer:
        return self._cart.customer

    @property
    def history_depth(self) -> int:
        return len(self._cart.history)

    def set_customer(
        self,
        name: str | None = None,
        address: str | None = None,
        phone: str | None = None,
    ) -> Customer:
        """Update the billing details. Fields left as None keep their value.

        Typing into the customer form is not itself an undoable step; the
        details are captured by the snapshot of the next cart mutation.
        """
        current = self._cart.customer
        self._cart.customer = Customer.of(
            current.name if name is None else name,
            current.address if address is None else address,
            current.phone if phone is None else phone,
        )
        return self._cart.customer

    # --- Cart mutators --------------------------------------------------------

    def add_to_cart(self, product_id: str) -> CartLine:
        checkpoint = self._cart.checkpoint()
        line = self._cart.add(product_id)
        logger.debug("Added %s to cart (line %s, qty %d)", product_id, line.id, line.qty)
        self._persist(checkpoint)
        return line

    def set_qty(self, line_id: str, qty: object) -> CartLine | None:
        checkpoint = self._cart.checkpoint()
        line = self._cart.set_qty(line_id, qty)
        if line is not None:
            logger.debug("Line %s quantity set to %d", line_id, line.qty)
            self._persist(checkpoint)
        return line

    def remove_line(self, line_id: str) -> None:
        checkpoint = self._cart.checkpoint()
        self._cart.remove_line(line_id)
        self._persist(checkpoint)

    def clear_cart(self) -> None:
        checkpoint = self._cart.checkpoint()
        self._cart.clear()
        logger.debug("Cart cleared")
        self._persist(checkpoint)

    def undo(self) -> bool:
        checkpoint = self._cart.checkpoint()
        if not self._cart.undo():
            logger.debug("Nothing to undo")
            return False
        self._persist(checkpoint)
        return True

    # --- Derived values -------------------------------------------------------

    def compute_totals(self) -> Totals:
        return self._pricing.compute_totals(self._cart.lines)

    def materialize_order(self, status: OrderStatus) -> Order:
        """Build an order from the current cart without touching the cart."""
        return Order.materialize(
            items=self._pricing.price_lines(self._cart.lines),
            totals=self.compute_totals(),
            customer=self._cart.customer,
            status=status,
        )

    # --- Ledger ---------------------------------------------------------------

    def record_sale(self, order: Order) -> None:
        self._order_repo.append(order)

    def checkout(self) -> Order:
        """Record the cart as a PAID sale, then clear it.

        The clear is an ordinary undoable step: ``undo`` brings the cart
        back, but the ledger keeps the sale.
        """
        if self._cart.is_empty:
            raise ValidationError("Cart is empty")
        order = self.materialize_order(OrderStatus.PAID)
        self.record_sale(order)
        self.clear_cart()
        logger.info("Recorded sale %s for %s", order.id, order.total)
        return order

    # --- Presentation ---------------------------------------------------------

    def view(self) -> CartDTO:
        products = {p.id: p for p in self._product_repo.list_all()}
        lines: list[CartLineDTO] = []
        for line in self._cart.lines:
            product = products.get(line.product_id)
            if product is None:
                continue
            lines.append(
                CartLineDTO(
                    line_id=line.id,
                    product_id=product.id,
                    name=product.name,
                    quantity=line.qty,
                    unit_price=str(product.price),
                    line_total=str(product.price * line.qty),
                )
            )
        totals = self.compute_totals()
        customer = self._cart.customer
        return CartDTO(
            lines=lines,
            subtotal=str(totals.subtotal),
            tax=str(totals.tax),
            total=str(totals.total),
            customer_name=customer.name,
            customer_address=customer.address,
            customer_phone=customer.phone,
            can_undo=self._cart.can_undo,
        )

    # --- Internal helpers -----------------------------------------------------

    def _persist(self, checkpoint: CartCheckpoint) -> None:
        """Save the cart lines, reverting to *checkpoint* if the write fails."""
        try:
            self._cart_repo.save(self._cart.lines)
        except (OSError, ValueError, TypeError) as exc:
            self._cart.rollback(checkpoint)
            logger.exception("Could not save the cart; change reverted")
            raise PersistenceError("Could not save the cart; the change was not applied") from exc
