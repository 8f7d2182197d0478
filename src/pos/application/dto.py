"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world. Amounts are preformatted
strings (e.g. ``"₹ 1499.00"``).
"""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.model.order import Order


@dataclass(frozen=True)
class CartLineDTO:
    line_id: str
    product_id: str
    name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the draft order as the cashier sees it.

    Lines whose product no longer exists are left out.
    """

    lines: list[CartLineDTO]
    subtotal: str
    tax: str
    total: str
    customer_name: str
    customer_address: str
    customer_phone: str
    can_undo: bool


@dataclass(frozen=True)
class OrderItemDTO:
    name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order as printed on an invoice or listed in a report."""

    id: str
    status: str
    created_at: str
    customer_name: str
    customer_address: str
    customer_phone: str
    items: list[OrderItemDTO]
    subtotal: str
    tax: str
    total: str

    @staticmethod
    def from_order(order: Order) -> OrderDTO:
        return OrderDTO(
            id=order.id,
            status=order.status.value,
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
            customer_name=order.customer.name,
            customer_address=order.customer.address,
            customer_phone=order.customer.phone,
            items=[
                OrderItemDTO(
                    name=item.name,
                    quantity=item.qty,
                    unit_price=str(item.price),
                    line_total=str(item.line_total),
                )
                for item in order.items
            ],
            subtotal=str(order.totals.subtotal),
            tax=str(order.totals.tax),
            total=str(order.totals.total),
        )


@dataclass(frozen=True)
class SalesReportDTO:
    month: str  # "" means every month
    orders: list[OrderDTO]
    total: str


@dataclass(frozen=True)
class CategoryCountDTO:
    id: str
    name: str
    product_count: int


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    category_id: str
    category_name: str  # "-" when the category is gone
    price: str
    image: str


@dataclass(frozen=True)
class CatalogDTO:
    """Output: the browsable catalog with per-category product counts."""

    categories: list[CategoryCountDTO]
    total_products: int
    products: list[ProductDTO]
