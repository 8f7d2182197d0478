"""Plain-text rendering shared by the cart, register and report commands."""

from __future__ import annotations

import click

from pos.application.dto import CartDTO, OrderDTO, SalesReportDTO

SHOP_NAME = "SM SYSTEMS (SALES & SERVICES) (Kottaram)"
SHOP_CONTACT = "Contact: 9486171929, 7598194206"


def display_cart(dto: CartDTO) -> None:
    if not dto.lines:
        click.echo("Cart is empty.")
    else:
        click.echo(f"  {'#':>2} {'Line':<8} {'Product':<22} {'Qty':>4} {'Amount':>14}")
        click.echo(f"  {'-' * 54}")
        for i, line in enumerate(dto.lines, start=1):
            click.echo(
                f"  {i:>2} {line.line_id:<8} {line.name:<22} {line.quantity:>4} {line.line_total:>14}"
            )
        click.echo(f"  {'-' * 54}")
    click.echo(f"  {'Subtotal':<38} {dto.subtotal:>16}")
    click.echo(f"  {'Tax':<38} {dto.tax:>16}")
    click.echo(f"  {'Total':<38} {dto.total:>16}")
    if dto.customer_name or dto.customer_phone:
        click.echo(f"Customer: {dto.customer_name} {dto.customer_phone}".rstrip())


def display_invoice(dto: OrderDTO) -> None:
    click.echo(SHOP_NAME)
    click.echo(SHOP_CONTACT)
    click.echo()
    click.echo(f"Invoice To: {dto.customer_name}")
    for line in dto.customer_address.splitlines():
        click.echo(f"  {line}")
    if dto.customer_phone:
        click.echo(f"  {dto.customer_phone}")
    click.echo(f"Invoice: {dto.id}  ({dto.status})")
    click.echo(f"Date:    {dto.created_at}")
    click.echo()
    click.echo(f"  {'Item':<22} {'Qty':>4} {'Rate':>14} {'Amount':>14}")
    click.echo(f"  {'-' * 57}")
    for item in dto.items:
        click.echo(
            f"  {item.name:<22} {item.quantity:>4} {item.unit_price:>14} {item.line_total:>14}"
        )
    click.echo(f"  {'-' * 57}")
    click.echo(f"  {'Subtotal':<41} {dto.subtotal:>16}")
    click.echo(f"  {'Tax':<41} {dto.tax:>16}")
    click.echo(f"  {'Total':<41} {dto.total:>16}")
    click.echo()
    click.echo("Thank you for your purchase!")


def display_sales_report(dto: SalesReportDTO) -> None:
    title = f"Sales for {dto.month}" if dto.month else "All sales"
    click.echo(title)
    if not dto.orders:
        click.echo("No sales recorded.")
    else:
        click.echo(f"  {'Date':<20} {'Invoice':<12} {'Items':<30} {'Total':>14}")
        click.echo(f"  {'-' * 79}")
        for order in dto.orders:
            items = ", ".join(f"{i.name} x{i.quantity}" for i in order.items)
            click.echo(
                f"  {order.created_at:<20} {order.id:<12} {items[:30]:<30} {order.total:>14}"
            )
        click.echo(f"  {'-' * 79}")
    click.echo(f"  {'Total':<63} {dto.total:>16}")
