"""One-shot CLI commands for the persisted cart.

Each invocation starts a fresh session, so undo history does not carry
over between commands; use ``pos register`` for an undoable session.
"""

from __future__ import annotations

import click

from pos.application.dto import OrderDTO
from pos.domain.exceptions import DomainException
from pos.domain.model.order import OrderStatus
from pos.infrastructure.bootstrap import Container
from pos.infrastructure.cli.formatting import display_cart, display_invoice


def _customer_options(func):
    func = click.option("--phone", default=None, help="Customer phone.")(func)
    func = click.option("--address", default=None, help="Customer address.")(func)
    func = click.option("--customer", "name", default=None, help="Customer name.")(func)
    return func


@click.command("show")
@click.pass_obj
def cart_show(container: Container) -> None:
    """Show the cart and its totals."""
    display_cart(container.session().view())


@click.command("add")
@click.argument("product_ids", nargs=-1, required=True)
@click.pass_obj
def cart_add(container: Container, product_ids: tuple[str, ...]) -> None:
    """Add one unit of each PRODUCT_ID."""
    session = container.session()
    try:
        for product_id in product_ids:
            session.add_to_cart(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    display_cart(session.view())


@click.command("qty")
@click.argument("line_id")
@click.argument("quantity")
@click.pass_obj
def cart_qty(container: Container, line_id: str, quantity: str) -> None:
    """Set the quantity of LINE_ID (values below 1 become 1)."""
    session = container.session()
    try:
        session.set_qty(line_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    display_cart(session.view())


@click.command("remove")
@click.argument("line_id")
@click.pass_obj
def cart_remove(container: Container, line_id: str) -> None:
    """Remove LINE_ID from the cart."""
    session = container.session()
    try:
        session.remove_line(line_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    display_cart(session.view())


@click.command("clear")
@click.pass_obj
def cart_clear(container: Container) -> None:
    """Empty the cart."""
    try:
        container.session().clear_cart()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo("Cart cleared.")


@click.command("invoice")
@_customer_options
@click.pass_obj
def cart_invoice(
    container: Container, name: str | None, address: str | None, phone: str | None
) -> None:
    """Print a DRAFT invoice for the cart without recording a sale."""
    session = container.session()
    session.set_customer(name=name, address=address, phone=phone)
    display_invoice(OrderDTO.from_order(session.materialize_order(OrderStatus.DRAFT)))


@click.command("checkout")
@_customer_options
@click.pass_obj
def cart_checkout(
    container: Container, name: str | None, address: str | None, phone: str | None
) -> None:
    """Record the cart as a PAID sale and clear it."""
    session = container.session()
    session.set_customer(name=name, address=address, phone=phone)

    try:
        order = session.checkout()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Payment recorded: {order.id} ({order.total})")
