"""Interactive register: one long-lived session at the counter.

Unlike the one-shot ``cart`` commands, the register keeps a single
POSSession alive, so every cart change can be undone until the cashier
quits.
"""

from __future__ import annotations

import logging
import shlex
from typing import Callable

import click

from pos.application.dto import OrderDTO
from pos.application.pos_session import POSSession
from pos.domain.exceptions import DomainException
from pos.domain.model.order import OrderStatus
from pos.infrastructure.bootstrap import Container
from pos.infrastructure.cli.formatting import display_cart, display_invoice

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Commands:
  add PRODUCT_ID...     add one unit of each product
  qty LINE QTY          set a line's quantity (LINE is a line ID or its #)
  rm LINE               remove a line
  clear                 empty the cart and customer details
  undo                  revert the last cart change
  customer              enter customer name, address and phone
  show                  show the cart
  invoice               print a DRAFT invoice
  pay                   record the sale as PAID and clear the cart
  help                  show this text
  quit                  leave the register"""


class UsageError(Exception):
    """A register command was typed with the wrong arguments."""


def _resolve_line(session: POSSession, token: str) -> str:
    """Accept a line ID or its 1-based position in the cart display."""
    if token.isdigit():
        shown = session.view().lines
        index = int(token)
        if 1 <= index <= len(shown):
            return shown[index - 1].line_id
    return token


def _add(session: POSSession, args: list[str]) -> None:
    if not args:
        raise UsageError("usage: add PRODUCT_ID...")
    for product_id in args:
        session.add_to_cart(product_id)
    display_cart(session.view())


def _qty(session: POSSession, args: list[str]) -> None:
    if len(args) != 2:
        raise UsageError("usage: qty LINE QTY")
    session.set_qty(_resolve_line(session, args[0]), args[1])
    display_cart(session.view())


def _rm(session: POSSession, args: list[str]) -> None:
    if len(args) != 1:
        raise UsageError("usage: rm LINE")
    session.remove_line(_resolve_line(session, args[0]))
    display_cart(session.view())


def _clear(session: POSSession, args: list[str]) -> None:
    session.clear_cart()
    click.echo("Cart cleared.")


def _undo(session: POSSession, args: list[str]) -> None:
    if not session.undo():
        click.echo("Nothing to undo.")
        return
    display_cart(session.view())


def _customer(session: POSSession, args: list[str]) -> None:
    current = session.customer
    try:
        name = click.prompt("Name", default=current.name, show_default=bool(current.name))
        address = click.prompt("Address", default=current.address, show_default=bool(current.address))
        phone = click.prompt("Phone", default=current.phone, show_default=bool(current.phone))
    except click.Abort:
        # Ctrl-C / EOF part-way through the form leaves the details as they were.
        click.echo()
        click.echo("Customer details unchanged.")
        return
    session.set_customer(name=name, address=address, phone=phone)


def _show(session: POSSession, args: list[str]) -> None:
    display_cart(session.view())


def _invoice(session: POSSession, args: list[str]) -> None:
    display_invoice(OrderDTO.from_order(session.materialize_order(OrderStatus.DRAFT)))


def _pay(session: POSSession, args: list[str]) -> None:
    order = session.checkout()
    click.echo(f"Payment recorded: {order.id} ({order.total})")


def _help(session: POSSession, args: list[str]) -> None:
    click.echo(HELP_TEXT)


COMMANDS: dict[str, Callable[[POSSession, list[str]], None]] = {
    "add": _add,
    "qty": _qty,
    "rm": _rm,
    "clear": _clear,
    "undo": _undo,
    "customer": _customer,
    "show": _show,
    "invoice": _invoice,
    "pay": _pay,
    "help": _help,
}

QUIT_WORDS = {"quit", "exit", "q"}


def run_command(session: POSSession, line: str) -> bool:
    """Execute one typed line. Returns False when the cashier asked to quit.

    Domain errors are shown and the session carries on; anything
    unexpected is logged and the command is treated as a no-op.
    """
    try:
        words = shlex.split(line)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        return True
    if not words:
        return True

    name, args = words[0].lower(), words[1:]
    if name in QUIT_WORDS:
        return False

    command = COMMANDS.get(name)
    if command is None:
        click.echo(f"Unknown command '{name}'. Type 'help' for a list.", err=True)
        return True

    try:
        command(session, args)
    except (DomainException, UsageError) as exc:
        click.echo(f"Error: {exc}", err=True)
    except Exception:
        logger.exception("Register command %r failed", line)
        click.echo("Error: command failed; see log for details.", err=True)
    return True


@click.command("register")
@click.pass_obj
def register(container: Container) -> None:
    """Run an interactive, undoable cashier session."""
    session = container.session()
    click.echo("Register open. Type 'help' for commands.")
    display_cart(session.view())

    while True:
        try:
            line = click.prompt("pos", default="", show_default=False, prompt_suffix="> ")
        except click.Abort:
            click.echo()
            break
        if not run_command(session, line):
            break

    click.echo("Register closed.")
