import logging
from pathlib import Path

import click

from pos.application.seed_catalog import SeedCatalogHandler
from pos.infrastructure.bootstrap import DATA_DIR_ENV, DEFAULT_DATA_DIR, Container, build_container
from pos.infrastructure.cli.cart_commands import (
    cart_add,
    cart_checkout,
    cart_clear,
    cart_invoice,
    cart_qty,
    cart_remove,
    cart_show,
)
from pos.infrastructure.cli.catalog_commands import catalog_browse
from pos.infrastructure.cli.category_commands import (
    category_add,
    category_delete,
    category_list,
    category_rename,
)
from pos.infrastructure.cli.product_commands import product_delete, product_list, product_save
from pos.infrastructure.cli.register import register
from pos.infrastructure.cli.report_commands import report_sales


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=DATA_DIR_ENV,
    default=DEFAULT_DATA_DIR,
    show_default=True,
    help="Directory holding the JSON data files.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debug details to stderr.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, verbose: bool) -> None:
    """POS — single-shop point of sale"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = build_container(data_dir)


@cli.command("seed")
@click.option("--reset", is_flag=True, help="Wipe all data (including sales) first.")
@click.pass_obj
def seed(container: Container, reset: bool) -> None:
    """Load the demo catalog if the catalog is empty."""
    handler = SeedCatalogHandler(
        product_repo=container.product_repository(),
        category_repo=container.category_repository(),
        cart_repo=container.cart_repository(),
        order_repo=container.order_repository(),
    )
    if reset:
        if not click.confirm("This deletes every product, category and sale. Continue?"):
            raise click.Abort()
        handler.reset()
        click.echo("Data reset to the demo catalog.")
    elif handler.seed_if_empty():
        click.echo("Demo catalog loaded.")
    else:
        click.echo("Catalog already populated; nothing to do.")


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def catalog() -> None:
    """Browse the catalog (read-only)."""


@cli.group()
def cart() -> None:
    """Work with the current cart."""


@cli.group()
def report() -> None:
    """Sales reports."""


# Register subcommands
category.add_command(category_add)
category.add_command(category_delete)
category.add_command(category_list)
category.add_command(category_rename)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_save)
catalog.add_command(catalog_browse)
cart.add_command(cart_add)
cart.add_command(cart_checkout)
cart.add_command(cart_clear)
cart.add_command(cart_invoice)
cart.add_command(cart_qty)
cart.add_command(cart_remove)
cart.add_command(cart_show)
report.add_command(report_sales)
cli.add_command(register)
