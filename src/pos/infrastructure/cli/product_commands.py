"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from pos.application.browse_catalog import BrowseCatalogHandler
from pos.application.delete_product import DeleteProductHandler
from pos.application.save_product import SaveProductHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import Container


@click.command("save")
@click.option("--id", "product_id", default=None, help="Product ID to replace (omit to add).")
@click.option("--name", required=True, help="Product name.")
@click.option("--category", "category_id", required=True, help="Category ID.")
@click.option("--price", required=True, help="Price (e.g. 1499.00).")
@click.option("--image", default="", help="Image URL.")
@click.pass_obj
def product_save(
    container: Container,
    product_id: str | None,
    name: str,
    category_id: str,
    price: str,
    image: str,
) -> None:
    """Add a product, or replace an existing one wholesale."""
    handler = SaveProductHandler(product_repo=container.product_repository())

    try:
        product = handler.handle(
            name=name,
            category_id=category_id,
            price=price,
            image=image,
            product_id=product_id,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if container.category_repository().get_by_id(category_id) is None:
        click.echo(f"Warning: category '{category_id}' does not exist.", err=True)
    click.echo(f"Product {product.id} '{product.name}' saved at {product.price}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_delete(container: Container, product_id: str) -> None:
    """Delete a product (cart lines that use it are skipped from now on)."""
    DeleteProductHandler(product_repo=container.product_repository()).handle(product_id)
    click.echo(f"Product {product_id} deleted")


@click.command("list")
@click.pass_obj
def product_list(container: Container) -> None:
    """List all products in the catalog."""
    handler = BrowseCatalogHandler(
        product_repo=container.product_repository(),
        category_repo=container.category_repository(),
    )
    products = handler.handle().products

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<10} {'Name':<22} {'Category':<16} {'Price':>14}")
    click.echo("-" * 65)
    for p in products:
        click.echo(f"{p.id:<10} {p.name:<22} {p.category_name:<16} {p.price:>14}")
