"""CLI command for the read-only customer catalog."""

from __future__ import annotations

import click

from pos.application.browse_catalog import BrowseCatalogHandler
from pos.infrastructure.bootstrap import Container


@click.command("browse")
@click.option("--category", "category_id", default=None, help="Only show this category ID.")
@click.option("--search", default=None, help="Match product names containing this text.")
@click.pass_obj
def catalog_browse(container: Container, category_id: str | None, search: str | None) -> None:
    """Browse products without touching the cart."""
    handler = BrowseCatalogHandler(
        product_repo=container.product_repository(),
        category_repo=container.category_repository(),
    )
    dto = handler.handle(category_id=category_id, search=search)

    click.echo(f"{'All Products':<24} {dto.total_products:>4}")
    for c in dto.categories:
        click.echo(f"{c.name:<24} {c.product_count:>4}")
    click.echo()

    if not dto.products:
        click.echo("No matching products.")
        return

    for p in dto.products:
        click.echo(f"{p.name:<28} {p.price:>14}")
