"""CLI commands for product categories."""

from __future__ import annotations

import click

from pos.application.add_category import AddCategoryHandler
from pos.application.delete_category import DeleteCategoryHandler
from pos.application.rename_category import RenameCategoryHandler
from pos.domain.exceptions import DomainException
from pos.infrastructure.bootstrap import Container


@click.command("add")
@click.option("--name", required=True, help="Category name.")
@click.pass_obj
def category_add(container: Container, name: str) -> None:
    """Add a new category."""
    handler = AddCategoryHandler(category_repo=container.category_repository())
    category = handler.handle(name)
    if category is None:
        click.echo("Nothing added: category name is blank.")
        return
    click.echo(f"Category {category.id} '{category.name}' added")


@click.command("rename")
@click.option("--id", "category_id", required=True, help="Category ID.")
@click.option("--name", required=True, help="New category name.")
@click.pass_obj
def category_rename(container: Container, category_id: str, name: str) -> None:
    """Rename an existing category."""
    handler = RenameCategoryHandler(category_repo=container.category_repository())

    try:
        category = handler.handle(category_id, name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if category is None:
        click.echo(f"No category with ID '{category_id}'.")
        return
    click.echo(f"Category {category.id} renamed to '{category.name}'")


@click.command("delete")
@click.option("--id", "category_id", required=True, help="Category ID.")
@click.pass_obj
def category_delete(container: Container, category_id: str) -> None:
    """Delete a category that no product uses."""
    handler = DeleteCategoryHandler(
        category_repo=container.category_repository(),
        product_repo=container.product_repository(),
    )

    try:
        handler.handle(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category {category_id} deleted")


@click.command("list")
@click.pass_obj
def category_list(container: Container) -> None:
    """List all categories."""
    categories = container.category_repository().list_all()

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':<16} {'Name':<24}")
    click.echo("-" * 41)
    for c in categories:
        click.echo(f"{c.id:<16} {c.name:<24}")
