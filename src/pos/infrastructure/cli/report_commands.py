"""CLI commands for sales reporting."""

from __future__ import annotations

import click

from pos.application.sales_report import SalesReportHandler
from pos.infrastructure.bootstrap import Container
from pos.infrastructure.cli.formatting import display_sales_report


@click.command("sales")
@click.option("--month", default="", help="Month as YYYY-MM (omit for all sales).")
@click.pass_obj
def report_sales(container: Container, month: str) -> None:
    """Show recorded sales for a month and their total."""
    handler = SalesReportHandler(order_repo=container.order_repository())
    display_sales_report(handler.sales_in_month(month))
