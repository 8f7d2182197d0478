"""Application service: Monthly Sales Report use case (query)."""

from __future__ import annotations

from pos.application.dto import OrderDTO, SalesReportDTO
from pos.domain.model.value_objects import Money
from pos.domain.repository.order_repository import OrderRepository


class SalesReportHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def sales_in_month(self, month: str | None) -> SalesReportDTO:
        """Orders whose timestamp starts with *month* (``"YYYY-MM"``).

        Any ISO prefix works (``"2024"``, ``"2024-01-15"``); a blank month
        selects the whole ledger.
        """
        prefix = (month or "").strip()
        orders = [o for o in self._order_repo.list_all() if o.created_in(prefix)]

        total = Money.zero()
        for order in orders:
            total = total + order.total

        return SalesReportDTO(
            month=prefix,
            orders=[OrderDTO.from_order(o) for o in orders],
            total=str(total),
        )
