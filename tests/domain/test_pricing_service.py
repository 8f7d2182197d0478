"""Unit tests for the Pricing domain service."""

from decimal import Decimal

from pos.domain.model.cart import CartLine
from pos.domain.model.catalog import Product
from pos.domain.model.value_objects import Money, Quantity
from pos.domain.service.pricing_service import PricingService
from tests.fakes import FakeProductRepository


def _line(line_id: str, product_id: str, qty: int) -> CartLine:
    return CartLine(id=line_id, product_id=product_id, quantity=Quantity(qty))


def _service(tax_rate: Decimal = Decimal("0")) -> PricingService:
    repo = FakeProductRepository([
        Product(id="P1", name="Dome Camera", category_id="cat-cctv", price=Money.of("100.00")),
        Product(id="P2", name="HDMI Cable", category_id="cat-hdmi", price=Money.of("299.00")),
    ])
    return PricingService(repo, tax_rate=tax_rate)


class TestComputeTotals:

    def test_empty_cart(self):
        totals = _service().compute_totals([])
        assert totals.subtotal == Money.zero()
        assert totals.total == Money.zero()

    def test_price_times_quantity(self):
        totals = _service().compute_totals([_line("a", "P1", 2)])
        assert totals.subtotal == Money.of("200.00")
        assert totals.tax == Money.zero()
        assert totals.total == Money.of("200.00")

    def test_order_of_lines_does_not_matter(self):
        lines = [_line("a", "P1", 2), _line("b", "P2", 3)]
        svc = _service()
        assert svc.compute_totals(lines) == svc.compute_totals(list(reversed(lines)))
        assert svc.compute_totals(lines).total == Money.of("1097.00")

    def test_missing_product_contributes_zero(self):
        lines = [_line("a", "P1", 1), _line("b", "GONE", 5)]
        assert _service().compute_totals(lines).total == Money.of("100.00")

    def test_tax_rate_applies_to_subtotal(self):
        totals = _service(Decimal("0.10")).compute_totals([_line("a", "P1", 1)])
        assert totals.tax == Money.of("10.00")
        assert totals.total == Money.of("110.00")


class TestPriceLines:

    def test_snapshots_name_and_price(self):
        items = _service().price_lines([_line("a", "P2", 2)])
        assert len(items) == 1
        assert items[0].name == "HDMI Cable"
        assert items[0].price == Money.of("299.00")
        assert items[0].qty == 2

    def test_orphaned_line_gets_blank_name_and_zero_price(self):
        items = _service().price_lines([_line("a", "GONE", 4)])
        assert items[0].product_id == "GONE"
        assert items[0].name == ""
        assert items[0].price == Money.zero()
        assert items[0].qty == 4
