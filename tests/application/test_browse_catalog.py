"""Integration tests for the read-only catalog query."""

from pos.application.browse_catalog import BrowseCatalogHandler
from pos.domain.model.catalog import Category, Product
from pos.domain.model.value_objects import Money
from tests.fakes import FakeCategoryRepository, FakeProductRepository


def _handler() -> BrowseCatalogHandler:
    products = FakeProductRepository([
        Product(id="p1", name="Dome Camera 2MP", category_id="cat-cctv", price=Money.of("1499")),
        Product(id="p2", name="Bullet Camera 5MP", category_id="cat-cctv", price=Money.of("2499")),
        Product(id="p3", name="DVR 4-Channel", category_id="cat-dvr", price=Money.of("3999")),
        Product(id="p4", name="Stray", category_id="gone", price=Money.of("1")),
    ])
    categories = FakeCategoryRepository([
        Category(id="cat-cctv", name="CCTV Cameras"),
        Category(id="cat-dvr", name="DVR"),
        Category(id="cat-hdmi", name="HDMI Cables"),
    ])
    return BrowseCatalogHandler(products, categories)


class TestBrowseCatalog:

    def test_counts_per_category(self):
        dto = _handler().handle()
        assert dto.total_products == 4
        assert [(c.id, c.product_count) for c in dto.categories] == [
            ("cat-cctv", 2),
            ("cat-dvr", 1),
            ("cat-hdmi", 0),
        ]

    def test_filter_by_category(self):
        dto = _handler().handle(category_id="cat-cctv")
        assert [p.id for p in dto.products] == ["p1", "p2"]

    def test_search_is_case_insensitive(self):
        dto = _handler().handle(search="CAMERA")
        assert [p.id for p in dto.products] == ["p1", "p2"]

    def test_search_wins_over_category(self):
        dto = _handler().handle(category_id="cat-cctv", search="dvr")
        assert [p.id for p in dto.products] == ["p3"]

    def test_missing_category_shows_dash(self):
        dto = _handler().handle(search="stray")
        assert dto.products[0].category_name == "-"
        assert dto.products[0].price == "₹ 1.00"
