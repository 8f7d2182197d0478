"""Integration tests for the category use cases."""

import pytest

from pos.application.add_category import AddCategoryHandler
from pos.application.delete_category import DeleteCategoryHandler
from pos.application.rename_category import RenameCategoryHandler
from pos.domain.exceptions import ValidationError
from pos.domain.model.catalog import Category, Product
from pos.domain.model.value_objects import Money
from tests.fakes import FakeCategoryRepository, FakeProductRepository


def _categories() -> FakeCategoryRepository:
    return FakeCategoryRepository([
        Category(id="cat-cctv", name="CCTV Cameras"),
        Category(id="cat-dvr", name="DVR"),
    ])


class TestAddCategory:

    def test_adds_with_generated_id(self):
        repo = _categories()
        category = AddCategoryHandler(repo).handle("  Monitors ")
        assert category.name == "Monitors"
        assert category.id not in ("cat-cctv", "cat-dvr")
        assert repo.list_all()[-1] == category

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_is_ignored(self, name):
        repo = _categories()
        assert AddCategoryHandler(repo).handle(name) is None
        assert len(repo.list_all()) == 2


class TestRenameCategory:

    def test_renames_in_place(self):
        repo = _categories()
        RenameCategoryHandler(repo).handle("cat-dvr", " Recorders ")
        assert repo.get_by_id("cat-dvr").name == "Recorders"
        assert [c.id for c in repo.list_all()] == ["cat-cctv", "cat-dvr"]

    def test_blank_name_rejected(self):
        repo = _categories()
        with pytest.raises(ValidationError, match="cannot be empty"):
            RenameCategoryHandler(repo).handle("cat-dvr", "  ")
        assert repo.get_by_id("cat-dvr").name == "DVR"

    def test_duplicate_name_rejected_case_insensitively(self):
        repo = _categories()
        with pytest.raises(ValidationError, match="already exists"):
            RenameCategoryHandler(repo).handle("cat-dvr", "cctv cameras")
        assert repo.get_by_id("cat-dvr").name == "DVR"

    def test_changing_case_of_own_name_is_allowed(self):
        repo = _categories()
        RenameCategoryHandler(repo).handle("cat-dvr", "dvr")
        assert repo.get_by_id("cat-dvr").name == "dvr"

    def test_unknown_id_is_noop(self):
        repo = _categories()
        assert RenameCategoryHandler(repo).handle("nope", "Anything") is None
        assert [c.name for c in repo.list_all()] == ["CCTV Cameras", "DVR"]


class TestDeleteCategory:

    def test_refused_while_products_reference_it(self):
        categories = _categories()
        products = FakeProductRepository([
            Product(id="p1", name="Dome", category_id="cat-cctv", price=Money.of("10")),
        ])
        with pytest.raises(ValidationError, match="Remove or move products"):
            DeleteCategoryHandler(categories, products).handle("cat-cctv")
        assert categories.get_by_id("cat-cctv") is not None

    def test_deletes_unused_category(self):
        categories = _categories()
        products = FakeProductRepository([
            Product(id="p1", name="Dome", category_id="cat-cctv", price=Money.of("10")),
        ])
        DeleteCategoryHandler(categories, products).handle("cat-dvr")
        assert categories.get_by_id("cat-dvr") is None
        assert len(categories.list_all()) == 1
