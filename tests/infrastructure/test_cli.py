"""End-to-end tests for the click CLI against a temporary data directory."""

import logging

import click
import pytest
from click.testing import CliRunner

from pos.infrastructure.bootstrap import build_container
from pos.infrastructure.cli.main import cli
from pos.infrastructure.cli.register import run_command


@pytest.fixture
def data_dir(tmp_path):
    return tmp_path / "data"


@pytest.fixture
def invoke(data_dir):
    runner = CliRunner()

    def _invoke(*args, input=None):
        return runner.invoke(cli, ["--data-dir", str(data_dir), *args], input=input)

    return _invoke


@pytest.fixture
def seeded(invoke, data_dir):
    result = invoke("seed")
    assert result.exit_code == 0, result.output
    return build_container(data_dir)


def _product_id(container, name: str) -> str:
    for product in container.product_repository().list_all():
        if product.name == name:
            return product.id
    raise AssertionError(f"no product {name!r}")


class TestSeed:

    def test_seed_then_noop(self, invoke):
        assert "Demo catalog loaded" in invoke("seed").output
        assert "nothing to do" in invoke("seed").output

    def test_reset_asks_for_confirmation(self, invoke, seeded):
        result = invoke("seed", "--reset", input="n\n")
        assert result.exit_code == 1
        result = invoke("seed", "--reset", input="y\n")
        assert result.exit_code == 0
        assert "reset" in result.output


class TestCatalogCommands:

    def test_category_lifecycle(self, invoke, seeded):
        result = invoke("category", "add", "--name", "Cables")
        assert result.exit_code == 0
        new_id = result.output.split()[1]

        result = invoke("category", "rename", "--id", new_id, "--name", "dvr")
        assert result.exit_code == 1
        assert "already exists" in result.output

        assert invoke("category", "delete", "--id", new_id).exit_code == 0
        assert "Cables" not in invoke("category", "list").output

    def test_category_in_use_cannot_be_deleted(self, invoke, seeded):
        result = invoke("category", "delete", "--id", "cat-cctv")
        assert result.exit_code == 1
        assert "Remove or move products" in result.output

    def test_product_save_warns_about_unknown_category(self, invoke, seeded):
        result = invoke(
            "product", "save", "--name", "Tripod", "--category", "nope", "--price", "250"
        )
        assert result.exit_code == 0
        assert "does not exist" in result.output
        assert "Tripod" in invoke("product", "list").output

    def test_product_save_rejects_negative_price(self, invoke, seeded):
        result = invoke(
            "product", "save", "--name", "X", "--category", "cat-dvr", "--price", "-1"
        )
        assert result.exit_code == 1

    def test_browse_with_search(self, invoke, seeded):
        result = invoke("catalog", "browse", "--search", "dvr")
        assert result.exit_code == 0
        assert "DVR 4-Channel" in result.output
        assert "Dome Camera" not in result.output


class TestCartCommands:

    def test_add_checkout_and_report(self, invoke, seeded):
        dome = _product_id(seeded, "Dome Camera 2MP")
        result = invoke("cart", "add", dome, dome)
        assert "₹ 2998.00" in result.output

        result = invoke("cart", "checkout", "--customer", "Asha")
        assert result.exit_code == 0
        assert "Payment recorded: ORD-" in result.output
        assert "Cart is empty" in invoke("cart", "show").output

        report = invoke("report", "sales")
        assert "₹ 2998.00" in report.output
        assert "Dome Camera 2MP x2" in report.output

    def test_checkout_of_empty_cart_fails(self, invoke, seeded):
        result = invoke("cart", "checkout")
        assert result.exit_code == 1
        assert "Cart is empty" in result.output
        assert "No sales recorded" in invoke("report", "sales").output

    def test_invoice_is_a_draft(self, invoke, seeded):
        invoke("cart", "add", _product_id(seeded, "BNC Connector"))
        result = invoke("cart", "invoice", "--customer", "Asha", "--phone", "98765")
        assert "(DRAFT)" in result.output
        assert "Invoice To: Asha" in result.output
        assert "No sales recorded" in invoke("report", "sales").output

    def test_unwritable_cart_reports_error(self, invoke, seeded, data_dir):
        cart_file = data_dir / "cctv_cart.json"
        cart_file.unlink(missing_ok=True)
        cart_file.mkdir()

        result = invoke("cart", "add", _product_id(seeded, "BNC Connector"))
        assert result.exit_code == 1
        assert "Could not save the cart" in result.output


class TestRegister:

    def test_add_remove_undo_pay(self, invoke, seeded):
        hdmi = _product_id(seeded, "HDMI Cable 2m")
        script = "\n".join([
            f"add {hdmi} {hdmi}",
            "rm 1",
            "undo",
            "pay",
            "undo",
            "quit",
        ]) + "\n"

        result = invoke("register", input=script)

        assert result.exit_code == 0, result.output
        assert "Payment recorded" in result.output
        assert "Register closed." in result.output
        # Undo after paying brings the cart back; the sale stays recorded.
        assert len(seeded.cart_repository().load()) == 1
        assert len(seeded.order_repository().list_all()) == 1

    def test_errors_do_not_end_the_session(self, invoke, seeded):
        result = invoke("register", input="pay\nbogus\nqty 1\nundo\nquit\n")
        assert result.exit_code == 0
        assert "Error: Cart is empty" in result.output
        assert "Unknown command" in result.output
        assert "usage: qty" in result.output
        assert "Nothing to undo." in result.output
        assert "Register closed." in result.output

    def test_cancelled_customer_form_keeps_details(self, seeded, monkeypatch, capsys, caplog):
        session = seeded.session()
        session.set_customer(name="Asha")

        def _abort(*args, **kwargs):
            raise click.Abort()

        monkeypatch.setattr(click, "prompt", _abort)

        assert run_command(session, "customer") is True
        assert session.customer.name == "Asha"
        captured = capsys.readouterr()
        assert "Customer details unchanged." in captured.out
        assert "command failed" not in captured.err
        assert not [r for r in caplog.records if r.levelno >= logging.ERROR]
