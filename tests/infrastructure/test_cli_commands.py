"""Tests for the click CLI, run against a JSON store in a temp dir."""

import pytest
from click.testing import CliRunner

from restopos.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()
    env = {"POS_DATABASE_PATH": str(tmp_path / "database.json")}

    def invoke(*args):
        return runner.invoke(cli, list(args), env=env)

    return invoke


class TestOrderCommands:

    def test_create_and_show(self, run):
        result = run("order", "create", "--table", "5", "--items", "1:1,4:2")
        assert result.exit_code == 0, result.output
        assert "Order #1 sent to kitchen" in result.output
        assert "Butter Chicken" in result.output

        shown = run("order", "show", "--id", "1")
        assert shown.exit_code == 0
        assert "430.00" in shown.output

    def test_takeaway(self, run):
        result = run("order", "create", "--type", "takeaway", "--items", "6:1")
        assert result.exit_code == 0, result.output
        assert "Takeaway" in result.output

    def test_bad_items_format(self, run):
        result = run("order", "create", "--table", "5", "--items", "1-1")
        assert result.exit_code == 2
        assert "Invalid item format" in result.output

    def test_domain_error_surfaces(self, run):
        result = run("order", "create", "--items", "1:1")
        assert result.exit_code == 1
        assert "Table number is required" in result.output

    def test_show_unknown(self, run):
        result = run("order", "show", "--id", "9")
        assert result.exit_code == 1
        assert "Order not found" in result.output

    def test_status_cancel_and_list(self, run):
        run("order", "create", "--table", "5", "--items", "1:1,4:2")

        assert "now preparing" in run("order", "status", "--id", "1", "preparing").output
        assert "cancelled" in run("order", "cancel-item", "--id", "1", "--item", "4").output

        listed = run("order", "list", "--status", "preparing")
        assert listed.exit_code == 0
        assert "preparing" in listed.output

    def test_list_empty(self, run):
        assert "No orders found." in run("order", "list").output


class TestBillAndKotCommands:

    def test_bill(self, run):
        run("order", "create", "--table", "5", "--items", "1:1,4:2")
        result = run("bill", "create", "--order", "1")
        assert result.exit_code == 0, result.output
        # 430 + 5% tax
        assert "451.50" in result.output

        again = run("bill", "create", "--order", "1")
        assert again.exit_code == 1
        assert "already billed" in again.output

    def test_kot_logs_and_stats(self, run):
        assert "No KOT entries yet." in run("kot", "logs").output
        run("order", "create", "--table", "5", "--items", "1:1")

        assert "new_order" in run("kot", "logs").output
        stats = run("kot", "stats").output
        assert "Total KOTs:      1" in stats
        assert "Success rate:    100%" in stats


class TestMenuCommands:

    def test_list(self, run):
        result = run("menu", "list")
        assert result.exit_code == 0
        assert "Filter Coffee" in result.output
