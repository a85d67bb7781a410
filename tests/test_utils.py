"""Tests for line parsing, order building and formatting."""

from decimal import Decimal

import pytest

from couponcalc.errors import InvalidOrderError, ProductNotFoundError
from couponcalc.models import Discount
from couponcalc.utils import build_order, format_money, format_order, parse_line_spec


class TestParseLineSpec:
    def test_sku_and_quantity(self):
        assert parse_line_spec("A1:3") == ("A1", 3)

    def test_sku_only_defaults_to_one(self):
        assert parse_line_spec("B7") == ("B7", 1)

    def test_surrounding_whitespace(self):
        assert parse_line_spec("  C3:2 ") == ("C3", 2)

    @pytest.mark.parametrize("spec", ["", "A1:", "A1:x", "A1:-2", ":3", "A1:0"])
    def test_invalid_specs(self, spec):
        with pytest.raises(InvalidOrderError):
            parse_line_spec(spec)


class TestBuildOrder:
    def test_builds_lines_in_order(self, catalog):
        order = build_order([("B7", 1), ("A1", 4)], catalog)

        assert [line.product.sku_code for line in order.order_lines] == ["B7", "A1"]
        assert order.order_lines[1].quantity == 4
        assert order.total == Decimal("44.90")

    def test_unknown_sku_raises(self, catalog):
        with pytest.raises(ProductNotFoundError):
            build_order([("A1", 1), ("ZZ", 1)], catalog)


class TestFormatting:
    def test_format_money(self):
        assert format_money(Decimal("20")) == "20.00"
        assert format_money(Decimal("1234.5")) == "1,234.50"
        assert format_money(Decimal("-3")) == "-3.00"

    def test_format_order(self, make_order):
        order = make_order(("A1", 2))
        order.discounts.append(Discount("Discount for whole order", Decimal("1")))

        text = format_order(order)

        assert "A1" in text
        assert "Discount for whole order: -1.00" in text
        assert "Total:          10.00" in text
        assert "Amount payable: 9.00" in text

    def test_format_order_marks_free_lines(self, make_order, products):
        order = make_order(("A1", 1))
        order.add_line(products["G1"], 1, is_free=True)

        assert "[free]" in format_order(order)
