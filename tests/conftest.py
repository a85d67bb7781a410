"""Pytest fixtures for couponcalc tests."""

import json
import tempfile
from decimal import Decimal
from pathlib import Path

import pytest

from couponcalc.catalog_store import InMemoryCatalog
from couponcalc.models import Coupon, CouponType, Order, Product


@pytest.fixture
def temp_dir():
    """Create a temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def products():
    """A small product range across two suppliers and three categories."""
    return {
        "A1": Product("A1", category="stationery", supplier="ACME", price=Decimal("5.00")),
        "B7": Product("B7", category="books", supplier="Northwind", price=Decimal("24.90")),
        "C3": Product("C3", category="books", supplier="ACME", price=Decimal("12.50")),
        "G1": Product("G1", category="gifts", supplier="Contoso", price=Decimal("8.00")),
    }


@pytest.fixture
def coupons():
    return [
        Coupon("TENOFF", CouponType.WHOLE_ORDER_FIXED, amount=Decimal("10.00")),
        Coupon("SAVE10", CouponType.WHOLE_ORDER_PERCENTAGE, amount=Decimal("0.10")),
        Coupon("PENS1", CouponType.SPECIFIC_PRODUCT, item_code="A1", amount=Decimal("1.00")),
        Coupon("ACME2", CouponType.SPECIFIC_SUPPLIER, item_code="ACME", amount=Decimal("2.00")),
        Coupon("BOOKS3", CouponType.SPECIFIC_CATEGORY, item_code="books", amount=Decimal("3.00")),
        Coupon("GIFT", CouponType.FREE_GIFT, item_code="G1"),
        Coupon("NOGIFT", CouponType.FREE_GIFT, item_code="MISSING"),
    ]


@pytest.fixture
def catalog(products, coupons):
    """In-memory lookup over the product and coupon fixtures."""
    return InMemoryCatalog(products.values(), coupons)


@pytest.fixture
def make_order(products):
    """Build an order from (sku, quantity) pairs."""

    def _make(*lines: tuple[str, int]) -> Order:
        order = Order()
        for sku, quantity in lines:
            order.add_line(products[sku], quantity)
        return order

    return _make


@pytest.fixture
def catalog_file(temp_dir, products, coupons):
    """Write the fixtures to a catalog JSON file and return its path."""
    path = temp_dir / "catalog.json"
    data = {
        "schema_version": 1,
        "products": [p.to_dict() for p in products.values()],
        "coupons": [c.to_dict() for c in coupons],
    }
    path.write_text(json.dumps(data, indent=2))
    return path
