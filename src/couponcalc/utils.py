"""Utility functions for couponcalc."""

import re
from decimal import Decimal

from .calculators import ProductLookup
from .errors import InvalidOrderError, ProductNotFoundError
from .models import Coupon, Discount, Order, OrderLine, Product

_CENT = Decimal("0.01")


def parse_line_spec(spec: str) -> tuple[str, int]:
    """
    Parse an order line spec into (sku, quantity).

    Formats:
    - SKU (quantity 1)
    - SKU:3

    Raises:
        InvalidOrderError: If the spec format is invalid.
    """
    match = re.match(r"^([^:\s]+)(?::(\d+))?$", spec.strip())
    if not match:
        raise InvalidOrderError(f"invalid line '{spec}', expected 'SKU' or 'SKU:QTY'")

    sku = match.group(1)
    quantity = int(match.group(2)) if match.group(2) else 1
    if quantity < 1:
        raise InvalidOrderError(f"invalid line '{spec}', quantity must be >= 1")
    return sku, quantity


def build_order(lines: list[tuple[str, int]], lookup: ProductLookup) -> Order:
    """
    Build an order from (sku, quantity) pairs, resolving each SKU.

    Raises:
        ProductNotFoundError: If a SKU is unknown.
    """
    order = Order()
    for sku, quantity in lines:
        product = lookup.find_product_by_sku(sku)
        if product is None:
            raise ProductNotFoundError(sku)
        order.add_line(product, quantity)
    return order


def format_money(amount: Decimal) -> str:
    """Format a monetary amount with two decimal places."""
    return f"{amount.quantize(_CENT):,}"


def format_product(product: Product) -> str:
    """Format a product for display."""
    return (
        f"{product.sku_code:<12} {format_money(product.price):>10}  "
        f"{product.category} / {product.supplier}"
    )


def format_coupon(coupon: Coupon) -> str:
    """Format a coupon for display."""
    target = f" -> {coupon.item_code}" if coupon.item_code else ""
    return f"{coupon.code:<12} {coupon.coupon_type.value}{target} (amount {coupon.amount})"


def format_line(line: OrderLine) -> str:
    free = " [free]" if line.is_free else ""
    return (
        f"{line.product.sku_code:<12} x{line.quantity:<4} "
        f"{format_money(line.subtotal):>10}{free}"
    )


def format_discount(discount: Discount) -> str:
    return f"{discount.remarks}: -{format_money(discount.amount)}"


def format_order(order: Order) -> str:
    """Format an order with its lines, discounts and totals for display."""
    out = ["Lines:"]
    for line in order.order_lines:
        out.append(f"  {format_line(line)}")
    if order.discounts:
        out.append("Discounts:")
        for discount in order.discounts:
            out.append(f"  {format_discount(discount)}")
    out.append(f"Total:          {format_money(order.total)}")
    out.append(f"Amount payable: {format_money(order.amount_payable)}")
    return "\n".join(out)
