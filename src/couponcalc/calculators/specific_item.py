"""Calculators for coupons that target a product, supplier or category."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..errors import InvalidCouponError
from ..models import Discount

if TYPE_CHECKING:
    from ..models import Coupon, Order, OrderLine

logger = logging.getLogger(__name__)


def require_item_code(coupon: Coupon) -> str:
    """Return the coupon's item reference or raise if it has none."""
    if not coupon.item_code:
        raise InvalidCouponError(
            coupon.code, f"{coupon.coupon_type.value} coupon requires an item_code"
        )
    return coupon.item_code


class _MatchingLineCalculator(ABC):
    """Applies ``coupon.amount`` once per order line whose key matches the coupon.

    Subclasses set ``target`` (used in the remark) and implement ``line_key``.
    Zero matching lines is a silent no-op: no discount is recorded.
    """

    target = ""

    @abstractmethod
    def line_key(self, line: OrderLine) -> str:
        """Return the value compared against the coupon item_code."""

    def apply(self, coupon: Coupon, order: Order) -> None:
        item_code = require_item_code(coupon)
        count = sum(1 for line in order.order_lines if self.line_key(line) == item_code)
        if count == 0:
            logger.debug("Coupon %s matched no lines for %s %s", coupon.code, self.target, item_code)
            return

        order.discounts.append(
            Discount(f"Discount for {self.target} {item_code} x {count}", coupon.amount * count)
        )


class SpecificProductCalculator(_MatchingLineCalculator):
    target = "product"

    def line_key(self, line: OrderLine) -> str:
        return line.product.sku_code


class SpecificSupplierCalculator(_MatchingLineCalculator):
    target = "supplier"

    def line_key(self, line: OrderLine) -> str:
        return line.product.supplier


class SpecificCategoryCalculator(_MatchingLineCalculator):
    target = "category"

    def line_key(self, line: OrderLine) -> str:
        return line.product.category
