"""Calculators for coupons that discount the whole order."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING

from ..models import Discount

if TYPE_CHECKING:
    from ..models import Coupon, Order

logger = logging.getLogger(__name__)


def format_percentage(fraction: Decimal) -> str:
    """Render a fraction as a percentage label, e.g. 0.125 -> "12.5%"."""
    percent = (fraction * 100).normalize()
    # normalize() turns 10 into 1E+1
    return f"{percent:f}%"


class WholeOrderFixedCalculator:
    """Takes a flat currency amount off the order."""

    def apply(self, coupon: Coupon, order: Order) -> None:
        order.discounts.append(Discount("Discount for whole order", coupon.amount))


class WholeOrderPercentageCalculator:
    """Takes a fraction of the order total off the order."""

    def apply(self, coupon: Coupon, order: Order) -> None:
        amount = order.total * coupon.amount
        logger.debug("Percentage coupon %s: %s of %s", coupon.code, coupon.amount, order.total)
        order.discounts.append(
            Discount(f"Discount for whole order ({format_percentage(coupon.amount)})", amount)
        )
