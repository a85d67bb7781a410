"""Calculator for coupons that add a free product to the order."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..errors import ProductNotFoundError
from ..models import OrderLine
from .specific_item import require_item_code

if TYPE_CHECKING:
    from ..models import Coupon, Order
    from .calculator_protocol import ProductLookup

logger = logging.getLogger(__name__)


class FreeGiftCalculator:
    """Appends one free line for the coupon's product.

    No Discount is recorded; the free line contributes nothing to the total.
    """

    def __init__(self, lookup: ProductLookup):
        self._lookup = lookup

    def apply(self, coupon: Coupon, order: Order) -> None:
        sku = require_item_code(coupon)
        product = self._lookup.find_product_by_sku(sku)
        if product is None:
            raise ProductNotFoundError(sku)

        logger.debug("Coupon %s adds free %s", coupon.code, sku)
        order.order_lines.append(OrderLine(product=product, quantity=1, is_free=True))
