"""Entry points for applying a coupon to an order."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .calculators import CouponCalculatorSelector
from .errors import CouponCalcError, CouponNotFoundError

if TYPE_CHECKING:
    from .calculators import CatalogLookup, ProductLookup
    from .models import Coupon, Order

logger = logging.getLogger(__name__)


def apply_coupon(order: Order, coupon: Coupon, lookup: ProductLookup) -> Order:
    """
    Apply a resolved coupon to an order in place.

    Applying the same coupon twice records its effect twice; callers apply
    each coupon at most once.

    Args:
        order: The assembled order. Mutated.
        coupon: The coupon to apply.
        lookup: Product lookup, used by free-gift coupons.

    Returns:
        The same order, for chaining.

    Raises:
        UnsupportedCouponTypeError: If the coupon type has no calculator.
        ProductNotFoundError: If a free-gift SKU cannot be resolved.
        InvalidCouponError: If the coupon lacks a required item_code.
    """
    selector = CouponCalculatorSelector(lookup)
    try:
        calculator = selector.calculator_for(coupon.coupon_type)
        calculator.apply(coupon, order)
    except CouponCalcError as e:
        logger.warning("Coupon %s not applied: %s", coupon.code, e)
        raise

    logger.info(
        "Applied coupon %s (%s): total=%s payable=%s",
        coupon.code,
        coupon.coupon_type.value,
        order.total,
        order.amount_payable,
    )
    return order


def apply_coupon_code(order: Order, code: str, lookup: CatalogLookup) -> Order:
    """
    Resolve a coupon by code and apply it to an order.

    Raises:
        CouponNotFoundError: If the code is unknown.
    """
    coupon = lookup.find_coupon_by_code(code)
    if coupon is None:
        logger.warning("Coupon code %s not found", code)
        raise CouponNotFoundError(code)
    return apply_coupon(order, coupon, lookup)
