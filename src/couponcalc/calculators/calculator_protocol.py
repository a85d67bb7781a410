"""Protocol definitions for coupon calculators and their collaborators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..models import Coupon, Order, Product


class CouponCalculator(Protocol):
    """Protocol for the per-coupon-type discount calculation.

    Implementations mutate the order in place: they either append to
    ``order.discounts`` or append a single line to ``order.order_lines``.
    An implementation applies its whole effect or raises before touching
    the order.

    Each implementation handles a specific coupon type
    (e.g., WholeOrderFixedCalculator, FreeGiftCalculator).
    """

    def apply(self, coupon: Coupon, order: Order) -> None:
        """Apply a coupon to an order.

        Args:
            coupon: The resolved coupon. Read-only.
            order: The order to mutate.
        """
        ...


class ProductLookup(Protocol):
    """Resolves products by SKU. Only free-gift calculation needs it."""

    def find_product_by_sku(self, sku: str) -> Product | None:
        """Return the product for a SKU, or None if unknown."""
        ...


class CatalogLookup(ProductLookup, Protocol):
    """Product lookup that can also resolve coupons by code."""

    def find_coupon_by_code(self, code: str) -> Coupon | None:
        """Return the coupon for a code, or None if unknown."""
        ...
