"""Selection of the calculator for a coupon type."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ..errors import UnsupportedCouponTypeError
from ..models import CouponType
from .free_gift import FreeGiftCalculator
from .specific_item import (
    SpecificCategoryCalculator,
    SpecificProductCalculator,
    SpecificSupplierCalculator,
)
from .whole_order import WholeOrderFixedCalculator, WholeOrderPercentageCalculator

if TYPE_CHECKING:
    from .calculator_protocol import CouponCalculator, ProductLookup

# Every CouponType must appear here; there is no fallback.
_CALCULATOR_FACTORIES: dict[CouponType, Callable[[ProductLookup], CouponCalculator]] = {
    CouponType.WHOLE_ORDER_FIXED: lambda lookup: WholeOrderFixedCalculator(),
    CouponType.WHOLE_ORDER_PERCENTAGE: lambda lookup: WholeOrderPercentageCalculator(),
    CouponType.SPECIFIC_PRODUCT: lambda lookup: SpecificProductCalculator(),
    CouponType.SPECIFIC_SUPPLIER: lambda lookup: SpecificSupplierCalculator(),
    CouponType.SPECIFIC_CATEGORY: lambda lookup: SpecificCategoryCalculator(),
    CouponType.FREE_GIFT: FreeGiftCalculator,
}


class CouponCalculatorSelector:
    """Maps a coupon type to the calculator that implements it."""

    def __init__(self, lookup: ProductLookup):
        """
        Initialize the selector.

        Args:
            lookup: Product lookup handed to calculators that need one.
        """
        self._lookup = lookup

    def calculator_for(self, coupon_type: CouponType | str) -> CouponCalculator:
        """Get a calculator for a coupon type.

        Args:
            coupon_type: A CouponType or its wire name (e.g., "free_gift").

        Returns:
            A fresh calculator instance.

        Raises:
            UnsupportedCouponTypeError: If the type has no calculator.
        """
        if not isinstance(coupon_type, CouponType):
            coupon_type = CouponType.parse(coupon_type)

        factory = _CALCULATOR_FACTORIES.get(coupon_type)
        if factory is None:
            raise UnsupportedCouponTypeError(coupon_type.value, supported_types())
        return factory(self._lookup)


def supported_types() -> list[str]:
    """Get the wire names of all coupon types with a calculator.

    Returns:
        Sorted list of coupon type names.
    """
    return sorted(t.value for t in _CALCULATOR_FACTORIES)
