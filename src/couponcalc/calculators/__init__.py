"""Coupon calculators and calculator selection for couponcalc."""

from ..errors import UnsupportedCouponTypeError
from .calculator_protocol import CatalogLookup, CouponCalculator, ProductLookup
from .free_gift import FreeGiftCalculator
from .selector import CouponCalculatorSelector, supported_types
from .specific_item import (
    SpecificCategoryCalculator,
    SpecificProductCalculator,
    SpecificSupplierCalculator,
)
from .whole_order import WholeOrderFixedCalculator, WholeOrderPercentageCalculator

__all__ = [
    # Protocols
    "CouponCalculator",
    "ProductLookup",
    "CatalogLookup",
    # Calculators
    "WholeOrderFixedCalculator",
    "WholeOrderPercentageCalculator",
    "SpecificProductCalculator",
    "SpecificSupplierCalculator",
    "SpecificCategoryCalculator",
    "FreeGiftCalculator",
    # Selection
    "CouponCalculatorSelector",
    "supported_types",
    "UnsupportedCouponTypeError",
]
