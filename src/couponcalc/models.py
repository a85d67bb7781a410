"""Data models for couponcalc."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from .errors import InvalidOrderError, UnsupportedCouponTypeError

ZERO = Decimal("0")


def _to_decimal(value: Any, name: str) -> Decimal:
    """Convert a JSON number or string to Decimal without float rounding."""
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError):
            raise InvalidOrderError(f"{name} is not a number: {value!r}") from None
    if not result.is_finite():
        raise InvalidOrderError(f"{name} must be finite, got {value!r}")
    return result


class CouponType(str, Enum):
    """The closed set of coupon kinds the engine understands."""

    WHOLE_ORDER_FIXED = "whole_order_fixed"
    WHOLE_ORDER_PERCENTAGE = "whole_order_percentage"
    SPECIFIC_PRODUCT = "specific_product"
    SPECIFIC_SUPPLIER = "specific_supplier"
    SPECIFIC_CATEGORY = "specific_category"
    FREE_GIFT = "free_gift"

    @classmethod
    def parse(cls, value: "CouponType | str") -> "CouponType":
        """Resolve a wire name to a CouponType.

        Raises:
            UnsupportedCouponTypeError: If the value is not a known type.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedCouponTypeError(value, [t.value for t in cls]) from None


@dataclass(frozen=True)
class Product:
    """A catalog product, identified by its SKU code."""

    sku_code: str
    category: str
    supplier: str
    price: Decimal

    def __post_init__(self) -> None:
        price = _to_decimal(self.price, "price")
        if price < ZERO:
            raise InvalidOrderError(f"price of {self.sku_code} is negative ({price})")
        object.__setattr__(self, "price", price)

    def to_dict(self) -> dict[str, Any]:
        return {
            "sku_code": self.sku_code,
            "category": self.category,
            "supplier": self.supplier,
            "price": str(self.price),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Product":
        return cls(
            sku_code=data["sku_code"],
            category=data.get("category", ""),
            supplier=data.get("supplier", ""),
            price=_to_decimal(data["price"], "price"),
        )


@dataclass
class OrderLine:
    """A product and quantity within an order."""

    product: Product
    quantity: int
    is_free: bool = False

    def __post_init__(self) -> None:
        # bool is an int subclass; reject it explicitly
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise InvalidOrderError(f"quantity must be an integer, got {self.quantity!r}")
        if self.quantity <= 0:
            raise InvalidOrderError(
                f"quantity of {self.product.sku_code} must be positive, got {self.quantity}"
            )

    @property
    def subtotal(self) -> Decimal:
        if self.is_free:
            return ZERO
        return self.product.price * self.quantity

    def to_dict(self) -> dict[str, Any]:
        return {
            "product": self.product.to_dict(),
            "quantity": self.quantity,
            "is_free": self.is_free,
            "subtotal": str(self.subtotal),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OrderLine":
        return cls(
            product=Product.from_dict(data["product"]),
            quantity=data["quantity"],
            is_free=data.get("is_free", False),
        )


@dataclass(frozen=True)
class Discount:
    """A monetary reduction recorded against an order."""

    remarks: str
    amount: Decimal

    def to_dict(self) -> dict[str, Any]:
        return {"remarks": self.remarks, "amount": str(self.amount)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Discount":
        return cls(remarks=data["remarks"], amount=_to_decimal(data["amount"], "amount"))


@dataclass
class Order:
    """An order: its lines, the discounts applied to it and derived totals.

    ``amount_payable`` is not clamped at zero; stacking discounts larger than
    the total yields a negative value.
    """

    order_lines: list[OrderLine] = field(default_factory=list)
    discounts: list[Discount] = field(default_factory=list)

    @property
    def total(self) -> Decimal:
        return sum((line.subtotal for line in self.order_lines), ZERO)

    @property
    def discount_total(self) -> Decimal:
        return sum((d.amount for d in self.discounts), ZERO)

    @property
    def amount_payable(self) -> Decimal:
        return self.total - self.discount_total

    def add_line(self, product: Product, quantity: int, is_free: bool = False) -> OrderLine:
        """Append a new line for a product and return it."""
        line = OrderLine(product=product, quantity=quantity, is_free=is_free)
        self.order_lines.append(line)
        return line

    def to_dict(self) -> dict[str, Any]:
        return {
            "order_lines": [line.to_dict() for line in self.order_lines],
            "discounts": [d.to_dict() for d in self.discounts],
            "total": str(self.total),
            "amount_payable": str(self.amount_payable),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Order":
        return cls(
            order_lines=[OrderLine.from_dict(line) for line in data.get("order_lines", [])],
            discounts=[Discount.from_dict(d) for d in data.get("discounts", [])],
        )


@dataclass(frozen=True)
class Coupon:
    """A promotional rule identified by its code.

    The meaning of ``amount`` depends on ``coupon_type``: a currency amount
    for fixed and specific coupons, a fraction (0.1 == 10%) for percentage
    coupons, unused for free gifts. ``item_code`` holds the SKU, supplier or
    category the coupon targets.
    """

    code: str
    coupon_type: CouponType
    item_code: str | None = None
    amount: Decimal = ZERO

    def __post_init__(self) -> None:
        object.__setattr__(self, "coupon_type", CouponType.parse(self.coupon_type))
        object.__setattr__(self, "amount", _to_decimal(self.amount, "amount"))

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "code": self.code,
            "coupon_type": self.coupon_type.value,
            "amount": str(self.amount),
        }
        if self.item_code is not None:
            result["item_code"] = self.item_code
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Coupon":
        return cls(
            code=data["code"],
            coupon_type=CouponType.parse(data["coupon_type"]),
            item_code=data.get("item_code"),
            amount=_to_decimal(data.get("amount", "0"), "amount"),
        )
