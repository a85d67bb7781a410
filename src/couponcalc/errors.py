"""Custom exceptions for couponcalc."""


class CouponCalcError(Exception):
    """Base exception for all couponcalc errors."""

    pass


class UnsupportedCouponTypeError(CouponCalcError):
    """Raised when a coupon type has no registered calculator."""

    def __init__(self, coupon_type: object, supported: list[str] | None = None):
        self.coupon_type = coupon_type
        self.supported = supported or []
        msg = f"Unsupported coupon type: {coupon_type}"
        if self.supported:
            msg = f"{msg}. Supported: {', '.join(self.supported)}"
        super().__init__(msg)


class ProductNotFoundError(CouponCalcError):
    """Raised when a SKU cannot be resolved to a product."""

    def __init__(self, sku: str):
        self.sku = sku
        super().__init__(f"Product not found: {sku}")


class CouponNotFoundError(CouponCalcError):
    """Raised when a coupon code doesn't exist."""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Coupon not found: {code}")


class InvalidCouponError(CouponCalcError):
    """Raised when a coupon is missing data its type requires."""

    def __init__(self, code: str, reason: str):
        self.code = code
        self.reason = reason
        super().__init__(f"Invalid coupon {code}: {reason}")


class InvalidOrderError(CouponCalcError):
    """Raised when an order, order line or product holds invalid values."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid order: {reason}")


class CatalogNotFoundError(CouponCalcError):
    """Raised when the catalog file doesn't exist."""

    def __init__(self, path: str | None = None):
        self.path = path
        msg = "Catalog not found. Set COUPONCALC_CATALOG or pass --catalog."
        if path:
            msg = f"Catalog not found at {path}. Set COUPONCALC_CATALOG or pass --catalog."
        super().__init__(msg)


class InvalidSchemaVersionError(CouponCalcError):
    """Raised when a catalog has an unsupported schema version."""

    def __init__(self, found: int, supported: int):
        self.found = found
        self.supported = supported
        super().__init__(
            f"Unsupported schema version {found}. This tool supports version {supported}."
        )


class InvalidCatalogError(CouponCalcError):
    """Raised when a catalog file cannot be decoded into products and coupons."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid catalog at {path}: {reason}")
