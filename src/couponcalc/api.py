"""FastAPI REST API for couponcalc."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from . import __version__
from .calculators import supported_types
from .catalog_store import CatalogStore
from .engine import apply_coupon_code
from .errors import (
    CatalogNotFoundError,
    CouponCalcError,
    CouponNotFoundError,
    InvalidCatalogError,
    InvalidCouponError,
    InvalidOrderError,
    InvalidSchemaVersionError,
    ProductNotFoundError,
    UnsupportedCouponTypeError,
)
from .utils import build_order


# --- Pydantic Schemas ---


class ProductSchema(BaseModel):
    sku_code: str
    category: str
    supplier: str
    price: str


class CouponSchema(BaseModel):
    code: str
    coupon_type: str
    item_code: str | None = None
    amount: str


class OrderLineSchema(BaseModel):
    product: ProductSchema
    quantity: int
    is_free: bool
    subtotal: str


class DiscountSchema(BaseModel):
    remarks: str
    amount: str


class OrderSchema(BaseModel):
    order_lines: list[OrderLineSchema]
    discounts: list[DiscountSchema]
    total: str
    amount_payable: str


class OrderLineRequest(BaseModel):
    sku: str = Field(..., description="Product SKU code")
    quantity: int = Field(default=1, ge=1)


class ApplyCouponRequest(BaseModel):
    """Request body for applying a coupon to an order."""

    coupon_code: str = Field(..., description="Code of the coupon to apply")
    lines: list[OrderLineRequest] = Field(default_factory=list)


class ProductListResponse(BaseModel):
    products: list[ProductSchema]
    count: int


class CouponListResponse(BaseModel):
    coupons: list[CouponSchema]
    count: int


class ErrorResponse(BaseModel):
    detail: str
    error_type: str


# --- Helper Functions ---


def get_catalog_store() -> CatalogStore:
    """Get the CatalogStore for the configured catalog path."""
    return CatalogStore()


app = FastAPI(
    title="couponcalc API",
    description="REST API for applying coupons to orders",
    version=__version__,
)


# --- Global Exception Handler ---


# Map exception types to HTTP status codes
ERROR_STATUS_CODES: dict[type, int] = {
    UnsupportedCouponTypeError: 400,
    InvalidCouponError: 400,
    InvalidOrderError: 400,
    ProductNotFoundError: 404,
    CouponNotFoundError: 404,
    CatalogNotFoundError: 503,
    InvalidSchemaVersionError: 500,
    InvalidCatalogError: 500,
}


@app.exception_handler(CouponCalcError)
async def couponcalc_error_handler(request: Request, exc: CouponCalcError) -> JSONResponse:
    """Map CouponCalcError subclasses to appropriate HTTP responses."""
    status_code = ERROR_STATUS_CODES.get(type(exc), 500)
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error_type": type(exc).__name__},
    )


# --- Endpoints ---


@app.get("/api/health")
def health_check():
    """
    Health check endpoint.

    Reports whether the catalog is present and which coupon types are supported.
    """
    store = get_catalog_store()
    return {
        "status": "ok",
        "catalog_found": store.exists(),
        "coupon_types": supported_types(),
    }


@app.get("/api/products", response_model=ProductListResponse)
def list_products():
    """List all catalog products."""
    products = get_catalog_store().list_products()
    return ProductListResponse(
        products=[ProductSchema(**p.to_dict()) for p in products],
        count=len(products),
    )


@app.get("/api/coupons", response_model=CouponListResponse)
def list_coupons():
    """List all catalog coupons."""
    coupons = get_catalog_store().list_coupons()
    return CouponListResponse(
        coupons=[CouponSchema(**c.to_dict()) for c in coupons],
        count=len(coupons),
    )


@app.post(
    "/api/orders/apply-coupon",
    response_model=OrderSchema,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def apply_coupon_to_order(request: ApplyCouponRequest):
    """
    Build an order from SKU/quantity lines and apply a coupon to it.

    Returns the resulting lines, discounts, total and amount payable.
    """
    store = get_catalog_store()
    order = build_order([(line.sku, line.quantity) for line in request.lines], store)
    apply_coupon_code(order, request.coupon_code, store)
    return OrderSchema(**order.to_dict())
