"""Product and coupon lookup backed by memory or a JSON catalog file."""

import json
import logging
import os
from pathlib import Path
from typing import Any, Iterable

from .errors import CatalogNotFoundError, InvalidCatalogError, InvalidSchemaVersionError
from .models import Coupon, Product

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

# Can be overridden via COUPONCALC_CATALOG environment variable
_default_catalog_path = Path(__file__).parent.parent.parent / "data" / "catalog.json"


def default_catalog_path() -> Path:
    """Get the catalog path from the environment, falling back to data/catalog.json."""
    return Path(os.environ.get("COUPONCALC_CATALOG", _default_catalog_path))


class InMemoryCatalog:
    """Dictionary-backed product and coupon lookup."""

    def __init__(
        self,
        products: Iterable[Product] = (),
        coupons: Iterable[Coupon] = (),
    ):
        self._products = {p.sku_code: p for p in products}
        self._coupons = {c.code: c for c in coupons}

    def find_product_by_sku(self, sku: str) -> Product | None:
        return self._products.get(sku)

    def find_coupon_by_code(self, code: str) -> Coupon | None:
        return self._coupons.get(code)

    def list_products(self) -> list[Product]:
        return sorted(self._products.values(), key=lambda p: p.sku_code)

    def list_coupons(self) -> list[Coupon]:
        return sorted(self._coupons.values(), key=lambda c: c.code)


class CatalogStore:
    """Read-only lookup over a JSON catalog file.

    The file is loaded lazily on first access and cached for the
    lifetime of the store.
    """

    def __init__(self, catalog_path: Path | None = None):
        """
        Initialize CatalogStore.

        Args:
            catalog_path: Override catalog file (for testing).
        """
        self.catalog_path = Path(catalog_path) if catalog_path else default_catalog_path()
        self._catalog: InMemoryCatalog | None = None

    def exists(self) -> bool:
        """Check if catalog file exists."""
        return self.catalog_path.exists()

    def load(self) -> InMemoryCatalog:
        """
        Load the catalog from disk.

        Raises:
            CatalogNotFoundError: If the catalog file doesn't exist.
            InvalidSchemaVersionError: If schema version is unsupported.
            InvalidCatalogError: If the file is not valid JSON or an entry is malformed.
        """
        if self._catalog is not None:
            return self._catalog

        if not self.exists():
            raise CatalogNotFoundError(str(self.catalog_path))

        path = str(self.catalog_path)
        try:
            with open(self.catalog_path, "r", encoding="utf-8") as f:
                data: dict[str, Any] = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidCatalogError(path, f"not valid JSON ({e})") from e

        if not isinstance(data, dict):
            raise InvalidCatalogError(path, "top level must be an object")

        version = data.get("schema_version", 0)
        if version != SCHEMA_VERSION:
            raise InvalidSchemaVersionError(version, SCHEMA_VERSION)

        try:
            products = [Product.from_dict(p) for p in data.get("products", [])]
            coupons = [Coupon.from_dict(c) for c in data.get("coupons", [])]
        except KeyError as e:
            raise InvalidCatalogError(path, f"entry is missing key {e}") from e
        except (TypeError, AttributeError) as e:
            raise InvalidCatalogError(path, f"malformed entry ({e})") from e

        self._catalog = InMemoryCatalog(products=products, coupons=coupons)
        logger.info(
            "Loaded catalog %s (%d products, %d coupons)",
            self.catalog_path,
            len(self._catalog.list_products()),
            len(self._catalog.list_coupons()),
        )
        return self._catalog

    def find_product_by_sku(self, sku: str) -> Product | None:
        return self.load().find_product_by_sku(sku)

    def find_coupon_by_code(self, code: str) -> Coupon | None:
        return self.load().find_coupon_by_code(code)

    def list_products(self) -> list[Product]:
        return self.load().list_products()

    def list_coupons(self) -> list[Coupon]:
        return self.load().list_coupons()
