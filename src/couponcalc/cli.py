"""Command-line interface for couponcalc."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from . import __version__
from .catalog_store import CatalogStore
from .engine import apply_coupon_code
from .errors import CouponCalcError
from .utils import build_order, format_coupon, format_order, format_product, parse_line_spec


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging from COUPONCALC_LOG_LEVEL (or DEBUG with --verbose)."""
    level_name = "DEBUG" if verbose else os.environ.get("COUPONCALC_LOG_LEVEL", "WARNING")
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.WARNING),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def get_store(args: argparse.Namespace) -> CatalogStore:
    """Get the CatalogStore for --catalog or the configured default."""
    return CatalogStore(Path(args.catalog) if args.catalog else None)


def cmd_apply(args: argparse.Namespace) -> int:
    """Apply a coupon code to an order built from SKU:QTY lines."""
    try:
        store = get_store(args)

        lines = [parse_line_spec(spec) for spec in args.lines]
        order = build_order(lines, store)
        apply_coupon_code(order, args.coupon, store)

        if args.json:
            print(json.dumps(order.to_dict(), indent=2))
        else:
            print(f"Applied coupon: {args.coupon}")
            print(format_order(order))
        return 0

    except CouponCalcError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_products(args: argparse.Namespace) -> int:
    """List catalog products."""
    try:
        products = get_store(args).list_products()

        if not products:
            print("No products found.")
            return 0

        if args.json:
            print(json.dumps([p.to_dict() for p in products], indent=2))
        else:
            print(f"Products ({len(products)}):")
            for product in products:
                print(f"  {format_product(product)}")
        return 0

    except CouponCalcError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_coupons(args: argparse.Namespace) -> int:
    """List catalog coupons."""
    try:
        coupons = get_store(args).list_coupons()

        if not coupons:
            print("No coupons found.")
            return 0

        if args.json:
            print(json.dumps([c.to_dict() for c in coupons], indent=2))
        else:
            print(f"Coupons ({len(coupons)}):")
            for coupon in coupons:
                print(f"  {format_coupon(coupon)}")
        return 0

    except CouponCalcError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_serve(args: argparse.Namespace) -> int:
    """Start the API server."""
    try:
        import uvicorn

        store = get_store(args)
        if not store.exists():
            print(f"Warning: catalog not found at {store.catalog_path}.", file=sys.stderr)
            print("Starting server anyway...", file=sys.stderr)
        if args.catalog:
            os.environ["COUPONCALC_CATALOG"] = str(store.catalog_path)

        print("Starting couponcalc API server...")
        print(f"Catalog: {store.catalog_path}")
        print(f"API docs: http://{args.host}:{args.port}/docs")
        print()

        # When reload is enabled, uvicorn requires the app as an import string
        app_target = "couponcalc.api:app" if args.reload else None
        if app_target is None:
            from .api import app
            app_target = app

        uvicorn.run(app_target, host=args.host, port=args.port, reload=args.reload)
        return 0

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="couponcalc",
        description="Apply coupons to orders and compute the amount payable.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--catalog", "-c", help="Path to catalog JSON (default: $COUPONCALC_CATALOG or data/catalog.json)"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # apply
    apply_parser = subparsers.add_parser("apply", help="Apply a coupon to an order")
    apply_parser.add_argument("coupon", help="Coupon code")
    apply_parser.add_argument(
        "lines", nargs="+", help="Order lines as SKU or SKU:QTY (e.g., A1:2 B7)"
    )
    apply_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # products
    products_parser = subparsers.add_parser("products", help="List catalog products")
    products_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # coupons
    coupons_parser = subparsers.add_parser("coupons", help="List catalog coupons")
    coupons_parser.add_argument("--json", action="store_true", help="Output as JSON")

    # serve
    serve_parser = subparsers.add_parser("serve", help="Start the API server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Host to bind (default: 127.0.0.1)")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port (default: 8000)")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    return parser


def main() -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()
    configure_logging(args.verbose)

    commands = {
        "apply": cmd_apply,
        "products": cmd_products,
        "coupons": cmd_coupons,
        "serve": cmd_serve,
    }

    cmd_func = commands.get(args.command)
    if cmd_func:
        return cmd_func(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
