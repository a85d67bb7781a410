"""Integration tests for CLI."""

import json
import os
import subprocess
import sys
from pathlib import Path

from couponcalc.cli import create_parser

SRC_DIR = Path(__file__).resolve().parent.parent / "src"


def run_couponcalc(args: list[str], cwd: Path) -> subprocess.CompletedProcess:
    """Run couponcalc CLI command."""
    return subprocess.run(
        [sys.executable, "-m", "couponcalc.cli"] + args,
        cwd=cwd,
        capture_output=True,
        text=True,
        env={**os.environ, "PYTHONPATH": str(SRC_DIR)},
    )


class TestParser:
    def test_apply_arguments(self):
        args = create_parser().parse_args(["--catalog", "c.json", "apply", "GIFT", "A1:2", "B7", "--json"])

        assert args.command == "apply"
        assert args.catalog == "c.json"
        assert args.coupon == "GIFT"
        assert args.lines == ["A1:2", "B7"]
        assert args.json is True

    def test_serve_defaults(self):
        args = create_parser().parse_args(["serve"])

        assert args.host == "127.0.0.1"
        assert args.port == 8000
        assert args.reload is False


class TestCLIIntegration:
    """Integration tests for CLI commands."""

    def test_apply_fixed_coupon(self, catalog_file, temp_dir):
        result = run_couponcalc(["--catalog", str(catalog_file), "apply", "TENOFF", "A1:10"], temp_dir)

        assert result.returncode == 0
        assert "Applied coupon: TENOFF" in result.stdout
        assert "Amount payable: 40.00" in result.stdout

    def test_apply_json_output(self, catalog_file, temp_dir):
        result = run_couponcalc(
            ["--catalog", str(catalog_file), "apply", "SAVE10", "C3:16", "--json"], temp_dir
        )

        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert data["discounts"][0]["remarks"] == "Discount for whole order (10%)"
        assert data["amount_payable"] == "180.0000"

    def test_apply_free_gift(self, catalog_file, temp_dir):
        result = run_couponcalc(
            ["--catalog", str(catalog_file), "apply", "GIFT", "B7", "--json"], temp_dir
        )

        assert result.returncode == 0
        data = json.loads(result.stdout)
        assert data["order_lines"][-1]["is_free"] is True
        assert data["total"] == "24.90"

    def test_apply_unknown_gift_product_fails(self, catalog_file, temp_dir):
        result = run_couponcalc(["--catalog", str(catalog_file), "apply", "NOGIFT", "A1"], temp_dir)

        assert result.returncode == 1
        assert "Product not found: MISSING" in result.stderr

    def test_apply_unknown_coupon_fails(self, catalog_file, temp_dir):
        result = run_couponcalc(["--catalog", str(catalog_file), "apply", "NOPE", "A1"], temp_dir)

        assert result.returncode == 1
        assert "Coupon not found: NOPE" in result.stderr

    def test_apply_bad_line_fails(self, catalog_file, temp_dir):
        result = run_couponcalc(["--catalog", str(catalog_file), "apply", "TENOFF", "A1:zero"], temp_dir)

        assert result.returncode == 1
        assert "Invalid order" in result.stderr

    def test_catalog_from_environment(self, catalog_file, temp_dir, monkeypatch):
        monkeypatch.setenv("COUPONCALC_CATALOG", str(catalog_file))

        result = run_couponcalc(["products"], temp_dir)

        assert result.returncode == 0
        assert "Products (4):" in result.stdout

    def test_missing_catalog_fails(self, temp_dir):
        result = run_couponcalc(["--catalog", str(temp_dir / "nope.json"), "coupons"], temp_dir)

        assert result.returncode == 1
        assert "Catalog not found" in result.stderr

    def test_coupons_json(self, catalog_file, temp_dir):
        result = run_couponcalc(["--catalog", str(catalog_file), "coupons", "--json"], temp_dir)

        assert result.returncode == 0
        codes = [c["code"] for c in json.loads(result.stdout)]
        assert "BOOKS3" in codes
        assert len(codes) == 7

    def test_no_command_prints_help(self, temp_dir):
        result = run_couponcalc([], temp_dir)

        assert result.returncode == 0
        assert "usage: couponcalc" in result.stdout

    def test_malformed_catalog_fails_cleanly(self, temp_dir):
        path = temp_dir / "broken.json"
        path.write_text(json.dumps({"schema_version": 1, "products": [{"sku_code": "A1"}]}))

        result = run_couponcalc(["--catalog", str(path), "products"], temp_dir)

        assert result.returncode == 1
        assert "Invalid catalog" in result.stderr
        assert "Traceback" not in result.stderr
