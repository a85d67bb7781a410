"""couponcalc: apply typed coupons to orders."""

__version__ = "0.1.0"
