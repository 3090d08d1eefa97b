"""Ordering service: order creation and order lifecycle."""

__version__ = "0.1.0"
