"""Aggregates and entities."""
from .aggregate import AggregateRoot
from .buyer import Buyer, PaymentMethod, mask_card_number, payment_fingerprint
from .order import Order, OrderItem

__all__ = [
    "AggregateRoot",
    "Buyer",
    "Order",
    "OrderItem",
    "PaymentMethod",
    "mask_card_number",
    "payment_fingerprint",
]
