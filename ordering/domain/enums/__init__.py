"""Domain enumerations."""
from .card_type import CardType
from .order_status import ALLOWED_TRANSITIONS, OrderStatus, can_transition, transition

__all__ = [
    "ALLOWED_TRANSITIONS",
    "CardType",
    "OrderStatus",
    "can_transition",
    "transition",
]
