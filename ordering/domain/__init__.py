"""Domain layer - pure domain models and interfaces."""

from .entities import Buyer, Order, OrderItem, PaymentMethod
from .enums import CardType, OrderStatus
from .event_bus import EventBus
from .repositories import BuyerRepository, OrderRepository, UnitOfWork
from .services import find_card_error, validate_card
from .value_objects import Address, Money

__all__ = [
    "Address",
    "Buyer",
    "BuyerRepository",
    "CardType",
    "EventBus",
    "Money",
    "Order",
    "OrderItem",
    "OrderRepository",
    "OrderStatus",
    "PaymentMethod",
    "UnitOfWork",
    "find_card_error",
    "validate_card",
]
