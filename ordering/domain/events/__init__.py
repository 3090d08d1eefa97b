"""Domain events collected by aggregates and dispatched after commit."""
from .base import DomainEvent
from .buyer_events import PaymentMethodVerifiedEvent
from .order_events import (
    OrderStartedEvent,
    OrderStatusChangedEvent,
    OrderAwaitingValidationEvent,
    OrderStockConfirmedEvent,
    OrderPaidEvent,
    OrderShippedEvent,
    OrderCancelledEvent,
    OrderRefundRequestedEvent,
)

__all__ = [
    "DomainEvent",
    "PaymentMethodVerifiedEvent",
    "OrderStartedEvent",
    "OrderStatusChangedEvent",
    "OrderAwaitingValidationEvent",
    "OrderStockConfirmedEvent",
    "OrderPaidEvent",
    "OrderShippedEvent",
    "OrderCancelledEvent",
    "OrderRefundRequestedEvent",
]
