"""Application layer - commands, handlers and interfaces."""

from .commands import CancelOrderCommand, CreateOrderCommand, OrderItemDTO, ShipOrderCommand
from .handlers import (
    CancelOrderCommandHandler,
    CreateOrderCommandHandler,
    ShipOrderCommandHandler,
)
from .interfaces import IdentityService

__all__ = [
    # Commands
    "CancelOrderCommand",
    "CreateOrderCommand",
    "OrderItemDTO",
    "ShipOrderCommand",
    # Handlers
    "CancelOrderCommandHandler",
    "CreateOrderCommandHandler",
    "ShipOrderCommandHandler",
    # Interfaces
    "IdentityService",
]
