"""Command handlers."""
from .create_order import CreateOrderCommandHandler
from .dispatch import save_and_publish
from .order_status import CancelOrderCommandHandler, ShipOrderCommandHandler

__all__ = [
    "CancelOrderCommandHandler",
    "CreateOrderCommandHandler",
    "ShipOrderCommandHandler",
    "save_and_publish",
]
