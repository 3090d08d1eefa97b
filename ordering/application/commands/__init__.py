"""Application commands."""
from .create_order import CreateOrderCommand, OrderItemDTO
from .order_status import CancelOrderCommand, ShipOrderCommand

__all__ = [
    "CancelOrderCommand",
    "CreateOrderCommand",
    "OrderItemDTO",
    "ShipOrderCommand",
]
