"""Database models."""

from .base import Base
from .buyer_model import BuyerModel, PaymentMethodModel
from .order_model import OrderItemModel, OrderModel

__all__ = ["Base", "BuyerModel", "OrderItemModel", "OrderModel", "PaymentMethodModel"]
