"""Data layer - infrastructure persistence and mapping."""

from .mappers import BuyerMapper, OrderItemMapper, OrderMapper, PaymentMethodMapper
from .models import Base, BuyerModel, OrderItemModel, OrderModel, PaymentMethodModel
from .repositories import SqlAlchemyBuyerRepository, SqlAlchemyOrderRepository
from .uow import SqlAlchemyUnitOfWork, create_uow

__all__ = [
    "Base",
    "BuyerMapper",
    "BuyerModel",
    "create_uow",
    "OrderItemMapper",
    "OrderItemModel",
    "OrderMapper",
    "OrderModel",
    "PaymentMethodMapper",
    "PaymentMethodModel",
    "SqlAlchemyBuyerRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyUnitOfWork",
]
