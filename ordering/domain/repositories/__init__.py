"""Repository and unit-of-work interfaces."""
from .buyer_repository import BuyerRepository
from .order_repository import OrderRepository
from .unit_of_work import UnitOfWork

__all__ = ["BuyerRepository", "OrderRepository", "UnitOfWork"]
