"""SQLAlchemy repositories."""
from .buyer_repository_impl import SqlAlchemyBuyerRepository
from .order_repository_impl import SqlAlchemyOrderRepository

__all__ = ["SqlAlchemyBuyerRepository", "SqlAlchemyOrderRepository"]
