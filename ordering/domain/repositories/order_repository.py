"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.order import Order
from .unit_of_work import UnitOfWork


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @property
    @abstractmethod
    def unit_of_work(self) -> UnitOfWork:
        """Unit of work that commits what this repository stages."""
        pass

    @abstractmethod
    def add(self, order: Order) -> Order:
        """Stage a new order for insert.

        Args:
            order: Order aggregate to persist
        """
        pass

    @abstractmethod
    def update(self, order: Order) -> Order:
        """Stage changes of a loaded order."""
        pass

    @abstractmethod
    async def get(self, order_id: str) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        pass
