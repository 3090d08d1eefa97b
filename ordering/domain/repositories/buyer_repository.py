"""Repository interfaces for Buyer aggregate."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.buyer import Buyer
from .unit_of_work import UnitOfWork


class BuyerRepository(ABC):
    """Abstract repository for Buyer aggregate persistence."""

    @property
    @abstractmethod
    def unit_of_work(self) -> UnitOfWork:
        pass

    @abstractmethod
    def add(self, buyer: Buyer) -> Buyer:
        """Stage a new buyer for insert."""
        pass

    @abstractmethod
    def update(self, buyer: Buyer) -> Buyer:
        """Stage changes of a loaded buyer (e.g. a new payment method)."""
        pass

    @abstractmethod
    async def find_by_identity(self, identity: str) -> Optional[Buyer]:
        """Retrieve buyer by identity-provider subject.

        Args:
            identity: Identity of the caller

        Returns:
            Buyer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id(self, buyer_id: str) -> Optional[Buyer]:
        pass
