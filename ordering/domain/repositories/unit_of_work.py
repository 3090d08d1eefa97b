"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Transactional boundary shared by the repositories of one request."""

    @abstractmethod
    async def save_changes(self) -> int:
        """Commit every staged change atomically.

        Returns:
            Number of affected rows (0 means nothing was persisted)

        Raises:
            Exception: Storage failure, after the transaction is rolled back
        """
        pass
