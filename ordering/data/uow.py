"""Unit of Work pattern for atomic transactions."""

from typing import Optional
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ordering.domain.repositories import UnitOfWork

from .repositories import SqlAlchemyBuyerRepository, SqlAlchemyOrderRepository


logger = logging.getLogger(__name__)


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    Unit of Work over one SQLAlchemy session.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Hand out repositories bound to that session
    3. Atomic commit/rollback of everything they staged

    Usage:
        async with SqlAlchemyUnitOfWork(session_factory) as uow:
            handler = CreateOrderCommandHandler(uow.orders, uow.buyers, identity, bus)
            created = await handler.handle(command)

    The session factory must be created with autoflush=False: affected rows
    are counted from the session's pending state right before commit.
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

        # Lazy-loaded repositories
        self._order_repository: Optional[SqlAlchemyOrderRepository] = None
        self._buyer_repository: Optional[SqlAlchemyBuyerRepository] = None

    async def __aenter__(self) -> "SqlAlchemyUnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Rollback on exception, always close the session."""
        if exc_type is not None:
            logger.error(f"Transaction failed: {exc_val}")
            await self._session.rollback()
        await self._session.close()
        self._session = None
        self._order_repository = None
        self._buyer_repository = None

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        """Lazy-load order repository."""
        if self._order_repository is None:
            self._order_repository = SqlAlchemyOrderRepository(self.session, self)
        return self._order_repository

    @property
    def buyers(self) -> SqlAlchemyBuyerRepository:
        """Lazy-load buyer repository."""
        if self._buyer_repository is None:
            self._buyer_repository = SqlAlchemyBuyerRepository(self.session, self)
        return self._buyer_repository

    async def save_changes(self) -> int:
        """Commit all pending changes.

        Returns:
            Number of inserted, updated and deleted rows

        Raises:
            Exception: Any storage error (including stale version conflicts),
                after rollback
        """
        session = self.session
        affected = (
            len(session.new)
            + len(session.deleted)
            + sum(
                1 for obj in session.dirty
                if session.is_modified(obj, include_collections=False)
            )
        )

        try:
            await session.commit()
        except Exception as e:
            logger.error(f"❌ Commit failed: {e}")
            await session.rollback()
            raise

        logger.info(f"✅ Transaction committed ({affected} row(s))")
        return affected


def create_uow(session_factory: async_sessionmaker) -> SqlAlchemyUnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory

    Returns:
        SqlAlchemyUnitOfWork instance
    """
    return SqlAlchemyUnitOfWork(session_factory)
