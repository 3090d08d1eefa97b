"""SQLAlchemy implementation of OrderRepository."""

from typing import Dict, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ordering.domain.entities import Order
from ordering.domain.exceptions import OrderNotFoundError
from ordering.domain.repositories import OrderRepository, UnitOfWork

from ..mappers import OrderMapper
from ..models import OrderModel


class SqlAlchemyOrderRepository(OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession, unit_of_work: UnitOfWork) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session owned by the unit of work
            unit_of_work: Unit of work committing this session
        """
        self._session = session
        self._unit_of_work = unit_of_work
        self._models: Dict[str, OrderModel] = {}

    @property
    def unit_of_work(self) -> UnitOfWork:
        return self._unit_of_work

    def add(self, order: Order) -> Order:
        """Stage a new order for insert (no flush, no commit)."""
        model = OrderMapper.to_persistence(order)
        self._session.add(model)
        self._models[order.id] = model
        return order

    def update(self, order: Order) -> Order:
        """Copy aggregate changes onto the row loaded by get().

        Raises:
            OrderNotFoundError: If the order was not loaded through this repository
        """
        model = self._models.get(order.id)
        if model is None:
            raise OrderNotFoundError(order.id, "update")
        OrderMapper.update_persistence(order, model)
        return order

    async def get(self, order_id: str) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            Order if found, None otherwise
        """
        result = await self._session.execute(
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(OrderModel.id == order_id)
        )
        model = result.scalar_one_or_none()

        if not model:
            return None

        self._models[order_id] = model
        return OrderMapper.to_domain(model)
