"""SQLAlchemy implementation of BuyerRepository."""

from typing import Dict, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ordering.domain.entities import Buyer
from ordering.domain.repositories import BuyerRepository, UnitOfWork

from ..mappers import BuyerMapper
from ..models import BuyerModel


class SqlAlchemyBuyerRepository(BuyerRepository):
    """Concrete implementation of BuyerRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession, unit_of_work: UnitOfWork) -> None:
        self._session = session
        self._unit_of_work = unit_of_work
        self._models: Dict[str, BuyerModel] = {}

    @property
    def unit_of_work(self) -> UnitOfWork:
        return self._unit_of_work

    def add(self, buyer: Buyer) -> Buyer:
        model = BuyerMapper.to_persistence(buyer)
        self._session.add(model)
        self._models[buyer.id] = model
        return buyer

    def update(self, buyer: Buyer) -> Buyer:
        """Stage new payment methods of a buyer loaded through this repository."""
        model = self._models.get(buyer.id)
        if model is None:
            raise LookupError(f"Buyer {buyer.id} was not loaded in this unit of work")
        BuyerMapper.update_persistence(buyer, model)
        return buyer

    async def find_by_identity(self, identity: str) -> Optional[Buyer]:
        return await self._find_one(BuyerModel.identity_guid == identity)

    async def find_by_id(self, buyer_id: str) -> Optional[Buyer]:
        return await self._find_one(BuyerModel.id == buyer_id)

    async def _find_one(self, condition) -> Optional[Buyer]:
        result = await self._session.execute(
            select(BuyerModel)
            .options(selectinload(BuyerModel.payment_methods))
            .where(condition)
        )
        model = result.scalar_one_or_none()
        if not model:
            return None

        self._models[model.id] = model
        return BuyerMapper.to_domain(model)
