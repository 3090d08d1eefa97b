"""
In-memory persistence.

Repositories and unit of work backed by dictionaries, for tests and demos.
Aggregates are stored and returned as copies, so nothing reaches the store
without save_changes().
"""
from copy import deepcopy
from typing import Dict, Optional
import logging

from ordering.domain.entities import Buyer, Order
from ordering.domain.exceptions import OrderNotFoundError
from ordering.domain.repositories import BuyerRepository, OrderRepository, UnitOfWork


logger = logging.getLogger(__name__)


def _snapshot(aggregate):
    copy = deepcopy(aggregate)
    copy.clear_domain_events()
    return copy


class InMemoryStore:
    """Committed state shared by every unit of work created over it."""

    def __init__(self):
        self.orders: Dict[str, Order] = {}
        self.buyers: Dict[str, Buyer] = {}


class InMemoryUnitOfWork(UnitOfWork):
    """Stages aggregates and copies them into the store on save_changes()."""

    def __init__(self, store: Optional[InMemoryStore] = None):
        self.store = store if store is not None else InMemoryStore()
        self._staged_orders: Dict[str, Order] = {}
        self._staged_buyers: Dict[str, Buyer] = {}
        self.orders = InMemoryOrderRepository(self)
        self.buyers = InMemoryBuyerRepository(self)

    def stage_order(self, order: Order) -> None:
        self._staged_orders[order.id] = order

    def stage_buyer(self, buyer: Buyer) -> None:
        self._staged_buyers[buyer.id] = buyer

    async def save_changes(self) -> int:
        affected = 0
        for order_id, order in self._staged_orders.items():
            self.store.orders[order_id] = _snapshot(order)
            affected += 1
        for buyer_id, buyer in self._staged_buyers.items():
            self.store.buyers[buyer_id] = _snapshot(buyer)
            affected += 1

        self._staged_orders.clear()
        self._staged_buyers.clear()
        logger.info(f"In-memory commit: {affected} aggregate(s)")
        return affected


class InMemoryOrderRepository(OrderRepository):
    """In-memory implementation of OrderRepository."""

    def __init__(self, unit_of_work: InMemoryUnitOfWork):
        self._unit_of_work = unit_of_work

    @property
    def unit_of_work(self) -> InMemoryUnitOfWork:
        return self._unit_of_work

    def add(self, order: Order) -> Order:
        self._unit_of_work.stage_order(order)
        return order

    def update(self, order: Order) -> Order:
        if order.id not in self._unit_of_work.store.orders:
            raise OrderNotFoundError(order.id, "update")
        self._unit_of_work.stage_order(order)
        return order

    async def get(self, order_id: str) -> Optional[Order]:
        order = self._unit_of_work.store.orders.get(order_id)
        return deepcopy(order) if order is not None else None


class InMemoryBuyerRepository(BuyerRepository):
    """In-memory implementation of BuyerRepository."""

    def __init__(self, unit_of_work: InMemoryUnitOfWork):
        self._unit_of_work = unit_of_work

    @property
    def unit_of_work(self) -> InMemoryUnitOfWork:
        return self._unit_of_work

    def add(self, buyer: Buyer) -> Buyer:
        self._unit_of_work.stage_buyer(buyer)
        return buyer

    def update(self, buyer: Buyer) -> Buyer:
        self._unit_of_work.stage_buyer(buyer)
        return buyer

    async def find_by_identity(self, identity: str) -> Optional[Buyer]:
        for buyer in self._unit_of_work.store.buyers.values():
            if buyer.identity_guid == identity:
                return deepcopy(buyer)
        return None

    async def find_by_id(self, buyer_id: str) -> Optional[Buyer]:
        buyer = self._unit_of_work.store.buyers.get(buyer_id)
        return deepcopy(buyer) if buyer is not None else None
