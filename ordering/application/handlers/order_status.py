"""Handlers moving an existing order along its lifecycle."""
import logging

from ordering.application.commands import CancelOrderCommand, ShipOrderCommand
from ordering.domain.entities import Order
from ordering.domain.event_bus import EventBus
from ordering.domain.exceptions import OrderNotFoundError
from ordering.domain.repositories import OrderRepository

from .dispatch import save_and_publish


logger = logging.getLogger(__name__)


class _OrderStatusHandler:
    operation = ""

    def __init__(self, order_repository: OrderRepository, event_bus: EventBus):
        self.order_repository = order_repository
        self.event_bus = event_bus

    async def _load(self, order_id: str) -> Order:
        order = await self.order_repository.get(order_id)
        if order is None:
            raise OrderNotFoundError(order_id, self.operation)
        return order

    async def _save(self, order: Order) -> bool:
        self.order_repository.update(order)
        saved = await save_and_publish(self.order_repository.unit_of_work, self.event_bus, [order])
        logger.info(f"[{order.id}] {self.operation}: status={order.status.value} saved={saved}")
        return saved


class CancelOrderCommandHandler(_OrderStatusHandler):
    """
    Cancel an order.

    Raises:
        OrderNotFoundError: Unknown order id
        InvalidStatusTransitionError: Order already shipped, cancelled or refunded
    """

    operation = "cancel"

    async def handle(self, command: CancelOrderCommand) -> bool:
        order = await self._load(command.order_id)
        order.set_cancelled(command.reason)
        return await self._save(order)


class ShipOrderCommandHandler(_OrderStatusHandler):
    """
    Mark a paid order as shipped.

    Raises:
        OrderNotFoundError: Unknown order id
        InvalidStatusTransitionError: Order is not paid
    """

    operation = "ship"

    async def handle(self, command: ShipOrderCommand) -> bool:
        order = await self._load(command.order_id)
        order.set_shipped_status()
        return await self._save(order)
