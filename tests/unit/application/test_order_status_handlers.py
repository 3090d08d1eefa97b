"""Unit tests for the cancel and ship handlers, backed by the in-memory store."""
import pytest

from ordering.application.commands import CancelOrderCommand, ShipOrderCommand
from ordering.application.handlers import CancelOrderCommandHandler, ShipOrderCommandHandler
from ordering.domain.enums import OrderStatus
from ordering.domain.events import OrderCancelledEvent, OrderShippedEvent, OrderStatusChangedEvent
from ordering.domain.exceptions import InvalidStatusTransitionError, OrderNotFoundError
from ordering.infrastructure.adapters.persistence import InMemoryStore, InMemoryUnitOfWork
from ordering.infrastructure.event_bus import InMemoryEventBus


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def event_bus():
    return InMemoryEventBus()


@pytest.fixture
def published(event_bus):
    events = []
    event_bus.subscribe(None, events.append)
    return events


async def _save(store, order):
    uow = InMemoryUnitOfWork(store)
    uow.orders.add(order)
    await uow.save_changes()


class TestCancelOrderHandler:

    @pytest.mark.asyncio
    async def test_cancel_persists_status_and_publishes(self, store, event_bus, published, order):
        await _save(store, order)
        handler = CancelOrderCommandHandler(InMemoryUnitOfWork(store).orders, event_bus)

        result = await handler.handle(CancelOrderCommand(order_id=order.id, reason="Changed my mind"))

        assert result is True
        assert store.orders[order.id].status == OrderStatus.CANCELLED
        assert store.orders[order.id].description == "Changed my mind"
        assert [type(e) for e in published] == [OrderStatusChangedEvent, OrderCancelledEvent]

    @pytest.mark.asyncio
    async def test_cancel_twice_fails(self, store, event_bus, published, order):
        await _save(store, order)
        await CancelOrderCommandHandler(InMemoryUnitOfWork(store).orders, event_bus).handle(
            CancelOrderCommand(order_id=order.id)
        )
        delivered = len(published)

        with pytest.raises(InvalidStatusTransitionError):
            await CancelOrderCommandHandler(InMemoryUnitOfWork(store).orders, event_bus).handle(
                CancelOrderCommand(order_id=order.id)
            )

        assert len(published) == delivered

    @pytest.mark.asyncio
    async def test_unknown_order(self, store, event_bus):
        handler = CancelOrderCommandHandler(InMemoryUnitOfWork(store).orders, event_bus)

        with pytest.raises(OrderNotFoundError) as exc_info:
            await handler.handle(CancelOrderCommand(order_id="missing"))

        assert isinstance(exc_info.value, LookupError)
        assert "cancel" in str(exc_info.value)


class TestShipOrderHandler:

    @pytest.mark.asyncio
    async def test_ship_paid_order(self, store, event_bus, published, order):
        order.set_awaiting_validation()
        order.set_stock_confirmed()
        order.set_paid_status()
        order.clear_domain_events()
        await _save(store, order)

        result = await ShipOrderCommandHandler(InMemoryUnitOfWork(store).orders, event_bus).handle(
            ShipOrderCommand(order_id=order.id)
        )

        assert result is True
        assert store.orders[order.id].status == OrderStatus.SHIPPED
        assert isinstance(published[-1], OrderShippedEvent)

    @pytest.mark.asyncio
    async def test_ship_unpaid_order_fails_and_keeps_status(
        self, store, event_bus, published, order
    ):
        await _save(store, order)

        with pytest.raises(InvalidStatusTransitionError):
            await ShipOrderCommandHandler(InMemoryUnitOfWork(store).orders, event_bus).handle(
                ShipOrderCommand(order_id=order.id)
            )

        assert store.orders[order.id].status == OrderStatus.SUBMITTED
        assert published == []
