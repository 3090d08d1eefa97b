"""
Integration tests: handlers against the SQLAlchemy unit of work.

Flow under test:
1. CreateOrderCommandHandler stages buyer + order in one session
2. SqlAlchemyUnitOfWork commits and reports affected rows
3. Events reach the bus only after the commit
4. Status handlers reload, transition and save the order
"""
from datetime import datetime, timedelta
from decimal import Decimal

import pytest
from sqlalchemy import func, select
from sqlalchemy.orm.exc import StaleDataError

from ordering.application.commands import CancelOrderCommand, OrderItemDTO, ShipOrderCommand
from ordering.application.handlers import (
    CancelOrderCommandHandler,
    CreateOrderCommandHandler,
    ShipOrderCommandHandler,
)
from ordering.data import create_uow
from ordering.data.models import OrderItemModel, PaymentMethodModel
from ordering.domain.enums import OrderStatus
from ordering.domain.exceptions import (
    ExpiredCardError,
    InvalidStatusTransitionError,
    OrderNotFoundError,
)
from ordering.infrastructure.adapters.identity import ContextIdentityService, caller_identity
from ordering.infrastructure.database import get_session_factory


async def _create_order(session_factory, event_bus, command, identity="1234") -> str:
    started = []
    event_bus.subscribe("OrderStartedEvent", started.append)
    try:
        with caller_identity(identity):
            async with create_uow(session_factory) as uow:
                handler = CreateOrderCommandHandler(
                    uow.orders, uow.buyers, ContextIdentityService(), event_bus
                )
                assert await handler.handle(command) is True
    finally:
        event_bus.unsubscribe("OrderStartedEvent", started.append)
    return started[-1].order_id


async def _count(session_factory, model) -> int:
    async with session_factory() as session:
        return await session.scalar(select(func.count()).select_from(model))


class TestCreateOrder:

    @pytest.mark.asyncio
    async def test_order_and_buyer_are_persisted(
        self, test_session_factory, event_bus, published, make_order_command
    ):
        command = make_order_command(
            card_number="4012888888881881",
            order_items=[OrderItemDTO(product_id=7, product_name="Mug", unit_price=Decimal("8.50"), units=2)],
        )

        order_id = await _create_order(test_session_factory, event_bus, command)

        async with create_uow(test_session_factory) as uow:
            order = await uow.orders.get(order_id)
            buyer = await uow.buyers.find_by_identity("1234")

        assert order.status == OrderStatus.SUBMITTED
        assert order.address.city == "city"
        assert order.get_total().amount == Decimal("17.00")
        assert order.buyer_id == buyer.id
        (payment,) = buyer.payment_methods
        assert order.payment_method_id == payment.id
        assert payment.card_number == "XXXXXXXXXXXX1881"
        assert payment.security_number is None
        assert [e.event_type for e in published] == [
            "PaymentMethodVerifiedEvent", "OrderStartedEvent",
        ]

    @pytest.mark.asyncio
    async def test_same_card_reuses_payment_method(
        self, test_session_factory, event_bus, published, order_command
    ):
        first = await _create_order(test_session_factory, event_bus, order_command)
        second = await _create_order(test_session_factory, event_bus, order_command)

        assert first != second
        assert await _count(test_session_factory, PaymentMethodModel) == 1
        assert [e.event_type for e in published] == [
            "PaymentMethodVerifiedEvent", "OrderStartedEvent", "OrderStartedEvent",
        ]

    @pytest.mark.asyncio
    async def test_new_card_adds_payment_method(
        self, test_session_factory, event_bus, make_order_command
    ):
        await _create_order(test_session_factory, event_bus, make_order_command(card_number="1111"))
        await _create_order(test_session_factory, event_bus, make_order_command(card_number="2222"))

        async with create_uow(test_session_factory) as uow:
            buyer = await uow.buyers.find_by_identity("1234")

        assert sorted(p.card_number for p in buyer.payment_methods) == ["1111", "2222"]

    @pytest.mark.asyncio
    async def test_rejected_card_writes_nothing(
        self, test_session_factory, event_bus, published, make_order_command
    ):
        command = make_order_command(card_expiration=datetime.now() - timedelta(days=1))

        with pytest.raises(ExpiredCardError):
            await _create_order(test_session_factory, event_bus, command)

        assert await _count(test_session_factory, PaymentMethodModel) == 0
        assert await _count(test_session_factory, OrderItemModel) == 0
        assert published == []

    @pytest.mark.asyncio
    async def test_save_with_nothing_staged_returns_zero(self, test_session_factory):
        async with create_uow(test_session_factory) as uow:
            assert await uow.save_changes() == 0


class TestOrderLifecycle:

    @pytest.mark.asyncio
    async def test_cancel_round_trip(
        self, test_session_factory, event_bus, published, order_command
    ):
        order_id = await _create_order(test_session_factory, event_bus, order_command)

        async with create_uow(test_session_factory) as uow:
            handler = CancelOrderCommandHandler(uow.orders, event_bus)
            assert await handler.handle(CancelOrderCommand(order_id, "Changed my mind")) is True

        async with create_uow(test_session_factory) as uow:
            order = await uow.orders.get(order_id)
        assert order.status == OrderStatus.CANCELLED
        assert order.description == "Changed my mind"
        assert published[-1].event_type == "OrderCancelledEvent"

    @pytest.mark.asyncio
    async def test_cancel_twice_is_rejected(self, test_session_factory, event_bus, order_command):
        order_id = await _create_order(test_session_factory, event_bus, order_command)

        async with create_uow(test_session_factory) as uow:
            await CancelOrderCommandHandler(uow.orders, event_bus).handle(CancelOrderCommand(order_id))

        with pytest.raises(InvalidStatusTransitionError):
            async with create_uow(test_session_factory) as uow:
                await CancelOrderCommandHandler(uow.orders, event_bus).handle(CancelOrderCommand(order_id))

    @pytest.mark.asyncio
    async def test_ship_requires_payment(self, test_session_factory, event_bus, order_command):
        order_id = await _create_order(test_session_factory, event_bus, order_command)

        with pytest.raises(InvalidStatusTransitionError):
            async with create_uow(test_session_factory) as uow:
                await ShipOrderCommandHandler(uow.orders, event_bus).handle(ShipOrderCommand(order_id))

        async with create_uow(test_session_factory) as uow:
            assert (await uow.orders.get(order_id)).status == OrderStatus.SUBMITTED

    @pytest.mark.asyncio
    async def test_unknown_order(self, test_session_factory, event_bus):
        with pytest.raises(OrderNotFoundError):
            async with create_uow(test_session_factory) as uow:
                await CancelOrderCommandHandler(uow.orders, event_bus).handle(CancelOrderCommand("missing"))

    @pytest.mark.asyncio
    async def test_concurrent_update_is_rejected(self, file_engine, event_bus, order_command):
        session_factory = get_session_factory(bind=file_engine)
        order_id = await _create_order(session_factory, event_bus, order_command)

        async with create_uow(session_factory) as first, create_uow(session_factory) as second:
            first_order = await first.orders.get(order_id)
            second_order = await second.orders.get(order_id)

            first_order.set_cancelled("first")
            first.orders.update(first_order)
            assert await first.save_changes() == 1

            second_order.set_cancelled("second")
            second.orders.update(second_order)
            with pytest.raises(StaleDataError):
                await second.save_changes()

        async with create_uow(session_factory) as uow:
            assert (await uow.orders.get(order_id)).description == "first"
