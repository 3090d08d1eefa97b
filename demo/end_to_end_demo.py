"""
End-to-End Demo: Order creation and lifecycle

This demonstrates the complete workflow:
1. Validate the payment card
2. Create or load the buyer and verify its payment method
3. Create the order in Submitted status
4. Commit buyer and order in one transaction
5. Publish domain events after the commit
6. Cancel the order through its state machine

Runs against a local SQLite database (ORDERING_DATABASE_URL to override).
"""
import asyncio
from datetime import datetime, timedelta
from decimal import Decimal

from ordering.application import (
    CancelOrderCommand,
    CancelOrderCommandHandler,
    CreateOrderCommand,
    CreateOrderCommandHandler,
    OrderItemDTO,
)
from ordering.data import create_uow
from ordering.domain.events import DomainEvent
from ordering.infrastructure.adapters.identity import ContextIdentityService, caller_identity
from ordering.infrastructure.database import close_database, get_session_factory, init_database
from ordering.infrastructure.event_bus import get_event_bus
from ordering.infrastructure.logging import configure_logging

logger = configure_logging()


def print_event(event: DomainEvent) -> None:
    print(f"   📣 {event.event_type}: {event.to_dict()['data']}")


async def demo_place_and_cancel():
    """Demo: place an order, then cancel it."""

    print("\n" + "="*80)
    print("DEMO: Place and cancel an order")
    print("="*80 + "\n")

    await init_database()
    session_factory = get_session_factory()
    event_bus = get_event_bus()
    event_bus.subscribe(None, print_event)
    started = []
    event_bus.subscribe("OrderStartedEvent", started.append)
    identity_service = ContextIdentityService()

    command = CreateOrderCommand(
        street="1 Main Street",
        city="Springfield",
        state="IL",
        country="US",
        zip_code="62701",
        card_number="4012888888881881",
        card_holder_name="Jane Doe",
        card_expiration=datetime.now() + timedelta(days=365),
        card_security_number="123",
        card_type_id=2,
        order_items=[
            OrderItemDTO(product_id=1, product_name="Mug", unit_price=Decimal("8.50"), units=2),
            OrderItemDTO(product_id=2, product_name="T-Shirt", unit_price=Decimal("19.99")),
        ],
    )

    with caller_identity("demo-user-1"):
        async with create_uow(session_factory) as uow:
            handler = CreateOrderCommandHandler(uow.orders, uow.buyers, identity_service, event_bus)
            created = await handler.handle(command)
            print(f"\n✅ Order created: {created}\n")

    event_bus.unsubscribe("OrderStartedEvent", started.append)
    order_id = started[-1].order_id

    async with create_uow(session_factory) as uow:
        handler = CancelOrderCommandHandler(uow.orders, event_bus)
        cancelled = await handler.handle(CancelOrderCommand(order_id=order_id, reason="Changed my mind"))
        print(f"\n✅ Order {order_id} cancelled: {cancelled}\n")


async def main():
    """Run the demo."""
    try:
        await demo_place_and_cancel()
        print("\n✅ Demo completed successfully!")
    except Exception as e:
        logger.error(f"Demo failed: {e}", exc_info=True)
        raise
    finally:
        await close_database()


if __name__ == "__main__":
    asyncio.run(main())
