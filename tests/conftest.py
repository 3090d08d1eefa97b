"""Shared fixtures for ordering tests."""
from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from ordering.application.commands import CreateOrderCommand
from ordering.domain.entities import Order
from ordering.domain.value_objects import Address, Money


def _fake_order_command(**overrides) -> CreateOrderCommand:
    values = dict(
        street="street",
        city="city",
        state="state",
        country="country",
        zip_code="zipcode",
        card_number="1234",
        card_holder_name="XXX",
        card_expiration=datetime.now() + timedelta(days=365),
        card_security_number="123",
        card_type_id=0,
    )
    values.update(overrides)
    return CreateOrderCommand(**values)


def _fake_order(with_items: bool = True) -> Order:
    order = Order.create(
        address=Address("street", "city", "state", "country", "zipcode"),
        buyer_id="buyer-1",
        payment_method_id="payment-1",
        card_type_id=1,
        card_number="12",
        card_security_number="111",
        card_holder_name="fakeName",
        card_expiration=datetime.now() + timedelta(days=365),
    )
    if with_items:
        order.add_order_item(
            product_id=1,
            product_name="cup",
            unit_price=Money(Decimal("10.00")),
            discount=Money(Decimal("0")),
            units=2,
        )
    order.clear_domain_events()
    return order


@pytest.fixture
def make_order_command():
    """Create-order command with valid defaults; keyword args replace fields."""
    return _fake_order_command


@pytest.fixture
def make_order():
    """Submitted order with events cleared; one line of 2 x 10.00 unless with_items=False."""
    return _fake_order


@pytest.fixture
def order_command():
    return _fake_order_command()


@pytest.fixture
def order():
    return _fake_order()
