"""Tests for the Buyer aggregate."""
from datetime import datetime, timedelta

import pytest

from ordering.domain.entities import Buyer, PaymentMethod, mask_card_number
from ordering.domain.enums import CardType
from ordering.domain.events import PaymentMethodVerifiedEvent
from ordering.domain.exceptions import ArgumentError, EmptyIdentityError


EXPIRATION = datetime(2031, 1, 1)


def _verify(buyer: Buyer, **overrides) -> PaymentMethod:
    values = dict(
        alias="visa",
        card_number="4012888888881881",
        card_holder_name="Jane Doe",
        expiration=EXPIRATION,
        security_number="123",
        card_type_id=CardType.VISA,
    )
    values.update(overrides)
    return buyer.verify_or_add_payment_method(**values)


class TestBuyerCreation:

    @pytest.mark.parametrize("identity", ["", " ", "\t\n"])
    def test_empty_identity_fails(self, identity):
        with pytest.raises(EmptyIdentityError):
            Buyer.create(identity)

    def test_empty_identity_is_argument_error(self):
        with pytest.raises(ArgumentError):
            Buyer(id="b1", identity_guid="")

    def test_new_buyer_has_no_payment_methods(self):
        buyer = Buyer.create("1234")
        assert buyer.identity_guid == "1234"
        assert buyer.id
        assert buyer.payment_methods == []
        assert buyer.get_domain_events() == []


class TestVerifyOrAddPaymentMethod:

    def test_adds_method_and_records_event(self):
        buyer = Buyer.create("1234")

        payment = _verify(buyer, order_id="order-1")

        assert buyer.payment_methods == [payment]
        events = buyer.get_domain_events()
        assert len(events) == 1
        event = events[0]
        assert isinstance(event, PaymentMethodVerifiedEvent)
        assert event.buyer_id == buyer.id
        assert event.payment_method_id == payment.id
        assert event.order_id == "order-1"
        assert event.aggregate_type == "Buyer"
        assert event.aggregate_id == buyer.id

    def test_same_card_twice_yields_one_method(self):
        buyer = Buyer.create("1234")

        first = _verify(buyer)
        second = _verify(buyer, alias="other alias", security_number="999")

        assert second is first
        assert len(buyer.payment_methods) == 1
        assert len(buyer.get_domain_events()) == 1

    def test_different_card_adds_second_method(self):
        buyer = Buyer.create("1234")

        _verify(buyer)
        _verify(buyer, expiration=EXPIRATION + timedelta(days=31))

        assert len(buyer.payment_methods) == 2

    def test_card_number_is_masked_and_code_not_in_repr(self):
        buyer = Buyer.create("1234")

        payment = _verify(buyer)

        assert payment.card_number == "XXXXXXXXXXXX1881"
        assert "security_number" not in repr(payment)
        assert payment.security_number == "123"
        assert payment.card_type is CardType.VISA

    def test_rehydrated_method_matches_by_fingerprint(self):
        buyer = Buyer.create("1234")
        stored = _verify(buyer)
        reloaded = Buyer(
            id=buyer.id,
            identity_guid=buyer.identity_guid,
            payment_methods=[
                PaymentMethod(
                    id=stored.id,
                    alias=stored.alias,
                    card_number=stored.card_number,
                    card_holder_name=stored.card_holder_name,
                    expiration=stored.expiration,
                    card_type_id=stored.card_type_id,
                    fingerprint=stored.fingerprint,
                )
            ],
        )

        assert _verify(reloaded).id == stored.id
        assert reloaded.get_domain_events() == []

    def test_find_payment_method(self):
        buyer = Buyer.create("1234")
        payment = _verify(buyer)

        assert buyer.find_payment_method(payment.id) is payment
        assert buyer.find_payment_method("missing") is None


def test_mask_card_number_short_numbers():
    assert mask_card_number("1234") == "1234"
    assert mask_card_number("123456") == "XX3456"


def test_unknown_card_type_resolves_to_none():
    assert CardType.from_id(0) is None
    assert CardType.from_id(3) is CardType.MASTERCARD
