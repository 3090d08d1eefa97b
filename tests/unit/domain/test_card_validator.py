"""Tests for payment card validation."""
from datetime import datetime, timedelta, timezone

import pytest

from ordering.domain.exceptions import (
    ArgumentError,
    ExpiredCardError,
    InvalidCardNumberError,
    InvalidHolderNameError,
    InvalidSecurityNumberError,
)
from ordering.domain.services import find_card_error, validate_card


NOW = datetime(2030, 6, 1, 12, 0, 0)


def _card(**overrides):
    values = dict(
        card_number="4012888888881881",
        expiration=NOW + timedelta(days=30),
        security_number="123",
        holder_name="Jane Doe",
        card_type_id=2,
        now=NOW,
    )
    values.update(overrides)
    return values


class TestCardValidator:
    """Check order: holder name, security number, card number, expiration."""

    def test_valid_card_has_no_error(self):
        assert find_card_error(**_card()) is None
        validate_card(**_card())

    @pytest.mark.parametrize("holder_name", ["", "   ", None])
    def test_missing_holder_name(self, holder_name):
        with pytest.raises(InvalidHolderNameError):
            validate_card(**_card(holder_name=holder_name))

    def test_missing_security_number(self):
        with pytest.raises(InvalidSecurityNumberError):
            validate_card(**_card(security_number=""))

    def test_missing_card_number(self):
        with pytest.raises(InvalidCardNumberError):
            validate_card(**_card(card_number=""))

    @pytest.mark.parametrize("delta", [timedelta(0), timedelta(seconds=-1), timedelta(days=-365)])
    def test_expiration_not_in_future_is_expired(self, delta):
        with pytest.raises(ExpiredCardError) as exc_info:
            validate_card(**_card(expiration=NOW + delta))
        assert exc_info.value.field == "card_expiration"

    def test_first_offending_field_is_reported(self):
        error = find_card_error(**_card(
            holder_name="",
            security_number="",
            card_number="",
            expiration=NOW - timedelta(days=1),
        ))
        assert isinstance(error, InvalidHolderNameError)

        error = find_card_error(**_card(
            security_number="",
            card_number="",
            expiration=NOW - timedelta(days=1),
        ))
        assert isinstance(error, InvalidSecurityNumberError)

        error = find_card_error(**_card(card_number="", expiration=NOW - timedelta(days=1)))
        assert isinstance(error, InvalidCardNumberError)

    def test_errors_are_argument_errors(self):
        error = find_card_error(**_card(card_number=""))
        assert isinstance(error, ArgumentError)
        assert isinstance(error, ValueError)

    def test_aware_expiration_uses_utc_now(self):
        future = datetime.now(timezone.utc) + timedelta(hours=1)
        past = datetime.now(timezone.utc) - timedelta(hours=1)

        assert find_card_error("1234", future, "123", "XXX", 0) is None
        assert isinstance(find_card_error("1234", past, "123", "XXX", 0), ExpiredCardError)

    @pytest.mark.parametrize("offset, expired", [
        (timedelta(hours=-1), False),
        (timedelta(hours=1), True),
    ])
    def test_naive_now_against_aware_expiration(self, offset, expired):
        expiration = datetime(2030, 6, 1, 12, 0, 0, tzinfo=timezone.utc)
        local_now = (expiration + offset).astimezone().replace(tzinfo=None)

        error = find_card_error(**_card(expiration=expiration, now=local_now))

        assert isinstance(error, ExpiredCardError) is expired

    @pytest.mark.parametrize("offset, expired", [
        (timedelta(hours=-1), False),
        (timedelta(hours=1), True),
    ])
    def test_aware_now_against_naive_expiration(self, offset, expired):
        expiration = datetime(2030, 6, 1, 12, 0, 0)
        aware_now = (expiration + offset).astimezone(timezone.utc)

        error = find_card_error(**_card(expiration=expiration, now=aware_now))

        assert isinstance(error, ExpiredCardError) is expired
