"""
Payment card validation.

Pure functions, no side effects. Checks run in a fixed order and the first
offending field is reported:
1. holder name
2. security number
3. card number
4. expiration (must be strictly in the future)
"""
from datetime import datetime, timezone
from typing import Optional

from ..exceptions import (
    CardValidationError,
    ExpiredCardError,
    InvalidCardNumberError,
    InvalidHolderNameError,
    InvalidSecurityNumberError,
)


def _reference_time(expiration: datetime, now: Optional[datetime]) -> datetime:
    """Current time, or `now`, in the same awareness as `expiration`; naive means local time."""
    expiration_aware = expiration.tzinfo is not None
    if now is None:
        return datetime.now(timezone.utc) if expiration_aware else datetime.now()
    if expiration_aware and now.tzinfo is None:
        return now.astimezone()
    if not expiration_aware and now.tzinfo is not None:
        return now.astimezone().replace(tzinfo=None)
    return now


def _is_blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def find_card_error(
    card_number: Optional[str],
    expiration: datetime,
    security_number: Optional[str],
    holder_name: Optional[str],
    card_type_id: int,
    now: Optional[datetime] = None,
) -> Optional[CardValidationError]:
    """
    Return the first validation failure, or None for a valid card.

    Args:
        card_number: Card number as entered
        expiration: Card expiration
        security_number: Card security code
        holder_name: Name on the card
        card_type_id: Card type identifier (not restricted here)
        now: Reference time, defaults to the current time. Naive and aware
            values may be mixed with expiration; naive ones are local time.
    """
    if _is_blank(holder_name):
        return InvalidHolderNameError()
    if _is_blank(security_number):
        return InvalidSecurityNumberError()
    if _is_blank(card_number):
        return InvalidCardNumberError()

    reference = _reference_time(expiration, now)
    if expiration <= reference:
        return ExpiredCardError(expiration)

    return None


def validate_card(
    card_number: Optional[str],
    expiration: datetime,
    security_number: Optional[str],
    holder_name: Optional[str],
    card_type_id: int,
    now: Optional[datetime] = None,
) -> None:
    """
    Raise the first validation failure.

    Raises:
        CardValidationError: One of InvalidHolderNameError,
            InvalidSecurityNumberError, InvalidCardNumberError, ExpiredCardError
    """
    error = find_card_error(
        card_number, expiration, security_number, holder_name, card_type_id, now=now
    )
    if error is not None:
        raise error
