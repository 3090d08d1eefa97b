"""
Buyer aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional
import hashlib

from ..enums import CardType
from ..events.base import DomainEvent
from ..events.buyer_events import PaymentMethodVerifiedEvent
from ..exceptions import EmptyIdentityError
from ..value_objects import generate_id
from .aggregate import AggregateRoot


def payment_fingerprint(
    card_number: str,
    card_holder_name: str,
    expiration: datetime,
    card_type_id: int,
) -> str:
    """SHA-256 over the identifying card fields."""
    if expiration.tzinfo is not None:
        expiration = expiration.astimezone(timezone.utc).replace(tzinfo=None)
    material = "|".join([
        card_number.strip(),
        card_holder_name.strip(),
        expiration.isoformat(),
        str(card_type_id),
    ])
    return hashlib.sha256(material.encode("utf-8")).hexdigest()


def mask_card_number(card_number: str) -> str:
    """Keep only the last four characters."""
    visible = card_number[-4:]
    return "X" * (len(card_number) - len(visible)) + visible


@dataclass(eq=False)
class PaymentMethod:
    """
    Stored payment card of a buyer.

    card_number is always the masked form. security_number lives only in
    memory for the request that supplied it and is never persisted.
    """
    id: str
    alias: str
    card_number: str
    card_holder_name: str
    expiration: datetime
    card_type_id: int
    fingerprint: str
    security_number: Optional[str] = field(default=None, repr=False, compare=False)

    @classmethod
    def create(
        cls,
        alias: str,
        card_number: str,
        card_holder_name: str,
        expiration: datetime,
        security_number: str,
        card_type_id: int,
    ) -> 'PaymentMethod':
        return cls(
            id=generate_id(),
            alias=alias,
            card_number=mask_card_number(card_number),
            card_holder_name=card_holder_name,
            expiration=expiration,
            card_type_id=card_type_id,
            fingerprint=payment_fingerprint(
                card_number, card_holder_name, expiration, card_type_id
            ),
            security_number=security_number,
        )

    @property
    def card_type(self) -> Optional[CardType]:
        return CardType.from_id(self.card_type_id)

    def is_equal_to(self, fingerprint: str) -> bool:
        return self.fingerprint == fingerprint

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PaymentMethod):
            return NotImplemented
        return self.fingerprint == other.fingerprint

    def __hash__(self) -> int:
        return hash(self.fingerprint)


@dataclass(eq=False)
class Buyer(AggregateRoot):
    """
    Buyer aggregate root.

    Identified externally by the identity-provider subject (identity_guid).
    """
    id: str
    identity_guid: str
    payment_methods: List[PaymentMethod] = field(default_factory=list)

    _domain_events: List[DomainEvent] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self):
        if not self.identity_guid or not self.identity_guid.strip():
            raise EmptyIdentityError()

    @classmethod
    def create(cls, identity: str) -> 'Buyer':
        """
        Factory method for a buyer placing their first order.

        Raises:
            EmptyIdentityError: If identity is empty or whitespace
        """
        return cls(id=generate_id(), identity_guid=identity)

    def verify_or_add_payment_method(
        self,
        alias: str,
        card_number: str,
        card_holder_name: str,
        expiration: datetime,
        security_number: str,
        card_type_id: int,
        order_id: Optional[str] = None,
    ) -> PaymentMethod:
        """
        Return the stored method for this card, adding it if new.

        A newly added method records PaymentMethodVerifiedEvent.
        Card legality is checked by the card validator beforehand.

        Args:
            alias: Display name for the stored method
            card_number: Raw card number (stored masked)
            card_holder_name: Name on the card
            expiration: Card expiration
            security_number: Card security code (not persisted)
            card_type_id: Card type identifier
            order_id: Order being placed, for the event context

        Returns:
            Existing or newly created PaymentMethod
        """
        fingerprint = payment_fingerprint(
            card_number, card_holder_name, expiration, card_type_id
        )
        existing = self.find_payment_method_by_fingerprint(fingerprint)
        if existing is not None:
            return existing

        payment = PaymentMethod.create(
            alias=alias,
            card_number=card_number,
            card_holder_name=card_holder_name,
            expiration=expiration,
            security_number=security_number,
            card_type_id=card_type_id,
        )
        self.payment_methods.append(payment)
        self._record_event(
            PaymentMethodVerifiedEvent(
                buyer_id=self.id,
                payment_method_id=payment.id,
                order_id=order_id,
                user_id=self.identity_guid,
            )
        )
        return payment

    def find_payment_method(self, payment_method_id: str) -> Optional[PaymentMethod]:
        return next((p for p in self.payment_methods if p.id == payment_method_id), None)

    def find_payment_method_by_fingerprint(self, fingerprint: str) -> Optional[PaymentMethod]:
        return next((p for p in self.payment_methods if p.is_equal_to(fingerprint)), None)
