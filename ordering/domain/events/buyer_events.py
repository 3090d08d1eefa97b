"""Buyer Domain Events."""
from dataclasses import dataclass
from typing import Optional

from .base import DomainEvent


@dataclass
class PaymentMethodVerifiedEvent(DomainEvent):
    """
    A new payment method was verified and stored for a buyer.

    order_id is the order being placed when the method was added, if any.
    """

    AGGREGATE_TYPE = "Buyer"

    buyer_id: str = ""
    payment_method_id: str = ""
    order_id: Optional[str] = None

    def __post_init__(self):
        """Set aggregate_id to buyer_id."""
        if not self.aggregate_id and self.buyer_id:
            object.__setattr__(self, 'aggregate_id', self.buyer_id)
        super().__post_init__()
