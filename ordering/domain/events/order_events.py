"""
Order Domain Events.

Recorded by the Order aggregate on creation and on every status transition.
A transition records OrderStatusChangedEvent first, then its specific event.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from .base import DomainEvent


@dataclass
class _OrderEvent(DomainEvent):
    """Order event keyed by order_id."""

    order_id: str = ""

    def __post_init__(self):
        """Set aggregate_id to order_id."""
        if not self.aggregate_id and self.order_id:
            object.__setattr__(self, 'aggregate_id', self.order_id)
        super().__post_init__()


@dataclass
class OrderStartedEvent(_OrderEvent):
    """
    Order was placed and entered the Submitted status.

    Carries no card number or security code.
    """

    buyer_id: str = ""
    payment_method_id: str = ""
    card_type_id: int = 0
    card_holder_name: str = ""
    card_expiration: str = ""
    ordered_on: str = ""


@dataclass
class OrderStatusChangedEvent(_OrderEvent):
    """Order moved from one status to another."""

    previous_status: str = ""
    new_status: str = ""
    reason: Optional[str] = None


@dataclass
class OrderAwaitingValidationEvent(_OrderEvent):
    """Order handed to stock validation."""

    product_units: List[dict] = field(default_factory=list)


@dataclass
class OrderStockConfirmedEvent(_OrderEvent):
    """Stock confirmed for every line."""


@dataclass
class OrderPaidEvent(_OrderEvent):
    """Payment succeeded."""

    product_units: List[dict] = field(default_factory=list)


@dataclass
class OrderShippedEvent(_OrderEvent):
    """Order left the warehouse."""


@dataclass
class OrderCancelledEvent(_OrderEvent):
    """Order cancelled (by the buyer or because stock was rejected)."""

    reason: Optional[str] = None


@dataclass
class OrderRefundRequestedEvent(_OrderEvent):
    """Refund requested for a paid or shipped order."""

    reason: Optional[str] = None
