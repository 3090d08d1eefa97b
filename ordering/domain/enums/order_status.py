"""
Order Status Enum.

Lifecycle states of the Order aggregate and the edges between them.
"""
from enum import Enum
from typing import Dict, FrozenSet, Optional

from ..exceptions import InvalidStatusTransitionError


class OrderStatus(str, Enum):
    """Order lifecycle states."""

    SUBMITTED = "submitted"
    AWAITING_STOCK_VALIDATION = "awaiting_stock_validation"
    STOCK_CONFIRMED = "stock_confirmed"
    PAID = "paid"
    SHIPPED = "shipped"
    CANCELLED = "cancelled"
    REFUND_REQUESTED = "refund_requested"


# Target status -> statuses it may be entered from
ALLOWED_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.AWAITING_STOCK_VALIDATION: frozenset({OrderStatus.SUBMITTED}),
    OrderStatus.STOCK_CONFIRMED: frozenset({OrderStatus.AWAITING_STOCK_VALIDATION}),
    OrderStatus.CANCELLED: frozenset({
        OrderStatus.SUBMITTED,
        OrderStatus.AWAITING_STOCK_VALIDATION,
        OrderStatus.STOCK_CONFIRMED,
        OrderStatus.PAID,
    }),
    OrderStatus.PAID: frozenset({OrderStatus.STOCK_CONFIRMED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.PAID}),
    OrderStatus.REFUND_REQUESTED: frozenset({OrderStatus.PAID, OrderStatus.SHIPPED}),
}


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    """Check whether `target` may follow `current`."""
    return current in ALLOWED_TRANSITIONS.get(target, frozenset())


def transition(
    current: OrderStatus,
    target: OrderStatus,
    order_id: Optional[str] = None,
) -> OrderStatus:
    """
    Pure transition function.

    Returns:
        The new status

    Raises:
        InvalidStatusTransitionError: If the edge does not exist
    """
    if not can_transition(current, target):
        raise InvalidStatusTransitionError(current, target, order_id=order_id)
    return target
