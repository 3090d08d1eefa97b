"""
Ordering domain errors.

Two families:
- ArgumentError: malformed caller input. Never retried, surfaced verbatim.
- OrderStateError / OrderNotFoundError: state-machine and lookup failures,
  carrying the operation context.
"""
from typing import Optional


class OrderingDomainError(Exception):
    """Base class for all ordering errors."""


# =============================================================================
# CALLER INPUT
# =============================================================================

class ArgumentError(OrderingDomainError, ValueError):
    """Invalid argument supplied by the caller."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class CardValidationError(ArgumentError):
    """Payment card rejected before any state is touched."""


class InvalidHolderNameError(CardValidationError):
    def __init__(self):
        super().__init__("Card holder name is required", field="card_holder_name")


class InvalidSecurityNumberError(CardValidationError):
    def __init__(self):
        super().__init__("Card security number is required", field="card_security_number")


class InvalidCardNumberError(CardValidationError):
    def __init__(self):
        super().__init__("Card number is required", field="card_number")


class ExpiredCardError(CardValidationError):
    def __init__(self, expiration):
        super().__init__(f"Card expired on {expiration.isoformat()}", field="card_expiration")
        self.expiration = expiration


class EmptyIdentityError(ArgumentError):
    def __init__(self):
        super().__init__("Buyer identity cannot be empty", field="identity")


class MissingIdentityError(ArgumentError):
    def __init__(self):
        super().__init__("No caller identity available for this request", field="identity")


class InvalidAddressError(ArgumentError):
    """Shipping address component missing."""


class InvalidOrderItemError(ArgumentError):
    """Order line rejected (units, discount)."""


# =============================================================================
# STATE / LOOKUP
# =============================================================================

class OrderStateError(OrderingDomainError):
    """Operation not allowed in the order's current state."""


class InvalidStatusTransitionError(OrderStateError):
    """Status change attempted along an edge the state machine does not have."""

    def __init__(self, current, target, order_id: Optional[str] = None):
        self.current = current
        self.target = target
        self.order_id = order_id
        where = f" (order {order_id})" if order_id else ""
        super().__init__(
            f"Cannot change order status from {current.value} to {target.value}{where}"
        )


class EmptyOrderError(OrderStateError):
    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order {order_id} has no items and cannot be validated")


class OrderNotFoundError(OrderingDomainError, LookupError):
    def __init__(self, order_id: str, operation: str):
        self.order_id = order_id
        self.operation = operation
        super().__init__(f"Order {order_id} not found ({operation})")
