"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
"""
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from ..enums import OrderStatus, can_transition, transition
from ..events.base import DomainEvent
from ..events.order_events import (
    OrderAwaitingValidationEvent,
    OrderCancelledEvent,
    OrderPaidEvent,
    OrderRefundRequestedEvent,
    OrderShippedEvent,
    OrderStartedEvent,
    OrderStatusChangedEvent,
    OrderStockConfirmedEvent,
)
from ..exceptions import EmptyOrderError, InvalidOrderItemError, InvalidStatusTransitionError
from ..value_objects import Address, Money, generate_id
from .aggregate import AggregateRoot


@dataclass
class OrderItem:
    """Individual line item within an order."""
    product_id: int
    product_name: str
    unit_price: Money
    discount: Money
    units: int = 1
    picture_url: Optional[str] = None

    def __post_init__(self):
        if self.units <= 0:
            raise InvalidOrderItemError(
                f"Invalid number of units for product {self.product_id}: {self.units}",
                field="units",
            )
        if self.discount.is_negative():
            raise InvalidOrderItemError("Discount cannot be negative", field="discount")
        if self.unit_price * self.units < self.discount:
            raise InvalidOrderItemError(
                "The total of order item is lower than applied discount",
                field="discount",
            )

    def total(self) -> Money:
        return self.unit_price * self.units - self.discount

    def add_units(self, units: int) -> None:
        if units <= 0:
            raise InvalidOrderItemError(f"Invalid units: {units}", field="units")
        self.units += units

    def set_new_discount(self, discount: Money) -> None:
        if discount.is_negative():
            raise InvalidOrderItemError("Discount cannot be negative", field="discount")
        if self.unit_price * self.units < discount:
            raise InvalidOrderItemError(
                "The total of order item is lower than applied discount",
                field="discount",
            )
        self.discount = discount


@dataclass(eq=False)
class Order(AggregateRoot):
    """
    Order aggregate root.

    Status changes only through the set_* operations below; each one guards
    the allowed predecessors and records OrderStatusChangedEvent followed by
    the transition-specific event.
    """
    id: str
    address: Address
    buyer_id: str
    payment_method_id: str
    ordered_on: datetime
    items: List[OrderItem] = field(default_factory=list)
    description: Optional[str] = None

    _status: OrderStatus = field(default=OrderStatus.SUBMITTED, init=False)
    _domain_events: List[DomainEvent] = field(default_factory=list, init=False, repr=False)

    @property
    def status(self) -> OrderStatus:
        return self._status

    # =========================================================================
    # FACTORIES
    # =========================================================================

    @classmethod
    def create(
        cls,
        address: Address,
        buyer_id: str,
        payment_method_id: str,
        card_type_id: int,
        card_number: str,
        card_security_number: str,
        card_holder_name: str,
        card_expiration: datetime,
        buyer_identity: Optional[str] = None,
        order_id: Optional[str] = None,
        ordered_on: Optional[datetime] = None,
    ) -> 'Order':
        """
        Factory method to place a new Order in Submitted status.

        Card fields are expected to be validated by the caller; only the
        holder name, type and expiration are carried on OrderStartedEvent.

        Returns:
            New Order instance with OrderStartedEvent collected
        """
        order = cls(
            id=order_id or generate_id(),
            address=address,
            buyer_id=buyer_id,
            payment_method_id=payment_method_id,
            ordered_on=ordered_on or datetime.now(timezone.utc),
        )
        order._record_event(
            OrderStartedEvent(
                order_id=order.id,
                buyer_id=buyer_id,
                payment_method_id=payment_method_id,
                card_type_id=card_type_id,
                card_holder_name=card_holder_name,
                card_expiration=card_expiration.isoformat(),
                ordered_on=order.ordered_on.isoformat(),
                user_id=buyer_identity,
            )
        )
        return order

    @classmethod
    def restore(
        cls,
        order_id: str,
        address: Address,
        buyer_id: str,
        payment_method_id: str,
        ordered_on: datetime,
        status: OrderStatus,
        items: Optional[List[OrderItem]] = None,
        description: Optional[str] = None,
    ) -> 'Order':
        """Rehydrate a persisted order. Records no events."""
        order = cls(
            id=order_id,
            address=address,
            buyer_id=buyer_id,
            payment_method_id=payment_method_id,
            ordered_on=ordered_on,
            items=list(items or []),
            description=description,
        )
        order._status = OrderStatus(status)
        return order

    # =========================================================================
    # ITEMS
    # =========================================================================

    def add_order_item(
        self,
        product_id: int,
        product_name: str,
        unit_price: Money,
        discount: Money,
        picture_url: Optional[str] = None,
        units: int = 1,
    ) -> OrderItem:
        """
        Add a line, merging with an existing line for the same product.

        A merge keeps the higher discount and adds the units. The merged line
        is checked like a new one and left unchanged when rejected.

        Raises:
            InvalidOrderItemError: Invalid units, or discount above the line total
        """
        existing = next((i for i in self.items if i.product_id == product_id), None)
        if existing is not None:
            merged = replace(
                existing,
                units=existing.units + units,
                discount=discount if existing.discount < discount else existing.discount,
            )
            existing.add_units(units)
            existing.set_new_discount(merged.discount)
            return existing

        item = OrderItem(
            product_id=product_id,
            product_name=product_name,
            unit_price=unit_price,
            discount=discount,
            units=units,
            picture_url=picture_url,
        )
        self.items.append(item)
        return item

    def get_total(self) -> Money:
        """Sum of all line totals."""
        if not self.items:
            return Money.zero()
        total = Money.zero(self.items[0].unit_price.currency)
        for item in self.items:
            total = total + item.total()
        return total

    # =========================================================================
    # STATUS TRANSITIONS
    # =========================================================================

    def set_awaiting_validation(self) -> None:
        """Submitted -> AwaitingStockValidation. Requires at least one item."""
        if not self.items and can_transition(self._status, OrderStatus.AWAITING_STOCK_VALIDATION):
            raise EmptyOrderError(self.id)
        self._change_status(OrderStatus.AWAITING_STOCK_VALIDATION)
        self._record_event(
            OrderAwaitingValidationEvent(order_id=self.id, product_units=self._product_units())
        )

    def set_stock_confirmed(self) -> None:
        self._change_status(OrderStatus.STOCK_CONFIRMED)
        self.description = "All the items were confirmed with available stock."
        self._record_event(OrderStockConfirmedEvent(order_id=self.id))

    def set_paid_status(self) -> None:
        self._change_status(OrderStatus.PAID)
        self.description = "The payment was performed."
        self._record_event(OrderPaidEvent(order_id=self.id, product_units=self._product_units()))

    def set_shipped_status(self) -> None:
        self._change_status(OrderStatus.SHIPPED)
        self.description = "The order was shipped."
        self._record_event(OrderShippedEvent(order_id=self.id))

    def set_cancelled(self, reason: Optional[str] = None) -> None:
        reason = reason or "The order was cancelled."
        self._change_status(OrderStatus.CANCELLED, reason)
        self.description = reason
        self._record_event(OrderCancelledEvent(order_id=self.id, reason=reason))

    def set_cancelled_when_stock_rejected(self, rejected_product_ids: Iterable[int]) -> None:
        """AwaitingStockValidation -> Cancelled, naming the products without stock."""
        if self._status != OrderStatus.AWAITING_STOCK_VALIDATION:
            raise InvalidStatusTransitionError(self._status, OrderStatus.CANCELLED, order_id=self.id)

        rejected = set(rejected_product_ids)
        names = ", ".join(i.product_name for i in self.items if i.product_id in rejected)
        self.set_cancelled(f"The product items don't have stock: ({names}).")

    def set_refund_requested(self, reason: Optional[str] = None) -> None:
        reason = reason or "A refund was requested."
        self._change_status(OrderStatus.REFUND_REQUESTED, reason)
        self.description = reason
        self._record_event(OrderRefundRequestedEvent(order_id=self.id, reason=reason))

    def _change_status(self, target: OrderStatus, reason: Optional[str] = None) -> None:
        previous = self._status
        self._status = transition(previous, target, order_id=self.id)
        self._record_event(
            OrderStatusChangedEvent(
                order_id=self.id,
                previous_status=previous.value,
                new_status=target.value,
                reason=reason,
            )
        )

    def _product_units(self) -> List[dict]:
        return [{"product_id": i.product_id, "units": i.units} for i in self.items]
