"""
Create Order Command Handler.

Flow:
1. Resolve the caller identity
2. Validate the payment card (errors propagate unchanged)
3. Load or create the Buyer, verify or add its payment method
4. Create the Order in Submitted status
5. Stage both aggregates and commit the unit of work
6. Publish domain events only after a successful commit

The buyer and order repositories must share one unit of work, so buyer and
order are committed in a single transaction.
"""
from datetime import datetime, timezone
import logging

from ordering.application.commands import CreateOrderCommand
from ordering.application.interfaces import IdentityService
from ordering.domain.entities import Buyer, Order
from ordering.domain.event_bus import EventBus
from ordering.domain.exceptions import MissingIdentityError
from ordering.domain.repositories import BuyerRepository, OrderRepository
from ordering.domain.services import validate_card
from ordering.domain.value_objects import Address, Money, generate_id

from .dispatch import save_and_publish


logger = logging.getLogger(__name__)


class CreateOrderCommandHandler:
    """
    Handler placing a new order for the current caller.

    Returns True when the order was persisted, False when the commit
    affected no rows. Validation failures are raised, never returned.
    """

    def __init__(
        self,
        order_repository: OrderRepository,
        buyer_repository: BuyerRepository,
        identity_service: IdentityService,
        event_bus: EventBus,
    ):
        """
        Initialize handler with dependencies.

        Args:
            order_repository: Repository for order persistence
            buyer_repository: Repository for buyer persistence (same unit of work)
            identity_service: Resolves the caller identity
            event_bus: Receives domain events after commit
        """
        self.order_repository = order_repository
        self.buyer_repository = buyer_repository
        self.identity_service = identity_service
        self.event_bus = event_bus

    async def handle(self, command: CreateOrderCommand) -> bool:
        """
        Execute the create-order workflow.

        Raises:
            MissingIdentityError: No caller identity
            CardValidationError: Card rejected (first offending field)
            InvalidAddressError: Shipping address incomplete
            InvalidOrderItemError: Order line rejected
        """
        identity = self.identity_service.get_caller_identity()
        if not identity or not identity.strip():
            raise MissingIdentityError()

        validate_card(
            card_number=command.card_number,
            expiration=command.card_expiration,
            security_number=command.card_security_number,
            holder_name=command.card_holder_name,
            card_type_id=command.card_type_id,
        )

        order_id = generate_id()

        buyer = await self.buyer_repository.find_by_identity(identity)
        is_new_buyer = buyer is None
        if is_new_buyer:
            buyer = Buyer.create(identity)
        logger.info(
            f"[{order_id}] Creating order for {'new' if is_new_buyer else 'existing'} buyer {buyer.id}"
        )

        alias = command.card_alias or f"Payment method on {datetime.now(timezone.utc):%Y-%m-%d}"
        payment_method = buyer.verify_or_add_payment_method(
            alias=alias,
            card_number=command.card_number,
            card_holder_name=command.card_holder_name,
            expiration=command.card_expiration,
            security_number=command.card_security_number,
            card_type_id=command.card_type_id,
            order_id=order_id,
        )

        order = Order.create(
            address=Address(
                street=command.street,
                city=command.city,
                state=command.state,
                country=command.country,
                zip_code=command.zip_code,
            ),
            buyer_id=buyer.id,
            payment_method_id=payment_method.id,
            card_type_id=command.card_type_id,
            card_number=command.card_number,
            card_security_number=command.card_security_number,
            card_holder_name=command.card_holder_name,
            card_expiration=command.card_expiration,
            buyer_identity=identity,
            order_id=order_id,
        )
        for item in command.order_items:
            order.add_order_item(
                product_id=item.product_id,
                product_name=item.product_name,
                unit_price=Money(amount=item.unit_price, currency=item.currency),
                discount=Money(amount=item.discount, currency=item.currency),
                picture_url=item.picture_url,
                units=item.units,
            )

        if is_new_buyer:
            self.buyer_repository.add(buyer)
        else:
            self.buyer_repository.update(buyer)
        self.order_repository.add(order)

        created = await save_and_publish(
            self.order_repository.unit_of_work, self.event_bus, [buyer, order]
        )
        if created:
            logger.info(f"[{order_id}] Order created (payment method {payment_method.id})")
        else:
            logger.warning(f"[{order_id}] Order was not persisted")
        return created
