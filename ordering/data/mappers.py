"""Static mappers for domain aggregates ↔ database models."""

from decimal import Decimal

from ordering.domain.entities import Buyer, Order, OrderItem, PaymentMethod
from ordering.domain.enums import OrderStatus
from ordering.domain.value_objects import Address, Money

from .models import BuyerModel, OrderItemModel, OrderModel, PaymentMethodModel


class OrderItemMapper:
    """Static mapper for OrderItem ↔ OrderItemModel transformation."""

    @staticmethod
    def to_domain(model: OrderItemModel) -> OrderItem:
        """Convert ORM model to domain entity.

        Args:
            model: OrderItemModel instance

        Returns:
            OrderItem domain entity
        """
        currency = model.currency or "USD"
        return OrderItem(
            product_id=model.product_id,
            product_name=model.product_name,
            unit_price=Money(amount=Decimal(str(model.unit_price)), currency=currency),
            discount=Money(amount=Decimal(str(model.discount)), currency=currency),
            units=model.units,
            picture_url=model.picture_url,
        )

    @staticmethod
    def to_persistence(entity: OrderItem, order_id: str) -> OrderItemModel:
        """Convert domain entity to ORM model.

        Args:
            entity: OrderItem domain entity
            order_id: Owning order id

        Returns:
            OrderItemModel instance
        """
        return OrderItemModel(
            order_id=order_id,
            product_id=entity.product_id,
            product_name=entity.product_name,
            unit_price=entity.unit_price.amount,
            discount=entity.discount.amount,
            currency=entity.unit_price.currency,
            units=entity.units,
            picture_url=entity.picture_url,
        )


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested items).

        Args:
            model: OrderModel instance

        Returns:
            Order domain aggregate, without pending events
        """
        return Order.restore(
            order_id=model.id,
            address=Address(
                street=model.street,
                city=model.city,
                state=model.state,
                country=model.country,
                zip_code=model.zip_code,
            ),
            buyer_id=model.buyer_id,
            payment_method_id=model.payment_method_id,
            ordered_on=model.ordered_on,
            status=OrderStatus(model.status),
            items=[OrderItemMapper.to_domain(item_model) for item_model in model.items],
            description=model.description,
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model (with nested items).

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        order_model = OrderModel(
            id=entity.id,
            street=entity.address.street,
            city=entity.address.city,
            state=entity.address.state,
            country=entity.address.country,
            zip_code=entity.address.zip_code,
            buyer_id=entity.buyer_id,
            payment_method_id=entity.payment_method_id,
            ordered_on=entity.ordered_on,
            status=entity.status.value,
            description=entity.description,
        )

        order_model.items = [
            OrderItemMapper.to_persistence(item, entity.id)
            for item in entity.items
        ]

        return order_model

    @staticmethod
    def update_persistence(entity: Order, model: OrderModel) -> OrderModel:
        """Update existing ORM model from domain aggregate.

        Only lifecycle fields and lines change after creation; lines are
        matched by product id so untouched rows stay untouched.

        Args:
            entity: Order domain aggregate
            model: Existing OrderModel instance

        Returns:
            Updated OrderModel instance
        """
        if model.status != entity.status.value:
            model.status = entity.status.value
        if model.description != entity.description:
            model.description = entity.description

        rows = {row.product_id: row for row in model.items}
        for item in entity.items:
            row = rows.get(item.product_id)
            if row is None:
                model.items.append(OrderItemMapper.to_persistence(item, entity.id))
                continue
            if row.units != item.units:
                row.units = item.units
            if Decimal(str(row.discount)) != item.discount.amount:
                row.discount = item.discount.amount

        return model


class PaymentMethodMapper:
    """Static mapper for PaymentMethod ↔ PaymentMethodModel transformation."""

    @staticmethod
    def to_domain(model: PaymentMethodModel) -> PaymentMethod:
        return PaymentMethod(
            id=model.id,
            alias=model.alias,
            card_number=model.card_number,
            card_holder_name=model.card_holder_name,
            expiration=model.expiration,
            card_type_id=model.card_type_id,
            fingerprint=model.fingerprint,
        )

    @staticmethod
    def to_persistence(entity: PaymentMethod, buyer_id: str) -> PaymentMethodModel:
        # security_number has no column
        return PaymentMethodModel(
            id=entity.id,
            buyer_id=buyer_id,
            alias=entity.alias,
            card_number=entity.card_number,
            card_holder_name=entity.card_holder_name,
            expiration=entity.expiration,
            card_type_id=entity.card_type_id,
            fingerprint=entity.fingerprint,
        )


class BuyerMapper:
    """Static mapper for Buyer ↔ BuyerModel transformation with payment methods."""

    @staticmethod
    def to_domain(model: BuyerModel) -> Buyer:
        return Buyer(
            id=model.id,
            identity_guid=model.identity_guid,
            payment_methods=[
                PaymentMethodMapper.to_domain(pm) for pm in model.payment_methods
            ],
        )

    @staticmethod
    def to_persistence(entity: Buyer) -> BuyerModel:
        buyer_model = BuyerModel(id=entity.id, identity_guid=entity.identity_guid)
        buyer_model.payment_methods = [
            PaymentMethodMapper.to_persistence(pm, entity.id)
            for pm in entity.payment_methods
        ]
        return buyer_model

    @staticmethod
    def update_persistence(entity: Buyer, model: BuyerModel) -> BuyerModel:
        """Append payment methods the model does not have yet."""
        known = {pm.id for pm in model.payment_methods}
        for pm in entity.payment_methods:
            if pm.id not in known:
                model.payment_methods.append(PaymentMethodMapper.to_persistence(pm, entity.id))
        return model
