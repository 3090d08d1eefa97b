"""SQLAlchemy ORM models for Order aggregate."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import relationship

from .base import Base


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    id = Column(String(32), primary_key=True)

    # Shipping address
    street = Column(String(200), nullable=False)
    city = Column(String(100), nullable=False)
    state = Column(String(100), nullable=False)
    country = Column(String(100), nullable=False)
    zip_code = Column(String(20), nullable=False)

    # Weak references to the Buyer aggregate
    buyer_id = Column(String(32), nullable=False, index=True)
    payment_method_id = Column(String(32), nullable=False)

    ordered_on = Column(DateTime(timezone=True), nullable=False)
    status = Column(String(50), nullable=False, index=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))

    # Optimistic concurrency
    version = Column(Integer, nullable=False)

    # Relationship to items
    items = relationship(
        "OrderItemModel", back_populates="order", cascade="all, delete-orphan"
    )

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self):
        return f"<OrderModel(id={self.id}, status={self.status})>"


class OrderItemModel(Base):
    """SQLAlchemy ORM model for order_items table."""

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(String(32), ForeignKey("orders.id"), nullable=False, index=True)
    product_id = Column(Integer, nullable=False)
    product_name = Column(String(500), nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)
    discount = Column(Numeric(10, 2), nullable=False, default=0)
    currency = Column(String(3), default="USD")
    units = Column(Integer, nullable=False)
    picture_url = Column(String(500), nullable=True)

    # Relationship back to order
    order = relationship("OrderModel", back_populates="items")
