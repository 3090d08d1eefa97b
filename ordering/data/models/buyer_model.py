"""SQLAlchemy ORM models for Buyer aggregate."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from .base import Base


class BuyerModel(Base):
    """SQLAlchemy ORM model for buyers table."""

    __tablename__ = "buyers"

    id = Column(String(32), primary_key=True)
    identity_guid = Column(String(200), nullable=False, unique=True, index=True)

    # Optimistic concurrency
    version = Column(Integer, nullable=False)

    payment_methods = relationship(
        "PaymentMethodModel", back_populates="buyer", cascade="all, delete-orphan"
    )

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self):
        return f"<BuyerModel(id={self.id}, identity_guid={self.identity_guid})>"


class PaymentMethodModel(Base):
    """
    SQLAlchemy ORM model for payment_methods table.

    Holds the masked card number only; the security code has no column.
    """

    __tablename__ = "payment_methods"

    id = Column(String(32), primary_key=True)
    buyer_id = Column(String(32), ForeignKey("buyers.id"), nullable=False, index=True)
    alias = Column(String(200), nullable=False)
    card_number = Column(String(25), nullable=False)
    card_holder_name = Column(String(200), nullable=False)
    expiration = Column(DateTime(timezone=True), nullable=False)
    card_type_id = Column(Integer, nullable=False)
    fingerprint = Column(String(64), nullable=False)

    buyer = relationship("BuyerModel", back_populates="payment_methods")

    # Concurrent orders for one buyer cannot store the same card twice
    __table_args__ = (
        UniqueConstraint("buyer_id", "fingerprint", name="uq_payment_methods_buyer_fingerprint"),
    )
