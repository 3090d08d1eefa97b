"""
Create order command.

Card fields are kept as plain strings so that empty values reach the card
validator and fail with their field-specific error.
"""
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field


class OrderItemDTO(BaseModel):
    """DTO for an order line in a create-order command."""

    product_id: int = Field(..., description="Catalog product id")
    product_name: str = Field(..., description="Product name")
    unit_price: Decimal = Field(..., ge=0, description="Unit price amount")
    discount: Decimal = Field(default=Decimal("0"), ge=0, description="Discount amount")
    units: int = Field(default=1, gt=0, description="Quantity ordered")
    picture_url: Optional[str] = Field(None, description="Product picture")
    currency: str = Field(default="USD", min_length=3, max_length=3, description="Currency code")

    model_config = {"frozen": True}


@dataclass
class CreateOrderCommand:
    """Command to place a new order for the current caller."""

    street: Optional[str]
    city: Optional[str]
    state: Optional[str]
    country: Optional[str]
    zip_code: Optional[str]
    card_number: Optional[str]
    card_holder_name: Optional[str]
    card_expiration: datetime
    card_security_number: Optional[str]
    card_type_id: int = 0
    card_alias: Optional[str] = None
    order_items: List[OrderItemDTO] = field(default_factory=list)
