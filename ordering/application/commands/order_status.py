"""Commands that move an existing order along its lifecycle."""
from dataclasses import dataclass
from typing import Optional


@dataclass
class CancelOrderCommand:
    """Command to cancel an order."""

    order_id: str
    reason: Optional[str] = None


@dataclass
class ShipOrderCommand:
    """Command to mark a paid order as shipped."""

    order_id: str
