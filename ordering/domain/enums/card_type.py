"""Payment card types."""
from enum import IntEnum
from typing import Optional


class CardType(IntEnum):
    """Card brands known to the ordering domain."""

    AMEX = 1
    VISA = 2
    MASTERCARD = 3

    @classmethod
    def from_id(cls, card_type_id: int) -> Optional["CardType"]:
        """Resolve a card type id, None for ids this domain does not know."""
        try:
            return cls(card_type_id)
        except ValueError:
            return None
