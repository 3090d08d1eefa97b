"""Domain services."""
from .card_validator import find_card_error, validate_card

__all__ = ["find_card_error", "validate_card"]
