"""Domain value objects."""

from .value_objects import Money, generate_id
from .address import Address

__all__ = [
    "Address",
    "Money",
    "generate_id",
]
