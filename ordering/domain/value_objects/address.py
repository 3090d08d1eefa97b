"""Shipping address value object."""
from dataclasses import dataclass, fields

from ..exceptions import InvalidAddressError


@dataclass(frozen=True)
class Address:
    """
    Shipping address of an order.

    Every component is required.
    """
    street: str
    city: str
    state: str
    country: str
    zip_code: str

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not value or not str(value).strip():
                raise InvalidAddressError(f"Address {f.name} is required", field=f.name)

    def __str__(self) -> str:
        return f"{self.street}, {self.city}, {self.state} {self.zip_code}, {self.country}"
