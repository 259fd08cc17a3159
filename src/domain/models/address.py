"""Address value object.

The shipping address owned by an Order. This is the local (aggregate) form;
the cross-service wire form lives in integration.models.AddressDto.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Address:
    """Immutable postal address used as an order's shipping destination."""

    street: str
    city: str
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for storage."""
        return {
            "street": self.street,
            "city": self.city,
            "region": self.region,
            "postal_code": self.postal_code,
            "country": self.country,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Address":
        """Deserialize from dictionary."""
        return cls(
            street=data.get("street", ""),
            city=data.get("city", ""),
            region=data.get("region"),
            postal_code=data.get("postal_code"),
            country=data.get("country"),
        )
