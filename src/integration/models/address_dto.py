"""Cross-service address contract.

This is the wire representation of an address shared between bounded
contexts (CustomerService publishes it, OrderService consumes it). It is
mapped to the local domain.models.Address before touching an aggregate.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class AddressDto:
    """Shared address representation carried by integration events."""

    street: str
    city: str
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AddressDto":
        return cls(
            street=data.get("street", ""),
            city=data.get("city", ""),
            state=data.get("state"),
            postal_code=data.get("postal_code"),
            country=data.get("country"),
        )
