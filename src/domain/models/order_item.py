"""OrderItem value object."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class OrderItem:
    """A single line of an order."""

    product_id: str
    product_name: str
    product_price: float
    quantity: int = 1

    @property
    def total(self) -> float:
        return self.product_price * self.quantity

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for storage."""
        return {
            "product_id": self.product_id,
            "product_name": self.product_name,
            "product_price": self.product_price,
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "OrderItem":
        """Deserialize from dictionary."""
        return cls(
            product_id=data["product_id"],
            product_name=data.get("product_name", ""),
            product_price=float(data.get("product_price", 0.0)),
            quantity=int(data.get("quantity", 1)),
        )
