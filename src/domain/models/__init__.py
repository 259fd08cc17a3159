"""Domain value objects for the Order Service.

All value objects use @dataclass(frozen=True) for immutability.
"""

from .address import Address
from .order_item import OrderItem

__all__ = [
    "Address",
    "OrderItem",
]
