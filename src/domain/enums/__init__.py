"""Domain enumerations package."""

from .order_status import OrderStatus

__all__ = [
    "OrderStatus",
]
