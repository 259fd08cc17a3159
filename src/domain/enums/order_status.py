"""Order lifecycle enumerations."""

from enum import Enum


class OrderStatus(str, Enum):
    """Lifecycle status of an Order aggregate."""

    CREATED = "created"
    SHIPPED = "shipped"
    CANCELLED = "cancelled"
