"""Domain entities (aggregate roots) for the Order Service."""

from .order import Order, OrderState

__all__ = [
    "Order",
    "OrderState",
]
