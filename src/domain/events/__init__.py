"""Domain events package.

Contains all domain events for the Order aggregate.
"""

from .order import (
    OrderCancelledDomainEvent,
    OrderCreatedDomainEvent,
    OrderShippedDomainEvent,
    OrderShippingAddressUpdatedDomainEvent,
)

__all__ = [
    "OrderCreatedDomainEvent",
    "OrderShippingAddressUpdatedDomainEvent",
    "OrderShippedDomainEvent",
    "OrderCancelledDomainEvent",
]
