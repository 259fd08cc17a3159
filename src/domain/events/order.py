"""Domain events for Order aggregate operations."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from neuroglia.data.abstractions import DomainEvent
from neuroglia.eventing.cloud_events.decorators import cloudevent


@cloudevent("order.created.v1")
@dataclass
class OrderCreatedDomainEvent(DomainEvent):
    """Event raised when a new order aggregate is created."""

    aggregate_id: str
    customer_id: str
    order_date: datetime
    items: list[dict[str, Any]]
    shipping_address: dict[str, Any]
    status: str
    created_at: datetime

    def __init__(
        self,
        aggregate_id: str,
        customer_id: str,
        order_date: datetime,
        items: list[dict[str, Any]],
        shipping_address: dict[str, Any],
        status: str,
        created_at: datetime,
    ) -> None:
        super().__init__(aggregate_id)
        self.aggregate_id = aggregate_id
        self.customer_id = customer_id
        self.order_date = order_date
        self.items = items
        self.shipping_address = shipping_address
        self.status = status
        self.created_at = created_at


@cloudevent("order.shipping-address.updated.v1")
@dataclass
class OrderShippingAddressUpdatedDomainEvent(DomainEvent):
    """Event raised when an order's shipping address is replaced."""

    aggregate_id: str
    shipping_address: dict[str, Any]
    updated_at: datetime

    def __init__(self, aggregate_id: str, shipping_address: dict[str, Any], updated_at: datetime) -> None:
        super().__init__(aggregate_id)
        self.aggregate_id = aggregate_id
        self.shipping_address = shipping_address
        self.updated_at = updated_at


@cloudevent("order.shipped.v1")
@dataclass
class OrderShippedDomainEvent(DomainEvent):
    """Event raised when an order is shipped."""

    aggregate_id: str
    shipped_at: datetime

    def __init__(self, aggregate_id: str, shipped_at: datetime) -> None:
        super().__init__(aggregate_id)
        self.aggregate_id = aggregate_id
        self.shipped_at = shipped_at


@cloudevent("order.cancelled.v1")
@dataclass
class OrderCancelledDomainEvent(DomainEvent):
    """Event raised when an order is cancelled."""

    aggregate_id: str
    cancelled_at: datetime

    def __init__(self, aggregate_id: str, cancelled_at: datetime) -> None:
        super().__init__(aggregate_id)
        self.aggregate_id = aggregate_id
        self.cancelled_at = cancelled_at
