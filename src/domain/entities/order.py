"""Order aggregate definition using the AggregateState pattern.

DomainEvents are appended/aggregated in the Order and the
repository publishes them via Mediator after the Order was persisted.
"""

from datetime import datetime, timezone
from typing import Any, Optional, cast
from uuid import uuid4

from multipledispatch import dispatch
from neuroglia.data.abstractions import AggregateRoot, AggregateState

from domain.enums import OrderStatus
from domain.events.order import (
    OrderCancelledDomainEvent,
    OrderCreatedDomainEvent,
    OrderShippedDomainEvent,
    OrderShippingAddressUpdatedDomainEvent,
)
from domain.models import Address, OrderItem


class OrderState(AggregateState[str]):
    """Encapsulates the persisted state for the Order aggregate."""

    id: str
    customer_id: str
    """Reference to the customer owning the order (owned by CustomerService)."""

    order_date: datetime
    items: list[dict[str, Any]]
    """OrderItem.to_dict() entries."""

    shipping_address: dict[str, Any]
    """Address.to_dict()"""

    status: str
    """OrderStatus value, stored as string for serialization."""

    created_at: datetime
    updated_at: datetime

    def __init__(self) -> None:
        super().__init__()
        self.id = ""
        self.customer_id = ""
        self.items = []
        self.shipping_address = {}
        self.status = OrderStatus.CREATED.value

        now = datetime.now(timezone.utc)
        self.order_date = now
        self.created_at = now
        self.updated_at = now

    @dispatch(OrderCreatedDomainEvent)
    def on(self, event: OrderCreatedDomainEvent) -> None:  # type: ignore[override]
        """Apply the creation event to the state."""
        self.id = event.aggregate_id
        self.customer_id = event.customer_id
        self.order_date = event.order_date
        self.items = list(event.items)
        self.shipping_address = dict(event.shipping_address)
        self.status = event.status
        self.created_at = event.created_at
        self.updated_at = event.created_at

    @dispatch(OrderShippingAddressUpdatedDomainEvent)
    def on(self, event: OrderShippingAddressUpdatedDomainEvent) -> None:  # type: ignore[override]
        """Apply the shipping address updated event to the state."""
        self.shipping_address = dict(event.shipping_address)
        self.updated_at = event.updated_at

    @dispatch(OrderShippedDomainEvent)
    def on(self, event: OrderShippedDomainEvent) -> None:  # type: ignore[override]
        """Apply the shipped event to the state."""
        self.status = OrderStatus.SHIPPED.value
        self.updated_at = event.shipped_at

    @dispatch(OrderCancelledDomainEvent)
    def on(self, event: OrderCancelledDomainEvent) -> None:  # type: ignore[override]
        """Apply the cancelled event to the state."""
        self.status = OrderStatus.CANCELLED.value
        self.updated_at = event.cancelled_at


class Order(AggregateRoot[OrderState, str]):
    """Order aggregate root following the AggregateState pattern."""

    def __init__(
        self,
        customer_id: str,
        items: list[OrderItem],
        shipping_address: Address,
        order_date: Optional[datetime] = None,
        order_id: Optional[str] = None,
    ) -> None:
        super().__init__()
        if not customer_id or not customer_id.strip():
            raise ValueError("An order must reference a customer")

        aggregate_id = order_id or str(uuid4())
        created_time = datetime.now(timezone.utc)

        self.state.on(
            self.register_event(  # type: ignore
                OrderCreatedDomainEvent(
                    aggregate_id=aggregate_id,
                    customer_id=customer_id,
                    order_date=order_date or created_time,
                    items=[item.to_dict() for item in items],
                    shipping_address=shipping_address.to_dict(),
                    status=OrderStatus.CREATED.value,
                    created_at=created_time,
                )
            )
        )

    def id(self) -> str:
        """Return the aggregate identifier with a precise type."""
        aggregate_id = super().id()
        if aggregate_id is None:
            raise ValueError("Order aggregate identifier has not been initialized")
        return cast(str, aggregate_id)

    @property
    def status(self) -> OrderStatus:
        return OrderStatus(self.state.status)

    @property
    def shipping_address(self) -> Address:
        return Address.from_dict(self.state.shipping_address)

    @property
    def items(self) -> list[OrderItem]:
        return [OrderItem.from_dict(item) for item in self.state.items]

    def total(self) -> float:
        return sum(item.total for item in self.items)

    def update_shipping_address(self, address: Address) -> bool:
        """Replace the shipping address.

        Returns False (and registers no event) when the address is unchanged,
        so replaying the same update is a no-op.
        """
        if self.state.shipping_address == address.to_dict():
            return False
        self.state.on(
            self.register_event(  # type: ignore
                OrderShippingAddressUpdatedDomainEvent(
                    aggregate_id=self.id(),
                    shipping_address=address.to_dict(),
                    updated_at=datetime.now(timezone.utc),
                )
            )
        )
        return True

    def ship(self) -> bool:
        if self.status == OrderStatus.SHIPPED:
            return False
        if self.status == OrderStatus.CANCELLED:
            raise ValueError(f"Order {self.id()} is cancelled and cannot be shipped")
        self.state.on(
            self.register_event(  # type: ignore
                OrderShippedDomainEvent(aggregate_id=self.id(), shipped_at=datetime.now(timezone.utc))
            )
        )
        return True

    def cancel(self) -> bool:
        if self.status == OrderStatus.CANCELLED:
            return False
        if self.status == OrderStatus.SHIPPED:
            raise ValueError(f"Order {self.id()} has shipped and cannot be cancelled")
        self.state.on(
            self.register_event(  # type: ignore
                OrderCancelledDomainEvent(aggregate_id=self.id(), cancelled_at=datetime.now(timezone.utc))
            )
        )
        return True
