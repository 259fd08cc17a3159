from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

from neuroglia.eventing.cloud_events.decorators import cloudevent
from neuroglia.integration.models import IntegrationEvent

from integration.models import AddressDto


@cloudevent("customer.address.updated.v1")
@dataclass
class CustomerAddressUpdatedIntegrationEventV1(IntegrationEvent[str]):
    """Incoming CloudEvent published by the CustomerService when a customer's shipping address changes.

    The CloudEventIngestor populates instances from the payload without calling
    __init__, so shipping_address may arrive as a plain mapping and event_id
    may be missing. Consumers must not rely on __post_init__ having run.
    """

    aggregate_id: str
    """The customer identifier."""

    created_at: datetime
    """When the address change occurred."""

    shipping_address: AddressDto | None = None
    """The customer's new shipping address (wire form)."""

    event_id: str = field(default_factory=lambda: uuid4().hex)
    """Unique event identifier, stable across redeliveries."""

    def __post_init__(self) -> None:
        if isinstance(self.shipping_address, dict):
            self.shipping_address = AddressDto.from_dict(self.shipping_address)
