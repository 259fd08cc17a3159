"""Integration event package exports."""

from .customer_address_updated_handler import create_customer_address_updated_handler, validate_customer_address_updated
from .customer_events import CustomerAddressUpdatedIntegrationEventV1
from .customer_events_handler import CustomerAddressUpdatedIntegrationEventHandler
from .dispatcher import IntegrationEventDispatcher
from .subscriptions import build_integration_event_dispatcher

__all__ = [
    "CustomerAddressUpdatedIntegrationEventV1",
    "CustomerAddressUpdatedIntegrationEventHandler",
    "IntegrationEventDispatcher",
    "build_integration_event_dispatcher",
    "create_customer_address_updated_handler",
    "validate_customer_address_updated",
]
