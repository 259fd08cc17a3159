"""Integration event subscriptions of the Order Service."""

from typing import Any

from application.events.integration.customer_address_updated_handler import create_customer_address_updated_handler
from application.events.integration.customer_events import CustomerAddressUpdatedIntegrationEventV1
from application.events.integration.dispatcher import IntegrationEventDispatcher


def build_integration_event_dispatcher(order_repository: Any, max_concurrency: int = 8) -> IntegrationEventDispatcher:
    """Build the dispatch table of every integration event the Order Service consumes."""
    dispatcher = IntegrationEventDispatcher()
    dispatcher.register(
        CustomerAddressUpdatedIntegrationEventV1,
        create_customer_address_updated_handler(order_repository, max_concurrency=max_concurrency),
    )
    return dispatcher
