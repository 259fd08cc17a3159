"""Observability utilities and metrics."""

from .metrics import (
    integration_event_processing_time,
    integration_events_discarded,
    integration_events_failed,
    integration_events_received,
    order_addresses_updated,
    orders_cancelled,
    orders_created,
    orders_shipped,
)

__all__ = [
    # Integration event metrics
    "integration_events_received",
    "integration_events_discarded",
    "integration_events_failed",
    "integration_event_processing_time",
    # Order metrics
    "orders_created",
    "orders_shipped",
    "orders_cancelled",
    "order_addresses_updated",
]
