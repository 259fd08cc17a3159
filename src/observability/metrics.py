"""Business metrics for the Order Service.

Defines OpenTelemetry metrics for:
- Integration events consumed from other bounded contexts
- Orders: lifecycle and shipping address synchronization
"""

from opentelemetry import metrics

meter = metrics.get_meter(__name__)

# =============================================================================
# INTEGRATION EVENT METRICS
# =============================================================================

integration_events_received = meter.create_counter(
    name="order_service.integration_events.received",
    description="Total integration events delivered to the service",
    unit="1",
)

integration_events_discarded = meter.create_counter(
    name="order_service.integration_events.discarded",
    description="Total malformed integration events discarded without retry",
    unit="1",
)

integration_events_failed = meter.create_counter(
    name="order_service.integration_events.failed",
    description="Total integration events that failed and were left for redelivery",
    unit="1",
)

integration_event_processing_time = meter.create_histogram(
    name="order_service.integration_event.processing_time",
    description="Time to handle an integration event",
    unit="ms",
)

# =============================================================================
# ORDER METRICS
# =============================================================================

orders_created = meter.create_counter(
    name="order_service.orders.created",
    description="Total orders created",
    unit="1",
)

orders_shipped = meter.create_counter(
    name="order_service.orders.shipped",
    description="Total orders shipped",
    unit="1",
)

orders_cancelled = meter.create_counter(
    name="order_service.orders.cancelled",
    description="Total orders cancelled",
    unit="1",
)

order_addresses_updated = meter.create_counter(
    name="order_service.orders.address_updated",
    description="Total order shipping address updates issued from integration events",
    unit="1",
)
