import logging
import time

from multipledispatch import dispatch
from neuroglia.mediation.mediator import IntegrationEventHandler

from application.events.integration.customer_events import CustomerAddressUpdatedIntegrationEventV1
from application.events.integration.subscriptions import build_integration_event_dispatcher
from application.settings import app_settings
from domain.exceptions import RepositoryError, ValidationError
from domain.repositories import OrderRepository
from observability import integration_event_processing_time, integration_events_discarded, integration_events_failed, integration_events_received

log = logging.getLogger(__name__)


class CustomerAddressUpdatedIntegrationEventHandler(IntegrationEventHandler[CustomerAddressUpdatedIntegrationEventV1]):
    """Delivers CustomerAddressUpdated cloud events from the mediator into the dispatch table.

    Malformed events are discarded (never retried); repository failures are
    re-raised so the event bus redelivers the event.
    """

    def __init__(self, order_repository: OrderRepository) -> None:
        self._dispatcher = build_integration_event_dispatcher(
            order_repository,
            max_concurrency=app_settings.integration_event_max_concurrency,
        )

    @dispatch(CustomerAddressUpdatedIntegrationEventV1)
    async def handle_async(self, e: CustomerAddressUpdatedIntegrationEventV1) -> None:
        event_type = e.__cloudevent__type__  # type: ignore
        event_id = getattr(e, "event_id", None)
        log.debug(f"🌐 Handling event type: {event_type}")
        integration_events_received.add(1, {"event_type": event_type})
        started = time.perf_counter()
        try:
            await self._dispatcher.dispatch_async(e)
        except ValidationError as ex:
            integration_events_discarded.add(1, {"event_type": event_type})
            log.warning(f"❗ Discarding malformed {event_type} event {event_id}: {ex}")
        except RepositoryError as ex:
            integration_events_failed.add(1, {"event_type": event_type})
            log.error(f"❌ Failed to handle {event_type} event {event_id}, leaving it for redelivery: {ex}")
            raise
        finally:
            integration_event_processing_time.record((time.perf_counter() - started) * 1000, {"event_type": event_type})
