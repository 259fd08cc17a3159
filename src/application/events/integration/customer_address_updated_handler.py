"""Synchronizes order shipping addresses with CustomerAddressUpdated events.

The handler is a plain async function closed over its collaborators (an
order repository and an address mapper). Handling is idempotent: replaying
an event leaves every order of the customer shipping to the event's address,
so redelivery by the event bus is always safe.

Events delivered by the CloudEventIngestor are built without running their
constructor, so the payload is read as received: the shipping address may
be a plain mapping and event_id may be absent.
"""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any, Awaitable, Callable, TypeVar

from application.events.integration.customer_events import CustomerAddressUpdatedIntegrationEventV1
from application.mapping import map_address
from domain.exceptions import RepositoryError, ValidationError
from domain.models import Address
from integration.models import AddressDto
from observability import order_addresses_updated

log = logging.getLogger(__name__)

T = TypeVar("T")

AddressMapper = Callable[[AddressDto], Address]

CustomerAddressUpdatedHandler = Callable[[CustomerAddressUpdatedIntegrationEventV1], Awaitable[None]]


def validate_customer_address_updated(event: CustomerAddressUpdatedIntegrationEventV1) -> AddressDto:
    """Reject events that cannot be applied and return their shipping address.

    Raises:
        ValidationError: If the customer id is missing or the address is absent,
            not an address object or mapping, or lacks a street or city
    """
    event_id = getattr(event, "event_id", None)
    customer_id = getattr(event, "aggregate_id", None)
    if not isinstance(customer_id, str) or not customer_id.strip():
        raise ValidationError(f"CustomerAddressUpdated event {event_id} has no customer id")

    address = getattr(event, "shipping_address", None)
    if address is None:
        raise ValidationError(f"CustomerAddressUpdated event {event_id} has no shipping address")
    if isinstance(address, Mapping):
        address = AddressDto.from_dict(dict(address))
    elif not isinstance(address, AddressDto):
        raise ValidationError(f"CustomerAddressUpdated event {event_id} has an unreadable shipping address of type {type(address).__name__}")

    if not address.street or not address.city:
        raise ValidationError(f"CustomerAddressUpdated event {event_id} has an incomplete shipping address (street and city are required)")
    return address


async def _call_repository(awaitable: Awaitable[T], operation: str) -> T:
    try:
        return await awaitable
    except RepositoryError:
        raise
    except Exception as e:
        raise RepositoryError(f"Order repository failed to {operation}: {e}", cause=e) from e


def create_customer_address_updated_handler(
    order_repository: Any,
    address_mapper: AddressMapper = map_address,
    max_concurrency: int = 8,
) -> CustomerAddressUpdatedHandler:
    """Build the handler applying a customer's new shipping address to all their orders.

    Args:
        order_repository: Anything exposing get_by_customer_async(customer_id) and
            update_address_async(order_id, address), e.g. an OrderRepository
        address_mapper: Converts the wire address into the local Address
        max_concurrency: Upper bound on concurrent per-order writes

    Returns:
        The async handler function
    """
    if max_concurrency < 1:
        raise ValueError("max_concurrency must be at least 1")

    async def handle_customer_address_updated(event: CustomerAddressUpdatedIntegrationEventV1) -> None:
        wire_address = validate_customer_address_updated(event)
        customer_id = event.aggregate_id
        event_id = getattr(event, "event_id", None)
        log.debug(f"Handling CustomerAddressUpdated {event_id} for customer {customer_id}")

        orders = await _call_repository(order_repository.get_by_customer_async(customer_id), f"fetch orders of customer {customer_id}")
        if not orders:
            log.debug(f"Customer {customer_id} has no orders, nothing to update")
            return

        shipping_address = address_mapper(wire_address)
        semaphore = asyncio.Semaphore(max_concurrency)

        async def update_order(order_id: str) -> None:
            async with semaphore:
                await _call_repository(order_repository.update_address_async(order_id, shipping_address), f"update shipping address of order {order_id}")

        order_ids = [order.id() for order in orders]
        results = await asyncio.gather(*(update_order(order_id) for order_id in order_ids), return_exceptions=True)

        failures = [result for result in results if isinstance(result, BaseException)]
        order_addresses_updated.add(len(order_ids) - len(failures))
        if failures:
            log.error(f"Failed to update {len(failures)}/{len(order_ids)} orders of customer {customer_id}")
            raise failures[0]

        log.info(f"✅ Updated shipping address of {len(order_ids)} order(s) for customer {customer_id}")

    return handle_customer_address_updated
