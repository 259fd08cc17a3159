"""Get orders queries with handlers.

Uses the aggregate repository directly; aggregates are mapped to DTOs inline.
"""

import logging
from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Query, QueryHandler

from domain.entities import Order
from domain.repositories import OrderRepository
from integration.models import OrderDto

log = logging.getLogger(__name__)


def map_order_to_dto(order: Order) -> OrderDto:
    """Map an Order aggregate to its DTO representation.

    Args:
        order: The aggregate to map

    Returns:
        The mapped DTO
    """
    state = order.state
    return OrderDto(
        id=state.id,
        customer_id=state.customer_id,
        status=state.status,
        shipping_address=dict(state.shipping_address),
        items=[dict(item) for item in state.items],
        total=order.total(),
        order_date=state.order_date,
        created_at=state.created_at,
        updated_at=state.updated_at,
    )


@dataclass
class GetOrdersQuery(Query[OperationResult[list[OrderDto]]]):
    """Query to get all orders."""

    pass


class GetOrdersQueryHandler(QueryHandler[GetOrdersQuery, OperationResult[list[OrderDto]]]):
    """Handler for GetOrdersQuery."""

    def __init__(self, repository: OrderRepository):
        self._repository = repository

    async def handle_async(self, query: GetOrdersQuery) -> OperationResult[list[OrderDto]]:
        orders = await self._repository.get_all_async()
        log.debug(f"Retrieved {len(orders)} orders")
        return self.ok([map_order_to_dto(order) for order in orders])


@dataclass
class GetOrdersByCustomerQuery(Query[OperationResult[list[OrderDto]]]):
    """Query to get the orders placed by a customer."""

    customer_id: str
    """The customer whose orders to retrieve."""


class GetOrdersByCustomerQueryHandler(QueryHandler[GetOrdersByCustomerQuery, OperationResult[list[OrderDto]]]):
    """Handler for GetOrdersByCustomerQuery."""

    def __init__(self, repository: OrderRepository):
        self._repository = repository

    async def handle_async(self, query: GetOrdersByCustomerQuery) -> OperationResult[list[OrderDto]]:
        if not query.customer_id or not query.customer_id.strip():
            return self.bad_request("Customer id is required")

        orders = await self._repository.get_by_customer_async(query.customer_id)
        log.debug(f"Retrieved {len(orders)} orders for customer {query.customer_id}")
        return self.ok([map_order_to_dto(order) for order in orders])
