"""Get order by id query with handler."""

import logging
from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Query, QueryHandler

from domain.repositories import OrderRepository
from integration.models import OrderDto

from .get_orders_query import map_order_to_dto

log = logging.getLogger(__name__)


@dataclass
class GetOrderByIdQuery(Query[OperationResult[OrderDto]]):
    """Query to get an order by id."""

    order_id: str
    """The order to retrieve."""


class GetOrderByIdQueryHandler(QueryHandler[GetOrderByIdQuery, OperationResult[OrderDto]]):
    """Handler for GetOrderByIdQuery."""

    def __init__(self, repository: OrderRepository):
        self._repository = repository

    async def handle_async(self, query: GetOrderByIdQuery) -> OperationResult[OrderDto]:
        log.debug(f"Getting order: {query.order_id}")

        order = await self._repository.get_async(query.order_id)
        if order is None:
            return self.not_found(OrderDto, query.order_id)

        return self.ok(map_order_to_dto(order))
