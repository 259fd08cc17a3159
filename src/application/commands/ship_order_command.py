"""Ship order command with handler."""

import logging
from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mapping import Mapper
from neuroglia.mediation import Command, CommandHandler, Mediator

from application.commands.command_handler_base import CommandHandlerBase
from application.queries.get_orders_query import map_order_to_dto
from domain.entities import Order
from domain.enums import OrderStatus
from domain.repositories import OrderRepository
from integration.models import OrderDto
from observability import orders_shipped

log = logging.getLogger(__name__)


@dataclass
class ShipOrderCommand(Command[OperationResult[OrderDto]]):
    """Command to mark an order as shipped."""

    order_id: str
    """The order to ship."""


class ShipOrderCommandHandler(CommandHandlerBase, CommandHandler[ShipOrderCommand, OperationResult[OrderDto]]):
    """Handler for ShipOrderCommand. Shipping an already shipped order is a no-op."""

    def __init__(self, mediator: Mediator, mapper: Mapper, repository: OrderRepository):
        super().__init__(mediator, mapper)
        self._repository = repository

    async def handle_async(self, command: ShipOrderCommand) -> OperationResult[OrderDto]:
        order = await self._repository.get_async(command.order_id)
        if order is None:
            return self.not_found(Order, command.order_id)
        if order.status == OrderStatus.CANCELLED:
            return self.bad_request(f"Order {command.order_id} is cancelled and cannot be shipped")

        if order.ship():
            await self._repository.update_async(order)
            orders_shipped.add(1)
            log.info(f"Shipped order {command.order_id}")

        return self.ok(map_order_to_dto(order))
