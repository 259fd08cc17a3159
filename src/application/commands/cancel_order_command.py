"""Cancel order command with handler."""

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
from observability import orders_cancelled

log = logging.getLogger(__name__)


@dataclass
class CancelOrderCommand(Command[OperationResult[OrderDto]]):
    """Command to cancel an order that has not shipped yet."""

    order_id: str
    """The order to cancel."""


class CancelOrderCommandHandler(CommandHandlerBase, CommandHandler[CancelOrderCommand, OperationResult[OrderDto]]):
    """Handler for CancelOrderCommand. Cancelling an already cancelled order is a no-op."""

    def __init__(self, mediator: Mediator, mapper: Mapper, repository: OrderRepository):
        super().__init__(mediator, mapper)
        self._repository = repository

    async def handle_async(self, command: CancelOrderCommand) -> OperationResult[OrderDto]:
        order = await self._repository.get_async(command.order_id)
        if order is None:
            return self.not_found(Order, command.order_id)
        if order.status == OrderStatus.SHIPPED:
            return self.bad_request(f"Order {command.order_id} has shipped and cannot be cancelled")

        if order.cancel():
            await self._repository.update_async(order)
            orders_cancelled.add(1)
            log.info(f"Cancelled order {command.order_id}")

        return self.ok(map_order_to_dto(order))
