"""Create order command with handler."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from neuroglia.core import OperationResult
from neuroglia.mapping import Mapper
from neuroglia.mediation import Command, CommandHandler, Mediator

from application.commands.command_handler_base import CommandHandlerBase
from application.queries.get_orders_query import map_order_to_dto
from domain.entities import Order
from domain.models import Address, OrderItem
from domain.repositories import OrderRepository
from integration.models import OrderDto
from observability import orders_created

log = logging.getLogger(__name__)


@dataclass
class CreateOrderCommand(Command[OperationResult[OrderDto]]):
    """Command to place a new order for a customer."""

    customer_id: str
    """The customer placing the order."""

    items: list[dict[str, Any]] = field(default_factory=list)
    """Order lines: product_id, product_name, product_price, quantity."""

    shipping_address: dict[str, Any] = field(default_factory=dict)
    """Shipping address: street, city, region, postal_code, country."""

    order_date: datetime | None = None
    """When the order was placed (defaults to now)."""


class CreateOrderCommandHandler(CommandHandlerBase, CommandHandler[CreateOrderCommand, OperationResult[OrderDto]]):
    """Handler for CreateOrderCommand."""

    def __init__(self, mediator: Mediator, mapper: Mapper, repository: OrderRepository):
        super().__init__(mediator, mapper)
        self._repository = repository

    async def handle_async(self, command: CreateOrderCommand) -> OperationResult[OrderDto]:
        if not command.customer_id or not command.customer_id.strip():
            return self.bad_request("Customer id is required")
        if not command.items:
            return self.bad_request("An order requires at least one item")

        try:
            items = [OrderItem.from_dict(item) for item in command.items]
        except (KeyError, TypeError, ValueError) as e:
            return self.bad_request(f"Invalid order item: {e}")
        if any(item.quantity < 1 or item.product_price < 0 for item in items):
            return self.bad_request("Order items require a positive quantity and a non-negative price")

        address = Address.from_dict(command.shipping_address)
        if not address.street or not address.city:
            return self.bad_request("Shipping address requires a street and a city")

        order = Order(
            customer_id=command.customer_id,
            items=items,
            shipping_address=address,
            order_date=command.order_date,
        )
        await self._repository.add_async(order)
        orders_created.add(1)

        log.info(f"Created order {order.id()} for customer {command.customer_id}")
        return self.ok(map_order_to_dto(order))
