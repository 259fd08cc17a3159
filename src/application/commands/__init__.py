"""Application commands package."""

from .cancel_order_command import CancelOrderCommand, CancelOrderCommandHandler
from .command_handler_base import CommandHandlerBase
from .create_order_command import CreateOrderCommand, CreateOrderCommandHandler
from .ship_order_command import ShipOrderCommand, ShipOrderCommandHandler

__all__ = [
    "CommandHandlerBase",
    "CreateOrderCommand",
    "CreateOrderCommandHandler",
    "ShipOrderCommand",
    "ShipOrderCommandHandler",
    "CancelOrderCommand",
    "CancelOrderCommandHandler",
]
