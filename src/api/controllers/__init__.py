"""API controllers package."""

from .app_controller import AppController
from .orders_controller import OrdersController

__all__ = [
    "AppController",
    "OrdersController",
]
