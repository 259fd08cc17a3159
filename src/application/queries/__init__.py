"""Application queries package."""

from .get_order_by_id_query import GetOrderByIdQuery, GetOrderByIdQueryHandler
from .get_orders_query import GetOrdersByCustomerQuery, GetOrdersByCustomerQueryHandler, GetOrdersQuery, GetOrdersQueryHandler, map_order_to_dto

__all__ = [
    "GetOrderByIdQuery",
    "GetOrderByIdQueryHandler",
    "GetOrdersQuery",
    "GetOrdersQueryHandler",
    "GetOrdersByCustomerQuery",
    "GetOrdersByCustomerQueryHandler",
    "map_order_to_dto",
]
