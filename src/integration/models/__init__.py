"""Integration layer DTOs package.

Contains the cross-service address contract and the order read DTO.
"""

from .address_dto import AddressDto
from .order_dto import OrderDto

__all__ = [
    "AddressDto",
    "OrderDto",
]
