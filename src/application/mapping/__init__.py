"""Mapping functions between integration contracts and domain value objects."""

from .address_mapper import map_address

__all__ = [
    "map_address",
]
