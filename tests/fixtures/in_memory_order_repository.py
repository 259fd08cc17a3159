"""In-memory order repository used by handler and command tests.

Mirrors the operations of OrderRepository and records how many writes were
performed so tests can assert idempotence. Failures can be injected per
operation.
"""

import asyncio

from domain.entities import Order
from domain.exceptions import RepositoryError
from domain.models import Address


class InMemoryOrderRepository:
    """Dictionary-backed order store."""

    def __init__(self, orders: list[Order] | None = None, latency: float = 0.0) -> None:
        self._orders: dict[str, Order] = {}
        for order in orders or []:
            self._orders[order.id()] = order
        self.latency = latency
        self.write_count = 0
        self.read_count = 0
        self.fail_reads: Exception | None = None
        self.fail_writes_for: dict[str, Exception] = {}
        self.in_flight = 0
        self.max_in_flight = 0

    async def get_async(self, id: str) -> Order | None:
        return self._orders.get(id)

    async def contains_async(self, id: str) -> bool:
        return id in self._orders

    async def add_async(self, entity: Order) -> Order:
        self._orders[entity.id()] = entity
        self.write_count += 1
        return entity

    async def update_async(self, entity: Order) -> Order:
        self._orders[entity.id()] = entity
        self.write_count += 1
        return entity

    async def remove_async(self, id: str) -> None:
        self._orders.pop(id, None)

    async def get_all_async(self) -> list[Order]:
        return [self._orders[order_id] for order_id in sorted(self._orders)]

    async def get_by_customer_async(self, customer_id: str) -> list[Order]:
        self.read_count += 1
        if self.fail_reads is not None:
            raise self.fail_reads
        return [order for order in await self.get_all_async() if order.state.customer_id == customer_id]

    async def update_address_async(self, order_id: str, address: Address) -> bool:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.latency:
                await asyncio.sleep(self.latency)
            failure = self.fail_writes_for.get(order_id)
            if failure is not None:
                raise failure
            order = self._orders.get(order_id)
            if order is None:
                return False
            if order.update_shipping_address(address):
                self.write_count += 1
            return True
        finally:
            self.in_flight -= 1


def repository_failure(message: str = "connection reset") -> RepositoryError:
    return RepositoryError(message)
