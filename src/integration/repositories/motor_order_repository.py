"""MongoDB repository implementation for the Order aggregate."""

import logging

from neuroglia.data.infrastructure.mongo import MotorRepository
from pymongo.errors import PyMongoError

from domain.entities import Order
from domain.exceptions import RepositoryError
from domain.models import Address
from domain.repositories import OrderRepository

log = logging.getLogger(__name__)


class MotorOrderRepository(MotorRepository[Order, str], OrderRepository):
    """MongoDB-based repository for the Order aggregate.

    Extends Neuroglia's MotorRepository to inherit standard CRUD operations
    and implements OrderRepository for order-specific operations.

    Configured via MotorRepository.configure() in main.py.
    AggregateState fields are stored at the document root level, so filters
    use customer_id directly (not state.customer_id).
    """

    async def get_all_async(self) -> list[Order]:
        """Retrieve all orders ordered by id."""
        return await self._find_async({})

    async def get_by_customer_async(self, customer_id: str) -> list[Order]:
        """Retrieve the orders of a customer ordered by id.

        Args:
            customer_id: The customer to filter by

        Returns:
            List of orders placed by the customer
        """
        return await self._find_async({"customer_id": customer_id})

    async def update_address_async(self, order_id: str, address: Address) -> bool:
        """Replace the shipping address of an order.

        Loads the aggregate, applies the change through the aggregate and
        persists the document only when the address actually changed.

        Args:
            order_id: The order to update
            address: The new shipping address

        Returns:
            False if the order does not exist, True otherwise
        """
        try:
            order = await self.get_async(order_id)
            if order is None:
                log.warning(f"Order {order_id} not found for shipping address update")
                return False
            if order.update_shipping_address(address):
                await self.update_async(order)
                log.debug(f"Shipping address of order {order_id} updated")
            else:
                log.debug(f"Order {order_id} already ships to this address, skipping write")
            return True
        except PyMongoError as e:
            raise RepositoryError(f"Failed to update shipping address of order {order_id}", cause=e) from e

    async def _find_async(self, filter_dict: dict) -> list[Order]:
        try:
            cursor = self.collection.find(filter_dict).sort("id", 1)
            results = []
            async for doc in cursor:
                entity = self._deserialize_entity(doc)
                if entity:
                    results.append(entity)
            return results
        except PyMongoError as e:
            raise RepositoryError(f"Failed to query orders with filter {filter_dict}", cause=e) from e
