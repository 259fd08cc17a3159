"""Repository interface for the Order aggregate."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from neuroglia.data.infrastructure.abstractions import Repository

from domain.models import Address

if TYPE_CHECKING:
    from domain.entities import Order


class OrderRepository(Repository["Order", str], ABC):
    """Repository interface for the Order aggregate.

    Implementations use MongoDB via MotorRepository for state persistence.

    Note: Standard CRUD operations (get_async, add_async, update_async, remove_async)
    are inherited from the base Repository interface and implemented by MotorRepository.
    Only order-specific operations are declared here. Implementations raise
    RepositoryError when the underlying store fails.
    """

    @abstractmethod
    async def get_all_async(self) -> list["Order"]:
        """Retrieve all orders, ordered by id."""
        ...

    @abstractmethod
    async def get_by_customer_async(self, customer_id: str) -> list["Order"]:
        """Retrieve the orders placed by a customer.

        Args:
            customer_id: The customer to filter by

        Returns:
            The customer's orders ordered by id (possibly empty)
        """
        ...

    @abstractmethod
    async def update_address_async(self, order_id: str, address: Address) -> bool:
        """Replace the shipping address of a single order.

        The write is skipped when the order already carries the address.

        Args:
            order_id: The order to update
            address: The new shipping address

        Returns:
            False if the order does not exist, True otherwise
        """
        ...
