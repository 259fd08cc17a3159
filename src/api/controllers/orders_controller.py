"""Orders API controller.

Provides endpoints for:
- Listing orders, optionally by customer
- Getting order details
- Placing an order
- Shipping and cancelling orders
"""

from classy_fastapi.decorators import get, post, put
from neuroglia.dependency_injection import ServiceProviderBase
from neuroglia.mapping import Mapper
from neuroglia.mediation import Mediator
from neuroglia.mvc import ControllerBase
from pydantic import BaseModel, Field

from application.commands import CancelOrderCommand, CreateOrderCommand, ShipOrderCommand
from application.queries import GetOrderByIdQuery, GetOrdersByCustomerQuery, GetOrdersQuery

# ============================================================================
# REQUEST MODELS
# ============================================================================


class AddressRequest(BaseModel):
    """Shipping address of an order."""

    street: str = Field(..., description="Street and number")
    city: str = Field(..., description="City")
    region: str | None = Field(default=None, description="State, province or region")
    postal_code: str | None = Field(default=None, description="Postal code")
    country: str | None = Field(default=None, description="Country")


class OrderItemRequest(BaseModel):
    """A single order line."""

    product_id: str = Field(..., description="Product identifier")
    product_name: str = Field(..., description="Product display name")
    product_price: float = Field(..., ge=0, description="Unit price")
    quantity: int = Field(default=1, ge=1, description="Number of units")


class CreateOrderRequest(BaseModel):
    """Request to place a new order."""

    customer_id: str = Field(..., description="The customer placing the order")
    items: list[OrderItemRequest] = Field(..., description="Order lines")
    shipping_address: AddressRequest = Field(..., description="Where to ship the order")

    class Config:
        json_schema_extra = {
            "example": {
                "customer_id": "c1",
                "items": [{"product_id": "p1", "product_name": "Espresso", "product_price": 2.5, "quantity": 2}],
                "shipping_address": {"street": "1 Main St", "city": "Springfield", "region": "IL", "postal_code": "62701", "country": "USA"},
            }
        }


# ============================================================================
# CONTROLLER
# ============================================================================


class OrdersController(ControllerBase):
    """Controller for order management endpoints.

    Shipping addresses are kept in sync with the CustomerService through
    integration events, not through this API.
    """

    def __init__(self, service_provider: ServiceProviderBase, mapper: Mapper, mediator: Mediator):
        super().__init__(service_provider, mapper, mediator)

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    @get("/")
    async def get_orders(self):
        """List all orders."""
        result = await self.mediator.execute_async(GetOrdersQuery())
        return self.process(result)

    @get("/customer/{customer_id}")
    async def get_orders_by_customer(self, customer_id: str):
        """List the orders placed by a customer."""
        result = await self.mediator.execute_async(GetOrdersByCustomerQuery(customer_id=customer_id))
        return self.process(result)

    @get("/{order_id}")
    async def get_order(self, order_id: str):
        """Get a single order by id."""
        result = await self.mediator.execute_async(GetOrderByIdQuery(order_id=order_id))
        return self.process(result)

    # =========================================================================
    # WRITE OPERATIONS
    # =========================================================================

    @post("/", status_code=201)
    async def create_order(self, request: CreateOrderRequest):
        """Place a new order."""
        command = CreateOrderCommand(
            customer_id=request.customer_id,
            items=[item.model_dump() for item in request.items],
            shipping_address=request.shipping_address.model_dump(),
        )
        result = await self.mediator.execute_async(command)
        return self.process(result)

    @put("/{order_id}/ship")
    async def ship_order(self, order_id: str):
        """Mark an order as shipped."""
        result = await self.mediator.execute_async(ShipOrderCommand(order_id=order_id))
        return self.process(result)

    @put("/{order_id}/cancel")
    async def cancel_order(self, order_id: str):
        """Cancel an order that has not shipped yet."""
        result = await self.mediator.execute_async(CancelOrderCommand(order_id=order_id))
        return self.process(result)
