"""Order DTO returned by queries and commands.

This is the read representation of an Order aggregate.
"""

import datetime
from dataclasses import dataclass, field
from typing import Any, Optional

from neuroglia.data.abstractions import Identifiable, queryable


@queryable
@dataclass
class OrderDto(Identifiable[str]):
    """Read model DTO for the Order aggregate."""

    id: str
    customer_id: str
    status: str
    shipping_address: dict[str, Any]
    items: list[dict[str, Any]] = field(default_factory=list)
    total: float = 0.0
    order_date: Optional[datetime.datetime] = None
    created_at: Optional[datetime.datetime] = None
    updated_at: Optional[datetime.datetime] = None
