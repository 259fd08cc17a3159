"""Domain repositories package.

Contains abstract repository interfaces.
Implementations are in src/integration/repositories/.
"""

from .order_repository import OrderRepository

__all__: list[str] = [
    "OrderRepository",
]
