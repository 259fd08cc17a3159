"""Integration layer repositories package.

Contains MongoDB repository implementations.
These implement the abstract interfaces defined in domain/repositories/.
"""

from .motor_order_repository import MotorOrderRepository

__all__ = [
    "MotorOrderRepository",
]
