"""API routes package"""

from . import beer, customer, health

__all__ = ["beer", "customer", "health"]
