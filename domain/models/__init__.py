"""
Domain models package - in-memory domain entities.
"""

from domain.models.beer import Beer, utc_now
from domain.models.customer import Customer

__all__ = [
    "Beer",
    "Customer",
    "utc_now",
]
