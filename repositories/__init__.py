"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.beer_repository import BeerRepository
from repositories.customer_repository import CustomerRepository

__all__ = [
    "BaseRepository",
    "BeerRepository",
    "CustomerRepository",
]
