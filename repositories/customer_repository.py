"""
Customer Repository - Data access layer for customers
"""

from repositories.base import BaseRepository
from domain.models import Customer


class CustomerRepository(BaseRepository[Customer]):
    """Repository for customer data access"""

    def __init__(self):
        super().__init__(Customer)
