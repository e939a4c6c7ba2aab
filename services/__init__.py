"""
Services package - Business logic layer.
"""

from services.beer_service import BeerService
from services.customer_service import CustomerService

__all__ = ["BeerService", "CustomerService"]
