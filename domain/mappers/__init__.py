"""
Domain mappers package.
Handles transformation between domain entities and DTOs (Data Transfer Objects).
"""

from domain.mappers.beer_mapper import BeerMapper
from domain.mappers.customer_mapper import CustomerMapper

__all__ = ["BeerMapper", "CustomerMapper"]
