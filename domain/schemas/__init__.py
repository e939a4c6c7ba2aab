"""
Domain schemas package - Pydantic models for request and response bodies.
"""

from domain.schemas.beer_schemas import BeerDto
from domain.schemas.customer_schemas import CustomerDto

__all__ = ["BeerDto", "CustomerDto"]
