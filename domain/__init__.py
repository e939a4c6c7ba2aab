"""
Domain layer - Business entities, schemas, validators and mappers.
"""

from domain import models, schemas

__all__ = ["models", "schemas"]
