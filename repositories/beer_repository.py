"""
Beer Repository - Data access layer for beers
"""

from repositories.base import BaseRepository
from domain.models import Beer


class BeerRepository(BaseRepository[Beer]):
    """Repository for beer data access"""

    def __init__(self):
        super().__init__(Beer)
