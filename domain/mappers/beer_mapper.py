"""
Beer domain mappers.
Handles transformation between Beer entities and BeerDto.
"""

from dataclasses import replace

from domain.models import Beer, utc_now
from domain.schemas.beer_schemas import BeerDto


class BeerMapper:
    """Mapper for beer transformations."""

    @staticmethod
    def to_dto(beer: Beer) -> BeerDto:
        """
        Convert a Beer entity to its API representation.

        Args:
            beer: Beer entity

        Returns:
            BeerDto including the server-assigned id and timestamps
        """
        return BeerDto(
            uuid=beer.id,
            beer_name=beer.beer_name,
            beer_style=beer.beer_style,
            upc=beer.upc,
            quantity_on_hand=beer.quantity_on_hand,
            created_date=beer.created_date,
            last_updated_date=beer.last_updated_date,
        )

    @staticmethod
    def to_entity(beer_dto: BeerDto) -> Beer:
        """
        Build a new Beer entity from a validated DTO.

        Server-assigned fields on the DTO are ignored; the entity gets a fresh
        id and timestamps.
        """
        return Beer(
            beer_name=beer_dto.beer_name,
            beer_style=beer_dto.beer_style,
            upc=beer_dto.upc,
            quantity_on_hand=beer_dto.quantity_on_hand or 0,
        )

    @staticmethod
    def merge(beer: Beer, beer_dto: BeerDto) -> Beer:
        """
        Return a copy of ``beer`` carrying the DTO's business fields.

        The stored entity is left untouched so readers never see a half-applied
        update; the repository swaps the copy in.
        """
        quantity = beer_dto.quantity_on_hand
        return replace(
            beer,
            beer_name=beer_dto.beer_name,
            beer_style=beer_dto.beer_style,
            upc=beer_dto.upc,
            quantity_on_hand=beer.quantity_on_hand if quantity is None else quantity,
            last_updated_date=utc_now(),
        )
