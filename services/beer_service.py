from uuid import UUID
import logging

from domain.mappers import BeerMapper
from domain.schemas.beer_schemas import BeerDto
from repositories import BeerRepository
from app.exceptions import NotFoundError

logger = logging.getLogger("brewery.beer")


class BeerService:
    """Business logic for beer management"""

    def __init__(self, repository: BeerRepository):
        self.repository = repository

    def get_beer_by_id(self, beer_id: UUID) -> BeerDto:
        """Return the beer with the given id or raise NotFoundError"""
        beer = self.repository.get_by_id(beer_id)
        if beer is None:
            logger.warning(f"beer_not_found beer_id={beer_id}")
            raise NotFoundError(f"Beer {beer_id} not found")

        logger.info(f"beer_fetched beer_id={beer_id}")
        return BeerMapper.to_dto(beer)

    def save_beer(self, beer_dto: BeerDto) -> BeerDto:
        """
        Persist a new beer built from a validated DTO.

        Returns:
            BeerDto with the server-assigned id and timestamps
        """
        beer = self.repository.create(BeerMapper.to_entity(beer_dto))
        logger.info(f"beer_created beer_id={beer.id} upc={beer.upc}")
        return BeerMapper.to_dto(beer)

    def update_beer(self, beer_id: UUID, beer_dto: BeerDto) -> None:
        """Replace the business fields of an existing beer"""
        beer = self.repository.get_by_id(beer_id)
        if beer is None:
            logger.warning(f"beer_not_found beer_id={beer_id}")
            raise NotFoundError(f"Beer {beer_id} not found")

        try:
            self.repository.update(BeerMapper.merge(beer, beer_dto))
        except KeyError:
            # deleted between the lookup and the swap
            logger.warning(f"beer_not_found beer_id={beer_id}")
            raise NotFoundError(f"Beer {beer_id} not found")
        logger.info(f"beer_updated beer_id={beer_id}")

    def delete_by_id(self, beer_id: UUID) -> None:
        """Delete a beer; deleting an unknown id is a no-op"""
        if self.repository.delete(beer_id):
            logger.info(f"beer_deleted beer_id={beer_id}")
        else:
            logger.info(f"beer_delete_noop beer_id={beer_id}")
