"""Beer resource routes"""

from fastapi import APIRouter, Depends, Query, Request, Response, status
import logging
from typing import Literal, Optional
from uuid import UUID

from api.dependencies import get_beer_service, valid_beer_dto
from api.responses import VALIDATION_RESPONSES
from domain.schemas import BeerDto
from services import BeerService

router = APIRouter(prefix="/beer", tags=["Beer"])
logger = logging.getLogger("brewery.api.beer")


@router.get("/{beer_id}", response_model=BeerDto, responses=VALIDATION_RESPONSES)
def get_beer(
    beer_id: UUID,
    iscold: Optional[Literal["yes", "no"]] = Query(
        None, description="Is beer cold query param?"
    ),
    beer_service: BeerService = Depends(get_beer_service),
):
    """Get a beer by its UUID."""
    logger.debug(f"get_beer beer_id={beer_id} iscold={iscold}")
    return beer_service.get_beer_by_id(beer_id)


@router.post(
    "/",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses=VALIDATION_RESPONSES,
)
def handle_post(
    request: Request,
    beer_dto: BeerDto = Depends(valid_beer_dto),
    beer_service: BeerService = Depends(get_beer_service),
):
    """Create a beer; the Location header points at the new resource."""
    saved = beer_service.save_beer(beer_dto)
    location = request.url_for("get_beer", beer_id=str(saved.uuid)).path
    return Response(
        status_code=status.HTTP_201_CREATED, headers={"Location": location}
    )


@router.put(
    "/{beer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=VALIDATION_RESPONSES,
)
def handle_update(
    beer_id: UUID,
    beer_dto: BeerDto = Depends(valid_beer_dto),
    beer_service: BeerService = Depends(get_beer_service),
):
    """Replace the business fields of a beer."""
    beer_service.update_beer(beer_id, beer_dto)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{beer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_beer(
    beer_id: UUID,
    beer_service: BeerService = Depends(get_beer_service),
):
    """Delete a beer."""
    beer_service.delete_by_id(beer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
