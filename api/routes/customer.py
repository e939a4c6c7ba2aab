"""Customer resource routes"""

from fastapi import APIRouter, Depends, Request, Response, status
from uuid import UUID

from api.dependencies import get_customer_service, valid_customer_dto
from api.responses import VALIDATION_RESPONSES
from domain.schemas import CustomerDto
from services import CustomerService

router = APIRouter(prefix="/customer", tags=["Customer"])


@router.get(
    "/{customer_id}", response_model=CustomerDto, responses=VALIDATION_RESPONSES
)
def get_customer(
    customer_id: UUID,
    customer_service: CustomerService = Depends(get_customer_service),
):
    return customer_service.get_customer_by_id(customer_id)


@router.post(
    "/",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses=VALIDATION_RESPONSES,
)
def handle_post(
    request: Request,
    customer_dto: CustomerDto = Depends(valid_customer_dto),
    customer_service: CustomerService = Depends(get_customer_service),
):
    saved = customer_service.save_customer(customer_dto)
    location = request.url_for("get_customer", customer_id=str(saved.uuid)).path
    return Response(
        status_code=status.HTTP_201_CREATED, headers={"Location": location}
    )


@router.put(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=VALIDATION_RESPONSES,
)
def handle_update(
    customer_id: UUID,
    customer_dto: CustomerDto = Depends(valid_customer_dto),
    customer_service: CustomerService = Depends(get_customer_service),
):
    customer_service.update_customer(customer_id, customer_dto)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{customer_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_customer(
    customer_id: UUID,
    customer_service: CustomerService = Depends(get_customer_service),
):
    customer_service.delete_by_id(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
