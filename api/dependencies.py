"""
API dependencies for dependency injection
"""

from domain.schemas import BeerDto, CustomerDto
from domain.validators import raise_for_violations, validate_beer, validate_customer
from repositories import BeerRepository, CustomerRepository
from services import BeerService, CustomerService

# Process-wide in-memory stores
beer_repository = BeerRepository()
customer_repository = CustomerRepository()


def get_beer_service() -> BeerService:
    """
    Beer service dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(beer_service: BeerService = Depends(get_beer_service)):
            ...

    Tests replace it through ``app.dependency_overrides``.
    """
    return BeerService(beer_repository)


def get_customer_service() -> CustomerService:
    """Customer service dependency for FastAPI routes."""
    return CustomerService(customer_repository)


def valid_beer_dto(beer_dto: BeerDto) -> BeerDto:
    """Bind the request body to a BeerDto and enforce its constraints."""
    raise_for_violations(validate_beer(beer_dto))
    return beer_dto


def valid_customer_dto(customer_dto: CustomerDto) -> CustomerDto:
    """Bind the request body to a CustomerDto and enforce its constraints."""
    raise_for_violations(validate_customer(customer_dto))
    return customer_dto
