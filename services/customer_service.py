from uuid import UUID
import logging

from domain.mappers import CustomerMapper
from domain.schemas.customer_schemas import CustomerDto
from repositories import CustomerRepository
from app.exceptions import NotFoundError

logger = logging.getLogger("brewery.customer")


class CustomerService:
    """Business logic for customer management"""

    def __init__(self, repository: CustomerRepository):
        self.repository = repository

    def get_customer_by_id(self, customer_id: UUID) -> CustomerDto:
        customer = self.repository.get_by_id(customer_id)
        if customer is None:
            logger.warning(f"customer_not_found customer_id={customer_id}")
            raise NotFoundError(f"Customer {customer_id} not found")
        return CustomerMapper.to_dto(customer)

    def save_customer(self, customer_dto: CustomerDto) -> CustomerDto:
        customer = self.repository.create(CustomerMapper.to_entity(customer_dto))
        logger.info(f"customer_created customer_id={customer.id}")
        return CustomerMapper.to_dto(customer)

    def update_customer(self, customer_id: UUID, customer_dto: CustomerDto) -> None:
        customer = self.repository.get_by_id(customer_id)
        if customer is None:
            logger.warning(f"customer_not_found customer_id={customer_id}")
            raise NotFoundError(f"Customer {customer_id} not found")

        try:
            self.repository.update(CustomerMapper.merge(customer, customer_dto))
        except KeyError:
            logger.warning(f"customer_not_found customer_id={customer_id}")
            raise NotFoundError(f"Customer {customer_id} not found")
        logger.info(f"customer_updated customer_id={customer_id}")

    def delete_by_id(self, customer_id: UUID) -> None:
        if self.repository.delete(customer_id):
            logger.info(f"customer_deleted customer_id={customer_id}")
