"""
Customer domain mappers.
"""

from dataclasses import replace

from domain.models import Customer
from domain.schemas.customer_schemas import CustomerDto


class CustomerMapper:
    """Mapper for customer transformations."""

    @staticmethod
    def to_dto(customer: Customer) -> CustomerDto:
        return CustomerDto(uuid=customer.id, name=customer.name)

    @staticmethod
    def to_entity(customer_dto: CustomerDto) -> Customer:
        return Customer(name=customer_dto.name)

    @staticmethod
    def merge(customer: Customer, customer_dto: CustomerDto) -> Customer:
        return replace(customer, name=customer_dto.name)
