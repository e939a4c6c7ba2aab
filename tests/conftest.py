"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from api.dependencies import get_beer_service, get_customer_service  # noqa: E402
from main import app  # noqa: E402
from repositories import BeerRepository, CustomerRepository  # noqa: E402
from services import BeerService, CustomerService  # noqa: E402


@pytest.fixture
def beer_service_mock():
    """Replace the beer service with a mock for the duration of a test."""
    mock = MagicMock(spec=BeerService)
    app.dependency_overrides[get_beer_service] = lambda: mock
    yield mock
    app.dependency_overrides.pop(get_beer_service, None)


@pytest.fixture
def customer_service_mock():
    """Replace the customer service with a mock for the duration of a test."""
    mock = MagicMock(spec=CustomerService)
    app.dependency_overrides[get_customer_service] = lambda: mock
    yield mock
    app.dependency_overrides.pop(get_customer_service, None)


@pytest.fixture
def beer_repository():
    return BeerRepository()


@pytest.fixture
def customer_repository():
    return CustomerRepository()


@pytest.fixture
def beer_service(beer_repository):
    return BeerService(beer_repository)


@pytest.fixture
def customer_service(customer_repository):
    return CustomerService(customer_repository)
