"""
Sample inventory loaded at startup when ``settings.seed_sample_data`` is on.
"""

import logging

from domain.models import Beer, Customer
from repositories import BeerRepository, CustomerRepository

logger = logging.getLogger("brewery.sample_data")

SAMPLE_BEERS = [
    {"beer_name": "Galaxy Cat", "beer_style": "Pale Ale", "upc": 337010000001, "quantity_on_hand": 120},
    {"beer_name": "Mango Bobs", "beer_style": "IPA", "upc": 337010000002, "quantity_on_hand": 48},
    {"beer_name": "No Hammers On The Bar", "beer_style": "Pale Ale", "upc": 337010000003, "quantity_on_hand": 0},
]

SAMPLE_CUSTOMERS = ["Tasting Room"]


def load_sample_data(beers: BeerRepository, customers: CustomerRepository) -> int:
    """
    Populate empty repositories with sample records.

    Returns:
        Number of records created (0 if the repositories already held data)
    """
    if beers.count() or customers.count():
        logger.info("Repositories already populated; skipping sample data")
        return 0

    for data in SAMPLE_BEERS:
        beers.create(Beer(**data))
    for name in SAMPLE_CUSTOMERS:
        customers.create(Customer(name=name))

    created = len(SAMPLE_BEERS) + len(SAMPLE_CUSTOMERS)
    logger.info("Loaded %d sample records", created)
    return created
