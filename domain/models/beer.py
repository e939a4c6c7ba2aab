"""
Beer domain entity.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Beer:
    """A beer held in the brewery inventory.

    ``id`` and both timestamps are assigned by the server; the remaining
    fields are business data that may change over the beer's lifetime.
    """

    beer_name: str
    beer_style: str
    upc: int
    quantity_on_hand: int = 0
    id: UUID = field(default_factory=uuid4)
    created_date: datetime = field(default_factory=utc_now)
    last_updated_date: datetime = field(default_factory=utc_now)
