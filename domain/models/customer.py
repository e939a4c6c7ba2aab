"""
Customer domain entity.
"""

from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass
class Customer:
    """A brewery customer"""

    name: str
    id: UUID = field(default_factory=uuid4)
