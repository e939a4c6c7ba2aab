from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime
from uuid import UUID

from domain.validators import BEER_CONSTRAINTS, constraint_schema_extra


class BeerDto(BaseModel):
    """Beer as exchanged over the API (camelCase on the wire)"""

    uuid: Optional[UUID] = Field(
        None, description="UUID of beer", json_schema_extra={"readOnly": True}
    )
    beer_name: Optional[str] = Field(None, description="Name of beer")
    beer_style: Optional[str] = Field(
        None, description="Style of beer (e.g., 'Pale Ale', 'IPA')"
    )
    upc: Optional[int] = Field(None, description="Universal product code of beer")
    quantity_on_hand: Optional[int] = Field(
        None, description="Units in stock, maintained by the backend"
    )
    created_date: Optional[datetime] = Field(
        None, description="Creation timestamp", json_schema_extra={"readOnly": True}
    )
    last_updated_date: Optional[datetime] = Field(
        None,
        description="Last modification timestamp",
        json_schema_extra={"readOnly": True},
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra=constraint_schema_extra(BEER_CONSTRAINTS),
    )
