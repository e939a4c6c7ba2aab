from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from uuid import UUID

from domain.validators import CUSTOMER_CONSTRAINTS, constraint_schema_extra


class CustomerDto(BaseModel):
    """Customer as exchanged over the API"""

    uuid: Optional[UUID] = Field(
        None, description="UUID of customer", json_schema_extra={"readOnly": True}
    )
    name: Optional[str] = Field(None, description="Customer name")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra=constraint_schema_extra(CUSTOMER_CONSTRAINTS),
    )
