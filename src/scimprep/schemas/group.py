from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, model_validator
from .base import BaseResource, SCIMSchemaUri


class GroupMember(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    value: str
    ref: Optional[str] = Field(None, alias="$ref")
    display: Optional[str] = None
    type: Optional[str] = None


class Group(BaseResource):
    display_name: str = Field(..., alias="displayName")
    members: Optional[List[GroupMember]] = None

    @model_validator(mode="before")
    def set_default_schemas(cls, values):
        if isinstance(values, dict) and not values.get("schemas"):
            values = {**values, "schemas": [SCIMSchemaUri.GROUP.value]}
        return values
