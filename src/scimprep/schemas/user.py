from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator
from .base import BaseResource, MultiValuedAttribute, Name, SCIMSchemaUri


class Manager(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    value: Optional[str] = None
    ref: Optional[str] = Field(None, alias="$ref")
    display_name: Optional[str] = Field(None, alias="displayName")


class EnterpriseUserExtension(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    employee_number: Optional[str] = Field(None, alias="employeeNumber")
    cost_center: Optional[str] = Field(None, alias="costCenter")
    organization: Optional[str] = None
    division: Optional[str] = None
    department: Optional[str] = None
    manager: Optional[Manager] = None

    @field_validator("manager", mode="before")
    def normalize_manager(cls, v):
        """Accept a bare manager id, as sent by some identity providers."""
        if isinstance(v, str):
            return Manager(value=v)
        return v


class UserGroup(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    value: str
    ref: Optional[str] = Field(None, alias="$ref")
    display: Optional[str] = None
    type: Optional[str] = None


class User(BaseResource):
    user_name: str = Field(..., alias="userName")
    name: Optional[Name] = None
    display_name: Optional[str] = Field(None, alias="displayName")
    nick_name: Optional[str] = Field(None, alias="nickName")
    title: Optional[str] = None
    user_type: Optional[str] = Field(None, alias="userType")
    active: Optional[bool] = None
    password: Optional[str] = None

    emails: Optional[List[MultiValuedAttribute]] = None
    phone_numbers: Optional[List[MultiValuedAttribute]] = Field(None, alias="phoneNumbers")
    groups: Optional[List[UserGroup]] = None

    enterprise: Optional[EnterpriseUserExtension] = Field(
        None,
        alias=SCIMSchemaUri.ENTERPRISE_USER.value
    )

    @field_validator("user_name")
    def validate_username(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("userName cannot be empty")
        return v.strip()

    @model_validator(mode="before")
    def set_default_schemas(cls, values):
        if isinstance(values, dict) and not values.get("schemas"):
            schemas = [SCIMSchemaUri.USER.value]
            if values.get(SCIMSchemaUri.ENTERPRISE_USER.value) or values.get("enterprise"):
                schemas.append(SCIMSchemaUri.ENTERPRISE_USER.value)
            values = {**values, "schemas": schemas}
        return values
