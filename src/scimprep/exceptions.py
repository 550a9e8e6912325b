from typing import Optional
from fastapi import HTTPException
from scimprep.schemas.error import ErrorResponse


class SCIMException(HTTPException):
    def __init__(
        self,
        status_code: int,
        detail: Optional[str] = None,
        scim_type: Optional[str] = None,
    ):
        self.scim_type = scim_type
        super().__init__(
            status_code=status_code,
            detail=detail,
        )

    def to_error_response(self) -> ErrorResponse:
        return ErrorResponse(
            status=self.status_code,
            detail=self.detail,
            scim_type=self.scim_type
        )


class ResourceNotFound(SCIMException):
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            status_code=404,
            detail=f"{resource_type} with id '{resource_id}' not found",
        )


class InvalidValue(SCIMException):
    def __init__(self, detail: str):
        super().__init__(
            status_code=400,
            detail=detail,
            scim_type="invalidValue"
        )


class InvalidPath(SCIMException):
    def __init__(self, detail: str):
        super().__init__(
            status_code=400,
            detail=detail,
            scim_type="invalidPath"
        )


class InvalidDefinition(ValueError):
    """A resource type definition is incomplete or conflicts with another."""
