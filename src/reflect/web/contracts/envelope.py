"""Uniform response envelope shared by every endpoint.

Success: ``{"success": true, "data": ...}``
Failure: ``{"success": false, "message": "..."}``
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")


class CamelModel(BaseModel):
    """Base model serialized with camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ApiResponse(BaseModel, Generic[DataT]):
    """Successful response."""

    success: bool = Field(default=True, description="Always true")
    data: DataT


class ErrorResponse(BaseModel):
    """Failed response."""

    success: bool = Field(default=False, description="Always false")
    message: str = Field(..., description="User-facing error message")


def ok(data: DataT) -> ApiResponse[DataT]:
    """Wrap data in a success envelope."""
    return ApiResponse(data=data)
