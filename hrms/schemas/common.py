"""
Shared response envelope and base schema.

JSON payloads use camelCase keys; Python code uses snake_case attributes.
"""
from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base schema that serializes field names as camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiResponse(CamelModel, Generic[T]):
    """Standard response envelope."""

    success: bool = Field(..., description="Whether the request succeeded")
    message: str = Field(default="", description="Human-readable outcome")
    data: Optional[T] = Field(default=None, description="Response payload")
    errors: List[str] = Field(default_factory=list, description="Error details")

    @classmethod
    def ok(cls, data: Optional[T] = None, message: str = "Success") -> "ApiResponse[T]":
        """Build a success envelope."""
        return cls(success=True, message=message, data=data)
