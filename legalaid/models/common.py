"""
Common response models and utilities.

Shared base model with camelCase aliases, error schemas and pagination.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FieldError(BaseModel):
    """One field-level validation problem."""

    field: str | None = Field(default=None, description="Offending field, dotted for nested fields")
    message: str


class ErrorResponse(BaseModel):
    """Error response schema."""

    success: bool = False
    message: str = Field(description="Error message")
    errors: list[FieldError] | None = Field(default=None, description="Field-level details")


class SuccessMessage(BaseModel):
    """Acknowledgement without a payload."""

    success: bool = True
    message: str
