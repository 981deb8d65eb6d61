"""
Common Models
Shared base classes and small response pieces.
"""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Number = Union[int, float]
# Ids and raw values are echoed as stored
RawValue = Optional[Union[int, float, str]]


class CamelModel(BaseModel):
    """Response/request base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    error: str = Field(..., description="Error message")
    details: Optional[Any] = Field(None, description="Validation details (422 only)")

    model_config = ConfigDict(json_schema_extra={"example": {"error": "category not found"}})


class PriceRange(CamelModel):
    """Lowest and highest positive price."""

    min: Number = Field(0, description="Lowest price")
    max: Number = Field(0, description="Highest price")


ERROR_RESPONSES: Dict[Union[int, str], Dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid input"},
    404: {"model": ErrorResponse, "description": "Entity not found"},
}
