"""
Search Models
Request bodies for the search endpoints.

Every field is optional; at least one must carry a value. A search that
uses a unique key (see each model) and matches exactly one record is
answered with that record as an object, otherwise with a list.
"""

from typing import Optional

from pydantic import ConfigDict, Field

from .common import CamelModel, RawValue


class CategorySearchRequest(CamelModel):
    """Category search. ``categoryId`` is unique."""

    category_id: RawValue = Field(None, description="Exact category id")
    name: Optional[str] = Field(None, description="Case-insensitive substring of the name")
    status: Optional[str] = Field(None, description="Case-insensitive status")

    model_config = ConfigDict(json_schema_extra={"example": {"name": "garden"}})


class OrderSearchRequest(CamelModel):
    """Order search. ``orderId`` is unique."""

    order_id: RawValue = Field(None, description="Exact order id")
    user_id: RawValue = Field(None, description="Buyer id")
    status: Optional[str] = Field(None, description="Case-insensitive status")

    model_config = ConfigDict(json_schema_extra={"example": {"status": "completed"}})


class ProductSearchRequest(CamelModel):
    """Product search. ``productId`` is unique."""

    product_id: RawValue = Field(None, description="Exact product id")
    name: Optional[str] = Field(None, description="Case-insensitive substring of the name")
    category_id: RawValue = Field(None, description="Category id")

    model_config = ConfigDict(json_schema_extra={"example": {"productId": 1}})


class ReviewSearchRequest(CamelModel):
    """Review search. ``reviewId`` and the pair ``productId``+``userId`` are unique."""

    review_id: RawValue = Field(None, description="Exact review id")
    product_id: RawValue = Field(None, description="Reviewed product id")
    user_id: RawValue = Field(None, description="Reviewer id")
    rating: RawValue = Field(None, description="Exact rating")

    model_config = ConfigDict(json_schema_extra={"example": {"productId": 1, "userId": 2}})


class UserSearchRequest(CamelModel):
    """User search. ``email`` is unique."""

    email: Optional[str] = Field(None, description="Case-insensitive email")
    first_name: Optional[str] = Field(None, description="Case-insensitive substring")
    last_name: Optional[str] = Field(None, description="Case-insensitive substring")

    model_config = ConfigDict(json_schema_extra={"example": {"email": "ada@example.com"}})
