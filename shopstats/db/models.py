"""
Entity Models
Pydantic models for the records held in the in-memory dataset.

Stored records are loosely shaped: any field may be missing and numeric
fields (ids, prices, stock, timestamps) may arrive as strings. Models keep
the raw values as loaded and the reporting layer coerces them on read.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Raw numeric value as stored; coerced with shopstats.analytics.coercion
Numeric = Optional[Union[int, float, str]]


class Record(BaseModel):
    """Base model for stored records (camelCase keys, extra keys preserved)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_dict(self) -> Dict[str, Any]:
        """Return the record in its stored JSON shape."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class User(Record):
    """Customer, seller or admin account."""

    id: Numeric = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[str] = None
    status: Optional[str] = None


class Category(Record):
    """Product category. ``parent_id`` points at the parent category, if any."""

    id: Numeric = None
    name: Optional[str] = None
    parent_id: Numeric = None
    status: Optional[str] = None
    description: Optional[str] = None


class ProductVariant(Record):
    """Colour/size variant of a product with its own price and stock."""

    id: Optional[Union[str, int]] = None
    color: Optional[str] = None
    size: Optional[str] = None
    price: Numeric = None
    stock: Numeric = None


class Product(Record):
    """Catalog product."""

    id: Numeric = None
    category_id: Numeric = None
    seller_id: Numeric = None
    name: Optional[str] = None
    description: Optional[str] = None
    price: Numeric = None
    stock: Numeric = None
    status: Optional[str] = None
    variants: Optional[List[ProductVariant]] = Field(default_factory=list)
    tags: Optional[List[Any]] = Field(default_factory=list)


class OrderItem(Record):
    """Line item embedded in an order."""

    product_id: Numeric = None
    variant_id: Optional[Union[str, int]] = None
    quantity: Numeric = None
    price: Numeric = None


class Payment(Record):
    """Payment details embedded in an order."""

    method: Optional[str] = None
    status: Optional[str] = None


class Order(Record):
    """Customer order with embedded line items."""

    id: Numeric = None
    user_id: Numeric = None
    items: Optional[List[OrderItem]] = Field(default_factory=list)
    total_amount: Numeric = None
    status: Optional[str] = None
    payment: Optional[Payment] = None
    shipping_address: Optional[Any] = None
    created_at: Numeric = None
    modified_at: Numeric = None


class Review(Record):
    """Product review with a 1-5 rating."""

    id: Numeric = None
    product_id: Numeric = None
    user_id: Numeric = None
    rating: Numeric = None
    comment: Optional[str] = None
    created_at: Numeric = None
