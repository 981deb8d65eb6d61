"""
Data Access
Entity models and read-only repositories over the in-memory dataset.
"""

from .models import (
    Category,
    Order,
    OrderItem,
    Payment,
    Product,
    ProductVariant,
    Record,
    Review,
    User,
)
from .repository import COLLECTIONS, CollectionRepository, DataStore
from .session import get_data_store, load_data_store, reset_data_store, set_data_store

__all__ = [
    "Category",
    "Order",
    "OrderItem",
    "Payment",
    "Product",
    "ProductVariant",
    "Record",
    "Review",
    "User",
    "COLLECTIONS",
    "CollectionRepository",
    "DataStore",
    "get_data_store",
    "load_data_store",
    "reset_data_store",
    "set_data_store",
]
