"""
Read-only Repositories
Per-collection accessors over the in-memory dataset.
"""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Generic, Iterator, List, Mapping, Optional, Type, TypeVar, Union

from ..analytics.coercion import same_id
from .models import Category, Order, Product, Record, Review, User

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Record)

COLLECTIONS: Dict[str, Type[Record]] = {
    "users": User,
    "products": Product,
    "categories": Category,
    "orders": Order,
    "reviews": Review,
}


class CollectionRepository(Generic[T]):
    """
    Read-only view over one collection.

    Records keep their load order. Lookups are linear scans; collections
    are expected to hold tens to low thousands of records.
    """

    def __init__(self, name: str, records: List[T]):
        self.name = name
        self._records = list(records)

    def all(self) -> List[T]:
        """Return a copy of every record in the collection."""
        return list(self._records)

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Return the first record matching ``predicate``, or None."""
        for record in self._records:
            if predicate(record):
                return record
        return None

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        """Return all records matching ``predicate``."""
        return [record for record in self._records if predicate(record)]

    def get(self, record_id: Optional[float]) -> Optional[T]:
        """Find a record by numeric id."""
        return self.find(lambda record: same_id(record.id, record_id))

    def __iter__(self) -> Iterator[T]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"CollectionRepository(name={self.name!r}, size={len(self)})"


class DataStore:
    """
    The five collections of the dataset.

    Built once and shared read-only between requests.
    """

    def __init__(
        self,
        users: CollectionRepository[User],
        products: CollectionRepository[Product],
        categories: CollectionRepository[Category],
        orders: CollectionRepository[Order],
        reviews: CollectionRepository[Review],
    ):
        self.users = users
        self.products = products
        self.categories = categories
        self.orders = orders
        self.reviews = reviews

    def get_collection(self, name: str) -> CollectionRepository:
        """
        Get a collection by name.

        Raises:
            KeyError: If ``name`` is not one of the known collections
        """
        if name not in COLLECTIONS:
            raise KeyError(f"Unknown collection: {name}")
        return getattr(self, name)

    def stats(self) -> Dict[str, int]:
        """Number of records per collection."""
        return {name: len(self.get_collection(name)) for name in COLLECTIONS}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DataStore":
        """
        Build a store from a mapping of collection name to raw records.

        Missing collections are treated as empty; unknown keys are ignored.
        """
        repositories = {}
        for name, model in COLLECTIONS.items():
            raw_records = data.get(name) or []
            records = [model.model_validate(raw) for raw in raw_records]
            repositories[name] = CollectionRepository(name, records)
        return cls(**repositories)

    @classmethod
    def from_json_file(cls, path: Union[str, Path]) -> "DataStore":
        """
        Load a store from a JSON document shaped like ``{"users": [...], ...}``.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the document is not a JSON object
        """
        path = Path(path)
        with path.open(encoding="utf-8") as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object in {path}, got {type(data).__name__}")

        store = cls.from_dict(data)
        logger.info(f"Loaded dataset from {path}", extra={"collections": store.stats()})
        return store

    @classmethod
    def empty(cls) -> "DataStore":
        """Store with no records."""
        return cls.from_dict({})
