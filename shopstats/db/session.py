"""
Data Store Session
Provides the process-wide dataset for request handlers and scripts.
"""

import logging
from pathlib import Path
from typing import Optional

from .repository import DataStore

logger = logging.getLogger(__name__)

_store: Optional[DataStore] = None


def load_data_store(path: str) -> DataStore:
    """
    Load the dataset from ``path``.

    A missing file yields an empty store so the API can still start and
    answer health checks.
    """
    if not Path(path).exists():
        logger.warning(f"Dataset file not found: {path}, starting with an empty store")
        return DataStore.empty()

    return DataStore.from_json_file(path)


def get_data_store() -> DataStore:
    """Get the global data store (singleton, loaded on first use)."""
    global _store
    if _store is None:
        from ..api.config import get_settings

        _store = load_data_store(get_settings().database_file)
    return _store


def set_data_store(store: DataStore) -> None:
    """Replace the global data store."""
    global _store
    _store = store


def reset_data_store() -> None:
    """Drop the global data store (useful for testing)."""
    global _store
    _store = None
