"""
Pytest configuration and shared fixtures
"""

import copy
import sys
import time
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from shopstats.db import DataStore

DAY_MS = 24 * 60 * 60 * 1000
HOUR_MS = 60 * 60 * 1000

# Timestamps are relative to the start of the test session so the
# trending window behaves the same whenever the suite runs
NOW_MS = int(time.time() * 1000)


def iso(epoch_ms: int) -> str:
    """Format epoch millis as an ISO-8601 UTC string."""
    return datetime.fromtimestamp(epoch_ms / 1000, tz=timezone.utc).isoformat().replace("+00:00", "Z")


SAMPLE_DATA = {
    "users": [
        {"id": 1, "email": "ada@example.com", "firstName": "Ada", "lastName": "Lovelace", "role": "customer"},
        {"id": 2, "email": "alan@example.com", "firstName": "Alan", "lastName": "Turing", "role": "customer"},
        {"id": 3, "email": "ghost@example.com", "firstName": "", "lastName": "", "role": "customer"},
    ],
    "categories": [
        {"id": 1, "name": "Electronics", "parentId": None, "status": "active"},
        {"id": 2, "name": "Phones", "parentId": 1, "status": "active", "description": "Mobile phones"},
        {"id": 3, "name": "Laptops", "parentId": 1, "status": "inactive"},
        {"id": 4, "name": "Garden", "parentId": None, "status": "active"},
    ],
    "products": [
        {"id": 1, "categoryId": 1, "sellerId": 2, "name": "USB Cable", "price": "10.00", "stock": 5,
         "status": "active", "tags": ["cable"]},
        {"id": 2, "categoryId": 1, "name": "HDMI Adapter", "price": "20.00", "stock": 3,
         "status": "inactive", "variants": [
             {"id": 1, "color": "black", "size": "S", "price": 22, "stock": 2},
             {"id": 2, "color": "white", "size": "S", "price": 25, "stock": 0},
         ]},
        {"id": 3, "categoryId": 2, "sellerId": 2, "name": "Phone X", "price": 500, "stock": 50,
         "status": "active", "tags": ["phone"]},
        {"id": 4, "categoryId": 2, "sellerId": 1, "name": "Phone Y", "price": 450, "stock": 0,
         "status": "active", "variants": [
             {"id": 3, "color": "black", "size": "L", "price": 460, "stock": 4},
         ]},
        {"id": 5, "categoryId": 2, "name": "Phone Z", "price": 700, "stock": 20, "status": "active"},
        {"id": 6, "categoryId": 4, "sellerId": 2, "name": "Shovel", "price": 30, "stock": 100, "status": "active"},
        {"id": 7, "categoryId": 99, "sellerId": "2", "name": "Mystery Box", "price": "abc", "stock": 1, "status": "active"},
    ],
    "orders": [
        {"id": 1, "userId": 1, "totalAmount": 520, "status": "completed",
         "payment": {"method": "credit_card", "status": "paid"},
         "createdAt": NOW_MS - 1 * DAY_MS,
         "items": [
             {"productId": 3, "quantity": 1, "price": 500},
             {"productId": 1, "quantity": 2, "price": 10},
         ]},
        {"id": 2, "userId": 1, "totalAmount": 1400, "status": "completed",
         "payment": {"method": "paypal", "status": "paid"},
         "createdAt": NOW_MS - 2 * DAY_MS,
         "items": [
             {"productId": 3, "quantity": 1, "price": 500},
             {"productId": 4, "quantity": 2, "price": 450},
         ]},
        {"id": 3, "userId": 2, "totalAmount": 700, "status": "pending",
         "payment": {"method": "credit_card", "status": "pending"},
         "createdAt": NOW_MS - 10 * DAY_MS,
         "items": [{"productId": 5, "quantity": 1, "price": 700}]},
        {"id": 4, "userId": 2, "totalAmount": "10.00", "status": "completed",
         "createdAt": iso(NOW_MS - 10 * HOUR_MS),
         "items": [{"productId": 1, "quantity": 1, "price": 10}]},
        {"id": 5, "userId": 99, "totalAmount": 0, "status": "cancelled", "items": []},
    ],
    "reviews": [
        {"id": 1, "productId": 3, "userId": 1, "rating": 5, "comment": "Great",
         "createdAt": NOW_MS - 1 * DAY_MS},
        {"id": 2, "productId": 3, "userId": 2, "rating": 4, "comment": "Good",
         "createdAt": NOW_MS - 3 * DAY_MS},
        {"id": 3, "productId": 1, "userId": 1, "rating": 3, "createdAt": NOW_MS - 5 * DAY_MS},
        {"id": 4, "productId": 4, "userId": 3, "rating": 2, "createdAt": NOW_MS - 2 * DAY_MS},
        {"id": 5, "productId": 3, "userId": 99, "rating": 7, "createdAt": NOW_MS - 4 * DAY_MS},
    ],
}


@pytest.fixture
def sample_data():
    """Raw dataset as it would be read from database.json."""
    return copy.deepcopy(SAMPLE_DATA)


@pytest.fixture
def store(sample_data):
    """DataStore built from the sample dataset."""
    return DataStore.from_dict(sample_data)


@pytest.fixture
def now_ms():
    """Reference time the sample timestamps are relative to."""
    return NOW_MS
