"""
API Services
Reporting logic behind the API endpoints.
"""

from .base import ReportingService
from .category_service import CategoryService
from .order_service import OrderService
from .product_service import ProductService
from .search_service import SearchService
from .seller_service import SellerService
from .user_service import UserService

__all__ = [
    "ReportingService",
    "CategoryService",
    "OrderService",
    "ProductService",
    "SearchService",
    "SellerService",
    "UserService",
]
