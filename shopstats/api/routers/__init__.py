"""
API Routers
FastAPI route handlers for different endpoints.
"""

from .categories import router as categories_router
from .health import router as health_router
from .orders import router as orders_router
from .products import router as products_router
from .reviews import router as reviews_router
from .sellers import router as sellers_router
from .users import router as users_router

__all__ = [
    "health_router",
    "categories_router",
    "orders_router",
    "products_router",
    "reviews_router",
    "sellers_router",
    "users_router",
]
