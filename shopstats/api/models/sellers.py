"""
Seller Models
Response models for seller reporting endpoints.
"""

from typing import Dict, List, Optional

from pydantic import Field

from .categories import ProductSales
from .common import CamelModel, Number


class SellerCategoryCount(CamelModel):
    """Number of a seller's products in one category."""

    category_id: Optional[Number] = None
    category_name: str
    product_count: int


class SellerDashboard(CamelModel):
    """Catalog size, sales and best sellers of a seller."""

    seller_id: Number
    seller_name: str
    total_products: int
    active_products: int
    total_sales: Number = Field(..., description="Units sold across all orders")
    total_revenue: Number
    top_selling_products: List[ProductSales] = Field(..., description="Five best sellers by units")
    products_by_category: List[SellerCategoryCount]


class SellerAnalytics(CamelModel):
    """Sales, pricing, stock and monthly revenue of a seller."""

    seller_id: Number
    seller_name: str
    total_products: int
    active_products: int
    total_sales: Number
    total_revenue: Number
    average_product_price: Number = Field(..., description="Mean of positive prices (2dp)")
    total_stock: Number
    top_category: Optional[SellerCategoryCount] = None
    monthly_revenue: Dict[str, Number] = Field(..., description="Revenue per UTC month (YYYY-MM)")
