"""
Pydantic Models
Request/response models for API endpoints.
"""

from .common import ERROR_RESPONSES, CamelModel, ErrorResponse, PriceRange
from .categories import (
    CategoryProductsSummary,
    CategoryReviewsStatistics,
    CategorySalesStats,
    CategorySubcategories,
    CategoryTrendingProducts,
    ProductReviewStats,
    ProductSales,
    SubcategorySummary,
    TrendingProduct,
)
from .orders import (
    OrderCustomer,
    OrderDetails,
    OrderLineDetail,
    OrderStatistics,
    RecentOrder,
    RecentOrders,
)
from .products import (
    LowStockProduct,
    LowStockReport,
    ProductRecommendations,
    ProductReviewsSummary,
    ProductSalesStats,
    ProductVariantsSummary,
    RecentReview,
    Recommendation,
    TopReviewedProduct,
    TopReviewedProducts,
    VariantSummary,
)
from .search import (
    CategorySearchRequest,
    OrderSearchRequest,
    ProductSearchRequest,
    ReviewSearchRequest,
    UserSearchRequest,
)
from .sellers import SellerAnalytics, SellerCategoryCount, SellerDashboard
from .users import (
    ActivityOrder,
    CategoryActivity,
    OrderHistoryEntry,
    PaymentMethodUsage,
    PurchasedCategory,
    PurchasedProduct,
    UserActivity,
    UserOrderHistory,
    UserPaymentMethodsSummary,
    UserPurchaseSummary,
    UserReview,
    UserReviewsHistory,
    UserTotalSpent,
)

__all__ = [
    "ERROR_RESPONSES",
    "CamelModel",
    "ErrorResponse",
    "PriceRange",
    "CategoryProductsSummary",
    "CategoryReviewsStatistics",
    "CategorySalesStats",
    "CategorySubcategories",
    "CategoryTrendingProducts",
    "ProductReviewStats",
    "ProductSales",
    "SubcategorySummary",
    "TrendingProduct",
    "OrderCustomer",
    "OrderDetails",
    "OrderLineDetail",
    "OrderStatistics",
    "RecentOrder",
    "RecentOrders",
    "LowStockProduct",
    "LowStockReport",
    "ProductRecommendations",
    "ProductReviewsSummary",
    "ProductSalesStats",
    "ProductVariantsSummary",
    "RecentReview",
    "Recommendation",
    "TopReviewedProduct",
    "TopReviewedProducts",
    "VariantSummary",
    "CategorySearchRequest",
    "OrderSearchRequest",
    "ProductSearchRequest",
    "ReviewSearchRequest",
    "UserSearchRequest",
    "SellerAnalytics",
    "SellerCategoryCount",
    "SellerDashboard",
    "ActivityOrder",
    "CategoryActivity",
    "OrderHistoryEntry",
    "PaymentMethodUsage",
    "PurchasedCategory",
    "PurchasedProduct",
    "UserActivity",
    "UserOrderHistory",
    "UserPaymentMethodsSummary",
    "UserPurchaseSummary",
    "UserReview",
    "UserReviewsHistory",
    "UserTotalSpent",
]
