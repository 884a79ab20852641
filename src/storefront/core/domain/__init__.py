"""
Domain models and value objects.

Contains the shop entities: User, Product, Order, Sale, Notification and reports.
"""

from storefront.core.domain.notification import Notification
from storefront.core.domain.order import Order, Sale
from storefront.core.domain.product import Product
from storefront.core.domain.report import (
    InventoryReport,
    Report,
    ReportKind,
    SalesReport,
    UsersReport,
)
from storefront.core.domain.user import (
    SubscriptionPlan,
    SubscriptionState,
    User,
    UserStatus,
)

__all__ = [
    # User model
    "User",
    "UserStatus",
    "SubscriptionPlan",
    "SubscriptionState",
    # Product model
    "Product",
    # Order records
    "Order",
    "Sale",
    # Notification model
    "Notification",
    # Reports
    "Report",
    "ReportKind",
    "SalesReport",
    "InventoryReport",
    "UsersReport",
]
