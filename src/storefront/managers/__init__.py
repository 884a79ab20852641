"""Managers — компоненты магазина с собственным состоянием.

- UserManager: регистрация и поиск пользователей
- ProductManager: каталог и остатки
- OrderProcessor: проверка и оформление заказов (зависит от UserManager, ProductManager)
- ReportGenerator: read-only отчёты (зависит от всех трёх)
- NotificationService: ограниченный журнал уведомлений

Компоненты не потокобезопасны; при совместном использовании из нескольких
потоков доступ сериализует вызывающий код.
"""

from .notification_service import MAX_NOTIFICATIONS, NotificationConfig, NotificationService
from .order_processor import (
    MAX_ORDER_QUANTITY,
    MIN_ORDER_QUANTITY,
    OrderDecision,
    OrderLimits,
    OrderProcessor,
)
from .product_manager import LOW_STOCK_THRESHOLD, InventoryConfig, ProductManager
from .report_generator import ReportGenerator
from .user_manager import MIN_USER_AGE, UserManager, UserPolicy

__all__ = [
    "UserManager",
    "UserPolicy",
    "MIN_USER_AGE",
    "ProductManager",
    "InventoryConfig",
    "LOW_STOCK_THRESHOLD",
    "OrderProcessor",
    "OrderDecision",
    "OrderLimits",
    "MIN_ORDER_QUANTITY",
    "MAX_ORDER_QUANTITY",
    "ReportGenerator",
    "NotificationService",
    "NotificationConfig",
    "MAX_NOTIFICATIONS",
]
