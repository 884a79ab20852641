"""ReportGenerator — read-only агрегация по менеджерам.

Виды отчётов:
- sales     : выручка и количество продаж (OrderProcessor)
- inventory : товары с низким остатком (ProductManager)
- users     : количество пользователей (UserManager)

Неизвестный вид отчёта → None. Состояние менеджеров не изменяется.
"""

import logging

from storefront.core.domain.report import (
    InventoryReport,
    Report,
    ReportKind,
    SalesReport,
    UsersReport,
)
from storefront.managers.order_processor import OrderProcessor
from storefront.managers.product_manager import ProductManager
from storefront.managers.user_manager import UserManager

logger = logging.getLogger(__name__)


class ReportGenerator:
    """Формирует отчёты по фиксированному набору видов."""

    def __init__(
        self,
        user_manager: UserManager,
        product_manager: ProductManager,
        order_processor: OrderProcessor,
    ):
        self.user_manager = user_manager
        self.product_manager = product_manager
        self.order_processor = order_processor

        self._builders = {
            ReportKind.SALES.value: self._sales_report,
            ReportKind.INVENTORY.value: self._inventory_report,
            ReportKind.USERS.value: self._users_report,
        }

    def generate_report(self, kind: str) -> Report | None:
        """Отчёт указанного вида.

        Args:
            kind: 'sales', 'inventory' или 'users' (допускается ReportKind)

        Returns:
            Запись отчёта или None для неизвестного вида
        """
        if isinstance(kind, ReportKind):
            kind = kind.value
        if not isinstance(kind, str):
            logger.debug("Unknown report kind: %r", kind)
            return None

        builder = self._builders.get(kind)
        if builder is None:
            logger.debug("Unknown report kind: %r", kind)
            return None
        return builder()

    def _sales_report(self) -> SalesReport:
        return SalesReport(
            total=self.order_processor.get_sales_total(),
            count=self.order_processor.get_sales_count(),
        )

    def _inventory_report(self) -> InventoryReport:
        return InventoryReport(low_stock=self.product_manager.get_low_stock_items())

    def _users_report(self) -> UsersReport:
        return UsersReport(count=self.user_manager.get_user_count())
