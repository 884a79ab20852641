"""OrderProcessor — проверка и оформление заказов.

Цепочка проверок (первая непройденная блокирует заказ без побочных эффектов):
1. Количество в диапазоне [1, 999]
2. Пользователь существует
3. Достаточный остаток товара
4. Товар существует (повторная проверка после has_stock)
5. total = price * quantity > 0

При успехе:
- Создаётся Order (время UTC)
- Списывается остаток
- Создаётся Sale (отдельная метка времени в миллисекундах)
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Final

from storefront.core.domain.order import Order, Sale
from storefront.managers.product_manager import ProductManager
from storefront.managers.user_manager import UserManager

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

MIN_ORDER_QUANTITY: Final[int] = 1
MAX_ORDER_QUANTITY: Final[int] = 999


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _to_epoch_ms(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class OrderDecision:
    """Результат проверки заказа."""

    accepted: bool
    block_reason: str

    # Входные параметры для диагностики
    user_id: int
    product_id: int
    quantity: int

    # Сумма заказа (0.0 если до расчёта не дошли)
    total: float

    # Детали
    details: str


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class OrderLimits:
    """Допустимый диапазон количества в заказе."""

    min_quantity: int = MIN_ORDER_QUANTITY
    max_quantity: int = MAX_ORDER_QUANTITY


# =============================================================================
# ORDER PROCESSOR
# =============================================================================


class OrderProcessor:
    """Оформляет заказы, используя менеджеры пользователей и товаров."""

    def __init__(
        self,
        user_manager: UserManager,
        product_manager: ProductManager,
        limits: OrderLimits | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        """
        Args:
            user_manager: источник пользователей
            product_manager: источник товаров и остатков (изменяется при оформлении)
            limits: диапазон количества (опционально, используется default)
            clock: источник текущего времени (UTC)
        """
        self.user_manager = user_manager
        self.product_manager = product_manager
        self.limits = limits or OrderLimits()
        self._clock = clock

        self._orders: list[Order] = []
        self._sales: list[Sale] = []

    def evaluate_order(self, user_id: int, product_id: int, quantity: int) -> OrderDecision:
        """Проверка заказа без изменения состояния.

        Returns:
            OrderDecision с решением о допуске
        """
        # 1. Количество
        if (
            isinstance(quantity, bool)
            or not isinstance(quantity, int)
            or not self.limits.min_quantity <= quantity <= self.limits.max_quantity
        ):
            return self._blocked(
                "invalid_quantity",
                user_id,
                product_id,
                quantity,
                f"quantity {quantity!r} outside "
                f"[{self.limits.min_quantity}, {self.limits.max_quantity}]",
            )

        # 2. Пользователь
        if self.user_manager.find_user_by_id(user_id) is None:
            return self._blocked(
                "user_not_found", user_id, product_id, quantity, f"no user with id {user_id!r}"
            )

        # 3. Остаток
        if not self.product_manager.has_stock(product_id, quantity):
            return self._blocked(
                "insufficient_stock",
                user_id,
                product_id,
                quantity,
                f"stock {self.product_manager.get_stock(product_id)!r} < {quantity}",
            )

        # 4. Товар
        product = self.product_manager.get_product_by_id(product_id)
        if product is None:
            return self._blocked(
                "product_not_found",
                user_id,
                product_id,
                quantity,
                f"no product with id {product_id!r}",
            )

        # 5. Сумма
        total = product.price * quantity
        if total <= 0:
            return self._blocked(
                "non_positive_total", user_id, product_id, quantity, f"total {total} <= 0"
            )

        return OrderDecision(
            accepted=True,
            block_reason="",
            user_id=user_id,
            product_id=product_id,
            quantity=quantity,
            total=total,
            details=f"PASS: {quantity} x {product.name} = {total}",
        )

    def process_order(self, user_id: int, product_id: int, quantity: int) -> bool:
        """Оформление заказа.

        Returns:
            True если заказ оформлен, False при любой непройденной проверке
        """
        decision = self.evaluate_order(user_id, product_id, quantity)
        if not decision.accepted:
            logger.debug("Order rejected (%s): %s", decision.block_reason, decision.details)
            return False

        self._orders.append(
            Order(
                user_id=user_id,
                product_id=product_id,
                quantity=quantity,
                total=decision.total,
                date=self._clock(),
            )
        )
        self.product_manager.reduce_stock(product_id, quantity)
        self._sales.append(
            Sale(
                product_id=product_id,
                quantity=quantity,
                revenue=decision.total,
                ts_utc_ms=_to_epoch_ms(self._clock()),
            )
        )
        logger.info("Order accepted: %s", decision.details)
        return True

    def get_sales_total(self) -> float:
        """Сумма выручки по всем продажам."""
        return sum((sale.revenue for sale in self._sales), 0.0)

    def get_sales_count(self) -> int:
        return len(self._sales)

    def get_order_count(self) -> int:
        return len(self._orders)

    def get_orders(self) -> tuple[Order, ...]:
        return tuple(self._orders)

    def get_sales(self) -> tuple[Sale, ...]:
        return tuple(self._sales)

    def _blocked(
        self, reason: str, user_id: int, product_id: int, quantity: int, details: str
    ) -> OrderDecision:
        return OrderDecision(
            accepted=False,
            block_reason=reason,
            user_id=user_id,
            product_id=product_id,
            quantity=quantity,
            total=0.0,
            details=details,
        )
