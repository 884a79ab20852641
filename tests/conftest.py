"""Общие fixtures: связанные менеджеры и фиксированные часы."""

from datetime import datetime, timezone

import pytest

from storefront.managers import (
    NotificationService,
    OrderProcessor,
    ProductManager,
    ReportGenerator,
    UserManager,
)

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
FIXED_NOW_MS = int(FIXED_NOW.timestamp() * 1000)


@pytest.fixture
def user_manager():
    """Пустой UserManager."""
    return UserManager()


@pytest.fixture
def product_manager():
    """Пустой ProductManager."""
    return ProductManager()


@pytest.fixture
def order_processor(user_manager, product_manager):
    """OrderProcessor с фиксированным временем."""
    return OrderProcessor(user_manager, product_manager, clock=lambda: FIXED_NOW)


@pytest.fixture
def report_generator(user_manager, product_manager, order_processor):
    """ReportGenerator поверх тех же менеджеров."""
    return ReportGenerator(user_manager, product_manager, order_processor)


@pytest.fixture
def notification_service():
    """NotificationService с фиксированным временем."""
    return NotificationService(clock_ms=lambda: FIXED_NOW_MS)


@pytest.fixture
def stocked_shop(user_manager, product_manager):
    """Магазин из примера использования: John Doe и Widget (19.99, остаток 100)."""
    assert user_manager.add_user("John Doe", "john@example.com", 25)
    widget_id = product_manager.add_product("Widget", 19.99, 100)
    return {"user_id": 1, "product_id": widget_id}
