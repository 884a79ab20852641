"""Сквозной сценарий примера использования.

Собирает менеджеры через конструкторы и проходит основные операции:
регистрация, товар, заказ, расчёт суммы, проверка строки, комиссия, статус.
"""

import pytest

from storefront.core.math import calculate_payment_with_fee, calculate_total
from storefront.core.status import get_user_status
from storefront.core.validation import is_valid_string
from storefront.managers import (
    NotificationService,
    OrderProcessor,
    ProductManager,
    ReportGenerator,
    UserManager,
)


def test_sample_usage():
    users = UserManager()
    products = ProductManager()
    orders = OrderProcessor(users, products)
    reports = ReportGenerator(users, products, orders)
    notifications = NotificationService()

    assert users.add_user("John Doe", "john@example.com", 25) is True
    widget_id = products.add_product("Widget", 19.99, 100)
    assert orders.process_order(1, widget_id, 5) is True
    notifications.send_notification(1, "Your order has been placed")

    items = [{"price": 10, "quantity": 2}, {"price": 15, "quantity": 1}]
    assert calculate_total(items, 0.1, 0.08, 5.99, "USD") == 40.01
    assert is_valid_string("test") is True
    assert calculate_payment_with_fee(100, "credit") == pytest.approx(103)
    assert (
        get_user_status({"active": True, "subscription": {"status": "active", "plan": "premium"}})
        == "premium_active"
    )

    sales = reports.generate_report("sales")
    assert sales.count == 1
    assert sales.total == pytest.approx(99.95)
    assert reports.generate_report("users").count == 1
    assert reports.generate_report("inventory").low_stock == []
    assert notifications.get_notification_count() == 1
