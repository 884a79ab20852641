"""
Тесты для доменных моделей: User, Product, Order, Sale, Notification

Проверяет:
1. Создание моделей Pydantic
2. Immutability (frozen=True)
3. Ограничения полей
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from storefront.core.domain import Notification, Order, Product, Sale, User


class TestUser:
    """Тесты для модели User"""

    def test_creation(self) -> None:
        user = User(id=1, name="John Doe", email="john@example.com", age=25)
        assert user.id == 1
        assert user.email == "john@example.com"

    def test_immutable(self) -> None:
        user = User(id=1, name="John Doe", email="john@example.com", age=25)
        with pytest.raises(ValidationError):
            user.name = "Jane"  # type: ignore

    def test_id_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            User(id=0, name="John", email="john@example.com", age=25)


class TestProduct:
    """Тесты для модели Product"""

    def test_creation(self) -> None:
        product = Product(id=1, name="Widget", price=19.99)
        assert product.price == 19.99

    def test_immutable(self) -> None:
        product = Product(id=1, name="Widget", price=19.99)
        with pytest.raises(ValidationError):
            product.price = 1.0  # type: ignore


class TestOrderRecords:
    """Тесты для Order и Sale"""

    def test_order(self) -> None:
        moment = datetime(2024, 1, 2, tzinfo=timezone.utc)
        order = Order(user_id=1, product_id=2, quantity=3, total=30.0, date=moment)
        assert order.date == moment

    def test_order_quantity_positive(self) -> None:
        moment = datetime(2024, 1, 2, tzinfo=timezone.utc)
        with pytest.raises(ValidationError):
            Order(user_id=1, product_id=2, quantity=0, total=30.0, date=moment)

    def test_sale_revenue_positive(self) -> None:
        with pytest.raises(ValidationError):
            Sale(product_id=1, quantity=1, revenue=0.0, ts_utc_ms=1700000000000)

    def test_sale_json_roundtrip(self) -> None:
        sale = Sale(product_id=1, quantity=2, revenue=39.98, ts_utc_ms=1700000000000)
        assert Sale.model_validate_json(sale.model_dump_json()) == sale


class TestNotification:
    """Тесты для модели Notification"""

    def test_immutable(self) -> None:
        notification = Notification(user_id=1, message="hi", sent_ts_utc_ms=1700000000000)
        with pytest.raises(ValidationError):
            notification.message = "bye"  # type: ignore
