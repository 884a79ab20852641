"""
Order / Sale — Записи об оформленных заказах и продажах

Обе записи append-only и создаются OrderProcessor ровно один раз
на каждый успешно обработанный заказ.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# =============================================================================
# ORDER MODEL
# =============================================================================


class Order(BaseModel):
    """Оформленный заказ."""

    user_id: int = Field(..., description="Идентификатор покупателя")
    product_id: int = Field(..., description="Идентификатор товара")
    quantity: int = Field(..., ge=1, description="Количество единиц (верхнюю границу задаёт OrderLimits)")
    total: float = Field(..., gt=0, description="Сумма заказа (price * quantity)")
    date: datetime = Field(..., description="Время оформления (UTC)")

    model_config = {"frozen": True}  # Immutable


# =============================================================================
# SALE MODEL
# =============================================================================


class Sale(BaseModel):
    """
    Запись о продаже (выручка по заказу).

    Время хранится в миллисекундах UTC, отдельно от Order.date.
    """

    product_id: int = Field(..., description="Идентификатор товара")
    quantity: int = Field(..., ge=1, description="Количество единиц")
    revenue: float = Field(..., gt=0, description="Выручка")
    ts_utc_ms: int = Field(..., gt=0, description="Время продажи (UTC, миллисекунды)")

    model_config = {"frozen": True}  # Immutable
