"""
Reports — Записи отчётов ReportGenerator

Каждый отчёт — маленькая immutable запись с дискриминатором `type`.
Сериализованный вид (model_dump(mode="json")) соответствует JSON Schema
контрактам из storefront.core.contracts.
"""

from enum import Enum
from typing import Literal, Union

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class ReportKind(str, Enum):
    """Поддерживаемые виды отчётов"""

    SALES = "sales"
    INVENTORY = "inventory"
    USERS = "users"


# =============================================================================
# REPORT MODELS
# =============================================================================


class SalesReport(BaseModel):
    """Суммарная выручка и количество продаж."""

    type: Literal["sales"] = "sales"
    total: float = Field(..., description="Сумма выручки по всем продажам")
    count: int = Field(..., ge=0, description="Количество продаж")

    model_config = {"frozen": True}


class InventoryReport(BaseModel):
    """Товары с низким остатком."""

    type: Literal["inventory"] = "inventory"
    low_stock: list[int] = Field(
        default_factory=list, description="Идентификаторы товаров с остатком < порога"
    )

    model_config = {"frozen": True}


class UsersReport(BaseModel):
    """Количество зарегистрированных пользователей."""

    type: Literal["users"] = "users"
    count: int = Field(..., ge=0, description="Количество пользователей")

    model_config = {"frozen": True}


Report = Union[SalesReport, InventoryReport, UsersReport]
