"""
Product — Модель товара каталога

Immutable Pydantic модель. Остатки хранятся отдельно в инвентаре
ProductManager и в модель не входят.
"""

from pydantic import BaseModel, Field


class Product(BaseModel):
    """
    Модель товара.

    id = количество товаров на момент создания + 1.
    Цена не ограничена снизу: товар с нулевой ценой отсекается
    проверкой total > 0 при оформлении заказа.
    """

    id: int = Field(..., ge=1, description="Последовательный идентификатор товара")
    name: str = Field(..., description="Название товара")
    price: float = Field(..., description="Цена за единицу")

    model_config = {"frozen": True}  # Immutable
