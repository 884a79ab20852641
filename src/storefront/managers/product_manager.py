"""ProductManager — каталог товаров и складские остатки.

Инвариант инвентаря:
- Отсутствие ключа означает «нет такого товара»
- reduce_stock не ограничивает остаток снизу: вызывающий код обязан
  проверить has_stock заранее
"""

import logging
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Final

from storefront.core.domain.product import Product

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Остаток строго ниже порога считается низким
LOW_STOCK_THRESHOLD: Final[int] = 10


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class InventoryConfig:
    """Конфигурация инвентаря."""

    low_stock_threshold: int = LOW_STOCK_THRESHOLD


# =============================================================================
# PRODUCT MANAGER
# =============================================================================


class ProductManager:
    """Владеет товарами и счётчиками остатков по товарам."""

    def __init__(self, config: InventoryConfig | None = None):
        self.config = config or InventoryConfig()
        self._products: list[Product] = []
        self._inventory: dict[int, int] = {}

    def add_product(self, name: str, price: float, stock: int) -> int | None:
        """Добавление товара.

        Args:
            name: название товара
            price: цена за единицу
            stock: начальный остаток

        Returns:
            id нового товара (количество товаров + 1);
            None если name не строка, price не число или stock не целое
        """
        if not isinstance(name, str):
            logger.debug("add_product rejected: name %r is not a string", name)
            return None

        if isinstance(price, bool) or not isinstance(price, Real):
            logger.debug("add_product rejected: price %r is not a number", price)
            return None

        if isinstance(stock, bool) or not isinstance(stock, Integral):
            logger.debug("add_product rejected: stock %r is not an integer", stock)
            return None

        product_id = len(self._products) + 1
        self._products.append(Product(id=product_id, name=name, price=price))
        self._inventory[product_id] = stock
        logger.debug("Product %s added with stock %s", product_id, stock)
        return product_id

    def get_product_by_id(self, product_id: int) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def has_stock(self, product_id: int, quantity: int) -> bool:
        """True если товар есть в инвентаре и остаток >= quantity."""
        stock = self._inventory.get(product_id)
        return stock is not None and stock >= quantity

    def reduce_stock(self, product_id: int, quantity: int) -> None:
        """Списание остатка без нижней границы (доверяет вызывающему)."""
        if product_id in self._inventory:
            self._inventory[product_id] -= quantity

    def get_stock(self, product_id: int) -> int | None:
        """Текущий остаток или None для неизвестного товара."""
        return self._inventory.get(product_id)

    def get_low_stock_items(self) -> list[int]:
        """Идентификаторы товаров с остатком строго ниже порога."""
        threshold = self.config.low_stock_threshold
        return [
            product_id
            for product_id, stock in self._inventory.items()
            if stock < threshold
        ]

    def get_product_count(self) -> int:
        return len(self._products)

    def get_products(self) -> tuple[Product, ...]:
        return tuple(self._products)
