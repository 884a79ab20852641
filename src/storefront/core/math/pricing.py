"""
Pricing — Расчёт итоговой стоимости заказа

Детерминированный конвейер, каждый этап вызывается отдельно:

    subtotal → discount → tax → shipping → currency → rounding

Все ставки вне интервала (0, 1) молча игнорируются (вклад 0), неизвестная
валюта пересчитывается по курсу USD. Ни одна функция не бросает исключений
на некорректные ставки.
"""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final


# =============================================================================
# CONSTANTS
# =============================================================================


class Currency(str, Enum):
    """Поддерживаемые валюты"""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"


# Курсы пересчёта из USD
CURRENCY_RATES: Final[dict[str, float]] = {
    Currency.USD.value: 1.0,
    Currency.EUR.value: 0.85,
    Currency.GBP.value: 0.75,
}

# Курс для неизвестных кодов валют
DEFAULT_CURRENCY_RATE: Final[float] = CURRENCY_RATES[Currency.USD.value]

# Точность округления итоговой суммы (центы)
CENTS_DECIMALS: Final[int] = 2


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class PriceBreakdown:
    """Промежуточные значения конвейера расчёта."""

    subtotal: float
    discount_amount: float
    after_discount: float
    tax_amount: float
    before_shipping: float
    with_shipping: float
    currency_rate: float
    total: float


# =============================================================================
# PIPELINE STAGES
# =============================================================================


def _is_fractional_rate(rate: float) -> bool:
    return 0 < rate < 1


def calculate_subtotal(items: Iterable[Mapping[str, Any]]) -> float:
    """
    Сумма price * quantity по всем позициям.

    Позиция без price или quantity (ключ отсутствует или None) даёт вклад 0.

    Args:
        items: Позиции заказа вида {"price": ..., "quantity": ...}

    Returns:
        Subtotal
    """
    subtotal = 0.0
    for item in items:
        price = item.get("price")
        quantity = item.get("quantity")
        if price is None or quantity is None:
            continue
        subtotal += price * quantity
    return subtotal


def calculate_discount(subtotal: float, discount_rate: float) -> float:
    """Скидка: subtotal * rate только при 0 < rate < 1, иначе 0."""
    if not _is_fractional_rate(discount_rate):
        return 0.0
    return subtotal * discount_rate


def calculate_tax(amount: float, tax_rate: float) -> float:
    """Налог: amount * rate только при 0 < rate < 1, иначе 0."""
    if not _is_fractional_rate(tax_rate):
        return 0.0
    return amount * tax_rate


def apply_shipping(amount: float, shipping_cost: float) -> float:
    """Добавление стоимости доставки (только положительной)."""
    if shipping_cost > 0:
        return amount + shipping_cost
    return amount


def get_currency_rate(currency: str) -> float:
    """
    Курс валюты из фиксированной таблицы.

    Args:
        currency: Код валюты (например, 'EUR')

    Returns:
        Курс; для неизвестного кода — курс USD (1.0)
    """
    return CURRENCY_RATES.get(currency, DEFAULT_CURRENCY_RATE)


def convert_currency(amount: float, currency: str) -> float:
    """Пересчёт суммы в указанную валюту."""
    return amount * get_currency_rate(currency)


def round_to_cents(value: float, decimals: int = CENTS_DECIMALS) -> float:
    """
    Округление до центов: масштабирование, округление half away from zero.

    Не эквивалентно встроенному round() (banker's rounding): 0.125 → 0.13.
    inf и nan возвращаются без изменений.

    Args:
        value: Сумма
        decimals: Количество знаков после запятой

    Returns:
        Округлённая сумма
    """
    if not math.isfinite(value):
        return value

    scale = 10**decimals
    scaled = value * scale
    rounded = math.floor(abs(scaled) + 0.5)
    return math.copysign(rounded, scaled) / scale


# =============================================================================
# FULL PIPELINE
# =============================================================================


def calculate_price_breakdown(
    items: Iterable[Mapping[str, Any]],
    discount_rate: float,
    tax_rate: float,
    shipping_cost: float,
    currency: str,
) -> PriceBreakdown:
    """
    Полный расчёт с сохранением всех промежуточных значений.

    Args:
        items: Позиции заказа
        discount_rate: Доля скидки (учитывается при 0 < rate < 1)
        tax_rate: Доля налога (учитывается при 0 < rate < 1)
        shipping_cost: Стоимость доставки (учитывается при > 0)
        currency: Код валюты

    Returns:
        PriceBreakdown с итогом в поле total
    """
    subtotal = calculate_subtotal(items)
    discount_amount = calculate_discount(subtotal, discount_rate)
    after_discount = subtotal - discount_amount
    tax_amount = calculate_tax(after_discount, tax_rate)
    before_shipping = after_discount + tax_amount
    with_shipping = apply_shipping(before_shipping, shipping_cost)
    currency_rate = get_currency_rate(currency)

    return PriceBreakdown(
        subtotal=subtotal,
        discount_amount=discount_amount,
        after_discount=after_discount,
        tax_amount=tax_amount,
        before_shipping=before_shipping,
        with_shipping=with_shipping,
        currency_rate=currency_rate,
        total=round_to_cents(with_shipping * currency_rate),
    )


def calculate_total(
    items: Iterable[Mapping[str, Any]],
    discount_rate: float,
    tax_rate: float,
    shipping_cost: float,
    currency: str,
) -> float:
    """Итоговая сумма заказа, округлённая до центов."""
    return calculate_price_breakdown(
        items, discount_rate, tax_rate, shipping_cost, currency
    ).total


class PriceCalculator:
    """
    Stateless namespace над функциями конвейера.

    Не хранит состояние; все методы статические.
    """

    calculate_subtotal = staticmethod(calculate_subtotal)
    calculate_discount = staticmethod(calculate_discount)
    calculate_tax = staticmethod(calculate_tax)
    apply_shipping = staticmethod(apply_shipping)
    convert_currency = staticmethod(convert_currency)
    round_to_cents = staticmethod(round_to_cents)
    calculate_price_breakdown = staticmethod(calculate_price_breakdown)
    calculate_total = staticmethod(calculate_total)
