"""
Payments — Комиссия за способ оплаты

Комиссия применяется мультипликативно: amount * (1 + fee_rate).
Неизвестный способ оплаты не является ошибкой: сумма возвращается без комиссии.
"""

from enum import Enum
from typing import Final


class PaymentMethod(str, Enum):
    """Способы оплаты с комиссией"""

    CREDIT = "CREDIT"
    DEBIT = "DEBIT"
    PAYPAL = "PAYPAL"


# Доля комиссии по способу оплаты
PAYMENT_FEE_RATES: Final[dict[str, float]] = {
    PaymentMethod.CREDIT.value: 0.03,
    PaymentMethod.DEBIT.value: 0.01,
    PaymentMethod.PAYPAL.value: 0.035,
}


def get_fee_rate(method: str) -> float | None:
    """
    Доля комиссии для способа оплаты (регистр не важен).

    Returns:
        Доля комиссии или None для неизвестного способа
    """
    if not isinstance(method, str):
        return None
    return PAYMENT_FEE_RATES.get(method.upper())


def calculate_payment_with_fee(amount: float, method: str) -> float:
    """
    Сумма к оплате с учётом комиссии.

    Args:
        amount: Сумма платежа
        method: Способ оплаты ('credit', 'DEBIT', 'PayPal', ...)

    Returns:
        amount * (1 + fee_rate); amount без изменений для неизвестного способа
    """
    fee_rate = get_fee_rate(method)
    if fee_rate is None:
        return amount
    return amount * (1 + fee_rate)
