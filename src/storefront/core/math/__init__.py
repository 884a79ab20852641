"""
Core math modules для storefront

Расчёт стоимости заказа и комиссий за оплату.
"""

# Pricing pipeline
from storefront.core.math.pricing import (
    CENTS_DECIMALS,
    CURRENCY_RATES,
    DEFAULT_CURRENCY_RATE,
    Currency,
    PriceBreakdown,
    PriceCalculator,
    apply_shipping,
    calculate_discount,
    calculate_price_breakdown,
    calculate_subtotal,
    calculate_tax,
    calculate_total,
    convert_currency,
    get_currency_rate,
    round_to_cents,
)

# Payment fees
from storefront.core.math.payments import (
    PAYMENT_FEE_RATES,
    PaymentMethod,
    calculate_payment_with_fee,
    get_fee_rate,
)

__all__ = [
    # Pricing
    "CENTS_DECIMALS",
    "CURRENCY_RATES",
    "DEFAULT_CURRENCY_RATE",
    "Currency",
    "PriceBreakdown",
    "PriceCalculator",
    "apply_shipping",
    "calculate_discount",
    "calculate_price_breakdown",
    "calculate_subtotal",
    "calculate_tax",
    "calculate_total",
    "convert_currency",
    "get_currency_rate",
    "round_to_cents",
    # Payments
    "PAYMENT_FEE_RATES",
    "PaymentMethod",
    "calculate_payment_with_fee",
    "get_fee_rate",
]
