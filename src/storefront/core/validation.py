"""
Validation — Общие проверки строковых полей

Единая проверка строк для имён пользователей, названий товаров, описаний
заказов и email. Результат всегда bool, исключения не бросаются.
"""

from typing import Any, Final

# Максимальная длина строковых полей по умолчанию
MAX_STRING_LENGTH: Final[int] = 50

# Обязательный символ email
EMAIL_SEPARATOR: Final[str] = "@"


def is_valid_string(value: Any, max_length: int = MAX_STRING_LENGTH) -> bool:
    """
    Проверка строки: не None, тип str, длина в [1, max_length].

    Args:
        value: Проверяемое значение
        max_length: Максимальная допустимая длина

    Returns:
        True если строка валидна
    """
    if value is None:
        return False
    if not isinstance(value, str):
        return False
    return 1 <= len(value) <= max_length


def is_valid_email(value: Any) -> bool:
    """Email: валидная строка, содержащая '@' (без проверки по RFC)."""
    return is_valid_string(value) and EMAIL_SEPARATOR in value
