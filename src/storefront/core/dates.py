"""
Dates — Форматирование дат и расчёт возраста
"""

from datetime import date, datetime


def format_date_to_string(value: date) -> str:
    """
    Форматирование даты в YYYY-MM-DD с ведущими нулями.

    Args:
        value: date или datetime

    Returns:
        Строка вида '2024-03-07'
    """
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def _to_date(value: date | datetime | str) -> date | None:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value).date()
        except ValueError:
            return None
    return None


def calculate_age_from_birth_date(
    birth_date: date | datetime | str,
    today: date | None = None,
) -> int | None:
    """
    Полных лет между датой рождения и сегодняшней датой.

    Если день рождения в текущем году ещё не наступил, возраст уменьшается на 1.

    Args:
        birth_date: Дата рождения (date, datetime или ISO-8601 строка)
        today: Дата отсчёта (по умолчанию — сегодня)

    Returns:
        Возраст в годах; None если дату рождения не удалось разобрать
    """
    birth = _to_date(birth_date)
    if birth is None:
        return None

    current = today or date.today()
    age = current.year - birth.year
    if (current.month, current.day) < (birth.month, birth.day):
        age -= 1
    return age
