"""Unit тесты для UserManager.

Coverage:
- Регистрация валидного пользователя и счётчик
- Отказ по возрасту (< 18)
- Отказ по email (нет '@', пустой, длиннее 50, не строка)
- Последовательные id и поиск по id
- Отсутствие проверки дубликатов
"""

import pytest

from storefront.managers import UserManager, UserPolicy


# =============================================================================
# PASS SCENARIOS
# =============================================================================


def test_add_user_success_increments_count(user_manager):
    """Успешная регистрация увеличивает счётчик ровно на 1."""
    assert user_manager.get_user_count() == 0

    assert user_manager.add_user("John Doe", "john@example.com", 25) is True

    assert user_manager.get_user_count() == 1


def test_add_user_exact_minimum_age(user_manager):
    """Ровно 18 лет — допустимо."""
    assert user_manager.add_user("Teen", "teen@example.com", 18) is True


def test_add_user_assigns_sequential_ids(user_manager):
    """id = количество пользователей + 1."""
    user_manager.add_user("A", "a@example.com", 30)
    user_manager.add_user("B", "b@example.com", 40)

    users = user_manager.get_users()
    assert [u.id for u in users] == [1, 2]
    assert users[1].name == "B"
    assert users[1].email == "b@example.com"
    assert users[1].age == 40


def test_find_user_by_id(user_manager):
    """Поиск зарегистрированного пользователя по id."""
    user_manager.add_user("John Doe", "john@example.com", 25)

    user = user_manager.find_user_by_id(1)
    assert user is not None
    assert user.name == "John Doe"


def test_find_user_by_id_missing(user_manager):
    """Неизвестный id → None."""
    user_manager.add_user("John Doe", "john@example.com", 25)

    assert user_manager.find_user_by_id(2) is None
    assert user_manager.find_user_by_id(0) is None


def test_duplicate_email_allowed(user_manager):
    """Дубликаты email не проверяются."""
    assert user_manager.add_user("A", "same@example.com", 20) is True
    assert user_manager.add_user("B", "same@example.com", 21) is True
    assert user_manager.get_user_count() == 2


# =============================================================================
# REJECTIONS
# =============================================================================


@pytest.mark.parametrize("age", [17, 0, -5, 17.99])
def test_add_user_rejects_underage(user_manager, age):
    """Возраст < 18 отклоняется при валидном email."""
    assert user_manager.add_user("Kid", "kid@example.com", age) is False
    assert user_manager.get_user_count() == 0


@pytest.mark.parametrize(
    "email",
    [
        "john.example.com",
        "",
        "a" * 45 + "@b.com",  # 51 символ
        None,
        42,
    ],
)
def test_add_user_rejects_invalid_email(user_manager, email):
    """Email без '@', пустой, слишком длинный или не строка отклоняется."""
    assert user_manager.add_user("John", email, 30) is False
    assert user_manager.get_user_count() == 0


@pytest.mark.parametrize("age", ["25", None, True])
def test_add_user_rejects_non_numeric_age(user_manager, age):
    """Нечисловой возраст отклоняется без исключения."""
    assert user_manager.add_user("John", "john@example.com", age) is False


def test_add_user_rejects_non_string_name(user_manager):
    """Имя должно быть строкой."""
    assert user_manager.add_user(None, "john@example.com", 30) is False


def test_custom_policy_min_age():
    """Минимальный возраст задаётся через UserPolicy."""
    manager = UserManager(policy=UserPolicy(min_age=21))

    assert manager.add_user("A", "a@example.com", 20) is False
    assert manager.add_user("B", "b@example.com", 21) is True
