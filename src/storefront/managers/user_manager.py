"""UserManager — регистрация и поиск пользователей.

Проверки при регистрации:
- Возраст не меньше минимального (18)
- Email проходит общую проверку строки и содержит '@'

Отказ возвращается как False, исключения не бросаются.
Проверки дубликатов email нет.
"""

import logging
from dataclasses import dataclass
from numbers import Real
from typing import Final

from storefront.core.domain.user import User
from storefront.core.validation import is_valid_email

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Минимальный возраст регистрации
MIN_USER_AGE: Final[int] = 18


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class UserPolicy:
    """Параметры регистрации пользователей."""

    min_age: float = MIN_USER_AGE


# =============================================================================
# USER MANAGER
# =============================================================================


class UserManager:
    """Владеет списком пользователей."""

    def __init__(self, policy: UserPolicy | None = None):
        self.policy = policy or UserPolicy()
        self._users: list[User] = []

    def add_user(self, name: str, email: str, age: float) -> bool:
        """Регистрация пользователя.

        Args:
            name: имя пользователя
            email: email (обязателен '@', длина 1..50)
            age: возраст в годах

        Returns:
            True если пользователь добавлен
        """
        if not isinstance(name, str):
            logger.debug("add_user rejected: name %r is not a string", name)
            return False

        if isinstance(age, bool) or not isinstance(age, Real):
            logger.debug("add_user rejected: age %r is not a number", age)
            return False

        if age < self.policy.min_age:
            logger.debug("add_user rejected: age %s below %s", age, self.policy.min_age)
            return False

        if not is_valid_email(email):
            logger.debug("add_user rejected: invalid email %r", email)
            return False

        user = User(id=len(self._users) + 1, name=name, email=email, age=age)
        self._users.append(user)
        return True

    def find_user_by_id(self, user_id: int) -> User | None:
        """Поиск пользователя по id (линейный просмотр)."""
        for user in self._users:
            if user.id == user_id:
                return user
        return None

    def get_user_count(self) -> int:
        return len(self._users)

    def get_users(self) -> tuple[User, ...]:
        return tuple(self._users)
