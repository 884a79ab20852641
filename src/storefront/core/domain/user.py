"""
User — Модель зарегистрированного пользователя

Immutable Pydantic модель. Создаётся только через UserManager.add_user,
который выполняет бизнес-валидацию (возраст, email) и возвращает False
вместо исключения. Модель не дублирует эти проверки.
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class UserStatus(str, Enum):
    """Классификация пользователя по активности и подписке"""

    NOT_FOUND = "not_found"
    INACTIVE = "inactive"
    NO_SUBSCRIPTION = "no_subscription"
    EXPIRED = "expired"
    INACTIVE_SUBSCRIPTION = "inactive_subscription"
    ACTIVE_NO_PLAN = "active_no_plan"
    PREMIUM_ACTIVE = "premium_active"
    BASIC_ACTIVE = "basic_active"


class SubscriptionPlan(str, Enum):
    """Известные тарифные планы подписки"""

    PREMIUM = "premium"
    BASIC = "basic"


class SubscriptionState(str, Enum):
    """Состояния подписки, различаемые классификатором"""

    ACTIVE = "active"
    EXPIRED = "expired"


# =============================================================================
# USER MODEL
# =============================================================================


class User(BaseModel):
    """
    Модель пользователя.

    id присваивается последовательно (count + 1) в момент регистрации
    и никогда не переиспользуется: удаление пользователей не поддерживается.
    """

    id: int = Field(..., ge=1, description="Последовательный идентификатор")
    name: str = Field(..., description="Имя пользователя")
    email: str = Field(..., description="Email (содержит '@')")
    age: float = Field(..., description="Возраст в годах")

    model_config = {"frozen": True}  # Immutable
