"""
User status — Классификация пользователя по активности и подписке

Порядок проверок (первая сработавшая определяет результат):
1. Пользователь отсутствует → not_found
2. Флаг active не равен True → inactive
3. Подписка отсутствует или не является mapping → no_subscription
4. Подписка не active → expired / inactive_subscription
5. Нет плана → active_no_plan
6. План premium / basic → premium_active / basic_active
7. Любой другой план → active_no_plan
"""

from collections.abc import Mapping
from typing import Any

from storefront.core.domain.user import SubscriptionPlan, SubscriptionState, UserStatus

_PLAN_STATUSES: dict[str, UserStatus] = {
    SubscriptionPlan.PREMIUM.value: UserStatus.PREMIUM_ACTIVE,
    SubscriptionPlan.BASIC.value: UserStatus.BASIC_ACTIVE,
}


def get_user_status(user: Mapping[str, Any] | None) -> UserStatus:
    """
    Статус пользователя.

    Args:
        user: Запись вида {"active": bool, "subscription": {"status": ..., "plan": ...}}
              или None

    Returns:
        UserStatus (str enum, сравнивается со строками напрямую)
    """
    if user is None:
        return UserStatus.NOT_FOUND

    # Активен только active is True; 1, "yes" и т.п. не считаются
    if user.get("active") is not True:
        return UserStatus.INACTIVE

    subscription = user.get("subscription")
    if not isinstance(subscription, Mapping):
        return UserStatus.NO_SUBSCRIPTION

    status = subscription.get("status")
    if status != SubscriptionState.ACTIVE.value:
        if status == SubscriptionState.EXPIRED.value:
            return UserStatus.EXPIRED
        return UserStatus.INACTIVE_SUBSCRIPTION

    plan = subscription.get("plan")
    if not isinstance(plan, str):
        return UserStatus.ACTIVE_NO_PLAN

    return _PLAN_STATUSES.get(plan, UserStatus.ACTIVE_NO_PLAN)
