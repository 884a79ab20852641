"""NotificationService — ограниченный журнал уведомлений.

Журнал не обрезается частично: когда в нём уже max_notifications записей,
он полностью очищается перед добавлением новой. Поэтому журнал либо
растёт, либо сбрасывается ровно до одной записи.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone
from numbers import Integral
from typing import Final

from storefront.core.domain.notification import Notification

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

MAX_NOTIFICATIONS: Final[int] = 100


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class NotificationConfig:
    """Конфигурация журнала уведомлений."""

    max_notifications: int = MAX_NOTIFICATIONS


def _utc_now_ms() -> int:
    return int(datetime.now(timezone.utc).timestamp() * 1000)


# =============================================================================
# NOTIFICATION SERVICE
# =============================================================================


class NotificationService:
    """Владеет журналом уведомлений."""

    def __init__(
        self,
        config: NotificationConfig | None = None,
        clock_ms: Callable[[], int] = _utc_now_ms,
    ):
        self.config = config or NotificationConfig()
        self._clock_ms = clock_ms
        self._notifications: list[Notification] = []

    def send_notification(self, user_id: int, message: str) -> Notification | None:
        """Добавление уведомления в журнал (со сбросом переполненного журнала).

        Returns:
            Созданная запись; None если user_id не целое или message не строка
            (журнал при этом не изменяется)
        """
        if isinstance(user_id, bool) or not isinstance(user_id, Integral):
            logger.debug("send_notification rejected: user_id %r is not an integer", user_id)
            return None

        if not isinstance(message, str):
            logger.debug("send_notification rejected: message %r is not a string", message)
            return None

        if len(self._notifications) >= self.config.max_notifications:
            logger.info(
                "Notification log reset after %d entries", len(self._notifications)
            )
            self._notifications.clear()

        notification = Notification(
            user_id=user_id, message=message, sent_ts_utc_ms=self._clock_ms()
        )
        self._notifications.append(notification)
        return notification

    def get_notification_count(self) -> int:
        return len(self._notifications)

    def get_notifications(self) -> tuple[Notification, ...]:
        return tuple(self._notifications)
