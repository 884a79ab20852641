"""
Notification — Запись журнала уведомлений
"""

from pydantic import BaseModel, Field


class Notification(BaseModel):
    """Отправленное уведомление."""

    user_id: int = Field(..., description="Получатель")
    message: str = Field(..., description="Текст уведомления")
    sent_ts_utc_ms: int = Field(..., gt=0, description="Время отправки (UTC, миллисекунды)")

    model_config = {"frozen": True}  # Immutable
