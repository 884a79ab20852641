"""
storefront — учебный магазин из независимых компонентов с одной ответственностью.

Пакеты:
- storefront.core      : доменные модели, расчёт цен, валидация, контракты
- storefront.managers  : менеджеры пользователей, товаров, заказов, отчётов, уведомлений
"""
