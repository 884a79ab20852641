"""
Contract Validation Module

Модуль для валидации JSON контрактов отчётов storefront.
"""

from .validators import (
    REPORT_SCHEMAS,
    ReportContractValidator,
    SchemaLoader,
    is_valid_report,
    validate_report,
)

__all__ = [
    "REPORT_SCHEMAS",
    "SchemaLoader",
    "ReportContractValidator",
    "validate_report",
    "is_valid_report",
]
