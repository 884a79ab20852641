"""
JSON Schema Report Contract Validators

Сериализованный отчёт (report.model_dump(mode="json")) проверяется по схеме,
выбранной по его дискриминатору `type`:

    sales     → schema/sales_report.json
    inventory → schema/inventory_report.json
    users     → schema/users_report.json

Валидаторы строятся лениво и кэшируются по виду отчёта.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from storefront.core.domain.report import ReportKind

SCHEMA_DIR = Path(__file__).parent / "schema"

# Вид отчёта → имя файла схемы (без .json)
REPORT_SCHEMAS: Dict[str, str] = {
    kind.value: f"{kind.value}_report" for kind in ReportKind
}


class SchemaLoader:
    """Чтение и meta-валидация JSON Schema файлов из каталога."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени файла без расширения.

        Raises:
            FileNotFoundError: Если файла нет
            ValueError: Если файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"{schema_path.name} is not a valid JSON Schema: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


class ReportContractValidator:
    """
    Диспетчер проверки отчётов по полю `type`.

    Один экземпляр обслуживает все виды отчётов; Draft202012Validator
    создаётся при первой проверке отчёта данного вида.
    """

    def __init__(self, loader: SchemaLoader | None = None):
        self._loader = loader or SchemaLoader()
        self._validators: Dict[str, Draft202012Validator] = {}

    def _validator_for(self, kind: Any) -> Draft202012Validator | None:
        schema_name = REPORT_SCHEMAS.get(kind) if isinstance(kind, str) else None
        if schema_name is None:
            return None
        if kind not in self._validators:
            self._validators[kind] = Draft202012Validator(self._loader.load_schema(schema_name))
        return self._validators[kind]

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если вид отчёта неизвестен или данные не соответствуют схеме
        """
        validator = self._validator_for(data.get("type"))
        if validator is None:
            raise ValidationError(f"Unknown report type: {data.get('type')!r}")
        validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        validator = self._validator_for(data.get("type"))
        return validator is not None and validator.is_valid(data)


_DEFAULT_VALIDATOR: ReportContractValidator | None = None


def _default_validator() -> ReportContractValidator:
    global _DEFAULT_VALIDATOR
    if _DEFAULT_VALIDATOR is None:
        _DEFAULT_VALIDATOR = ReportContractValidator()
    return _DEFAULT_VALIDATOR


def validate_report(data: Dict[str, Any]) -> None:
    """Проверка отчёта встроенными схемами (ValidationError при несоответствии)."""
    _default_validator().validate(data)


def is_valid_report(data: Dict[str, Any]) -> bool:
    """Проверка отчёта без exception."""
    return _default_validator().is_valid(data)
