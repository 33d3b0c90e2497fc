"""
JSON Schema Contract Validators

Модуль для валидации JSON вывода согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- multiplication_table.json
- range_sum.json
"""

import json
from importlib import resources
from typing import Any, Dict, Optional

import jsonschema
from jsonschema import Draft202012Validator


# Пакет, в котором лежит каталог schema/ (package data)
SCHEMA_PACKAGE = "src.core.contracts"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы читаются как package data из <package>/schema/ через importlib.resources.
    """

    def __init__(self, package: str = SCHEMA_PACKAGE):
        self._schema_dir = resources.files(package) / "schema"

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'range_sum')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика, создаётся при первом обращении
_SCHEMA_LOADER: Optional[SchemaLoader] = None


def get_schema_loader() -> SchemaLoader:
    """Общий SchemaLoader (lazy)."""
    global _SCHEMA_LOADER
    if _SCHEMA_LOADER is None:
        _SCHEMA_LOADER = SchemaLoader()
    return _SCHEMA_LOADER


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = get_schema_loader().load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class MultiplicationTableValidator(ContractValidator):
    """Валидатор для multiplication_table контракта."""

    def __init__(self):
        super().__init__("multiplication_table")


class RangeSumValidator(ContractValidator):
    """Валидатор для range_sum контракта."""

    def __init__(self):
        super().__init__("range_sum")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_multiplication_table(data: Dict[str, Any]) -> None:
    """
    Валидация multiplication_table данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MultiplicationTableValidator().validate(data)


def validate_range_sum(data: Dict[str, Any]) -> None:
    """
    Валидация range_sum данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    RangeSumValidator().validate(data)
