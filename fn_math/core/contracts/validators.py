"""
JSON Schema Contract Validators

Модуль для валидации сериализованных конфигураций функций активации
согласно JSON Schema контракту (библиотека jsonschema).

Схема поставляется вместе с пакетом: schema/activation_config.json
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADING
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация JSON Schema (результат кэшируется).

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    schema_path = schema_dir / f"{schema_name}.json"
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

    return schema


# =============================================================================
# VALIDATOR
# =============================================================================


class ActivationConfigValidator:
    """Валидатор для activation_config контракта."""

    def __init__(self):
        self.schema = load_schema("activation_config")
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


def validate_activation_config(data: Dict[str, Any]) -> None:
    """
    Валидация activation_config данных.

    Проверяется только форма: имя является непустой строкой, коэффициенты числами.
    Существование имени и набор коэффициентов проверяет ActivationConfig.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ActivationConfigValidator().validate(data)
