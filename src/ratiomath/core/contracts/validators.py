"""
JSON Schema Contract Validators

Валидация payload-словарей Fraction/Vector/Point/Expression по JSON Schema
контрактам, поставляемым вместе с пакетом (contracts/schema/*.json).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Схема проходит meta-validation (Draft 2020-12) до первого использования
2. На каждую схему строится ровно один Draft202012Validator (ленивый кэш):
   expression.json рекурсивна, и *_from_payload валидирует целые деревья
3. Неизвестное имя схемы → FileNotFoundError, ошибка не кэшируется
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

SCHEMA_NAMES: Final[tuple[str, ...]] = ("fraction", "vector", "point", "expression")


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов с кэшем по имени схемы.

    По умолчанию читает схемы из каталога schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        if not schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")
        self._schema_dir = schema_dir
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка и meta-validation схемы.

        Args:
            schema_name: Имя схемы без расширения (например, 'fraction')

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является корректной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# VALIDATOR REGISTRY
# =============================================================================


@lru_cache(maxsize=None)
def get_validator(schema_name: str) -> Draft202012Validator:
    """
    Validator для схемы пакета, построенный один раз на процесс.

    Examples:
        >>> get_validator("fraction") is get_validator("fraction")
        True
        >>> get_validator("fraction").is_valid({"numerator": 1, "denominator": 0})
        False
    """
    return Draft202012Validator(_SCHEMA_LOADER.load_schema(schema_name))


def validate_payload(schema_name: str, data: Dict[str, Any]) -> None:
    """
    Валидация payload против схемы пакета.

    Raises:
        ValidationError: Если данные не соответствуют схеме
        FileNotFoundError: Если схемы с таким именем нет
    """
    get_validator(schema_name).validate(data)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_fraction_payload(data: Dict[str, Any]) -> None:
    validate_payload("fraction", data)


def validate_vector_payload(data: Dict[str, Any]) -> None:
    validate_payload("vector", data)


def validate_point_payload(data: Dict[str, Any]) -> None:
    validate_payload("point", data)


def validate_expression_payload(data: Dict[str, Any]) -> None:
    """Валидация дерева выражения целиком (схема рекурсивна)."""
    validate_payload("expression", data)
