"""
Distribution Spec Contracts

Проверка декларативных спецификаций распределений против JSON Schema
(draft 2020-12) средствами jsonschema.

Схемы лежат в src/core/contracts/schema/ и устанавливаются вместе с
пакетом как package data:
- distribution_spec.json — семейство и имена его параметров

Контракт проверяет только структуру спецификации. Числовые диапазоны
(> 0, не NaN) остаются за Pydantic моделями распределений, поэтому
нарушение диапазона всплывает как pydantic.ValidationError уже при
построении модели.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик и кэш JSON Schema.

    Каждая схема читается с диска один раз и проходит meta-validation
    перед первым использованием.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    def schema_names(self) -> List[str]:
        """Имена доступных схем (без расширения .json)."""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени.

        Args:
            schema_name: Имя схемы без расширения, например 'distribution_spec'

        Raises:
            FileNotFoundError: Файла схемы нет в каталоге
            ValueError: Файл не является валидной JSON Schema
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._cache[schema_name] = schema
        return schema


@lru_cache(maxsize=1)
def default_loader() -> SchemaLoader:
    """Общий загрузчик схем пакета (создаётся при первом обращении)."""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор данных против одной именованной схемы.

    Тонкая обёртка над Draft202012Validator: исключение при первой
    ошибке, булева проверка и полный список нарушений.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or default_loader()).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Наиболее релевантное нарушение контракта
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        return self._validator.iter_errors(data)

    def error_messages(self, data: Dict[str, Any]) -> List[str]:
        """
        Все нарушения контракта в виде '<путь>: <сообщение>'.

        Путь задаётся как JSON path до нарушающего значения ('$' для корня).
        Пустой список означает валидные данные.
        """
        return [
            f"{error.json_path}: {error.message}"
            for error in sorted(self.iter_errors(data), key=lambda e: e.json_path)
        ]


class DistributionSpecValidator(ContractValidator):
    """Валидатор distribution_spec."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("distribution_spec", loader)

    @property
    def families(self) -> List[str]:
        """Семейства, допускаемые контрактом."""
        return list(self.schema["properties"]["family"]["enum"])


@lru_cache(maxsize=1)
def _distribution_spec_validator() -> DistributionSpecValidator:
    return DistributionSpecValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_distribution_spec(data: Dict[str, Any]) -> None:
    """
    Проверка спецификации распределения.

    Args:
        data: Спецификация, например
            {"family": "chi_squared", "params": {"freedom": 3.0}}

    Raises:
        jsonschema.ValidationError: Спецификация нарушает контракт
    """
    _distribution_spec_validator().validate(data)
