"""
Contract Validators — проверка JSON документов с числами exactnum

Каждая схема из schema/ компилируется в Draft202012Validator один раз
и переиспользуется всеми вызовами validate_*() и codec.

Схемы:
- integer.json        — знаковое целое как каноническая десятичная строка
- fraction.json       — флаг знака + числитель + знаменатель
- complex_number.json — два тела дроби (real, imaginary)

Pattern-ограничения схем закрыты (?!\\n)$: jsonschema ищет pattern через
re.search, где голый $ допускает завершающий перевод строки.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Final, Iterator, List, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

logger = logging.getLogger(__name__)

SCHEMA_NAMES: Final[tuple[str, ...]] = ("integer", "fraction", "complex_number")


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик и компилятор JSON Schema.

    Хранит два кэша: разобранные схемы (dict) и скомпилированные
    валидаторы. Оба заполняются при первом обращении к схеме.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._validators: Dict[str, Draft202012Validator] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка и meta-валидация схемы.

        Args:
            schema_name: Имя схемы без расширения (например, 'fraction')

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded contract schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema

    def compiled(self, schema_name: str) -> Draft202012Validator:
        """Скомпилированный валидатор схемы (один экземпляр на схему)."""
        validator = self._validators.get(schema_name)
        if validator is None:
            validator = Draft202012Validator(self.load_schema(schema_name))
            self._validators[schema_name] = validator
        return validator


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Проверка документов против одной схемы.

    Сам по себе ничего не компилирует: берёт готовый валидатор у
    SchemaLoader, поэтому создавать экземпляры дёшево.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.validator = (loader or _SCHEMA_LOADER).compiled(schema_name)

    @property
    def schema(self) -> Dict[str, Any]:
        return self.validator.schema

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: наиболее релевантное нарушение схемы
        """
        error = best_match(self.validator.iter_errors(data))
        if error is not None:
            logger.debug(
                "Rejected %s document at %s: %s", self.schema_name, error.json_path, error.message
            )
            raise error

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)

    def describe_errors(self, data: Dict[str, Any]) -> List[str]:
        """
        Все нарушения в виде "<json path>: <message>", отсортированные по пути.
        """
        errors = sorted(self.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))
        return [f"{e.json_path}: {e.message}" for e in errors]


class IntegerValidator(ContractValidator):
    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("integer", loader)


class FractionValidator(ContractValidator):
    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("fraction", loader)


class ComplexNumberValidator(ContractValidator):
    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("complex_number", loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

# Создаются при первом вызове validate_*(), а не при импорте
_DEFAULT_VALIDATORS: Dict[str, ContractValidator] = {}


def _default_validator(schema_name: str) -> ContractValidator:
    validator = _DEFAULT_VALIDATORS.get(schema_name)
    if validator is None:
        validator = ContractValidator(schema_name)
        _DEFAULT_VALIDATORS[schema_name] = validator
    return validator


def validate_integer(data: Dict[str, Any]) -> None:
    """Raises ValidationError если документ не соответствует integer.json."""
    _default_validator("integer").validate(data)


def validate_fraction(data: Dict[str, Any]) -> None:
    """Raises ValidationError если документ не соответствует fraction.json."""
    _default_validator("fraction").validate(data)


def validate_complex_number(data: Dict[str, Any]) -> None:
    """Raises ValidationError если документ не соответствует complex_number.json."""
    _default_validator("complex_number").validate(data)
