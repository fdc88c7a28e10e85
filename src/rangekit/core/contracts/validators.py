"""
Range Contract Validators

Структурные валидаторы диапазонов и опций на границе доверия, до того как
данные попадут в алгебру.

JSON-часть каждого контракта — JSON Schema (Draft 2020-12), проверяемая
библиотекой jsonschema:
- range_options.json — опции диапазона
- range_record.json  — record-представление диапазона

Callable-опции (lessThan, equals, boundaryValidator) в JSON Schema не
выражаются и проверяются по арности рядом со схемой, вместе с правилами,
которые RangeOptions применяет при построении.
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from rangekit.core.domain.options import OPTION_ALIASES, RangeOptions
from rangekit.core.domain.ordering import OrderingContext, accepts_positional
from rangekit.core.domain.range import Range

logger = logging.getLogger(__name__)

# snake_case имя поля → camelCase ключ контракта
CONTRACT_KEYS: Dict[str, str] = {
    **{field: alias for alias, field in OPTION_ALIASES.items()},
    "lower_boundary": "lowerBoundary",
    "upper_boundary": "upperBoundary",
}

# Callable-опции и их арность
CALLABLE_OPTIONS: Dict[str, int] = {
    "lessThan": 2,
    "equals": 2,
    "boundaryValidator": 1,
}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются внутри пакета, в contracts/schema/.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'range_options')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Ключи приводятся к camelCase именам контракта до проверки схемы,
    поэтому snake_case вход проверяется так же.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    @staticmethod
    def normalize(data: Mapping[str, Any]) -> Dict[str, Any]:
        return {CONTRACT_KEYS.get(key, key): value for key, value in data.items()}

    def validate(self, data: Mapping[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Из всех нарушений поднимается наиболее релевантное (best_match).

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        error = best_match(self.iter_errors(data))
        if error is not None:
            raise error

    def is_valid(self, data: Any) -> bool:
        """Проверка без exception (включая callable-опции)"""
        if not isinstance(data, Mapping):
            return False
        normalized = self.normalize(data)
        return self.validator.is_valid(normalized) and _callables_valid(normalized)

    def iter_errors(self, data: Mapping[str, Any]):
        """Итератор по всем ошибкам схемы"""
        return self.validator.iter_errors(self.normalize(data))


class RangeOptionsValidator(ContractValidator):
    """Валидатор опций диапазона."""

    def __init__(self):
        super().__init__("range_options")


class RangeRecordValidator(ContractValidator):
    """Валидатор record-представления диапазона."""

    def __init__(self):
        super().__init__("range_record")


_OPTIONS_VALIDATOR = RangeOptionsValidator()
_RECORD_VALIDATOR = RangeRecordValidator()


def _callables_valid(data: Mapping[str, Any]) -> bool:
    """
    Проверка callable-опций по тем же правилам, что и RangeOptions.

    - lessThan/equals — два аргумента, boundaryValidator — один
    - ordering — только OrderingContext
    - ordering и lessThan/equals взаимоисключающие
    """
    for key, arity in CALLABLE_OPTIONS.items():
        value = data.get(key)
        if value is not None and not accepts_positional(value, arity):
            return False
    ordering = data.get("ordering")
    if ordering is None:
        return True
    if not isinstance(ordering, OrderingContext):
        return False
    return data.get("lessThan") is None and data.get("equals") is None


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_range_options(data: Mapping[str, Any]) -> None:
    """
    Валидация опций диапазона по схеме.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    _OPTIONS_VALIDATOR.validate(data)


def validate_range_record(data: Mapping[str, Any]) -> None:
    """
    Валидация record-представления по схеме.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    _RECORD_VALIDATOR.validate(data)


def is_range_options(value: Any) -> bool:
    """
    Являются ли данные допустимыми опциями диапазона.

    Args:
        value: RangeOptions или mapping

    Returns:
        True для RangeOptions и mapping, прошедших схему и проверку callable
    """
    if isinstance(value, RangeOptions):
        return True
    return _OPTIONS_VALIDATOR.is_valid(value)


def is_compact_range(value: Any) -> bool:
    """
    Compact-представление: (value,), (lower, upper) или (lower, upper, options).

    options: None, непустое имя или опции диапазона.
    """
    if not isinstance(value, (list, tuple)) or not 1 <= len(value) <= 3:
        return False
    if len(value) < 3:
        return True
    options = value[2]
    if options is None:
        return True
    if isinstance(options, str):
        return bool(options.strip())
    return is_range_options(options)


def is_range_record(value: Any) -> bool:
    """Record-представление: mapping с lowerBoundary/upperBoundary и опциями"""
    return _RECORD_VALIDATOR.is_valid(value)


def is_range(value: Any) -> bool:
    """
    Структурная проверка: Range, compact- или record-представление.

    Диапазон не строится, поэтому значение, прошедшее проверку, всё ещё
    может не построиться (например, валидатор отвергнет границу).
    """
    if isinstance(value, Range):
        return True
    if isinstance(value, (list, tuple)):
        return is_compact_range(value)
    if isinstance(value, Mapping):
        return is_range_record(value)
    return False
