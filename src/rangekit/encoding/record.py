"""
Record encoding — диапазон как словарь свойств

    {"lowerBoundary": 1, "upperBoundary": 10, "openUpperBoundary": True, ...}

Ключи опций те же, что у make_range. Record может также нести связанные
методы (includes, contains, overlaps, union, intersect, difference);
при обратном чтении они игнорируются.
"""

from collections.abc import Mapping
from typing import Any, Callable

from rangekit.algebra.operations import contains, difference, intersect, overlaps, union
from rangekit.core.domain.range import Range, make_range
from rangekit.core.errors import MalformedRangeError
from rangekit.encoding.compact import from_compact, options_to_dict

LOWER_KEYS = ("lowerBoundary", "lower_boundary")
UPPER_KEYS = ("upperBoundary", "upper_boundary")


def from_record(record: Mapping[str, Any]) -> Range:
    """
    Record-представление → Range.

    Raises:
        MalformedRangeError: Не mapping или нет lowerBoundary/upperBoundary
        MalformedRangeOptionsError: Опции неверной формы
    """
    if not isinstance(record, Mapping):
        raise MalformedRangeError(f"Range record must be a mapping, got {type(record).__name__}")

    lower_key = next((key for key in LOWER_KEYS if key in record), None)
    upper_key = next((key for key in UPPER_KEYS if key in record), None)
    if lower_key is None or upper_key is None:
        raise MalformedRangeError("Range record requires lowerBoundary and upperBoundary")

    options = {key: value for key, value in record.items() if key not in (lower_key, upper_key)}
    return make_range(record[lower_key], record[upper_key], options)


def to_record(range_: Range, with_helpers: bool = False) -> dict[str, Any]:
    """
    Range → record-представление.

    Args:
        range_: Диапазон
        with_helpers: Добавить связанные методы алгебры

    Returns:
        dict с lowerBoundary, upperBoundary и заданными опциями
    """
    record: dict[str, Any] = {
        "lowerBoundary": range_.lower.value,
        "upperBoundary": range_.upper.value,
        **options_to_dict(range_.to_options()),
    }
    if with_helpers:
        record["includes"] = range_.includes
        for name, operation in (
            ("contains", contains),
            ("overlaps", overlaps),
            ("union", union),
            ("intersect", intersect),
            ("difference", difference),
        ):
            record[name] = _bind(operation, range_)
    return record


def _bind(operation: Callable[[Range, Range], Any], range_: Range) -> Callable[[Any], Any]:
    def helper(other: Any) -> Any:
        return operation(range_, _operand(other))

    helper.__name__ = operation.__name__
    return helper


def _operand(value: Any) -> Range:
    if isinstance(value, Range):
        return value
    if isinstance(value, Mapping):
        return from_record(value)
    return from_compact(value)
