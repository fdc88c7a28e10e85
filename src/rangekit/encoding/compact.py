"""
Compact encoding — диапазон как короткий кортеж

    (value,)                   закрытая точка [value, value]
    (lower, upper)             закрытый диапазон, естественный порядок
    (lower, upper, options)    options: mapping, RangeOptions, имя или None

None в качестве границы означает неограниченность с этой стороны.
"""

from collections.abc import Sequence
from typing import Any

from rangekit.core.domain.options import RangeOptions
from rangekit.core.domain.ordering import DEFAULT_ORDERING
from rangekit.core.domain.range import Range, make_range
from rangekit.core.errors import MalformedRangeError


def options_to_dict(options: RangeOptions) -> dict[str, Any]:
    """
    Опции в виде dict с camelCase ключами (только заданные поля).

    Вложенные модели (ordering) остаются объектами, без сериализации.
    """
    result: dict[str, Any] = {}
    for field_name, info in RangeOptions.model_fields.items():
        value = getattr(options, field_name)
        if value is not None:
            result[info.alias or field_name] = value
    return result


def from_compact(value: Sequence[Any]) -> Range:
    """
    Compact-представление → Range.

    Raises:
        MalformedRangeError: Не последовательность длины 1..3
        MalformedRangeOptionsError: Опции неверной формы
    """
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise MalformedRangeError(f"Compact range must be a list or tuple, got {type(value).__name__}")
    if not 1 <= len(value) <= 3:
        raise MalformedRangeError(f"Compact range must have 1 to 3 items, got {len(value)}")

    if len(value) == 1:
        return make_range(value[0], value[0])

    lower, upper, *rest = value
    return make_range(lower, upper, rest[0] if rest else None)


def to_compact(range_: Range) -> tuple[Any, ...]:
    """
    Range → compact-представление.

    Закрытая точка без имени и валидатора, с естественным порядком,
    сворачивается в (value,).
    """
    if _is_plain_point(range_):
        return (range_.lower.value,)
    return (range_.lower.value, range_.upper.value, options_to_dict(range_.to_options()))


def _is_plain_point(range_: Range) -> bool:
    lower, upper = range_.lower, range_.upper
    if lower.is_unbounded or upper.is_unbounded or lower.open or upper.open:
        return False
    if range_.name is not None or range_.boundary_validator is not None:
        return False
    if not range_.ordering.is_compatible(DEFAULT_ORDERING):
        return False
    return range_.ordering.equals(lower.value, upper.value)
