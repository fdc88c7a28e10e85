"""
Coercion — любое представление диапазона → Range

Аксессоры возвращают None для значений, которые вовсе не диапазоны,
в согласии со структурной проверкой is_range.
"""

from collections.abc import Mapping
from typing import Any

from rangekit.core.contracts.validators import is_range
from rangekit.core.domain.boundary import Boundary
from rangekit.core.domain.options import RangeOptions
from rangekit.core.domain.range import Range
from rangekit.core.errors import MalformedRangeError
from rangekit.encoding.compact import from_compact
from rangekit.encoding.record import from_record


def to_range(value: Any) -> Range:
    """
    Range, compact- или record-представление → Range.

    Raises:
        MalformedRangeError: Значение не является представлением диапазона
    """
    if isinstance(value, Range):
        return value
    if isinstance(value, Mapping):
        return from_record(value)
    if isinstance(value, (list, tuple)):
        return from_compact(value)
    raise MalformedRangeError(f"Not a range encoding: {type(value).__name__}")


def get_range_options(value: Any) -> RangeOptions | None:
    if not is_range(value):
        return None
    return to_range(value).to_options()


def get_lower_boundary(value: Any) -> Boundary | None:
    if not is_range(value):
        return None
    return to_range(value).lower


def get_upper_boundary(value: Any) -> Boundary | None:
    if not is_range(value):
        return None
    return to_range(value).upper
