"""
Specialized ranges — диапазоны с ограничением типа значений

Специализация — композиция, а не наследование: каждая фабрика строит
обычный Range с boundary_validator (а для float — с необязательным
толерантным упорядочиванием).
"""

from typing import Any

from rangekit.core.domain.ordering import ToleranceConfig, tolerance_ordering
from rangekit.core.domain.range import Range, make_range
from rangekit.core.math.numerical_safeguards import is_real_number


# =============================================================================
# BOUNDARY VALIDATORS
# =============================================================================


def is_integer_value(value: Any) -> bool:
    """int, но не bool"""
    return isinstance(value, int) and not isinstance(value, bool)


def is_finite_real_value(value: Any) -> bool:
    """Конечное вещественное число (NaN/Inf ломают порядок)"""
    return is_real_number(value)


# =============================================================================
# FACTORIES
# =============================================================================


def integer_range(lower: Any = None, upper: Any = None, **options: Any) -> Range:
    """
    Диапазон целых чисел.

    Raises:
        InvalidBoundaryError: Граница не int
    """
    return make_range(lower, upper, options, boundary_validator=is_integer_value)


def float_range(
    lower: Any = None,
    upper: Any = None,
    tolerance: ToleranceConfig | None = None,
    **options: Any,
) -> Range:
    """
    Диапазон конечных вещественных чисел.

    Args:
        lower: Нижняя граница
        upper: Верхняя граница
        tolerance: Толерантности сравнения; None — естественный порядок
        **options: Прочие опции make_range

    Raises:
        InvalidBoundaryError: Граница NaN/Inf или не число
    """
    if tolerance is not None:
        options = {**options, "ordering": tolerance_ordering(tolerance)}
    return make_range(lower, upper, options, boundary_validator=is_finite_real_value)
