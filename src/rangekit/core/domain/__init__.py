"""
Доменные модели и value objects.

Сущность диапазона и её составные части: контекст упорядочивания,
модель границы, опции и фабрики специализированных диапазонов.
"""

from rangekit.core.domain.boundary import (
    Boundary,
    MergeMode,
    boundaries_meet,
    compare_lower_boundaries,
    compare_upper_boundaries,
    lower_boundary_order,
    upper_boundary_order,
    value_within_lower,
    value_within_upper,
)
from rangekit.core.domain.options import RangeOptions
from rangekit.core.domain.ordering import (
    DEFAULT_ORDERING,
    OrderingContext,
    ToleranceConfig,
    tolerance_ordering,
)
from rangekit.core.domain.range import Range, make_range
from rangekit.core.domain.specializations import (
    float_range,
    integer_range,
    is_finite_real_value,
    is_integer_value,
)

__all__ = [
    # Ordering
    "OrderingContext",
    "DEFAULT_ORDERING",
    "ToleranceConfig",
    "tolerance_ordering",
    # Boundary model
    "Boundary",
    "MergeMode",
    "value_within_lower",
    "value_within_upper",
    "lower_boundary_order",
    "upper_boundary_order",
    "compare_lower_boundaries",
    "compare_upper_boundaries",
    "boundaries_meet",
    # Range
    "Range",
    "RangeOptions",
    "make_range",
    # Specializations
    "integer_range",
    "float_range",
    "is_integer_value",
    "is_finite_real_value",
]
