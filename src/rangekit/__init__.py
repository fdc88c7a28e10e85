"""
rangekit — неизменяемые диапазоны над любым упорядоченным множеством

Слои:
- core: контекст упорядочивания, модель границы, Range, ошибки, контракты
- algebra: overlaps / contains / intersect / union / difference
- encoding: compact- и record-формы, приведение к Range
"""

import logging

from rangekit.algebra import (
    adjacent,
    belongs,
    check_compatible,
    contains,
    difference,
    intersect,
    overlaps,
    union,
)
from rangekit.core.contracts import is_range, is_range_options
from rangekit.core.domain import (
    DEFAULT_ORDERING,
    Boundary,
    OrderingContext,
    Range,
    RangeOptions,
    ToleranceConfig,
    float_range,
    integer_range,
    make_range,
    tolerance_ordering,
)
from rangekit.core.errors import (
    IncompatibleRangeError,
    InconsistentOrderingError,
    InvalidBoundaryError,
    MalformedRangeError,
    MalformedRangeOptionsError,
    RangeError,
)
from rangekit.encoding import (
    from_compact,
    from_record,
    get_lower_boundary,
    get_range_options,
    get_upper_boundary,
    to_compact,
    to_range,
    to_record,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Model
    "Range",
    "Boundary",
    "RangeOptions",
    "OrderingContext",
    "DEFAULT_ORDERING",
    "ToleranceConfig",
    "tolerance_ordering",
    "make_range",
    "integer_range",
    "float_range",
    # Algebra
    "check_compatible",
    "overlaps",
    "adjacent",
    "contains",
    "belongs",
    "intersect",
    "union",
    "difference",
    # Encodings
    "from_compact",
    "to_compact",
    "from_record",
    "to_record",
    "to_range",
    "get_range_options",
    "get_lower_boundary",
    "get_upper_boundary",
    "is_range",
    "is_range_options",
    # Errors
    "RangeError",
    "InvalidBoundaryError",
    "IncompatibleRangeError",
    "MalformedRangeOptionsError",
    "MalformedRangeError",
    "InconsistentOrderingError",
]
