"""
Range Encoding Adapters

Две взаимозаменяемые внешние формы диапазона, каждая преобразуется в
каноничный Range и обратно:
- compact: (lower, upper, options?) or (value,)
- record: {"lowerBoundary": ..., "upperBoundary": ..., **options}
"""

from .coerce import get_lower_boundary, get_range_options, get_upper_boundary, to_range
from .compact import from_compact, options_to_dict, to_compact
from .record import from_record, to_record

__all__ = [
    "from_compact",
    "to_compact",
    "from_record",
    "to_record",
    "options_to_dict",
    "to_range",
    "get_range_options",
    "get_lower_boundary",
    "get_upper_boundary",
]
