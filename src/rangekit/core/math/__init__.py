"""
Core math modules для rangekit

Float-примитивы для толерантного упорядочивания и float-диапазонов.
"""

from rangekit.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    compare_with_tolerance,
    is_close,
    is_real_number,
    is_valid_float,
    validate_tolerance,
)

__all__ = [
    # Epsilon constants
    "EPS_FLOAT_COMPARE_REL",
    "EPS_FLOAT_COMPARE_ABS",
    # NaN/Inf checks
    "is_valid_float",
    "is_real_number",
    # Epsilon comparisons
    "is_close",
    "compare_with_tolerance",
    "validate_tolerance",
]
