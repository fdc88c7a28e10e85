"""
Contract Validation Module

Структурные валидаторы представлений диапазонов и опций.
"""

from .validators import (
    ContractValidator,
    RangeOptionsValidator,
    RangeRecordValidator,
    SchemaLoader,
    is_compact_range,
    is_range,
    is_range_options,
    is_range_record,
    validate_range_options,
    validate_range_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RangeOptionsValidator",
    "RangeRecordValidator",
    # Functions
    "validate_range_options",
    "validate_range_record",
    "is_range_options",
    "is_compact_range",
    "is_range_record",
    "is_range",
]
