"""Range Algebra — множественные операции над диапазонами."""

from .operations import (
    adjacent,
    belongs,
    check_compatible,
    contains,
    difference,
    intersect,
    overlaps,
    union,
)

__all__ = [
    "check_compatible",
    "overlaps",
    "adjacent",
    "contains",
    "belongs",
    "intersect",
    "union",
    "difference",
]
