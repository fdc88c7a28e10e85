"""
Range Algebra — операции над диапазонами

Операции:
- overlaps(a, b)    — есть общее значение
- adjacent(a, b)    — касаются без пересечения
- contains(a, b)    — b ⊆ a (пустой b содержится в любом)
- intersect(a, b)   — один диапазон, возможно пустой
- union(a, b)       — список непересекающихся непустых диапазонов
- difference(a, b)  — список непересекающихся непустых диапазонов
- belongs(v, *rs)   — значение принадлежит хотя бы одному диапазону

Бинарные операции требуют совместимых контекстов упорядочивания и ничего
не приводят: иначе IncompatibleRangeError. Результат наследует ordering и
name первого операнда. Валидатор границ переносится, только если он общий
у обоих операндов: границы результата могут прийти из b. Списки
результатов отсортированы по возрастанию нижней границы (неограниченная
первой).
"""

import logging
from typing import Any

from rangekit.core.domain.boundary import (
    Boundary,
    MergeMode,
    boundaries_meet,
    compare_lower_boundaries,
    compare_upper_boundaries,
    lower_boundary_order,
)
from rangekit.core.domain.range import Range
from rangekit.core.errors import IncompatibleRangeError

logger = logging.getLogger(__name__)


# =============================================================================
# COMPATIBILITY
# =============================================================================


def check_compatible(a: Range, b: Range) -> None:
    """
    Проверка совместимости контекстов упорядочивания.

    Raises:
        IncompatibleRangeError: Контексты несовместимы
    """
    if not a.ordering.is_compatible(b.ordering):
        raise IncompatibleRangeError(
            f"Incompatible orderings: {a} uses {a.ordering!r}, {b} uses {b.ordering!r}"
        )


# =============================================================================
# PREDICATES
# =============================================================================


def overlaps(a: Range, b: Range) -> bool:
    """
    Пересекаются ли диапазоны (есть общее значение).

    Оба непустые, и верхняя граница каждого достигает нижней границы
    другого. Касающиеся диапазоны ([1, 5) и [5, 9]) не пересекаются.

    Raises:
        IncompatibleRangeError: Контексты несовместимы
    """
    check_compatible(a, b)
    if a.is_empty or b.is_empty:
        return False
    return boundaries_meet(a.upper, b.lower, a.ordering) and boundaries_meet(
        b.upper, a.lower, a.ordering
    )


def adjacent(a: Range, b: Range) -> bool:
    """
    Касаются ли диапазоны без пересечения.

    Общее значение границы закрыто ровно с одной стороны, поэтому в
    объединении нет разрыва: [1, 5) и [5, 9] смежные, [1, 5) и (5, 9] нет.
    """
    check_compatible(a, b)
    if a.is_empty or b.is_empty:
        return False
    return _touching(a, b) and not overlaps(a, b)


def contains(a: Range, b: Range) -> bool:
    """
    Содержит ли a все значения b.

    Args:
        a: Объемлющий диапазон
        b: Проверяемый диапазон

    Returns:
        True если b ⊆ a; пустой b содержится в любом диапазоне

    Raises:
        IncompatibleRangeError: Контексты несовместимы
    """
    check_compatible(a, b)
    if b.is_empty:
        return True
    if a.is_empty:
        return False
    return a.includes_lower_boundary(b.lower.value, b.lower.open) and a.includes_upper_boundary(
        b.upper.value, b.upper.open
    )


def belongs(value: Any, *ranges: Range) -> bool:
    """Принадлежит ли значение хотя бы одному из диапазонов"""
    return any(r.includes(value) for r in ranges)


# =============================================================================
# SET OPERATIONS
# =============================================================================


def intersect(a: Range, b: Range) -> Range:
    """
    Пересечение диапазонов.

    Нижняя граница — более строгая из нижних, верхняя — более строгая из
    верхних; при равных значениях сторона открыта, если открыта хотя бы
    у одного операнда. Результат может быть пустым и не отбрасывается.

    Raises:
        IncompatibleRangeError: Контексты несовместимы
    """
    check_compatible(a, b)
    lower = compare_lower_boundaries(a.lower, b.lower, a.ordering, MergeMode.INTERSECTION)
    upper = compare_upper_boundaries(a.upper, b.upper, a.ordering, MergeMode.INTERSECTION)
    return _derive(a, b, lower, upper)


def union(a: Range, b: Range) -> list[Range]:
    """
    Объединение диапазонов.

    Returns:
        [] — оба пустые
        [непустой] — один пустой
        [слитый] — пересекаются или касаются (хотя бы одна сторона закрыта)
        [a, b] по возрастанию нижней границы — иначе

    Raises:
        IncompatibleRangeError: Контексты несовместимы
    """
    check_compatible(a, b)
    if a.is_empty and b.is_empty:
        return []
    if a.is_empty:
        return [b]
    if b.is_empty:
        return [a]

    if _touching(a, b):
        lower = compare_lower_boundaries(a.lower, b.lower, a.ordering, MergeMode.UNION)
        upper = compare_upper_boundaries(a.upper, b.upper, a.ordering, MergeMode.UNION)
        merged = _derive(a, b, lower, upper)
        logger.debug("union: %s and %s merged into %s", a, b, merged)
        return [merged]

    logger.debug("union: %s and %s are disjoint", a, b)
    return _sorted_pair(a, b)


def difference(a: Range, b: Range) -> list[Range]:
    """
    Разность: значения a, не принадлежащие b.

    Случаи, по порядку:
    1. b содержит a                  → []
    2. b не пересекается с a         → [a]
    3. b срезает нижний конец a      → [(b.upper с обратной открытостью) .. a.upper]
    4. b срезает верхний конец a     → [a.lower .. (b.lower с обратной открытостью)]
    5. b строго внутри a             → обе части

    Точки разреза берут открытость, обратную открытости b: [1, 10] − [4, 6]
    даёт [1, 4) и (6, 10].

    Raises:
        IncompatibleRangeError: Контексты несовместимы
    """
    check_compatible(a, b)
    if a.is_empty:
        return []
    if contains(b, a):
        logger.debug("difference: %s covers %s", b, a)
        return []
    if not overlaps(a, b):
        return [a]

    pieces: list[Range] = []

    # Часть a ниже b
    if not b.lower.is_unbounded:
        below = _derive(a, b, a.lower, b.lower.flipped())
        if not below.is_empty:
            pieces.append(below)

    # Часть a выше b
    if not b.upper.is_unbounded:
        above = _derive(a, b, b.upper.flipped(), a.upper)
        if not above.is_empty:
            pieces.append(above)

    logger.debug("difference: %s minus %s -> %d piece(s)", a, b, len(pieces))
    return pieces


# =============================================================================
# HELPERS
# =============================================================================


def _derive(a: Range, b: Range, lower: Boundary, upper: Boundary) -> Range:
    """
    Диапазон-результат с метаданными a и границами lower/upper.

    Валидатор a сохраняется, только если b несёт тот же валидатор:
    границы из b уже прошли его при построении b.
    """
    validator = a.boundary_validator if a.boundary_validator is b.boundary_validator else None
    return a.replace(lower=lower, upper=upper, boundary_validator=validator)


def _touching(a: Range, b: Range) -> bool:
    """Нет разрыва между a и b (пересечение или касание)"""
    return boundaries_meet(a.upper, b.lower, a.ordering, touching=True) and boundaries_meet(
        b.upper, a.lower, a.ordering, touching=True
    )


def _sorted_pair(a: Range, b: Range) -> list[Range]:
    if lower_boundary_order(b.lower, a.lower, a.ordering) < 0:
        return [b, a]
    return [a, b]
