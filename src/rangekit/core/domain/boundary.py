"""
Boundary — одна граница диапазона и правила сравнения границ

Граница — пара (value, open). value=None означает неограниченность: нижняя
неограниченная граница идёт «от начала», верхняя — «до конца». Неограниченная
граница не ограничивает принадлежность, поэтому её флаг open всегда
приводится к False.

При равных значениях границ:
- INTERSECTION: открыта, если открыта хотя бы одна (побеждает более строгая)
- UNION: открыта, только если открыты обе (побеждает менее строгая)
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, StrictBool, model_validator

from rangekit.core.domain.ordering import OrderingContext


# =============================================================================
# ENUMS
# =============================================================================


class MergeMode(str, Enum):
    """Режим слияния двух однотипных границ"""

    INTERSECTION = "intersection"
    UNION = "union"


# =============================================================================
# BOUNDARY MODEL
# =============================================================================


class Boundary(BaseModel):
    """
    Граница диапазона.

    Immutable модель (frozen=True).
    """

    value: Any = Field(None, description="Значение границы (None = неограничена)")
    open: StrictBool = Field(False, description="True — значение не входит в диапазон")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def normalize_unbounded(cls, data: Any) -> Any:
        """У неограниченной границы open не имеет смысла — всегда False"""
        if isinstance(data, dict) and data.get("value") is None and data.get("open"):
            return {**data, "open": False}
        return data

    @classmethod
    def unbounded(cls) -> "Boundary":
        return cls()

    @classmethod
    def closed(cls, value: Any) -> "Boundary":
        return cls(value=value, open=False)

    @classmethod
    def opened(cls, value: Any) -> "Boundary":
        return cls(value=value, open=value is not None)

    @property
    def is_unbounded(self) -> bool:
        return self.value is None

    def flipped(self) -> "Boundary":
        """Та же точка с противоположной открытостью (разрез при difference)"""
        if self.is_unbounded:
            return self
        return Boundary(value=self.value, open=not self.open)


# =============================================================================
# VALUE vs BOUNDARY
# =============================================================================


def value_within_lower(value: Any, lower: Boundary, ordering: OrderingContext) -> bool:
    """
    Лежит ли значение не ниже нижней границы.

    Неограниченное значение (value=None) удовлетворяет только неограниченной
    нижней границе; на этом строится сравнение граница-граница.

    Args:
        value: Проверяемое значение (None = неограниченное)
        lower: Нижняя граница
        ordering: Контекст сравнения

    Returns:
        True если value удовлетворяет нижней границе
    """
    if value is None:
        return lower.is_unbounded and not lower.open
    if lower.is_unbounded:
        return True
    if lower.open:
        return ordering.less_than(lower.value, value)
    return not ordering.less_than(value, lower.value)


def value_within_upper(value: Any, upper: Boundary, ordering: OrderingContext) -> bool:
    """
    Лежит ли значение не выше верхней границы.

    Симметрично value_within_lower с обратным неравенством.
    """
    if value is None:
        return upper.is_unbounded and not upper.open
    if upper.is_unbounded:
        return True
    if upper.open:
        return ordering.less_than(value, upper.value)
    return not ordering.less_than(upper.value, value)


# =============================================================================
# SAME-KIND ORDER
# =============================================================================


def lower_boundary_order(a: Boundary, b: Boundary, ordering: OrderingContext) -> int:
    """
    Полный порядок нижних границ по тому, как низко они опускаются.

    Неограниченная первой; при равных значениях закрытая раньше открытой.

    Returns:
        -1 если a начинается раньше b, 0 если совпадают, 1 если позже
    """
    if a.is_unbounded or b.is_unbounded:
        return int(b.is_unbounded) - int(a.is_unbounded)
    if ordering.less_than(a.value, b.value):
        return -1
    if ordering.less_than(b.value, a.value):
        return 1
    return int(a.open) - int(b.open)


def upper_boundary_order(a: Boundary, b: Boundary, ordering: OrderingContext) -> int:
    """
    Полный порядок верхних границ по тому, как высоко они поднимаются.

    Неограниченная последней; при равных значениях открытая раньше закрытой.
    """
    if a.is_unbounded or b.is_unbounded:
        return int(a.is_unbounded) - int(b.is_unbounded)
    if ordering.less_than(a.value, b.value):
        return -1
    if ordering.less_than(b.value, a.value):
        return 1
    return int(b.open) - int(a.open)


# =============================================================================
# DOMINANT BOUNDARY
# =============================================================================


def compare_lower_boundaries(
    a: Boundary,
    b: Boundary,
    ordering: OrderingContext,
    mode: MergeMode = MergeMode.INTERSECTION,
) -> Boundary:
    """
    Доминирующая нижняя граница.

    INTERSECTION оставляет большую (более строгую) нижнюю границу, UNION —
    меньшую. При равных значениях lower_boundary_order уже ставит закрытую
    раньше открытой, что и даёт правило OR/AND для флага open.

    Args:
        a: Первая нижняя граница
        b: Вторая нижняя граница
        ordering: Контекст сравнения
        mode: Режим слияния

    Returns:
        Доминирующая граница
    """
    order = lower_boundary_order(a, b, ordering)
    if mode == MergeMode.INTERSECTION:
        return a if order >= 0 else b
    return a if order <= 0 else b


def compare_upper_boundaries(
    a: Boundary,
    b: Boundary,
    ordering: OrderingContext,
    mode: MergeMode = MergeMode.INTERSECTION,
) -> Boundary:
    """
    Доминирующая верхняя граница.

    INTERSECTION оставляет меньшую верхнюю границу, UNION — большую.
    """
    order = upper_boundary_order(a, b, ordering)
    if mode == MergeMode.INTERSECTION:
        return a if order <= 0 else b
    return a if order >= 0 else b


# =============================================================================
# CROSS-KIND: UPPER vs LOWER
# =============================================================================


def boundaries_meet(
    upper: Boundary,
    lower: Boundary,
    ordering: OrderingContext,
    touching: bool = False,
) -> bool:
    """
    Достигает ли верхняя граница одного диапазона нижней границы другого.

    Args:
        upper: Верхняя граница первого диапазона
        lower: Нижняя граница второго диапазона
        ordering: Контекст сравнения
        touching: Считать касание (равные значения, хотя бы одна закрыта)

    Returns:
        True если между границами нет разрыва:
        - одна из границ неограничена
        - lower.value < upper.value
        - значения равны и обе закрыты (общая точка),
          либо touching=True и хотя бы одна закрыта
    """
    if upper.is_unbounded or lower.is_unbounded:
        return True
    if ordering.less_than(lower.value, upper.value):
        return True
    if ordering.less_than(upper.value, lower.value):
        return False
    if not ordering.equals(upper.value, lower.value):
        return False
    if touching:
        return not (upper.open and lower.open)
    return not (upper.open or lower.open)
