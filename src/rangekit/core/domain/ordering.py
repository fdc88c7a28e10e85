"""
OrderingContext — пара примитивов сравнения, параметризующая диапазон

Каждый диапазон несёт явный контекст упорядочивания. Хранятся только два
примитива: less_than (строгий слабый порядок) и equals (эквивалентность).
Все остальные сравнения выводятся из них, поэтому кастомный equals
(например, толерантное равенство float) не противоречит производным:

    greater_than(a, b)     = not (less_than(a, b) or equals(a, b))
    less_or_equal(a, b)    = not greater_than(a, b)
    greater_or_equal(a, b) = not less_than(a, b)

Изменяемого глобального умолчания нет: DEFAULT_ORDERING — именованная
константа без состояния.
"""

import inspect
import operator
from dataclasses import dataclass
from typing import Any, Callable, Final

from pydantic import BaseModel, Field, field_validator

from rangekit.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    compare_with_tolerance,
    validate_tolerance,
)


# =============================================================================
# HELPERS
# =============================================================================


def accepts_positional(func: Callable[..., Any], count: int = 2) -> bool:
    """
    Проверка, что callable принимает count позиционных аргументов.

    Callable без доступной сигнатуры (часть C builtins) принимается как есть.

    Args:
        func: Проверяемый callable
        count: Число позиционных аргументов

    Returns:
        True если вызов func с count аргументами допустим
    """
    if not callable(func):
        return False
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return True
    try:
        signature.bind(*([None] * count))
    except TypeError:
        return False
    return True


# =============================================================================
# ORDERING CONTEXT
# =============================================================================


class OrderingContext(BaseModel):
    """
    Контекст упорядочивания: less_than + equals.

    Immutable модель (frozen=True); безопасна для совместного использования
    потоками, пока callables чистые.
    """

    less_than: Callable[[Any, Any], bool] = Field(
        ..., description="Строгий порядок: True если a < b"
    )
    equals: Callable[[Any, Any], bool] = Field(
        operator.eq, description="Эквивалентность (default: ==)"
    )
    key: str | None = Field(
        None,
        min_length=1,
        description="Токен структурной эквивалентности: равные ключи — совместимые контексты",
    )

    model_config = {"frozen": True}

    @field_validator("less_than", "equals")
    @classmethod
    def validate_binary_predicate(cls, v: Callable[..., Any], info) -> Callable[..., Any]:
        """Предикаты сравнения должны принимать два аргумента"""
        if not accepts_positional(v, 2):
            raise ValueError(f"{info.field_name} must accept two positional arguments")
        return v

    def greater_than(self, a: Any, b: Any) -> bool:
        return not (self.less_than(a, b) or self.equals(a, b))

    def less_or_equal(self, a: Any, b: Any) -> bool:
        return not self.greater_than(a, b)

    def greater_or_equal(self, a: Any, b: Any) -> bool:
        return not self.less_than(a, b)

    def compare(self, a: Any, b: Any) -> int | None:
        """
        Трёхзначное сравнение.

        Returns:
            -1 если a < b, 1 если b < a, 0 если equals(a, b),
            None если пара несравнима (например, NaN)
        """
        if self.less_than(a, b):
            return -1
        if self.less_than(b, a):
            return 1
        if self.equals(a, b):
            return 0
        return None

    def is_compatible(self, other: "OrderingContext") -> bool:
        """
        Совместимость контекстов для алгебры диапазонов.

        Совместимы: тот же объект; те же объекты callables; одинаковый
        непустой key.
        """
        if self is other:
            return True
        if self.less_than is other.less_than and self.equals is other.equals:
            return True
        return self.key is not None and self.key == other.key

    def __repr__(self) -> str:
        label = self.key if self.key is not None else getattr(self.less_than, "__name__", "custom")
        return f"OrderingContext({label})"


# Естественный порядок Python (<, ==)
DEFAULT_ORDERING: Final[OrderingContext] = OrderingContext(
    less_than=operator.lt, equals=operator.eq, key="natural"
)


# =============================================================================
# TOLERANCE ORDERING
# =============================================================================


@dataclass(frozen=True)
class ToleranceConfig:
    """
    Конфигурация толерантного сравнения float.

    Значения по умолчанию — из numerical_safeguards (EPS_FLOAT_COMPARE_*).
    """

    rel_tol: float = EPS_FLOAT_COMPARE_REL
    abs_tol: float = EPS_FLOAT_COMPARE_ABS

    def __post_init__(self) -> None:
        validate_tolerance(self.rel_tol, "rel_tol")
        validate_tolerance(self.abs_tol, "abs_tol")


def tolerance_ordering(config: ToleranceConfig | None = None) -> OrderingContext:
    """
    Порядок для float с толерантным равенством.

    Оба примитива опираются на compare_with_tolerance, поэтому для конечных
    значений выполняется ровно одно из less_than(a, b), less_than(b, a),
    equals(a, b).

    Args:
        config: Толерантности (default: ToleranceConfig())

    Returns:
        OrderingContext с ключом, зависящим только от толерантностей
    """
    config = config or ToleranceConfig()

    def equals(a: float, b: float) -> bool:
        return compare_with_tolerance(a, b, rel_tol=config.rel_tol, abs_tol=config.abs_tol) == 0

    def less_than(a: float, b: float) -> bool:
        return compare_with_tolerance(a, b, rel_tol=config.rel_tol, abs_tol=config.abs_tol) < 0

    return OrderingContext(
        less_than=less_than,
        equals=equals,
        key=f"tolerance(rel={config.rel_tol!r},abs={config.abs_tol!r})",
    )
