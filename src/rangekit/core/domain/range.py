"""
Range — неизменяемый диапазон упорядоченных значений

Range хранит нижнюю и верхнюю Boundary и OrderingContext, сравнивающий
значения. Диапазон не изменяется: операции алгебры и with_lower/with_upper
возвращают новые экземпляры.

Пустота:
    обе границы заданы И (upper < lower ИЛИ (есть открытая сторона И lower == upper))

Специализация (только целые, только float, ...) делается композицией:
необязательный boundary_validator применяется к каждой границе при построении.
"""

from typing import Any, Callable

from pydantic import BaseModel, Field, field_validator, model_validator

from rangekit.core.domain.boundary import Boundary, value_within_lower, value_within_upper
from rangekit.core.domain.options import RangeOptions
from rangekit.core.domain.ordering import DEFAULT_ORDERING, OrderingContext
from rangekit.core.errors import InconsistentOrderingError, InvalidBoundaryError


# =============================================================================
# RANGE MODEL
# =============================================================================


class Range(BaseModel):
    """
    Диапазон значений.

    Immutable модель (frozen=True); безопасна для совместного использования потоками.
    """

    lower: Boundary = Field(default_factory=Boundary.unbounded, description="Нижняя граница")
    upper: Boundary = Field(default_factory=Boundary.unbounded, description="Верхняя граница")
    ordering: OrderingContext = Field(
        default_factory=lambda: DEFAULT_ORDERING, description="Контекст сравнения"
    )
    name: str | None = Field(None, description="Диагностическая метка")
    boundary_validator: Callable[[Any], bool] | None = Field(
        None, description="Проверка допустимости значения границы"
    )

    model_config = {"frozen": True}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        """Имя не может быть пустым или из пробелов"""
        if v is not None and not v.strip():
            raise ValueError("name must be a non-blank string")
        return v

    @model_validator(mode="after")
    def validate_boundaries(self) -> "Range":
        """
        Проверка границ при построении.

        Raises:
            InvalidBoundaryError: boundary_validator отверг значение
            InconsistentOrderingError: ordering противоречит сам себе
        """
        if self.boundary_validator is not None:
            for side, boundary in (("lower", self.lower), ("upper", self.upper)):
                if not boundary.is_unbounded and not self.boundary_validator(boundary.value):
                    raise InvalidBoundaryError(
                        f"{self._label()}: invalid {side} boundary {boundary.value!r}"
                    )

        if not (self.lower.is_unbounded or self.upper.is_unbounded):
            lower_value, upper_value = self.lower.value, self.upper.value
            if self.ordering.equals(lower_value, upper_value) and (
                self.ordering.less_than(lower_value, upper_value)
                or self.ordering.less_than(upper_value, lower_value)
            ):
                raise InconsistentOrderingError(
                    f"{self._label()}: ordering reports {lower_value!r} and {upper_value!r} "
                    f"as both equal and ordered"
                )
        return self

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        if self.lower.is_unbounded or self.upper.is_unbounded:
            return False
        lower_value, upper_value = self.lower.value, self.upper.value
        if self.ordering.less_than(upper_value, lower_value):
            return True
        return (self.lower.open or self.upper.open) and self.ordering.equals(
            lower_value, upper_value
        )

    @property
    def is_unbounded(self) -> bool:
        return self.lower.is_unbounded or self.upper.is_unbounded

    def includes(self, value: Any) -> bool:
        """
        Принадлежит ли значение диапазону.

        Args:
            value: Проверяемое значение

        Returns:
            True если значение удовлетворяет обеим границам
        """
        return value_within_lower(value, self.lower, self.ordering) and value_within_upper(
            value, self.upper, self.ordering
        )

    def __contains__(self, value: Any) -> bool:
        return self.includes(value)

    def includes_lower_boundary(self, boundary_value: Any, open: bool = False) -> bool:
        """
        Лежит ли нижняя граница другого диапазона внутри этого диапазона.

        Открытую проверяемую границу не исключает равная ей открытая нижняя
        граница этого диапазона: (5, ...) начинается внутри (5, ...). Точка
        границы также не должна лежать за верхней границей диапазона.

        Args:
            boundary_value: Значение границы (None = неограничена)
            open: Открыта ли проверяемая граница

        Returns:
            True если граница внутри диапазона
        """
        if boundary_value is None:
            return self.lower.is_unbounded
        if not self.lower.is_unbounded:
            if self.lower.open and not open:
                if not self.ordering.less_than(self.lower.value, boundary_value):
                    return False
            elif self.ordering.less_than(boundary_value, self.lower.value):
                return False
        return value_within_upper(boundary_value, self.upper, self.ordering)

    def includes_upper_boundary(self, boundary_value: Any, open: bool = False) -> bool:
        """
        Лежит ли верхняя граница другого диапазона внутри этого диапазона.

        Симметрично includes_lower_boundary.
        """
        if boundary_value is None:
            return self.upper.is_unbounded
        if not self.upper.is_unbounded:
            if self.upper.open and not open:
                if not self.ordering.less_than(boundary_value, self.upper.value):
                    return False
            elif self.ordering.less_than(self.upper.value, boundary_value):
                return False
        return value_within_lower(boundary_value, self.lower, self.ordering)

    # -------------------------------------------------------------------------
    # Derived ranges
    # -------------------------------------------------------------------------

    def with_lower(self, lower: Boundary) -> "Range":
        """Копия с другой нижней границей (валидация выполняется заново)"""
        return self.replace(lower=lower)

    def with_upper(self, upper: Boundary) -> "Range":
        """Копия с другой верхней границей (валидация выполняется заново)"""
        return self.replace(upper=upper)

    def to_options(self) -> RangeOptions:
        """
        Опции, из которых make_range восстановит этот диапазон.

        Естественный порядок не записывается явно.
        """
        data: dict[str, Any] = {
            "open_lower_boundary": self.lower.open,
            "open_upper_boundary": self.upper.open,
        }
        if self.name is not None:
            data["name"] = self.name
        if not self.ordering.is_compatible(DEFAULT_ORDERING):
            data["ordering"] = self.ordering
        if self.boundary_validator is not None:
            data["boundary_validator"] = self.boundary_validator
        return RangeOptions.coerce(data)

    def replace(self, **changes: Any) -> "Range":
        fields = {
            "lower": self.lower,
            "upper": self.upper,
            "ordering": self.ordering,
            "name": self.name,
            "boundary_validator": self.boundary_validator,
        }
        fields.update(changes)
        return type(self)(**fields)

    def _label(self) -> str:
        return self.name or "range"

    def __str__(self) -> str:
        if self.lower.is_unbounded:
            lower = "(-inf"
        else:
            lower = f"{'(' if self.lower.open else '['}{self.lower.value!r}"
        if self.upper.is_unbounded:
            upper = "+inf)"
        else:
            upper = f"{self.upper.value!r}{')' if self.upper.open else ']'}"
        text = f"{lower}, {upper}"
        return f"{self.name}: {text}" if self.name else text


# =============================================================================
# CONSTRUCTION
# =============================================================================


def make_range(
    lower: Any = None,
    upper: Any = None,
    options: Any = None,
    **option_kwargs: Any,
) -> Range:
    """
    Построение диапазона из значений границ и опций.

    Args:
        lower: Нижняя граница (None = неограничена)
        upper: Верхняя граница (None = неограничена)
        options: None, mapping, RangeOptions или строка (имя)
        **option_kwargs: Опции, перекрывающие options

    Returns:
        Range

    Raises:
        MalformedRangeOptionsError: Опции неверной формы
        InvalidBoundaryError: boundary_validator отверг значение

    Examples:
        >>> make_range(1, 10).includes(10)
        True
        >>> make_range(1, 10, open_upper_boundary=True).includes(10)
        False
        >>> make_range(None, 10).includes(-1000)
        True
    """
    opts = RangeOptions.coerce(options, **option_kwargs)
    return Range(
        lower=Boundary(value=lower, open=opts.resolved_open_lower),
        upper=Boundary(value=upper, open=opts.resolved_open_upper),
        ordering=opts.resolve_ordering(),
        name=opts.name,
        boundary_validator=opts.boundary_validator,
    )
