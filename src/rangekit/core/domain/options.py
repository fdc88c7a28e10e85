"""
RangeOptions — опции построения диапазона

Распознаваемые ключи (принимаются и camelCase-алиасы, и snake_case-имена):

    openLowerBoundary / open_lower_boundary    по умолчанию False
    openUpperBoundary / open_upper_boundary    по умолчанию False
    openBoundaries / open_boundaries           задаёт оба; конкретные флаги важнее
    lessThan / less_than                       предикат двух аргументов
    equals                                     предикат двух аргументов
    ordering                                   OrderingContext (исключает lessThan/equals)
    name                                       диагностическая метка, непустая
    boundaryValidator / boundary_validator     предикат одного аргумента

Неизвестные ключи игнорируются. Распознанный ключ со значением неверной
формы — MalformedRangeOptionsError.
"""

from collections.abc import Mapping
from typing import Any, Callable

from pydantic import BaseModel, Field, StrictBool, StrictStr, ValidationError, field_validator, model_validator

from rangekit.core.domain.ordering import DEFAULT_ORDERING, OrderingContext, accepts_positional
from rangekit.core.errors import MalformedRangeOptionsError


# camelCase алиас → имя поля
OPTION_ALIASES: dict[str, str] = {
    "openBoundaries": "open_boundaries",
    "openLowerBoundary": "open_lower_boundary",
    "openUpperBoundary": "open_upper_boundary",
    "lessThan": "less_than",
    "boundaryValidator": "boundary_validator",
}


def _normalize_keys(data: Mapping[Any, Any]) -> dict[Any, Any]:
    return {OPTION_ALIASES.get(key, key): value for key, value in data.items()}


# =============================================================================
# OPTIONS MODEL
# =============================================================================


class RangeOptions(BaseModel):
    """
    Опции диапазона.

    Immutable модель (frozen=True).
    """

    name: StrictStr | None = Field(None, description="Диагностическая метка")
    open_boundaries: StrictBool | None = Field(None, alias="openBoundaries")
    open_lower_boundary: StrictBool | None = Field(None, alias="openLowerBoundary")
    open_upper_boundary: StrictBool | None = Field(None, alias="openUpperBoundary")
    less_than: Callable[[Any, Any], bool] | None = Field(None, alias="lessThan")
    equals: Callable[[Any, Any], bool] | None = Field(None)
    ordering: OrderingContext | None = Field(None)
    boundary_validator: Callable[[Any], bool] | None = Field(None, alias="boundaryValidator")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str | None:
        """Имя не может быть пустым или из пробелов"""
        if v is not None and not v.strip():
            raise ValueError("name must be a non-blank string")
        return v

    @field_validator("less_than", "equals")
    @classmethod
    def validate_comparison(cls, v: Callable[..., Any] | None, info) -> Callable[..., Any] | None:
        """lessThan/equals — функции двух аргументов"""
        if v is not None and not accepts_positional(v):
            raise ValueError(f"{info.field_name} must accept two positional arguments")
        return v

    @field_validator("boundary_validator")
    @classmethod
    def validate_boundary_validator(cls, v: Callable[..., Any] | None) -> Callable[..., Any] | None:
        if v is not None and not accepts_positional(v, 1):
            raise ValueError("boundary_validator must accept one positional argument")
        return v

    @model_validator(mode="after")
    def validate_ordering_source(self) -> "RangeOptions":
        """ordering и lessThan/equals взаимоисключающие"""
        if self.ordering is not None and (self.less_than is not None or self.equals is not None):
            raise ValueError("ordering cannot be combined with lessThan/equals")
        return self

    @property
    def resolved_open_lower(self) -> bool:
        if self.open_lower_boundary is not None:
            return self.open_lower_boundary
        return bool(self.open_boundaries)

    @property
    def resolved_open_upper(self) -> bool:
        if self.open_upper_boundary is not None:
            return self.open_upper_boundary
        return bool(self.open_boundaries)

    def resolve_ordering(self) -> OrderingContext:
        """
        Контекст упорядочивания из опций.

        Returns:
            ordering если задан; иначе контекст из lessThan/equals
            (недостающий примитив берётся из DEFAULT_ORDERING);
            иначе DEFAULT_ORDERING
        """
        if self.ordering is not None:
            return self.ordering
        if self.less_than is None and self.equals is None:
            return DEFAULT_ORDERING
        return OrderingContext(
            less_than=self.less_than or DEFAULT_ORDERING.less_than,
            equals=self.equals or DEFAULT_ORDERING.equals,
        )

    @classmethod
    def coerce(cls, options: Any = None, **overrides: Any) -> "RangeOptions":
        """
        Приведение любого допустимого представления опций к RangeOptions.

        Args:
            options: None, RangeOptions, mapping или строка (имя диапазона)
            **overrides: Ключи, перекрывающие options

        Returns:
            RangeOptions

        Raises:
            MalformedRangeOptionsError: Если опции неверной формы
        """
        if isinstance(options, cls) and not overrides:
            return options

        if options is None:
            data: dict[str, Any] = {}
        elif isinstance(options, cls):
            data = {
                field: getattr(options, field)
                for field in cls.model_fields
                if getattr(options, field) is not None
            }
        elif isinstance(options, str):
            data = {"name": options}
        elif isinstance(options, Mapping):
            data = _normalize_keys(options)
        else:
            raise MalformedRangeOptionsError(
                f"Range options must be a mapping, RangeOptions or name, got {type(options).__name__}"
            )

        data.update(_normalize_keys(overrides))
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise MalformedRangeOptionsError(f"Malformed range options: {e}") from e
