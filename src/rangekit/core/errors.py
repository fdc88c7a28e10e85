"""
Range Errors — иерархия исключений алгебры диапазонов

Все ошибки наследуют Exception (не ValueError), поэтому RangeError,
поднятая внутри pydantic-валидатора, пробрасывается как есть и не
превращается в ValidationError.

Пустота — НЕ ошибка: операции, дающие пустые диапазоны, завершаются
штатно, вызывающий код проверяет Range.is_empty.
"""


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RangeError(Exception):
    """Базовая ошибка диапазонов."""

    pass


class InvalidBoundaryError(RangeError):
    """
    Значение границы отвергнуто валидатором границ диапазона.

    Поднимается при построении, например когда целочисленный диапазон
    получает границу float.
    """

    pass


class IncompatibleRangeError(RangeError):
    """
    В операции алгебры встретились диапазоны с несовместимыми контекстами.

    Контексты совместимы, если это один объект, у них общие callables
    сравнения или одинаковый структурный ключ.
    """

    pass


class MalformedRangeOptionsError(RangeError):
    """
    Распознанная опция несёт значение неверной формы.

    Исходная pydantic ValidationError доступна как __cause__.
    """

    pass


class MalformedRangeError(RangeError):
    """Значение, переданное как compact- или record-представление, не диапазон."""

    pass


class InconsistentOrderingError(RangeError):
    """
    Контекст упорядочивания противоречит сам себе на паре границ.

    equals(lower, upper) истинно, а less_than при этом упорядочивает пару.
    """

    pass
