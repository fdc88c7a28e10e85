"""
Numerical Safeguards — float-примитивы для границ диапазонов

Float-диапазонам нужно то, чего не даёт естественный порядок:
- обнаружение NaN/Inf: NaN ломает любой порядок (NaN < x и x < NaN
  оба ложны, NaN != NaN)
- сравнение с epsilon, чтобы вычисленные арифметикой границы сходились

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. is_close рефлексивно и симметрично для конечных значений
2. compare_with_tolerance возвращает 0 ровно когда is_close
3. Толерантности никогда не отрицательны
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность сравнения float
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность сравнения float (около нуля)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_real_number(value: object) -> bool:
    """
    Проверка, является ли значение конечным вещественным числом (граница float).

    bool отвергается, хотя и является подклассом int.

    Examples:
        >>> is_real_number(1.5)
        True
        >>> is_real_number(float("nan"))
        False
        >>> is_real_number(True)
        False
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return is_valid_float(float(value))


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def validate_tolerance(value: float, name: str) -> None:
    """
    Валидация толерантности: конечная и неотрицательная.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм (math.isclose):
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.1 + 0.2, 0.3)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def compare_with_tolerance(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> int:
    """
    Сравнение двух float с учётом толерантности.

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность
        abs_tol: Абсолютная толерантность

    Returns:
        -1 если a < b (вне толерантности)
         0 если a ≈ b (is_close)
        +1 если a > b (вне толерантности)

    Examples:
        >>> compare_with_tolerance(1.0, 2.0)
        -1
        >>> compare_with_tolerance(2.0, 1.0)
        1
        >>> compare_with_tolerance(1.0, 1.0 + 1e-13)
        0
    """
    if is_close(a, b, rel_tol=rel_tol, abs_tol=abs_tol):
        return 0
    elif a < b:
        return -1
    else:
        return 1
