"""
Precision — Generic Real Scalars & IEEE-754 Propagation

Модуль определяет, в какой точности вычисляется каждая функция активации,
и гарантирует IEEE-754 семантику для исключительных значений:
- Точность вызова определяется первичным входом x (np.float32, np.float64, ...)
- Python int/float вычисляются в DEFAULT_PRECISION (np.float64)
- Переполнение даёт ±inf, неопределённость даёт NaN, без исключений и warnings
- Float сравнения с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf пропагируют по правилам IEEE-754 (не заменяются, не ловятся)
2. Результат имеет ту же точность, что и первичный вход
3. Состояние ошибок NumPy устанавливается на каждый вызов (thread-safe)
"""

import functools
import math
from typing import Callable, Final, TypeVar

import numpy as np

# =============================================================================
# ТИПЫ И ТОЧНОСТЬ
# =============================================================================

# Обобщённый вещественный скаляр: Python float или NumPy floating любой точности
Real = float | np.floating

# Точность по умолчанию для Python int/float входов
DEFAULT_PRECISION: Final[type[np.floating]] = np.float64

# Относительная толерантность для сравнения float
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для сравнения float
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12

F = TypeVar("F", bound=Callable)


def precision_of(x: object) -> type[np.floating]:
    """
    Определение точности вычислений по первичному входу.

    Args:
        x: Первичный вход функции

    Returns:
        type(x) если x — NumPy floating скаляр, иначе DEFAULT_PRECISION

    Examples:
        >>> precision_of(np.float32(1.0))
        <class 'numpy.float32'>
        >>> precision_of(1.0)
        <class 'numpy.float64'>
        >>> precision_of(3)
        <class 'numpy.float64'>
    """
    if isinstance(x, np.floating):
        return type(x)
    return DEFAULT_PRECISION


def as_real(value: object, precision: type[np.floating] | None = None) -> np.floating:
    """
    Приведение значения к вещественному скаляру заданной точности.

    Args:
        value: Исходное значение (int, float, NumPy скаляр)
        precision: Целевая точность (default: собственная точность value)

    Returns:
        NumPy floating скаляр

    Examples:
        >>> as_real(2)
        np.float64(2.0)
        >>> as_real(0.5, np.float32)
        np.float32(0.5)
    """
    if precision is None:
        precision = precision_of(value)
    return precision(value)


def ieee_propagate(fn: F) -> F:
    """
    Декоратор: вычисление с IEEE-754 пропагацией исключительных значений.

    Внутри вызова NumPy не выдаёт RuntimeWarning и не бросает
    FloatingPointError: overflow → ±inf, invalid → NaN, divide → ±inf.
    Контекст np.errstate создаётся на каждый вызов.
    """

    @functools.wraps(fn)
    def wrapper(*args, **kwargs):
        with np.errstate(all="ignore"):
            return fn(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: Real,
    b: Real,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Бесконечности равны только самим себе, NaN не равен ничему.

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
        >>> is_close(0.0, 1e-13)
        True
    """
    return math.isclose(float(a), float(b), rel_tol=rel_tol, abs_tol=abs_tol)


def is_same_real(a: Real, b: Real) -> bool:
    """
    Точное совпадение двух результатов, где NaN совпадает с NaN.

    Используется для проверки детерминизма: повторный вызов функции
    с теми же аргументами должен дать тот же результат, включая NaN.

    Examples:
        >>> is_same_real(float("nan"), float("nan"))
        True
        >>> is_same_real(0.0, 1e-300)
        False
    """
    if math.isnan(a) and math.isnan(b):
        return True
    return a == b
