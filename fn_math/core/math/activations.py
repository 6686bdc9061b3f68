"""
Activations — Scalar Activation & Basis Functions

Библиотека чистых скалярных функций активации и радиально-базисных функций:
- Кусочно-линейные: binary_step, heaviside, relu, leaky_relu, parametric_relu, linear, identity
- Экспоненциальные: exponential_linear_unit, scaled_elu, logistic, silu, softplus, mish
- Гауссовы и RBF: gaussian, gaussian_error_linear_unit, gaussian_rbf, multiquadratics
- Гиперболические: hyperbolic_tangent
- Векторные: maxout

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все функции чистые: нет состояния, нет побочных эффектов, детерминированы
2. Точность результата = точность первичного входа x (см. precision.py)
3. NaN/Inf пропагируют по IEEE-754, скалярные функции никогда не бросают исключений
4. Граница x=0 определена для каждой функции отдельно и не взаимозаменяема:
   relu(0) = 0, binary_step(0) = 1, ELU: x ≤ 0 → экспоненциальная ветвь,
   LeakyReLU/PReLU/SELU: x < 0 → отрицательная ветвь
5. maxout(пустая последовательность) → InvalidArgumentError

ФОРМУЛЫ:
    binary_step(x)                = 0 if x < 0 else 1
    exponential_linear_unit(a, x) = a·(e^x − 1) if x ≤ 0 else x
    gaussian(x)                   = e^(−x²)
    gaussian_error_linear_unit(x) = ½·x·(1 + erf(x/√2))
    gaussian_rbf(x, c, σ)         = e^(−(x − c)² / (2σ²))
    heaviside(a, x, b)            = 1 if a·x + b > 0 else 0
    hyperbolic_tangent(x)         = (e^x − e^−x) / (e^x + e^−x)
    identity(x)                   = x
    leaky_relu(x)                 = 0.01·x if x < 0 else x
    linear(a, x, b)               = a·x + b
    logistic(x)                   = 1 / (1 + e^−x)
    maxout(xs)                    = max xs_i
    mish(x)                       = x·tanh(ln(1 + e^x))
    multiquadratics(x, c, a)      = √((x − c)² + a²)
    parametric_relu(a, x)         = a·x if x < 0 else x
    relu(x)                       = 0 if x ≤ 0 else x
    scaled_elu(x)                 = λ·α·(e^x − 1) if x < 0 else λ·x
    silu(x)                       = x / (1 + e^−x)
    softplus(x)                   = ln(1 + e^x)
"""

import math
from collections.abc import Iterable
from typing import Final

import numpy as np

from fn_math.core.math.precision import Real, as_real, ieee_propagate, precision_of

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Наклон отрицательной ветви Leaky ReLU
LEAKY_RELU_SLOPE: Final[float] = 0.01

# Масштаб SELU (λ)
SELU_LAMBDA: Final[float] = 1.0507

# Насыщение отрицательной ветви SELU (α)
SELU_ALPHA: Final[float] = 1.67326


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgumentError(ValueError):
    """
    Нарушение предусловия аргумента, которое не выражается через IEEE-754.

    Единственный случай в библиотеке скалярных функций: maxout от пустой
    (или не одномерной) последовательности: максимум не определён.
    """
    pass


# =============================================================================
# КУСОЧНО-ЛИНЕЙНЫЕ ФУНКЦИИ
# =============================================================================


@ieee_propagate
def binary_step(x: Real) -> int:
    """
    Binary step.

    0 если x < 0, иначе 1. Ноль отображается в 1.
    Результат целочисленный (int), NaN отображается в 1.

    Examples:
        >>> binary_step(-0.001)
        0
        >>> binary_step(0.0)
        1
    """
    return 0 if x < 0 else 1


@ieee_propagate
def heaviside(a: Real, x: Real, b: Real) -> np.floating:
    """
    Heaviside step аффинного аргумента: 1 если a·x + b > 0, иначе 0.

    Граница a·x + b = 0 отображается в 0.
    """
    t = precision_of(x)
    return t(1) if as_real(a, t) * as_real(x, t) + as_real(b, t) > 0 else t(0)


@ieee_propagate
def identity(x: Real) -> np.floating:
    """f(x) = x"""
    return as_real(x)


@ieee_propagate
def linear(a: Real, x: Real, b: Real) -> np.floating:
    """f(x) = a·x + b"""
    t = precision_of(x)
    return as_real(a, t) * as_real(x, t) + as_real(b, t)


@ieee_propagate
def relu(x: Real) -> np.floating:
    """
    Rectified Linear Unit (ReLU).

    x если x > 0, иначе 0. Ноль и NaN попадают в ветвь 0.

    Examples:
        >>> relu(-1.0)
        np.float64(0.0)
        >>> relu(3.5)
        np.float64(3.5)
    """
    t = precision_of(x)
    x = as_real(x, t)
    return x if x > 0 else t(0)


@ieee_propagate
def leaky_relu(x: Real) -> np.floating:
    """
    Leaky ReLU: 0.01·x если x < 0, иначе x.
    """
    t = precision_of(x)
    x = as_real(x, t)
    return t(LEAKY_RELU_SLOPE) * x if x < 0 else x


@ieee_propagate
def parametric_relu(a: Real, x: Real) -> np.floating:
    """
    Parametric ReLU (PReLU): a·x если x < 0, иначе x.

    Args:
        a: Наклон отрицательной ветви
        x: Вход
    """
    t = precision_of(x)
    x = as_real(x, t)
    return as_real(a, t) * x if x < 0 else x


# =============================================================================
# ЭКСПОНЕНЦИАЛЬНЫЕ ФУНКЦИИ
# =============================================================================


@ieee_propagate
def exponential_linear_unit(a: Real, x: Real) -> np.floating:
    """
    Exponential Linear Unit (ELU).

    a·(e^x − 1) если x ≤ 0, иначе x.

    e^x − 1 вычисляется через expm1 (точнее вблизи нуля).

    Args:
        a: Насыщение отрицательной ветви (ELU(x) → −a при x → −∞)
        x: Вход

    Returns:
        ELU(a, x) в точности x

    Examples:
        >>> exponential_linear_unit(1.0, 2.0)
        np.float64(2.0)
        >>> exponential_linear_unit(1.0, 0.0)
        np.float64(0.0)
    """
    t = precision_of(x)
    x = as_real(x, t)
    if x > 0:
        return x
    return as_real(a, t) * np.expm1(x)


@ieee_propagate
def scaled_elu(x: Real) -> np.floating:
    """
    Scaled Exponential Linear Unit (SELU).

    λ·α·(e^x − 1) если x < 0, иначе λ·x.
    λ = SELU_LAMBDA = 1.0507, α = SELU_ALPHA = 1.67326.

    Для x ≥ 0 результат равен ровно λ·x.

    Examples:
        >>> scaled_elu(0.0)
        np.float64(0.0)
        >>> scaled_elu(2.0) == 1.0507 * 2.0
        np.True_
    """
    t = precision_of(x)
    x = as_real(x, t)
    if x < 0:
        return t(SELU_LAMBDA) * t(SELU_ALPHA) * np.expm1(x)
    return t(SELU_LAMBDA) * x


@ieee_propagate
def logistic(x: Real) -> np.floating:
    """
    Логистическая сигмоида: 1 / (1 + e^−x).

    При x → −∞ e^−x переполняется в +inf, результат → 0 (без warnings).

    Examples:
        >>> logistic(0.0)
        np.float64(0.5)
    """
    t = precision_of(x)
    x = as_real(x, t)
    return t(1) / (t(1) + np.exp(-x))


@ieee_propagate
def silu(x: Real) -> np.floating:
    """
    Sigmoid Linear Unit (SiLU, Swish-1): x / (1 + e^−x).
    """
    t = precision_of(x)
    x = as_real(x, t)
    return x / (t(1) + np.exp(-x))


swish = silu


@ieee_propagate
def softplus(x: Real) -> np.floating:
    """
    Softplus: ln(1 + e^x).

    Вычисляется как logaddexp(0, x) = ln(e^0 + e^x): совпадает с прямой
    формулой везде, где та конечна, и не переполняется при больших x,
    поэтому softplus(x) − x → 0 при x → +∞.

    Examples:
        >>> abs(softplus(0.0) - 0.6931471805599453) < 1e-15
        np.True_
    """
    t = precision_of(x)
    x = as_real(x, t)
    return np.logaddexp(t(0), x)


@ieee_propagate
def mish(x: Real) -> np.floating:
    """Mish: x·tanh(ln(1 + e^x)) = x·tanh(softplus(x))."""
    x = as_real(x)
    return x * np.tanh(softplus(x))


# =============================================================================
# ГАУССОВЫ И РАДИАЛЬНО-БАЗИСНЫЕ ФУНКЦИИ
# =============================================================================


@ieee_propagate
def gaussian(x: Real) -> np.floating:
    """
    Гауссиана: e^(−x²).

    Симметрична, gaussian(0) = 1, → 0 при |x| → ∞.
    """
    x = as_real(x)
    return np.exp(-np.square(x))


@ieee_propagate
def gaussian_error_linear_unit(x: Real) -> np.floating:
    """
    Gaussian Error Linear Unit (GELU): ½·x·(1 + erf(x/√2)).

    Точная форма (через erf), не tanh-аппроксимация.
    erf вычисляется в double и приводится к точности x.
    """
    t = precision_of(x)
    x = as_real(x, t)
    erf = t(math.erf(float(x / t(math.sqrt(2.0)))))
    return t(0.5) * x * (t(1) + erf)


@ieee_propagate
def gaussian_rbf(x: Real, c: Real, sigma: Real) -> np.floating:
    """
    Гауссова радиально-базисная функция.

    f(x) = e^(−(x − c)² / (2σ²))

    Args:
        x: Вход
        c: Центр
        sigma: Ширина (σ = 0 даёт 0 вне центра и NaN в центре, по IEEE-754)

    Returns:
        Значение RBF в точности x; максимум 1 при x = c
    """
    t = precision_of(x)
    x = as_real(x, t)
    distance_sq = np.square(x - as_real(c, t))
    return np.exp(-distance_sq / (t(2) * np.square(as_real(sigma, t))))


@ieee_propagate
def multiquadratics(x: Real, c: Real, a: Real) -> np.floating:
    """
    Мультиквадрик: √((x − c)² + a²).

    Вычисляется через hypot (без промежуточного переполнения квадратов).

    Args:
        x: Вход
        c: Центр
        a: Параметр формы
    """
    t = precision_of(x)
    x = as_real(x, t)
    return np.hypot(x - as_real(c, t), as_real(a, t))


# =============================================================================
# ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


@ieee_propagate
def hyperbolic_tangent(x: Real) -> np.floating:
    """
    Гиперболический тангенс: (e^x − e^−x) / (e^x + e^−x).

    Вычисляется через tanh: прямая формула при |x| > ~710 даёт inf/inf = NaN,
    tanh корректно насыщается в ±1. Нечётная функция, tanh(0) = 0.
    """
    x = as_real(x)
    return np.tanh(x)


# =============================================================================
# ВЕКТОРНЫЕ ФУНКЦИИ
# =============================================================================


@ieee_propagate
def maxout(x: Iterable[Real]) -> np.generic:
    """
    Maxout: максимальный элемент последовательности.

    Последовательность только читается. NaN среди элементов пропагирует
    (результат NaN).

    Args:
        x: Непустая одномерная последовательность (list, tuple, np.ndarray, ...)

    Returns:
        Значение максимального элемента (NumPy скаляр типа элементов)

    Raises:
        InvalidArgumentError: если последовательность пустая или не одномерная

    Examples:
        >>> maxout([3, 1, 4, 1, 5, 9, 2, 6])
        np.int64(9)
    """
    if isinstance(x, np.ndarray):
        values = x
    else:
        try:
            values = np.asarray(list(x))
        except ValueError as e:
            raise InvalidArgumentError(
                f"maxout requires a one-dimensional sequence of scalars: {e}"
            ) from e

    if values.ndim != 1:
        raise InvalidArgumentError(
            f"maxout requires a one-dimensional sequence, got shape {values.shape}"
        )

    if values.size == 0:
        raise InvalidArgumentError("maxout requires a non-empty sequence")

    return values.max()
