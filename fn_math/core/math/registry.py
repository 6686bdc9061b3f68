"""
Activation Registry — Discovery by Name

Единая точка поиска функций активации по имени:
- ACTIVATIONS: каноническое имя → ActivationInfo (функция, вид, коэффициенты, формула)
- ALIASES: общепринятые короткие имена (sigmoid, tanh, elu, gelu, swish, ...)
- build_activation: связывание коэффициентов параметрической функции → f(x)

Канонические имена совпадают с именами функций в activations.py.
Таблицы строятся при импорте и никогда не изменяются.
"""

import logging
from collections.abc import Callable, Mapping
from enum import Enum
from types import MappingProxyType
from typing import Final, NamedTuple

from fn_math.core.math.activations import (
    InvalidArgumentError,
    binary_step,
    exponential_linear_unit,
    gaussian,
    gaussian_error_linear_unit,
    gaussian_rbf,
    heaviside,
    hyperbolic_tangent,
    identity,
    leaky_relu,
    linear,
    logistic,
    maxout,
    mish,
    multiquadratics,
    parametric_relu,
    relu,
    scaled_elu,
    silu,
    softplus,
)

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS & TYPES
# =============================================================================


class ActivationKind(str, Enum):
    """Вид функции активации"""

    SCALAR = "scalar"  # f(x)
    PARAMETRIC = "parametric"  # f(x; коэффициенты)
    SEQUENCE = "sequence"  # f(x_1, ..., x_n)


class ActivationInfo(NamedTuple):
    """Описание зарегистрированной функции активации."""

    name: str  # Каноническое имя
    function: Callable  # Сама функция
    kind: ActivationKind
    parameters: tuple[str, ...]  # Коэффициенты кроме x, в порядке сигнатуры
    description: str  # Формула


class UnknownActivationError(LookupError):
    """Имя не найдено ни среди канонических имён, ни среди алиасов."""
    pass


# =============================================================================
# REGISTRY
# =============================================================================


def _info(
    function: Callable,
    description: str,
    parameters: tuple[str, ...] = (),
    kind: ActivationKind | None = None,
) -> ActivationInfo:
    if kind is None:
        kind = ActivationKind.PARAMETRIC if parameters else ActivationKind.SCALAR
    return ActivationInfo(function.__name__, function, kind, parameters, description)


ACTIVATIONS: Final[Mapping[str, ActivationInfo]] = MappingProxyType({
    info.name: info
    for info in (
        _info(binary_step, "0 if x < 0 else 1"),
        _info(exponential_linear_unit, "a*(exp(x) - 1) if x <= 0 else x", ("a",)),
        _info(gaussian, "exp(-x^2)"),
        _info(gaussian_error_linear_unit, "x/2 * (1 + erf(x/sqrt(2)))"),
        _info(gaussian_rbf, "exp(-(x - c)^2 / (2*sigma^2))", ("c", "sigma")),
        _info(heaviside, "1 if a*x + b > 0 else 0", ("a", "b")),
        _info(hyperbolic_tangent, "(exp(x) - exp(-x)) / (exp(x) + exp(-x))"),
        _info(identity, "x"),
        _info(leaky_relu, "0.01*x if x < 0 else x"),
        _info(linear, "a*x + b", ("a", "b")),
        _info(logistic, "1 / (1 + exp(-x))"),
        _info(maxout, "max(x_i)", kind=ActivationKind.SEQUENCE),
        _info(mish, "x * tanh(ln(1 + exp(x)))"),
        _info(multiquadratics, "sqrt((x - c)^2 + a^2)", ("c", "a")),
        _info(parametric_relu, "a*x if x < 0 else x", ("a",)),
        _info(relu, "0 if x <= 0 else x"),
        _info(scaled_elu, "1.0507*1.67326*(exp(x) - 1) if x < 0 else 1.0507*x"),
        _info(silu, "x / (1 + exp(-x))"),
        _info(softplus, "ln(1 + exp(x))"),
    )
})

ALIASES: Final[Mapping[str, str]] = MappingProxyType({
    "step": "binary_step",
    "elu": "exponential_linear_unit",
    "gelu": "gaussian_error_linear_unit",
    "rbf": "gaussian_rbf",
    "tanh": "hyperbolic_tangent",
    "none": "identity",
    "leaky_rectified_linear_unit": "leaky_relu",
    "sigmoid": "logistic",
    "max": "maxout",
    "prelu": "parametric_relu",
    "rectified_linear_unit": "relu",
    "selu": "scaled_elu",
    "swish": "silu",
    "sigmoid_linear_unit": "silu",
})

DEFAULT_ACTIVATION: Final[str] = "logistic"


# =============================================================================
# LOOKUP
# =============================================================================


def resolve_name(name: str) -> str:
    """
    Приведение имени к каноническому.

    Регистр, пробелы по краям и дефисы не важны: "Leaky-ReLU" → "leaky_relu".

    Raises:
        UnknownActivationError: если имя не найдено
    """
    key = name.strip().lower().replace("-", "_").replace(" ", "_")

    if key in ACTIVATIONS:
        return key
    if key in ALIASES:
        return ALIASES[key]

    raise UnknownActivationError(
        f"Unknown activation {name!r}. Known: {', '.join(sorted(ACTIVATIONS))}"
    )


def get_activation(name: str) -> ActivationInfo:
    """Описание функции активации по имени или алиасу."""
    return ACTIVATIONS[resolve_name(name)]


def list_activations(kind: ActivationKind | None = None) -> list[str]:
    """
    Отсортированный список канонических имён.

    Args:
        kind: Фильтр по виду (default: все)
    """
    return sorted(
        name for name, info in ACTIVATIONS.items() if kind is None or info.kind == kind
    )


def build_activation(
    name: str,
    params: Mapping[str, float] | None = None,
) -> Callable:
    """
    Построение функции одного аргумента f(x) со связанными коэффициентами.

    Коэффициенты передаются по имени, поэтому порядок аргументов
    в сигнатуре (linear(a, x, b), gaussian_rbf(x, c, sigma)) не важен.
    Значения коэффициентов не проверяются.

    Args:
        name: Имя или алиас
        params: Коэффициенты, ровно те, что перечислены в ActivationInfo.parameters

    Returns:
        Callable f(x)

    Raises:
        UnknownActivationError: если имя не найдено
        InvalidArgumentError: если коэффициенты отсутствуют или лишние

    Examples:
        >>> elu = build_activation("elu", {"a": 1.0})
        >>> elu(2.0)
        np.float64(2.0)
    """
    info = get_activation(name)
    params = dict(params or {})

    missing = [p for p in info.parameters if p not in params]
    unknown = sorted(set(params) - set(info.parameters))

    if missing:
        raise InvalidArgumentError(
            f"{info.name} requires parameters {list(info.parameters)}, missing {missing}"
        )

    if unknown:
        raise InvalidArgumentError(
            f"{info.name} does not accept parameters {unknown}"
        )

    logger.debug("Building activation %s with params %s", info.name, params)

    if not params:
        return info.function

    function = info.function

    def bound(x):
        return function(x=x, **params)

    bound.__name__ = info.name
    bound.__doc__ = f"{info.name}(x) with {params}"
    return bound
