"""
Core math modules для fn_math

Скалярные функции активации и базисные функции с IEEE-754 семантикой.
"""

# Precision
from fn_math.core.math.precision import (
    DEFAULT_PRECISION,
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    Real,
    as_real,
    ieee_propagate,
    is_close,
    is_same_real,
    precision_of,
)

# Activations
from fn_math.core.math.activations import (
    LEAKY_RELU_SLOPE,
    SELU_ALPHA,
    SELU_LAMBDA,
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
    swish,
)

# Registry
from fn_math.core.math.registry import (
    ACTIVATIONS,
    ALIASES,
    DEFAULT_ACTIVATION,
    ActivationInfo,
    ActivationKind,
    UnknownActivationError,
    build_activation,
    get_activation,
    list_activations,
    resolve_name,
)

__all__ = [
    # Precision — Constants
    "DEFAULT_PRECISION",
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Precision — Types
    "Real",
    # Precision — Functions
    "as_real",
    "ieee_propagate",
    "is_close",
    "is_same_real",
    "precision_of",
    # Activations — Constants
    "LEAKY_RELU_SLOPE",
    "SELU_ALPHA",
    "SELU_LAMBDA",
    # Activations — Exceptions
    "InvalidArgumentError",
    # Activations — Functions
    "binary_step",
    "exponential_linear_unit",
    "gaussian",
    "gaussian_error_linear_unit",
    "gaussian_rbf",
    "heaviside",
    "hyperbolic_tangent",
    "identity",
    "leaky_relu",
    "linear",
    "logistic",
    "maxout",
    "mish",
    "multiquadratics",
    "parametric_relu",
    "relu",
    "scaled_elu",
    "silu",
    "softplus",
    "swish",
    # Registry — Constants
    "ACTIVATIONS",
    "ALIASES",
    "DEFAULT_ACTIVATION",
    # Registry — Types
    "ActivationInfo",
    "ActivationKind",
    # Registry — Exceptions
    "UnknownActivationError",
    # Registry — Functions
    "build_activation",
    "get_activation",
    "list_activations",
    "resolve_name",
]
