"""
Contract Validation Module

Модуль для валидации JSON контрактов fn_math.
"""

from .validators import (
    ActivationConfigValidator,
    load_schema,
    validate_activation_config,
)

__all__ = [
    # Classes
    "ActivationConfigValidator",
    # Functions
    "load_schema",
    "validate_activation_config",
]
