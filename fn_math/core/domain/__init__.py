"""
Domain models.

Contains configuration models for activation functions.
"""

from fn_math.core.domain.activation_config import ActivationConfig

__all__ = [
    "ActivationConfig",
]
