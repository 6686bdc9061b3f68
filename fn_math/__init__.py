"""
fn_math — scalar activation and basis functions.

Re-exports the activation library, the name registry and the configuration
model so callers can ``from fn_math import relu``.
"""

from fn_math.core.domain import ActivationConfig
from fn_math.core.math import *  # noqa: F401,F403
from fn_math.core.math import __all__ as _math_all

__version__ = "1.0.0"

__all__ = ["ActivationConfig", *_math_all]
