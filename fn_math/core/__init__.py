"""
Core mathematical primitives, configuration models, and contracts.

This module contains the activation function library and everything needed
to discover, configure, and serialize its functions.
"""
