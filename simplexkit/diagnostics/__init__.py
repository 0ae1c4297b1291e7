"""Diagnostics and debugging utilities for simplexkit."""

from .core import assert_pivoted, assert_sorted, is_sorted
from .debug_mode import (
    DEBUG_ENV_VAR,
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "is_sorted",
    "assert_sorted",
    "assert_pivoted",
    "DEBUG_ENV_VAR",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
