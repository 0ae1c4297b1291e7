"""
Global debug switch for simplexkit.

While debug mode is on, the direct-search driver verifies the simplex order
after every evaluation pass and logs each iteration, and the linear
programming solver verifies and logs every pivot. The checks themselves live
in :mod:`simplexkit.diagnostics.core`.

Debug mode starts enabled when ``SIMPLEXKIT_DEBUG`` is set to ``1``, ``true``,
``yes`` or ``on``.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

DEBUG_ENV_VAR = "SIMPLEXKIT_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag_from_env(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


_debug_enabled: bool = _flag_from_env(DEBUG_ENV_VAR)


def is_debug_enabled() -> bool:
    """Whether the optimizers currently run their debug checks."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """Turn debug mode on or off for every optimizer in the process."""
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Switch debug mode for the duration of a ``with`` block.

    The previous setting is restored on exit, also when the block raises, so
    contexts nest.

    Example:
        >>> from simplexkit.optimize import GoalType, NelderMead
        >>> with debug_context():
        ...     best = NelderMead().optimize(lambda x: float(x @ x), GoalType.MINIMIZE, [1.0, 1.0])
    """
    previous = is_debug_enabled()
    set_debug_enabled(enabled)
    try:
        yield
    finally:
        set_debug_enabled(previous)


__all__ = ["DEBUG_ENV_VAR", "is_debug_enabled", "set_debug_enabled", "debug_context"]
