"""Convergence checkers deciding when two successive points are close enough."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np

from .core import EPSILON, SAFE_MIN, PointValue

DEFAULT_RELATIVE_THRESHOLD = 100 * EPSILON
DEFAULT_ABSOLUTE_THRESHOLD = 100 * SAFE_MIN


@runtime_checkable
class ConvergenceChecker(Protocol):
    """Policy comparing the previous and current point of an iteration."""

    def converged(self, iteration: int, previous: PointValue, current: PointValue) -> bool:
        ...


class SimpleScalarValueChecker:
    """
    Declare convergence when the objective values are close.

    Two values ``p`` and ``c`` are close when ``|p - c|`` is at most
    ``relative_threshold * max(|p|, |c|)`` or at most ``absolute_threshold``.
    A negative threshold disables the corresponding test.
    """

    def __init__(
        self,
        relative_threshold: float = DEFAULT_RELATIVE_THRESHOLD,
        absolute_threshold: float = DEFAULT_ABSOLUTE_THRESHOLD,
    ):
        self.relative_threshold = float(relative_threshold)
        self.absolute_threshold = float(absolute_threshold)

    def converged(self, iteration: int, previous: PointValue, current: PointValue) -> bool:
        p = previous.value
        c = current.value
        difference = abs(p - c)
        size = max(abs(p), abs(c))
        return difference <= size * self.relative_threshold or difference <= self.absolute_threshold

    def __repr__(self) -> str:
        return (
            f"SimpleScalarValueChecker(relative_threshold={self.relative_threshold!r}, "
            f"absolute_threshold={self.absolute_threshold!r})"
        )


class SimpleRealPointChecker:
    """
    Declare convergence when every coordinate of the two points is close.

    The per-coordinate test is the same as :class:`SimpleScalarValueChecker`.
    """

    def __init__(
        self,
        relative_threshold: float = DEFAULT_RELATIVE_THRESHOLD,
        absolute_threshold: float = DEFAULT_ABSOLUTE_THRESHOLD,
    ):
        self.relative_threshold = float(relative_threshold)
        self.absolute_threshold = float(absolute_threshold)

    def converged(self, iteration: int, previous: PointValue, current: PointValue) -> bool:
        p = previous.point
        c = current.point
        difference = np.abs(p - c)
        size = np.maximum(np.abs(p), np.abs(c))
        close = (difference <= size * self.relative_threshold) | (
            difference <= self.absolute_threshold
        )
        return bool(np.all(close))

    def __repr__(self) -> str:
        return (
            f"SimpleRealPointChecker(relative_threshold={self.relative_threshold!r}, "
            f"absolute_threshold={self.absolute_threshold!r})"
        )


__all__ = [
    "ConvergenceChecker",
    "SimpleScalarValueChecker",
    "SimpleRealPointChecker",
    "DEFAULT_RELATIVE_THRESHOLD",
    "DEFAULT_ABSOLUTE_THRESHOLD",
]
