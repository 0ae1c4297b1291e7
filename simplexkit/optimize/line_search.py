"""Derivative-free line search along a direction, used by Powell's method."""

from __future__ import annotations

import numpy as np

from .core import Array, GoalType, Objective
from .univariate import BracketFinder, BrentOptimizer, UnivariatePointValue


class LineSearch:
    """
    Optimize ``f(p + alpha * d)`` over the scalar ``alpha``.

    The optimum is first bracketed starting from ``alpha`` in ``[0, 1]`` and
    then refined with Brent's method on the bracket.

    Args:
        objective: Function of the full point. Every call made by the search
            goes through it, so an optimizer can count the evaluations.
        relative_tolerance: Relative accuracy of the Brent search.
        absolute_tolerance: Absolute accuracy of the Brent search.
    """

    def __init__(
        self,
        objective: Objective,
        relative_tolerance: float,
        absolute_tolerance: float,
    ):
        self._objective = objective
        self._bracket = BracketFinder()
        self._optimizer = BrentOptimizer(
            relative_accuracy=relative_tolerance,
            absolute_accuracy=absolute_tolerance,
        )

    def search(self, p: Array, d: Array, goal: GoalType) -> UnivariatePointValue:
        """Return the optimal step ``alpha`` along ``d`` and the value there."""
        p = np.asarray(p, dtype=float)
        d = np.asarray(d, dtype=float)

        def along(alpha: float) -> float:
            return self._objective(p + alpha * d)

        self._bracket.search(along, goal, 0.0, 1.0)
        return self._optimizer.optimize(
            along,
            goal,
            self._bracket.lo,
            self._bracket.hi,
            self._bracket.mid,
        )


__all__ = ["LineSearch"]
