"""Budget and counter bookkeeping shared by the multivariate optimizers."""

from __future__ import annotations

from typing import Optional

import numpy as np

from ..exceptions import TooManyEvaluationsError, TooManyIterationsError
from .convergence import ConvergenceChecker, SimpleScalarValueChecker
from .core import DEFAULT_MAX_COUNT, Array, GoalType, Objective, PointValue


class BaseOptimizer:
    """
    Owns the objective function, the goal and the evaluation/iteration budgets.

    Counters are reset at the start of every ``optimize`` call. One instance
    must not run two optimizations at the same time.
    """

    def __init__(self, checker: Optional[ConvergenceChecker] = None):
        self._checker: ConvergenceChecker = checker or SimpleScalarValueChecker()
        self._max_iterations = DEFAULT_MAX_COUNT
        self._max_evaluations = DEFAULT_MAX_COUNT
        self._iterations = 0
        self._evaluations = 0
        self._function: Optional[Objective] = None
        self._goal = GoalType.MINIMIZE

    @property
    def max_iterations(self) -> int:
        return self._max_iterations

    @max_iterations.setter
    def max_iterations(self, value: int) -> None:
        self._max_iterations = int(value)

    @property
    def iterations(self) -> int:
        return self._iterations

    @property
    def max_evaluations(self) -> int:
        return self._max_evaluations

    @max_evaluations.setter
    def max_evaluations(self, value: int) -> None:
        self._max_evaluations = int(value)

    @property
    def evaluations(self) -> int:
        return self._evaluations

    @property
    def convergence_checker(self) -> ConvergenceChecker:
        return self._checker

    @convergence_checker.setter
    def convergence_checker(self, checker: ConvergenceChecker) -> None:
        self._checker = checker

    @property
    def goal(self) -> GoalType:
        return self._goal

    def _reset(self, function: Objective, goal: GoalType) -> None:
        self._function = function
        self._goal = goal
        self._iterations = 0
        self._evaluations = 0

    def _increment_iterations(self) -> None:
        self._iterations += 1
        if self._iterations > self._max_iterations:
            raise TooManyIterationsError(self._max_iterations)

    def _evaluate(self, x: Array) -> float:
        """Evaluate the objective at ``x``, counting against the budget."""
        self._evaluations += 1
        if self._evaluations > self._max_evaluations:
            raise TooManyEvaluationsError(self._max_evaluations, x)
        return float(self._function(np.array(x, dtype=float)))

    def _converged(self, previous: PointValue, current: PointValue) -> bool:
        return self._checker.converged(self._iterations, previous, current)


__all__ = ["BaseOptimizer"]
