"""
Multi-start wrappers around multivariate and univariate optimizers.

The wrapped optimizer is run several times, first from the caller's start
point (or on the whole interval) and then from randomly generated points
(or random sub-intervals), to reduce the risk of getting trapped in a local
optimum. Iteration and evaluation budgets are shared by all starts.
"""

from __future__ import annotations

import math
from typing import Callable, List, Optional, Protocol, Sequence, Tuple

import numpy as np

from ..exceptions import NoConvergenceError, OptimizationError, format_message
from ..logging import get_logger
from .convergence import ConvergenceChecker
from .core import DEFAULT_MAX_COUNT, Array, GoalType, Objective, PointValue, PointValueComparator
from .univariate import UnivariateFunction, UnivariatePointValue

logger = get_logger(__name__)


class MultivariateOptimizer(Protocol):
    max_iterations: int
    max_evaluations: int
    convergence_checker: ConvergenceChecker

    @property
    def iterations(self) -> int:
        ...

    @property
    def evaluations(self) -> int:
        ...

    def optimize(self, function: Objective, goal: GoalType, start_point: Sequence[float]) -> PointValue:
        ...


class UniformRandomVectorGenerator:
    """Draw vectors uniformly from the box ``[lower, upper]``."""

    def __init__(
        self,
        lower: Sequence[float],
        upper: Sequence[float],
        rng: Optional[np.random.Generator] = None,
    ):
        self.lower = np.asarray(lower, dtype=float).reshape(-1)
        self.upper = np.asarray(upper, dtype=float).reshape(-1)
        if self.lower.shape != self.upper.shape:
            raise ValueError("lower and upper must have the same shape")
        if np.any(self.upper < self.lower):
            raise ValueError("upper must not be below lower")
        self.rng = rng if rng is not None else np.random.default_rng()

    def __call__(self) -> Array:
        return self.rng.uniform(self.lower, self.upper)


class MultiStartOptimizer:
    """
    Run ``optimizer`` from ``starts`` start points and keep the best optimum.

    Args:
        optimizer: Single-start optimizer to wrap.
        starts: Number of starts including the first one; values below 2
            disable restarts.
        generator: Callable returning a new random start point.
    """

    def __init__(
        self,
        optimizer: MultivariateOptimizer,
        starts: int,
        generator: Callable[[], Array],
    ):
        self._optimizer = optimizer
        self._starts = max(int(starts), 1)
        self._generator = generator
        self._optima: Optional[List[Optional[PointValue]]] = None
        self.max_iterations = DEFAULT_MAX_COUNT
        self.max_evaluations = DEFAULT_MAX_COUNT
        self._total_iterations = 0
        self._total_evaluations = 0

    @property
    def iterations(self) -> int:
        return self._total_iterations

    @property
    def evaluations(self) -> int:
        return self._total_evaluations

    @property
    def convergence_checker(self) -> ConvergenceChecker:
        return self._optimizer.convergence_checker

    @convergence_checker.setter
    def convergence_checker(self, checker: ConvergenceChecker) -> None:
        self._optimizer.convergence_checker = checker

    @property
    def optima(self) -> List[Optional[PointValue]]:
        """
        Optima of the last ``optimize`` call, best first, with ``None`` for
        every start that failed.
        """
        if self._optima is None:
            raise RuntimeError(format_message("NO_OPTIMUM_COMPUTED_YET"))
        return list(self._optima)

    def optimize(
        self,
        function: Objective,
        goal: GoalType,
        start_point: Sequence[float],
    ) -> PointValue:
        optima: List[Optional[PointValue]] = []
        self._total_iterations = 0
        self._total_evaluations = 0

        for i in range(self._starts):
            self._optimizer.max_iterations = self.max_iterations - self._total_iterations
            self._optimizer.max_evaluations = self.max_evaluations - self._total_evaluations
            start = start_point if i == 0 else self._generator()
            try:
                optima.append(self._optimizer.optimize(function, goal, start))
            except OptimizationError as exc:
                logger.info("start %d failed: %s", i, exc)
                optima.append(None)
            self._total_iterations += self._optimizer.iterations
            self._total_evaluations += self._optimizer.evaluations

        self._optima = PointValueComparator(goal).sorted(optima)
        if self._optima[0] is None:
            raise NoConvergenceError(self._starts)
        return self._optima[0]


class UnivariateOptimizer(Protocol):
    max_iterations: int
    max_evaluations: int
    iterations: int
    evaluations: int

    def optimize(
        self,
        func: UnivariateFunction,
        goal: GoalType,
        lo: float,
        hi: float,
        start: Optional[float] = None,
    ) -> UnivariatePointValue:
        ...


class MultiStartUnivariateOptimizer:
    """
    Run a univariate optimizer on random sub-intervals and keep the best optimum.

    The first start searches the whole interval ``[lo, hi]``. Every further
    start searches between two points drawn uniformly from it. Iteration and
    evaluation budgets are shared by all starts.

    Args:
        optimizer: Single-start univariate optimizer, usually a
            :class:`~simplexkit.optimize.univariate.BrentOptimizer`.
        starts: Number of starts including the first one.
        rng: Source of the random sub-intervals.

    Example:
        >>> import math
        >>> from simplexkit.optimize import BrentOptimizer, GoalType, MultiStartUnivariateOptimizer
        >>> wrapper = MultiStartUnivariateOptimizer(BrentOptimizer(), 10, np.random.default_rng(3))
        >>> best = wrapper.optimize(lambda x: math.cos(x) + 0.1 * x, GoalType.MINIMIZE, -10.0, 10.0)
    """

    def __init__(
        self,
        optimizer: UnivariateOptimizer,
        starts: int,
        rng: Optional[np.random.Generator] = None,
    ):
        self._optimizer = optimizer
        self._starts = max(int(starts), 1)
        self.rng = rng if rng is not None else np.random.default_rng()
        self._optima: Optional[List[Optional[UnivariatePointValue]]] = None
        self.max_iterations = DEFAULT_MAX_COUNT
        self.max_evaluations = DEFAULT_MAX_COUNT
        self._total_iterations = 0
        self._total_evaluations = 0

    @property
    def iterations(self) -> int:
        return self._total_iterations

    @property
    def evaluations(self) -> int:
        return self._total_evaluations

    @property
    def optima(self) -> List[Optional[UnivariatePointValue]]:
        """Optima of the last ``optimize`` call, best first, ``None`` for failed starts."""
        if self._optima is None:
            raise RuntimeError(format_message("NO_OPTIMUM_COMPUTED_YET"))
        return list(self._optima)

    def _interval(self, i: int, lo: float, hi: float) -> Tuple[float, float]:
        if i == 0:
            return lo, hi
        bound1, bound2 = (float(u) for u in lo + self.rng.random(2) * (hi - lo))
        return min(bound1, bound2), max(bound1, bound2)

    def optimize(
        self,
        func: UnivariateFunction,
        goal: GoalType,
        lo: float,
        hi: float,
    ) -> UnivariatePointValue:
        optima: List[Optional[UnivariatePointValue]] = []
        self._total_iterations = 0
        self._total_evaluations = 0

        for i in range(self._starts):
            self._optimizer.max_iterations = self.max_iterations - self._total_iterations
            self._optimizer.max_evaluations = self.max_evaluations - self._total_evaluations
            a, b = self._interval(i, lo, hi)
            try:
                optima.append(self._optimizer.optimize(func, goal, a, b))
            except OptimizationError as exc:
                logger.info("start %d on [%g, %g] failed: %s", i, a, b, exc)
                optima.append(None)
            self._total_iterations += self._optimizer.iterations
            self._total_evaluations += self._optimizer.evaluations

        sign = 1.0 if goal is GoalType.MINIMIZE else -1.0

        def rank(optimum: Optional[UnivariatePointValue]) -> Tuple[bool, float]:
            if optimum is None or math.isnan(optimum.value):
                return True, 0.0
            return False, sign * optimum.value

        self._optima = sorted(optima, key=rank)
        best = self._optima[0]
        if best is None or math.isnan(best.value):
            raise NoConvergenceError(self._starts)
        return best


__all__ = [
    "MultiStartOptimizer",
    "MultiStartUnivariateOptimizer",
    "MultivariateOptimizer",
    "UniformRandomVectorGenerator",
    "UnivariateOptimizer",
]
