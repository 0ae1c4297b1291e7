"""
Simplex-based direct search driver.

Direct search methods only use objective function values, never derivatives.
They compare the values at the ``n + 1`` vertices of a simplex and move the
simplex according to an algorithm-specific rule. This module owns the shared
machinery: building the start simplex, evaluating unevaluated vertices,
keeping the simplex sorted best first, the convergence test and the budgets.
Subclasses implement :meth:`DirectSearchOptimizer._iterate_simplex`.

Convergence is declared when *every* vertex of the current simplex passes the
convergence checker against the vertex with the same index in the previous
simplex, not only the best one.

References:
    - M. H. Wright, *Direct Search Methods: Once Scorned, Now Respectable*,
      1996.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, List, Optional, Sequence, Tuple, Union

import numpy as np

from ..logging import get_logger
from ..diagnostics import assert_sorted, is_debug_enabled
from .base import BaseOptimizer
from .convergence import ConvergenceChecker
from .core import GoalType, Objective, PointValue, PointValueComparator
from .simplex import StartConfiguration

logger = get_logger(__name__)

IterationCallback = Callable[[int, Tuple[PointValue, ...]], None]


class DirectSearchOptimizer(BaseOptimizer, ABC):
    """
    Base class for simplex-based direct search optimizers.

    If no start configuration is set, or its dimension does not match the
    start point, a unit hypercube is used. If no convergence checker is set,
    a default :class:`~simplexkit.optimize.convergence.SimpleScalarValueChecker`
    is used.
    """

    def __init__(self, checker: Optional[ConvergenceChecker] = None):
        super().__init__(checker)
        self._start_configuration: Optional[StartConfiguration] = None
        self._simplex: List[PointValue] = []
        self.callback: Optional[IterationCallback] = None

    @property
    def start_configuration(self) -> Optional[StartConfiguration]:
        return self._start_configuration

    def set_start_configuration(
        self,
        configuration: Union[StartConfiguration, Sequence[float], Sequence[Sequence[float]]],
    ) -> None:
        """
        Set the shape of the initial simplex.

        Accepts a :class:`StartConfiguration`, a 1-D vector of steps along the
        canonical axes, or a 2-D reference simplex of ``n + 1`` vertices.
        """
        if isinstance(configuration, StartConfiguration):
            self._start_configuration = configuration
            return
        nested = any(np.ndim(item) > 0 for item in configuration)
        if nested:
            self._start_configuration = StartConfiguration.from_reference(configuration)
        else:
            self._start_configuration = StartConfiguration.from_steps(configuration)

    @property
    def simplex(self) -> Tuple[PointValue, ...]:
        """Current simplex, best vertex first."""
        return tuple(self._simplex)

    def optimize(
        self,
        function: Objective,
        goal: GoalType,
        start_point: Sequence[float],
    ) -> PointValue:
        """
        Optimize ``function`` starting from ``start_point``.

        Raises:
            TooManyEvaluationsError: if the evaluation budget is exhausted.
            TooManyIterationsError: if the iteration budget is exhausted.
        """
        start = np.asarray(start_point, dtype=float).reshape(-1)
        if (
            self._start_configuration is None
            or self._start_configuration.dimension != start.shape[0]
        ):
            self._start_configuration = StartConfiguration.unit(start.shape[0])

        self._reset(function, goal)
        comparator = PointValueComparator(goal)
        self._simplex = self._start_configuration.build(start)
        self._evaluate_simplex(comparator)
        logger.debug(
            "%s started from %s (%d vertices)",
            type(self).__name__,
            start.tolist(),
            len(self._simplex),
        )

        previous: List[PointValue] = []
        while True:
            if self._iterations > 0:
                converged = all(
                    self._converged(prev, curr) for prev, curr in zip(previous, self._simplex)
                )
                if converged:
                    logger.info(
                        "%s converged after %d iterations and %d evaluations",
                        type(self).__name__,
                        self._iterations,
                        self._evaluations,
                    )
                    return self._simplex[0]

            previous = list(self._simplex)
            self._iterate_simplex(comparator)
            if is_debug_enabled():
                logger.debug(
                    "iteration %d: %s",
                    self._iterations,
                    [(v.point.tolist(), v.value) for v in self._simplex],
                )
            if self.callback is not None:
                self.callback(self._iterations, self.simplex)

    @abstractmethod
    def _iterate_simplex(self, comparator: PointValueComparator) -> None:
        """Compute the next simplex of the algorithm in place."""

    def _evaluate_simplex(self, comparator: PointValueComparator) -> None:
        """Evaluate every unevaluated vertex, then sort best first."""
        for i, vertex in enumerate(self._simplex):
            if not vertex.is_evaluated:
                self._simplex[i] = PointValue(vertex.point, self._evaluate(vertex.point))
        comparator.sort(self._simplex)
        if is_debug_enabled():
            assert_sorted(self._simplex, comparator)

    def _replace_worst_point(self, candidate: PointValue, comparator: PointValueComparator) -> None:
        """Drop the worst vertex and insert ``candidate`` at its rank."""
        n = len(self._simplex) - 1
        for i in range(n):
            if comparator(self._simplex[i], candidate) > 0:
                self._simplex[i], candidate = candidate, self._simplex[i]
        self._simplex[n] = candidate


__all__ = ["DirectSearchOptimizer", "IterationCallback"]
