"""
Powell's direction-set method.

The optimizer keeps ``n`` search directions, initially the coordinate axes,
and performs a line search along each of them in turn. After a sweep, the
overall displacement may replace the direction that produced the largest
single decrease, following Powell's test on the extrapolated point
``2 x - x_previous``.

References:
    - M. J. D. Powell, *An efficient method for finding the minimum of a
      function of several variables without calculating derivatives*, 1964.
    - Press et al., *Numerical Recipes*, section 10.5 (``powell``).
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence, Tuple

import numpy as np

from ..logging import get_logger
from .base import BaseOptimizer
from .convergence import ConvergenceChecker
from .core import Array, GoalType, Objective, PointValue
from .line_search import LineSearch

logger = get_logger(__name__)

DEFAULT_LS_RELATIVE_TOLERANCE = 1e-7
DEFAULT_LS_ABSOLUTE_TOLERANCE = 1e-11


def _new_point_and_direction(p: Array, d: Array, optimum: float) -> Tuple[Array, Array]:
    step = d * optimum
    return p + step, step


class PowellOptimizer(BaseOptimizer):
    """
    Powell's conjugate direction method.

    Line-search tolerances control the Brent search along each direction;
    the convergence checker compares the points before and after each sweep.
    """

    def __init__(
        self,
        ls_relative_tolerance: float = DEFAULT_LS_RELATIVE_TOLERANCE,
        ls_absolute_tolerance: float = DEFAULT_LS_ABSOLUTE_TOLERANCE,
        checker: Optional[ConvergenceChecker] = None,
    ):
        super().__init__(checker)
        self._line = LineSearch(self._evaluate, ls_relative_tolerance, ls_absolute_tolerance)
        self.callback: Optional[Callable[[int, PointValue], None]] = None

    def optimize(
        self,
        function: Objective,
        goal: GoalType,
        start_point: Sequence[float],
    ) -> PointValue:
        """Optimize ``function`` starting from ``start_point``."""
        self._reset(function, goal)
        x = np.array(start_point, dtype=float).reshape(-1)
        n = x.shape[0]
        direc = np.eye(n)

        f_val = self._evaluate(x)
        x1 = x.copy()
        while True:
            self._increment_iterations()

            f_x = f_val
            delta = 0.0
            big_ind = 0

            for i in range(n):
                d1 = direc[i].copy()
                f_x2 = f_val

                optimum = self._line.search(x, d1, goal)
                f_val = optimum.value
                x, _ = _new_point_and_direction(x, d1, optimum.x)

                if f_x2 - f_val > delta:
                    delta = f_x2 - f_val
                    big_ind = i

            previous = PointValue(x1, f_x)
            current = PointValue(x, f_val)
            if self.callback is not None:
                self.callback(self._iterations, current)
            if self._converged(previous, current):
                logger.info(
                    "Powell converged after %d iterations and %d evaluations",
                    self._iterations,
                    self._evaluations,
                )
                if goal is GoalType.MINIMIZE:
                    return current if f_val < f_x else previous
                return current if f_val > f_x else previous

            d = x - x1
            x2 = 2 * x - x1

            x1 = x.copy()
            f_x2 = self._evaluate(x2)

            if f_x > f_x2:
                t = 2 * (f_x + f_x2 - 2 * f_val)
                temp = f_x - f_val - delta
                t *= temp * temp
                temp = f_x - f_x2
                t -= delta * temp * temp

                if t < 0.0:
                    optimum = self._line.search(x, d, goal)
                    f_val = optimum.value
                    x, new_direction = _new_point_and_direction(x, d, optimum.x)

                    last_ind = n - 1
                    direc[big_ind] = direc[last_ind]
                    direc[last_ind] = new_direction
                    logger.debug("replaced direction %d with the sweep displacement", big_ind)

    def __repr__(self) -> str:
        return "PowellOptimizer()"


__all__ = [
    "PowellOptimizer",
    "DEFAULT_LS_RELATIVE_TOLERANCE",
    "DEFAULT_LS_ABSOLUTE_TOLERANCE",
]
