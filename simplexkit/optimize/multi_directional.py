"""Multi-directional search (Torczon's method)."""

from __future__ import annotations

from typing import List, Optional

from .convergence import ConvergenceChecker
from .core import PointValue, PointValueComparator
from .direct_search import DirectSearchOptimizer


class MultiDirectional(DirectSearchOptimizer):
    """
    Multi-directional direct search.

    Every non-best vertex is reflected through the best vertex. If the
    reflected simplex improves on the best vertex, an expanded simplex is
    tried as well; otherwise a contracted simplex is tried. The whole simplex
    moves at once, unlike Nelder-Mead which only replaces the worst vertex.

    Args:
        khi: Expansion coefficient.
        gamma: Contraction coefficient.
        checker: Convergence checker, defaults to a scalar value checker.
    """

    def __init__(
        self,
        khi: float = 2.0,
        gamma: float = 0.5,
        checker: Optional[ConvergenceChecker] = None,
    ):
        super().__init__(checker)
        self.khi = float(khi)
        self.gamma = float(gamma)

    def _iterate_simplex(self, comparator: PointValueComparator) -> None:
        while True:
            self._increment_iterations()

            original = self._simplex
            best = original[0]

            reflected = self._evaluate_new_simplex(original, 1.0, comparator)
            if comparator(reflected, best) < 0:
                reflected_simplex = self._simplex
                expanded = self._evaluate_new_simplex(original, self.khi, comparator)
                if comparator(reflected, expanded) <= 0:
                    self._simplex = reflected_simplex
                return

            contracted = self._evaluate_new_simplex(original, self.gamma, comparator)
            if comparator(contracted, best) < 0:
                return

            converged = all(
                self._converged(prev, curr) for prev, curr in zip(original, self._simplex)
            )
            if converged:
                return

    def _evaluate_new_simplex(
        self,
        original: List[PointValue],
        coeff: float,
        comparator: PointValueComparator,
    ) -> PointValue:
        """Build ``best + coeff * (best - vertex)`` for every vertex, evaluate and sort it."""
        x_smallest = original[0].point
        self._simplex = [original[0]]
        self._simplex.extend(
            PointValue(x_smallest + coeff * (x_smallest - vertex.point)) for vertex in original[1:]
        )
        self._evaluate_simplex(comparator)
        return self._simplex[0]

    def __repr__(self) -> str:
        return f"MultiDirectional(khi={self.khi!r}, gamma={self.gamma!r})"


__all__ = ["MultiDirectional"]
