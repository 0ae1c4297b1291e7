"""Nelder-Mead simplex method."""

from __future__ import annotations

from typing import Optional

from .convergence import ConvergenceChecker
from .core import PointValue, PointValueComparator
from .direct_search import DirectSearchOptimizer


class NelderMead(DirectSearchOptimizer):
    """
    Nelder-Mead direct search.

    Each iteration reflects the worst vertex through the centroid of the
    others, then expands, contracts (outside or inside) or shrinks the whole
    simplex towards the best vertex.

    Args:
        rho: Reflection coefficient.
        khi: Expansion coefficient.
        gamma: Contraction coefficient.
        sigma: Shrinkage coefficient.
        checker: Convergence checker, defaults to a scalar value checker.
    """

    def __init__(
        self,
        rho: float = 1.0,
        khi: float = 2.0,
        gamma: float = 0.5,
        sigma: float = 0.5,
        checker: Optional[ConvergenceChecker] = None,
    ):
        super().__init__(checker)
        self.rho = float(rho)
        self.khi = float(khi)
        self.gamma = float(gamma)
        self.sigma = float(sigma)

    def _iterate_simplex(self, comparator: PointValueComparator) -> None:
        self._increment_iterations()

        n = len(self._simplex) - 1
        best = self._simplex[0]
        second_worst = self._simplex[n - 1]
        worst = self._simplex[n]
        x_worst = worst.point

        # centroid of every vertex except the worst
        centroid = sum(vertex.point for vertex in self._simplex[:n]) / n

        x_r = centroid + self.rho * (centroid - x_worst)
        reflected = PointValue(x_r, self._evaluate(x_r))

        if comparator(best, reflected) <= 0 and comparator(reflected, second_worst) < 0:
            self._replace_worst_point(reflected, comparator)
            return

        if comparator(reflected, best) < 0:
            x_e = centroid + self.khi * (x_r - centroid)
            expanded = PointValue(x_e, self._evaluate(x_e))
            if comparator(expanded, reflected) < 0:
                self._replace_worst_point(expanded, comparator)
            else:
                self._replace_worst_point(reflected, comparator)
            return

        if comparator(reflected, worst) < 0:
            x_c = centroid + self.gamma * (x_r - centroid)
            out_contracted = PointValue(x_c, self._evaluate(x_c))
            if comparator(out_contracted, reflected) <= 0:
                self._replace_worst_point(out_contracted, comparator)
                return
        else:
            x_c = centroid - self.gamma * (centroid - x_worst)
            in_contracted = PointValue(x_c, self._evaluate(x_c))
            if comparator(in_contracted, worst) < 0:
                self._replace_worst_point(in_contracted, comparator)
                return

        # shrink towards the best vertex
        x_best = best.point
        for i in range(1, len(self._simplex)):
            x = self._simplex[i].point
            self._simplex[i] = PointValue(x_best + self.sigma * (x - x_best))
        self._evaluate_simplex(comparator)

    def __repr__(self) -> str:
        return (
            f"NelderMead(rho={self.rho!r}, khi={self.khi!r}, "
            f"gamma={self.gamma!r}, sigma={self.sigma!r})"
        )


__all__ = ["NelderMead"]
