"""
Univariate optimization: bracketing and Brent's method.

:class:`BracketFinder` expands an initial interval along the downhill (or
uphill, when maximizing) direction until it holds an interior extremum.
:class:`BrentOptimizer` then locates the extremum inside the bracket using
golden-section steps combined with parabolic interpolation.

Example:
    >>> import math
    >>> from simplexkit.optimize import GoalType
    >>> from simplexkit.optimize.univariate import BracketFinder, BrentOptimizer
    >>> bracket = BracketFinder()
    >>> bracket.search(math.sin, GoalType.MINIMIZE, 4.0, 5.0)
    >>> result = BrentOptimizer().optimize(math.sin, GoalType.MINIMIZE, bracket.lo, bracket.hi, bracket.mid)
    >>> round(result.x, 6)
    4.712389

References:
    - R. P. Brent, *Algorithms for Minimization without Derivatives*, 1973.
    - Press et al., *Numerical Recipes*, section 10.1 (``mnbrak``).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional

from ..exceptions import (
    TooManyEvaluationsError,
    TooManyIterationsError,
    require_strictly_positive,
)
from .core import GoalType

UnivariateFunction = Callable[[float], float]

GOLD = 1.618034
EPS_MIN = 1e-21
GOLDEN_SECTION = 0.5 * (3 - math.sqrt(5))


@dataclass(frozen=True)
class UnivariatePointValue:
    """Abscissa of an optimum and the function value there."""

    x: float
    value: float


class BracketFinder:
    """
    Find an interval ``(lo, hi)`` containing a local optimum, with ``mid``
    strictly better than both ends.

    Args:
        grow_limit: Maximum expansion factor of a parabolic extrapolation step.
        max_iterations: Maximum number of expansion steps.
    """

    def __init__(self, grow_limit: float = 100.0, max_iterations: int = 50):
        require_strictly_positive("grow_limit", grow_limit)
        require_strictly_positive("max_iterations", max_iterations)
        self.grow_limit = float(grow_limit)
        self.max_iterations = int(max_iterations)
        self.iterations = 0
        self.evaluations = 0
        self.lo = math.nan
        self.mid = math.nan
        self.hi = math.nan
        self.f_lo = math.nan
        self.f_mid = math.nan
        self.f_hi = math.nan

    def _eval(self, func: UnivariateFunction, x: float) -> float:
        self.evaluations += 1
        return float(func(x))

    def search(self, func: UnivariateFunction, goal: GoalType, xa: float, xb: float) -> None:
        """Search for a bracket starting from the two points ``xa`` and ``xb``."""
        self.iterations = 0
        self.evaluations = 0
        is_minim = goal is GoalType.MINIMIZE

        def better(a: float, b: float) -> bool:
            return a < b if is_minim else a > b

        fa = self._eval(func, xa)
        fb = self._eval(func, xb)
        if better(fa, fb):
            xa, xb = xb, xa
            fa, fb = fb, fa

        xc = xb + GOLD * (xb - xa)
        fc = self._eval(func, xc)

        while better(fc, fb):
            self.iterations += 1
            if self.iterations > self.max_iterations:
                raise TooManyIterationsError(self.max_iterations)

            tmp1 = (xb - xa) * (fb - fc)
            tmp2 = (xb - xc) * (fb - fa)
            val = tmp2 - tmp1
            denom = 2 * EPS_MIN if abs(val) < EPS_MIN else 2 * val

            w = xb - ((xb - xc) * tmp2 - (xb - xa) * tmp1) / denom
            w_lim = xb + self.grow_limit * (xc - xb)

            if (w - xc) * (xb - w) > 0:
                fw = self._eval(func, w)
                if better(fw, fc):
                    xa, xb = xb, w
                    fa, fb = fb, fw
                    break
                if better(fb, fw):
                    xc = w
                    fc = fw
                    break
                w = xc + GOLD * (xc - xb)
                fw = self._eval(func, w)
            elif (w - w_lim) * (w_lim - xc) >= 0:
                w = w_lim
                fw = self._eval(func, w)
            elif (w - w_lim) * (xc - w) > 0:
                fw = self._eval(func, w)
                if better(fw, fc):
                    xb, xc = xc, w
                    w = xc + GOLD * (xc - xb)
                    fb, fc = fc, fw
                    fw = self._eval(func, w)
            else:
                w = xc + GOLD * (xc - xb)
                fw = self._eval(func, w)

            xa, xb, xc = xb, xc, w
            fa, fb, fc = fb, fc, fw

        self.lo, self.mid, self.hi = xa, xb, xc
        self.f_lo, self.f_mid, self.f_hi = fa, fb, fc


class BrentOptimizer:
    """
    Brent's method for univariate optimization on a bounded interval.

    The search stops when the current estimate is within
    ``2 * (relative_accuracy * |x| + absolute_accuracy)`` of the interval
    midpoint, measured against the half width of the interval.
    """

    def __init__(
        self,
        relative_accuracy: float = 1e-9,
        absolute_accuracy: float = 1e-11,
        max_evaluations: int = 1000,
        max_iterations: int = 100,
    ):
        require_strictly_positive("relative_accuracy", relative_accuracy)
        require_strictly_positive("absolute_accuracy", absolute_accuracy)
        self.relative_accuracy = float(relative_accuracy)
        self.absolute_accuracy = float(absolute_accuracy)
        self.max_evaluations = int(max_evaluations)
        self.max_iterations = int(max_iterations)
        self.iterations = 0
        self.evaluations = 0
        self._function: Optional[UnivariateFunction] = None

    def _compute_objective_value(self, x: float) -> float:
        self.evaluations += 1
        if self.evaluations > self.max_evaluations:
            raise TooManyEvaluationsError(self.max_evaluations, [x])
        return float(self._function(x))

    def optimize(
        self,
        func: UnivariateFunction,
        goal: GoalType,
        lo: float,
        hi: float,
        start: Optional[float] = None,
    ) -> UnivariatePointValue:
        """Find the optimum of ``func`` in ``[lo, hi]``, starting at ``start``."""
        self._function = func
        self.iterations = 0
        self.evaluations = 0
        if start is None:
            start = lo + 0.5 * (hi - lo)
        return self._local_min(goal is GoalType.MINIMIZE, lo, start, hi)

    def _local_min(self, is_minim: bool, lo: float, mid: float, hi: float) -> UnivariatePointValue:
        eps = self.relative_accuracy
        t = self.absolute_accuracy
        a, b = (lo, hi) if lo < hi else (hi, lo)
        x = v = w = mid
        d = 0.0
        e = 0.0
        fx = self._compute_objective_value(x)
        if not is_minim:
            fx = -fx
        fv = fw = fx

        while True:
            m = 0.5 * (a + b)
            tol1 = eps * abs(x) + t
            tol2 = 2 * tol1

            if abs(x - m) <= tol2 - 0.5 * (b - a):
                return UnivariatePointValue(x, fx if is_minim else -fx)

            golden = True
            if abs(e) > tol1:
                # fit parabola
                r = (x - w) * (fx - fv)
                q = (x - v) * (fx - fw)
                p = (x - v) * q - (x - w) * r
                q = 2 * (q - r)
                if q > 0:
                    p = -p
                else:
                    q = -q
                r = e
                e = d
                if p > q * (a - x) and p < q * (b - x) and abs(p) < abs(0.5 * q * r):
                    golden = False
                    d = p / q
                    u = x + d
                    # f must not be evaluated too close to a or b
                    if u - a < tol2 or b - u < tol2:
                        d = tol1 if x <= m else -tol1
            if golden:
                e = (b - x) if x < m else (a - x)
                d = GOLDEN_SECTION * e

            if abs(d) < tol1:
                u = x + tol1 if d >= 0 else x - tol1
            else:
                u = x + d

            fu = self._compute_objective_value(u)
            if not is_minim:
                fu = -fu

            if fu <= fx:
                if u < x:
                    b = x
                else:
                    a = x
                v, fv = w, fw
                w, fw = x, fx
                x, fx = u, fu
            else:
                if u < x:
                    a = u
                else:
                    b = u
                if fu <= fw or w == x:
                    v, fv = w, fw
                    w, fw = u, fu
                elif fu <= fv or v == x or v == w:
                    v, fv = u, fu

            self.iterations += 1
            if self.iterations > self.max_iterations:
                raise TooManyIterationsError(self.max_iterations)


__all__ = [
    "UnivariateFunction",
    "UnivariatePointValue",
    "BracketFinder",
    "BrentOptimizer",
]
