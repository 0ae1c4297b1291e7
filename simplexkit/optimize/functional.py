"""Functional entry point returning :class:`OptimizeResult` objects."""

from __future__ import annotations

from typing import Callable, Dict, Optional, Union

import numpy as np

from ..exceptions import DimensionMismatchError
from .convergence import ConvergenceChecker
from .core import GoalType, OptimizeResult, Problem
from .direct_search import DirectSearchOptimizer
from .multi_directional import MultiDirectional
from .nelder_mead import NelderMead
from .powell import PowellOptimizer

Optimizer = Union[DirectSearchOptimizer, PowellOptimizer]

METHODS: Dict[str, Callable[[], Optimizer]] = {
    "nelder-mead": NelderMead,
    "multi-directional": MultiDirectional,
    "powell": PowellOptimizer,
}


def optimize(
    problem: Problem,
    x0: np.ndarray,
    method: str = "nelder-mead",
    goal: GoalType = GoalType.MINIMIZE,
    maxiter: Optional[int] = None,
    maxfev: Optional[int] = None,
    checker: Optional[ConvergenceChecker] = None,
    history: bool = False,
) -> OptimizeResult:
    """
    Optimize ``problem.fun`` from ``x0`` with a derivative-free method.

    ``method`` is one of ``"nelder-mead"``, ``"multi-directional"`` or
    ``"powell"``. Budget exhaustion raises instead of returning a partial
    result.
    """
    try:
        factory = METHODS[method.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown method {method!r}; expected one of {sorted(METHODS)}"
        ) from None

    x0 = np.asarray(x0, dtype=float).reshape(-1)
    if problem.dim is not None and x0.shape[0] != problem.dim:
        raise DimensionMismatchError(x0.shape[0], problem.dim)

    optimizer = factory()
    if maxiter is not None:
        optimizer.max_iterations = maxiter
    if maxfev is not None:
        optimizer.max_evaluations = maxfev
    if checker is not None:
        optimizer.convergence_checker = checker

    hist: list[np.ndarray] = []
    if history:
        hist.append(x0.copy())
        if isinstance(optimizer, DirectSearchOptimizer):
            optimizer.callback = lambda _, simplex: hist.append(simplex[0].point.copy())
        else:
            optimizer.callback = lambda _, current: hist.append(current.point.copy())

    best = optimizer.optimize(problem.fun, goal, x0)
    return OptimizeResult(
        x=np.array(best.point),
        fun=best.value,
        nit=optimizer.iterations,
        nfev=optimizer.evaluations,
        goal=goal,
        message="Convergence criterion satisfied.",
        history=hist,
    )


__all__ = ["METHODS", "optimize"]
