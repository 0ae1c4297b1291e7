"""
Matrix-form entry points for linear programming.

Problems are given as

```
    minimize or maximize    c^T x
    subject to              A x = b
                            G x <= h
                            x >= 0        (when ``non_negative``)
```

and solved with :class:`~simplexkit.linear.solver.SimplexSolver`. Algorithmic
failures are reported through :class:`~simplexkit.linear.core.Status` instead
of exceptions. :func:`linprog_wrapper` solves the same problem with SciPy's
HiGHS backend when SciPy is installed, which is handy for cross-checking.

Example:
    >>> import numpy as np
    >>> from simplexkit.linear.lp import simplex
    >>> c = np.array([-3.0, -5.0])  # maximize 3x + 5y -> minimize negative
    >>> G = np.array([[1.0, 2.0], [3.0, 2.0]])
    >>> h = np.array([4.0, 6.0])
    >>> result = simplex(c, g_mat=G, h_vec=h)
    >>> result.status
    <Status.OPTIMAL: 'optimal'>
    >>> result.x  # Optimal point (x1, x2) = (1, 1.5)
    array([1. , 1.5])
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import numpy as np

from ..exceptions import (
    DimensionMismatchError,
    NoFeasibleSolutionError,
    TooManyIterationsError,
    UnboundedSolutionError,
)
from ..logging import get_logger
from ..optimize.core import GoalType
from .core import LinearConstraint, LinearObjectiveFunction, LPResult, Relationship, Status
from .solver import DEFAULT_EPSILON, DEFAULT_MAX_ITERATIONS, SimplexSolver

logger = get_logger(__name__)

try:
    from scipy.optimize import linprog as _scipy_linprog

    SCIPY_AVAILABLE = True
except Exception:  # pragma: no cover - SciPy is optional
    SCIPY_AVAILABLE = False
    _scipy_linprog = None


def _coerce_block(
    mat: Optional[np.ndarray],
    vec: Optional[np.ndarray],
    n: int,
    names: Tuple[str, str],
) -> Tuple[Optional[np.ndarray], Optional[np.ndarray]]:
    if (mat is None) ^ (vec is None):
        raise ValueError(f"{names[0]} and {names[1]} must be provided together")
    if mat is None:
        return None, None
    arr = np.atleast_2d(np.asarray(mat, dtype=float))
    rhs = np.asarray(vec, dtype=float).reshape(-1)
    if arr.shape[1] != n:
        raise DimensionMismatchError(arr.shape[1], n)
    if rhs.shape[0] != arr.shape[0]:
        raise DimensionMismatchError(rhs.shape[0], arr.shape[0])
    return arr, rhs


def to_constraints(
    a_mat: Optional[np.ndarray],
    b_vec: Optional[np.ndarray],
    g_mat: Optional[np.ndarray],
    h_vec: Optional[np.ndarray],
    n: int,
) -> List[LinearConstraint]:
    """Turn the ``(A, b)`` and ``(G, h)`` blocks into constraint objects."""
    a_arr, b_arr = _coerce_block(a_mat, b_vec, n, ("A", "b"))
    g_arr, h_arr = _coerce_block(g_mat, h_vec, n, ("G", "h"))
    constraints: List[LinearConstraint] = []
    if a_arr is not None:
        constraints.extend(LinearConstraint(row, Relationship.EQ, rhs) for row, rhs in zip(a_arr, b_arr))
    if g_arr is not None:
        constraints.extend(LinearConstraint(row, Relationship.LEQ, rhs) for row, rhs in zip(g_arr, h_arr))
    return constraints


def simplex(
    c: np.ndarray,
    a_mat: Optional[np.ndarray] = None,
    b_vec: Optional[np.ndarray] = None,
    g_mat: Optional[np.ndarray] = None,
    h_vec: Optional[np.ndarray] = None,
    goal: GoalType = GoalType.MINIMIZE,
    non_negative: bool = True,
    epsilon: float = DEFAULT_EPSILON,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> LPResult:
    """
    Solve a linear program via the two-phase tableau simplex method.
    """
    c_arr = np.asarray(c, dtype=float).reshape(-1)
    if c_arr.shape[0] == 0:
        raise ValueError("Linear program must contain at least one variable")
    constraints = to_constraints(a_mat, b_vec, g_mat, h_vec, c_arr.shape[0])

    solver = SimplexSolver(epsilon=epsilon, max_iterations=max_iterations)
    try:
        optimum = solver.optimize(LinearObjectiveFunction(c_arr), constraints, goal, non_negative)
    except NoFeasibleSolutionError as exc:
        return LPResult(x=None, fun=None, status=Status.INFEASIBLE, message=str(exc), nit=solver.iterations)
    except UnboundedSolutionError as exc:
        return LPResult(x=None, fun=None, status=Status.UNBOUNDED, message=str(exc), nit=solver.iterations)
    except TooManyIterationsError as exc:
        return LPResult(x=None, fun=None, status=Status.MAX_ITER, message=str(exc), nit=max_iterations)

    x = np.array(optimum.point)
    if not np.all(np.isfinite(x)):
        logger.warning("simplex produced a non-finite point: %s", x)
        return LPResult(
            x=None,
            fun=None,
            status=Status.NUMERICAL_ERROR,
            message="Non-finite solution",
            nit=solver.iterations,
        )

    slack = None
    if g_mat is not None and h_vec is not None:
        slack = np.asarray(h_vec, dtype=float).reshape(-1) - np.atleast_2d(np.asarray(g_mat, dtype=float)) @ x
    return LPResult(
        x=x,
        fun=optimum.value,
        status=Status.OPTIMAL,
        message="Optimal solution found",
        nit=solver.iterations,
        slack=slack,
    )


def linprog_wrapper(
    c: np.ndarray,
    a_mat: Optional[np.ndarray] = None,
    b_vec: Optional[np.ndarray] = None,
    g_mat: Optional[np.ndarray] = None,
    h_vec: Optional[np.ndarray] = None,
    goal: GoalType = GoalType.MINIMIZE,
    non_negative: bool = True,
    max_iterations: int = 1000,
) -> LPResult:
    """
    Solve an LP via SciPy's ``linprog`` if SciPy is installed.
    """

    if not SCIPY_AVAILABLE:  # pragma: no cover - depends on SciPy
        return LPResult(
            x=None,
            fun=None,
            status=Status.NUMERICAL_ERROR,
            message="SciPy is not available",
            nit=0,
        )
    c_arr = np.asarray(c, dtype=float).reshape(-1)
    sign = -1.0 if goal is GoalType.MAXIMIZE else 1.0
    bounds = (0, None) if non_negative else (None, None)

    res = _scipy_linprog(
        c=sign * c_arr,
        A_eq=a_mat,
        b_eq=b_vec,
        A_ub=g_mat,
        b_ub=h_vec,
        bounds=bounds,
        options={"maxiter": max_iterations},
        method="highs",
    )
    statuses = {
        0: Status.OPTIMAL,
        1: Status.MAX_ITER,
        2: Status.INFEASIBLE,
        3: Status.UNBOUNDED,
    }
    status = statuses.get(res.status, Status.NUMERICAL_ERROR)
    return LPResult(
        x=res.x if res.success else None,
        fun=sign * res.fun if res.success else None,
        status=status,
        message=res.message,
        nit=res.nit,
        slack=res.slack if res.success and g_mat is not None else None,
    )


__all__ = ["simplex", "linprog_wrapper", "to_constraints", "SCIPY_AVAILABLE"]
