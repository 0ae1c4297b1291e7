"""
Linear programming with the two-phase tableau simplex method.

The object API (:class:`LinearObjectiveFunction`, :class:`LinearConstraint`,
:class:`SimplexSolver`) raises on infeasible or unbounded problems, while the
matrix-form :func:`simplex` reports a :class:`Status` instead. SciPy is only
needed for :func:`linprog_wrapper`.
"""

from . import core, lp, solver, tableau
from .core import LinearConstraint, LinearObjectiveFunction, LPResult, Relationship, Status
from .lp import linprog_wrapper, simplex
from .solver import SimplexSolver
from .tableau import SimplexTableau

__all__ = [
    "core",
    "lp",
    "solver",
    "tableau",
    # Core types
    "Relationship",
    "Status",
    "LinearConstraint",
    "LinearObjectiveFunction",
    "LPResult",
    # Algorithms
    "SimplexTableau",
    "SimplexSolver",
    "simplex",
    "linprog_wrapper",
]
