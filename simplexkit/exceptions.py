"""
Error taxonomy shared by the nonlinear and linear optimizers.

Configuration problems (bad start simplex, mismatched dimensions) derive from
``ValueError`` and are raised before any objective evaluation. Algorithmic
failures (exhausted budgets, unbounded or infeasible linear programs) derive
from :class:`OptimizationError`. Exceptions raised by user objective functions
are never wrapped.

Message templates live in :data:`MESSAGES`, a read-only mapping keyed by a
message code.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

import numpy as np

MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        "EQUAL_VERTICES_IN_SIMPLEX": "equal vertices {0} and {1} in simplex configuration",
        "SIMPLEX_NEED_ONE_POINT": "simplex must contain at least one point",
        "DIMENSIONS_MISMATCH_SIMPLE": "dimension mismatch: got {0}, expected {1}",
        "MAX_COUNT_EXCEEDED": "maximal count ({0}) exceeded",
        "MAX_EVALUATIONS_EXCEEDED": "maximal count ({0}) of evaluations exceeded",
        "MAX_ITERATIONS_EXCEEDED": "maximal count ({0}) of iterations exceeded",
        "UNBOUNDED_SOLUTION": "unbounded solution",
        "NO_FEASIBLE_SOLUTION": "no feasible solution",
        "NO_CONVERGENCE_WITH_ANY_START_POINT": "none of the {0} start points lead to convergence",
        "NO_OPTIMUM_COMPUTED_YET": "no optimum computed yet",
        "NOT_STRICTLY_POSITIVE": "{0} must be strictly positive, got {1}",
    }
)


def format_message(code: str, *args: object) -> str:
    """Render the message template registered under ``code``."""
    return MESSAGES[code].format(*args)


class DimensionMismatchError(ValueError):
    """Raised when vector lengths disagree."""

    def __init__(self, got: int, expected: int):
        self.got = got
        self.expected = expected
        super().__init__(format_message("DIMENSIONS_MISMATCH_SIMPLE", got, expected))


class DegenerateSimplexError(ValueError):
    """Raised when a start configuration would produce duplicated vertices."""

    def __init__(self, first: Optional[int] = None, second: Optional[int] = None):
        self.vertices = (first, second)
        if first is None:
            message = format_message("SIMPLEX_NEED_ONE_POINT")
        else:
            message = format_message("EQUAL_VERTICES_IN_SIMPLEX", first, second)
        super().__init__(message)


class OptimizationError(RuntimeError):
    """Base class for failures of an optimization run."""


class MaxCountExceededError(OptimizationError):
    """Raised when a counter would exceed its configured maximum."""

    code = "MAX_COUNT_EXCEEDED"

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(format_message(self.code, limit))


class TooManyEvaluationsError(MaxCountExceededError):
    """Raised when the objective function evaluation budget is exhausted.

    ``point`` holds the argument of the evaluation that was refused.
    """

    code = "MAX_EVALUATIONS_EXCEEDED"

    def __init__(self, limit: int, point: Optional[np.ndarray] = None):
        self.point = None if point is None else np.array(point, dtype=float)
        super().__init__(limit)


class TooManyIterationsError(MaxCountExceededError):
    """Raised when the iteration budget is exhausted."""

    code = "MAX_ITERATIONS_EXCEEDED"


class UnboundedSolutionError(OptimizationError):
    """Raised when a linear program has no finite optimum."""

    def __init__(self) -> None:
        super().__init__(format_message("UNBOUNDED_SOLUTION"))


class NoFeasibleSolutionError(OptimizationError):
    """Raised when the constraints of a linear program cannot be satisfied."""

    def __init__(self) -> None:
        super().__init__(format_message("NO_FEASIBLE_SOLUTION"))


class NoConvergenceError(OptimizationError):
    """Raised by multi-start optimization when every start failed."""

    def __init__(self, starts: int):
        self.starts = starts
        super().__init__(format_message("NO_CONVERGENCE_WITH_ANY_START_POINT", starts))


def require_strictly_positive(name: str, value: float) -> None:
    """Raise ``ValueError`` unless ``value > 0``."""
    if not value > 0:
        raise ValueError(format_message("NOT_STRICTLY_POSITIVE", name, value))


__all__ = [
    "MESSAGES",
    "format_message",
    "DimensionMismatchError",
    "DegenerateSimplexError",
    "OptimizationError",
    "MaxCountExceededError",
    "TooManyEvaluationsError",
    "TooManyIterationsError",
    "UnboundedSolutionError",
    "NoFeasibleSolutionError",
    "NoConvergenceError",
    "require_strictly_positive",
]
