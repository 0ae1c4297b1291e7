"""
Problem and result containers for the linear programming solver.

A linear program is described by a :class:`LinearObjectiveFunction`
``c . x + d`` and a collection of :class:`LinearConstraint` objects of the
form ``a . x REL b`` where ``REL`` is one of ``=``, ``<=`` or ``>=``.

Example:
    >>> from simplexkit.linear.core import LinearConstraint, Relationship
    >>> LinearConstraint.from_sides([1.0, 2.0], 1.0, Relationship.LEQ, [0.0, 1.0], 4.0)
    LinearConstraint(coefficients=[1.0, 1.0], relationship=<=, value=3.0)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

import numpy as np

from ..exceptions import DimensionMismatchError


class Relationship(Enum):
    """Relation between the two sides of a linear constraint."""

    EQ = "="
    LEQ = "<="
    GEQ = ">="

    def opposite(self) -> "Relationship":
        """Relationship obtained when both sides are multiplied by -1."""
        if self is Relationship.LEQ:
            return Relationship.GEQ
        if self is Relationship.GEQ:
            return Relationship.LEQ
        return Relationship.EQ

    def __str__(self) -> str:
        return self.value


class Status(Enum):
    """Solution status reported by the matrix-form entry points."""

    OPTIMAL = "optimal"
    INFEASIBLE = "infeasible"
    UNBOUNDED = "unbounded"
    MAX_ITER = "max_iter"
    NUMERICAL_ERROR = "numerical_error"


def _as_vector(values: Sequence[float]) -> np.ndarray:
    arr = np.array(values, dtype=float).reshape(-1)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True, eq=False)
class LinearObjectiveFunction:
    """Objective ``c . x + constant_term``."""

    coefficients: np.ndarray
    constant_term: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "coefficients", _as_vector(self.coefficients))
        object.__setattr__(self, "constant_term", float(self.constant_term))

    def value(self, point: Sequence[float]) -> float:
        x = np.asarray(point, dtype=float).reshape(-1)
        if x.shape[0] != self.coefficients.shape[0]:
            raise DimensionMismatchError(x.shape[0], self.coefficients.shape[0])
        return float(self.coefficients @ x) + self.constant_term

    def __len__(self) -> int:
        return self.coefficients.shape[0]


@dataclass(frozen=True, eq=False)
class LinearConstraint:
    """Constraint ``coefficients . x  relationship  value``."""

    coefficients: np.ndarray
    relationship: Relationship
    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "coefficients", _as_vector(self.coefficients))
        object.__setattr__(self, "value", float(self.value))

    @classmethod
    def from_sides(
        cls,
        lhs_coefficients: Sequence[float],
        lhs_constant: float,
        relationship: Relationship,
        rhs_coefficients: Sequence[float],
        rhs_constant: float,
    ) -> "LinearConstraint":
        """
        Build ``lhs . x + lhs_constant  REL  rhs . x + rhs_constant``.

        Variables are collected on the left and constants on the right.
        """
        lhs = np.asarray(lhs_coefficients, dtype=float).reshape(-1)
        rhs = np.asarray(rhs_coefficients, dtype=float).reshape(-1)
        if lhs.shape != rhs.shape:
            raise DimensionMismatchError(rhs.shape[0], lhs.shape[0])
        return cls(lhs - rhs, relationship, float(rhs_constant) - float(lhs_constant))

    def normalized(self) -> "LinearConstraint":
        """Equivalent constraint with a non-negative right-hand side."""
        if self.value < 0:
            return LinearConstraint(-self.coefficients, self.relationship.opposite(), -self.value)
        return self

    def __repr__(self) -> str:
        return (
            f"LinearConstraint(coefficients={self.coefficients.tolist()!r}, "
            f"relationship={self.relationship}, value={self.value!r})"
        )


@dataclass
class LPResult:
    """
    Outcome of the matrix-form linear programming entry points.

    Attributes:
        x: Optimal point, or ``None`` when no optimum was found.
        fun: Objective value at ``x`` (``None`` when unavailable).
        status: Enumeration describing the solver exit.
        message: Human-readable explanation of the status.
        nit: Number of pivot iterations performed.
        slack: ``h - G x`` for the inequality block when available.
    """

    x: Optional[np.ndarray]
    fun: Optional[float]
    status: Status
    message: str
    nit: int
    slack: Optional[np.ndarray] = None


__all__ = [
    "Relationship",
    "Status",
    "LinearObjectiveFunction",
    "LinearConstraint",
    "LPResult",
]
