"""
Dense tableau for the two-phase simplex method.

Layout of the tableau columns, left to right::

    [W] Z  x0 .. x{n-1}  [x-]  s0 ..  a0 ..  RHS

``W`` is the phase-1 objective and only exists while artificial variables are
present. ``x-`` is the shared negative part used when the decision variables
are not restricted to non-negative values (``x_i = x'_i - x-``). ``s`` columns
are slack (``<=``) or surplus (``>=``) variables and ``a`` columns are the
artificial variables of ``=`` and ``>=`` constraints. Row 0 is the active
objective row.

References:
    - Dantzig, *Linear Programming and Extensions*, 1963.
    - Bertsimas & Tsitsiklis, *Introduction to Linear Optimization*, 1997,
      section 3.5 (two-phase method).
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import numpy as np

from ..exceptions import DimensionMismatchError
from ..optimize.core import GoalType, PointValue
from .core import LinearConstraint, LinearObjectiveFunction, Relationship

NEGATIVE_VAR_COLUMN_LABEL = "x-"


def almost_equal(a: float, b: float, epsilon: float) -> bool:
    return abs(a - b) <= epsilon


def compare(a: float, b: float, epsilon: float) -> int:
    """Three-way comparison treating values within ``epsilon`` as equal."""
    if almost_equal(a, b, epsilon):
        return 0
    return -1 if a < b else 1


class SimplexTableau:
    """
    Tableau of a linear program, built from its objective and constraints.

    Args:
        objective: Objective function.
        constraints: Constraints; each is normalized to a non-negative
            right-hand side on construction.
        goal: Whether to minimize or maximize.
        restrict_to_non_negative: Whether all decision variables are
            constrained to be non-negative.
        epsilon: Tolerance for comparisons against 0 and 1.
    """

    def __init__(
        self,
        objective: LinearObjectiveFunction,
        constraints: Iterable[LinearConstraint],
        goal: GoalType,
        restrict_to_non_negative: bool,
        epsilon: float,
    ):
        self.objective = objective
        self.constraints: List[LinearConstraint] = [c.normalized() for c in constraints]
        for constraint in self.constraints:
            if constraint.coefficients.shape[0] != len(objective):
                raise DimensionMismatchError(constraint.coefficients.shape[0], len(objective))
        self.restrict_to_non_negative = restrict_to_non_negative
        self.epsilon = epsilon

        self.num_decision_variables = len(objective) + (0 if restrict_to_non_negative else 1)
        self.num_slack_variables = self._count(Relationship.LEQ) + self._count(Relationship.GEQ)
        self.num_artificial_variables = self._count(Relationship.EQ) + self._count(Relationship.GEQ)

        self.matrix = self._create_matrix(goal is GoalType.MAXIMIZE)
        self.column_labels = self._create_labels()

    def _count(self, relationship: Relationship) -> int:
        return sum(1 for c in self.constraints if c.relationship is relationship)

    def _create_labels(self) -> List[str]:
        labels = ["W"] if self.num_objective_functions == 2 else []
        labels.append("Z")
        labels.extend(f"x{i}" for i in range(self.original_num_decision_variables))
        if not self.restrict_to_non_negative:
            labels.append(NEGATIVE_VAR_COLUMN_LABEL)
        labels.extend(f"s{i}" for i in range(self.num_slack_variables))
        labels.extend(f"a{i}" for i in range(self.num_artificial_variables))
        labels.append("RHS")
        return labels

    def _create_matrix(self, maximize: bool) -> np.ndarray:
        num_obj = self.num_objective_functions
        n = self.original_num_decision_variables
        width = (
            num_obj
            + self.num_decision_variables
            + self.num_slack_variables
            + self.num_artificial_variables
            + 1
        )
        height = num_obj + len(self.constraints)
        matrix = np.zeros((height, width))

        if num_obj == 2:
            matrix[0, 0] = -1.0
        z = num_obj - 1
        matrix[z, z] = 1.0 if maximize else -1.0
        coefficients = -self.objective.coefficients if maximize else self.objective.coefficients
        matrix[z, num_obj:num_obj + n] = coefficients
        constant = self.objective.constant_term
        matrix[z, -1] = constant if maximize else -constant
        if not self.restrict_to_non_negative:
            matrix[z, self.slack_variable_offset - 1] = -coefficients.sum()

        slack = 0
        artificial = 0
        for i, constraint in enumerate(self.constraints):
            row = num_obj + i
            matrix[row, num_obj:num_obj + n] = constraint.coefficients
            if not self.restrict_to_non_negative:
                matrix[row, self.slack_variable_offset - 1] = -constraint.coefficients.sum()
            matrix[row, -1] = constraint.value

            if constraint.relationship is Relationship.LEQ:
                matrix[row, self.slack_variable_offset + slack] = 1.0
                slack += 1
            elif constraint.relationship is Relationship.GEQ:
                matrix[row, self.slack_variable_offset + slack] = -1.0
                slack += 1

            if constraint.relationship in (Relationship.EQ, Relationship.GEQ):
                col = self.artificial_variable_offset + artificial
                matrix[0, col] = 1.0
                matrix[row, col] = 1.0
                matrix[0] -= matrix[row]
                artificial += 1
        return matrix

    @property
    def num_objective_functions(self) -> int:
        return 2 if self.num_artificial_variables > 0 else 1

    @property
    def original_num_decision_variables(self) -> int:
        return len(self.objective)

    @property
    def width(self) -> int:
        return self.matrix.shape[1]

    @property
    def height(self) -> int:
        return self.matrix.shape[0]

    @property
    def slack_variable_offset(self) -> int:
        return self.num_objective_functions + self.num_decision_variables

    @property
    def artificial_variable_offset(self) -> int:
        return self.slack_variable_offset + self.num_slack_variables

    @property
    def rhs_offset(self) -> int:
        return self.width - 1

    def entry(self, row: int, col: int) -> float:
        return float(self.matrix[row, col])

    def basic_row(self, col: int) -> Optional[int]:
        """
        Row in which column ``col`` holds its single 1, or ``None`` if the
        column is not a unit column.
        """
        row = None
        for i in range(self.height):
            value = self.matrix[i, col]
            if almost_equal(value, 1.0, self.epsilon) and row is None:
                row = i
            elif not almost_equal(value, 0.0, self.epsilon):
                return None
        return row

    def is_optimal(self) -> bool:
        """True when no entry of the objective row is negative."""
        for col in range(self.num_objective_functions, self.width - 1):
            if compare(self.matrix[0, col], 0.0, self.epsilon) < 0:
                return False
        return True

    def pivot(self, row: int, col: int) -> None:
        """Make ``col`` a unit column with its 1 in ``row``."""
        self.matrix[row] /= self.matrix[row, col]
        for i in range(self.height):
            if i != row:
                multiplier = self.matrix[i, col]
                self.matrix[i] -= multiplier * self.matrix[row]

    def drop_phase1_objective(self) -> None:
        """
        Remove the phase-1 row together with the ``W`` column, every
        positive-cost non-artificial column and every non-basic artificial
        column. The tableau is rebuilt at the reduced shape.
        """
        if self.num_objective_functions == 1:
            return

        drop = [0]
        for col in range(self.num_objective_functions, self.artificial_variable_offset):
            if compare(self.matrix[0, col], 0.0, self.epsilon) > 0:
                drop.append(col)
        for i in range(self.num_artificial_variables):
            col = self.artificial_variable_offset + i
            if self.basic_row(col) is None:
                drop.append(col)

        keep = [j for j in range(self.width) if j not in drop]
        self.matrix = self.matrix[1:, keep].copy()
        self.column_labels = [self.column_labels[j] for j in keep]
        self.num_artificial_variables = 0

    def solution(self) -> PointValue:
        """
        Read the current basic solution.

        When two decision variables share a basic row the first one takes the
        row's value and the others are 0.
        """
        most_negative = 0.0
        if NEGATIVE_VAR_COLUMN_LABEL in self.column_labels:
            negative_row = self.basic_row(self.column_labels.index(NEGATIVE_VAR_COLUMN_LABEL))
            if negative_row is not None:
                most_negative = self.entry(negative_row, self.rhs_offset)

        claimed = set()
        coefficients = np.zeros(self.original_num_decision_variables)
        for i in range(coefficients.shape[0]):
            label = f"x{i}"
            if label not in self.column_labels:
                continue
            row = self.basic_row(self.column_labels.index(label))
            if row is not None and row in claimed:
                continue
            value = 0.0
            if row is not None:
                claimed.add(row)
                value = self.entry(row, self.rhs_offset)
            coefficients[i] = value - (0.0 if self.restrict_to_non_negative else most_negative)
        return PointValue(coefficients, self.objective.value(coefficients))

    def __repr__(self) -> str:
        return (
            f"SimplexTableau(shape={self.matrix.shape}, "
            f"columns={' '.join(self.column_labels)})"
        )


__all__ = ["SimplexTableau", "NEGATIVE_VAR_COLUMN_LABEL", "almost_equal", "compare"]
