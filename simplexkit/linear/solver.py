"""
Two-phase simplex solver for linear programs.

Phase 1 drives the artificial variables out of the basis by minimizing their
sum; a non-zero optimum means the constraints are infeasible. Phase 2 then
optimizes the real objective on the reduced tableau.

Example:
    >>> from simplexkit.linear import LinearConstraint, LinearObjectiveFunction, Relationship, SimplexSolver
    >>> from simplexkit.optimize import GoalType
    >>> f = LinearObjectiveFunction([3.0, 2.0])
    >>> constraints = [
    ...     LinearConstraint([1.0, 1.0], Relationship.LEQ, 4.0),
    ...     LinearConstraint([1.0, 0.0], Relationship.LEQ, 2.0),
    ... ]
    >>> SimplexSolver().optimize(f, constraints, GoalType.MAXIMIZE, True)
    PointValue(point=[2.0, 2.0], value=10.0)
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..exceptions import NoFeasibleSolutionError, TooManyIterationsError, UnboundedSolutionError
from ..logging import get_logger
from ..optimize.core import GoalType, PointValue
from ..diagnostics import assert_pivoted, is_debug_enabled
from .core import LinearConstraint, LinearObjectiveFunction
from .tableau import SimplexTableau, almost_equal, compare

logger = get_logger(__name__)

DEFAULT_EPSILON = 1e-6
DEFAULT_MAX_ITERATIONS = 100


class SimplexSolver:
    """
    Solve linear programs with the two-phase tableau simplex method.

    Args:
        epsilon: Tolerance used for every comparison against 0 or 1.
        max_iterations: Maximum number of pivots per ``optimize`` call,
            summed over both phases.
    """

    def __init__(self, epsilon: float = DEFAULT_EPSILON, max_iterations: int = DEFAULT_MAX_ITERATIONS):
        self.epsilon = epsilon
        self.max_iterations = max_iterations
        self._iterations = 0

    @property
    def iterations(self) -> int:
        return self._iterations

    def optimize(
        self,
        objective: LinearObjectiveFunction,
        constraints: Iterable[LinearConstraint],
        goal: GoalType,
        restrict_to_non_negative: bool,
    ) -> PointValue:
        """
        Return the optimal point and objective value.

        Raises:
            NoFeasibleSolutionError: If phase 1 ends with a non-zero objective.
            UnboundedSolutionError: If the ratio test finds no pivot row.
            TooManyIterationsError: If more than ``max_iterations`` pivots are needed.
        """
        self._iterations = 0
        tableau = SimplexTableau(objective, constraints, goal, restrict_to_non_negative, self.epsilon)
        logger.debug("built %r", tableau)

        self._solve_phase1(tableau)
        tableau.drop_phase1_objective()
        logger.debug("phase 2 on %r", tableau)

        while not tableau.is_optimal():
            self._do_iteration(tableau)

        solution = tableau.solution()
        logger.info("simplex solved in %d iterations, value=%g", self._iterations, solution.value)
        return solution

    def _solve_phase1(self, tableau: SimplexTableau) -> None:
        if tableau.num_artificial_variables == 0:
            return
        logger.debug("phase 1 with %d artificial variables", tableau.num_artificial_variables)
        while not tableau.is_optimal():
            self._do_iteration(tableau)
        if not almost_equal(tableau.entry(0, tableau.rhs_offset), 0.0, self.epsilon):
            raise NoFeasibleSolutionError()

    def _do_iteration(self, tableau: SimplexTableau) -> None:
        self._iterations += 1
        if self._iterations > self.max_iterations:
            raise TooManyIterationsError(self.max_iterations)

        col = self._pivot_column(tableau)
        row = self._pivot_row(tableau, col)
        if row is None:
            raise UnboundedSolutionError()
        if is_debug_enabled():
            logger.debug(
                "pivot %d: entering %s at row %d",
                self._iterations,
                tableau.column_labels[col],
                row,
            )
        tableau.pivot(row, col)
        if is_debug_enabled():
            assert_pivoted(tableau, row, col)

    def _pivot_column(self, tableau: SimplexTableau) -> int:
        min_value = 0.0
        min_pos = None
        for col in range(tableau.num_objective_functions, tableau.width - 1):
            value = tableau.entry(0, col)
            if compare(value, min_value, self.epsilon) < 0:
                min_value = value
                min_pos = col
        if min_pos is None:
            raise RuntimeError("no pivot column in an optimal tableau")
        return min_pos

    def _pivot_row(self, tableau: SimplexTableau, col: int) -> Optional[int]:
        """Minimum-ratio test; ties prefer a row that frees an artificial variable."""
        ties: List[int] = []
        min_ratio = float("inf")
        for row in range(tableau.num_objective_functions, tableau.height):
            entry = tableau.entry(row, col)
            if compare(entry, 0.0, self.epsilon) <= 0:
                continue
            ratio = tableau.entry(row, tableau.rhs_offset) / entry
            if almost_equal(ratio, min_ratio, self.epsilon):
                ties.append(row)
            elif ratio < min_ratio:
                min_ratio = ratio
                ties = [row]

        if not ties:
            return None
        if len(ties) > 1:
            for row in ties:
                for i in range(tableau.num_artificial_variables):
                    art = tableau.artificial_variable_offset + i
                    if almost_equal(tableau.entry(row, art), 1.0, self.epsilon) and tableau.basic_row(art) == row:
                        return row
        return ties[0]

    def __repr__(self) -> str:
        return f"SimplexSolver(epsilon={self.epsilon}, max_iterations={self.max_iterations})"


__all__ = ["SimplexSolver", "DEFAULT_EPSILON", "DEFAULT_MAX_ITERATIONS"]
