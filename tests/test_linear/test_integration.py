"""End-to-end checks of the tableau solver against SciPy's HiGHS backend."""

import numpy as np
import pytest

from simplexkit.linear import (
    LinearConstraint,
    LinearObjectiveFunction,
    Relationship,
    SimplexSolver,
    Status,
    linprog_wrapper,
)
from simplexkit.optimize import GoalType

pytest.importorskip("scipy")


def _as_matrix_form(constraints):
    """Split constraints into ``A x = b`` and ``G x <= h`` blocks."""
    eq_rows, eq_rhs, ub_rows, ub_rhs = [], [], [], []
    for constraint in constraints:
        if constraint.relationship is Relationship.EQ:
            eq_rows.append(constraint.coefficients)
            eq_rhs.append(constraint.value)
        elif constraint.relationship is Relationship.LEQ:
            ub_rows.append(constraint.coefficients)
            ub_rhs.append(constraint.value)
        else:
            ub_rows.append(-constraint.coefficients)
            ub_rhs.append(-constraint.value)
    a_mat = np.array(eq_rows) if eq_rows else None
    b_vec = np.array(eq_rhs) if eq_rhs else None
    g_mat = np.array(ub_rows) if ub_rows else None
    h_vec = np.array(ub_rhs) if ub_rhs else None
    return a_mat, b_vec, g_mat, h_vec


PROBLEMS = [
    (
        [5.0, 4.0, 3.0],
        [
            ([2.0, 3.0, 1.0], Relationship.LEQ, 5.0),
            ([4.0, 1.0, 2.0], Relationship.LEQ, 11.0),
            ([3.0, 4.0, 2.0], Relationship.LEQ, 8.0),
        ],
        GoalType.MAXIMIZE,
    ),
    (
        [2.0, 3.0, 1.0],
        [
            ([1.0, 1.0, 1.0], Relationship.GEQ, 10.0),
            ([1.0, -1.0, 0.0], Relationship.EQ, 1.0),
        ],
        GoalType.MINIMIZE,
    ),
    (
        [1.0, 2.0],
        [
            ([1.0, 1.0], Relationship.GEQ, 2.0),
            ([1.0, -1.0], Relationship.LEQ, 1.0),
            ([0.0, 1.0], Relationship.LEQ, 3.0),
        ],
        GoalType.MINIMIZE,
    ),
]


@pytest.mark.parametrize("coefficients, rows, goal", PROBLEMS)
def test_tableau_solver_matches_highs(coefficients, rows, goal):
    f = LinearObjectiveFunction(coefficients)
    constraints = [LinearConstraint(c, rel, v) for c, rel, v in rows]
    solution = SimplexSolver().optimize(f, constraints, goal, True)

    a_mat, b_vec, g_mat, h_vec = _as_matrix_form(constraints)
    reference = linprog_wrapper(np.array(coefficients), a_mat, b_vec, g_mat, h_vec, goal=goal)
    assert reference.status is Status.OPTIMAL
    assert solution.value == pytest.approx(reference.fun, rel=1e-7, abs=1e-9)

    for constraint in constraints:
        lhs = float(constraint.coefficients @ solution.point)
        if constraint.relationship is Relationship.EQ:
            assert lhs == pytest.approx(constraint.value, abs=1e-9)
        elif constraint.relationship is Relationship.LEQ:
            assert lhs <= constraint.value + 1e-9
        else:
            assert lhs >= constraint.value - 1e-9
    assert np.all(solution.point >= -1e-9)


def test_mixed_problem_known_optimum():
    f = LinearObjectiveFunction([2.0, 3.0, 1.0])
    constraints = [LinearConstraint(c, rel, v) for c, rel, v in PROBLEMS[1][1]]
    solution = SimplexSolver().optimize(f, constraints, GoalType.MINIMIZE, True)
    np.testing.assert_allclose(solution.point, [1.0, 0.0, 9.0], atol=1e-9)
    assert solution.value == pytest.approx(11.0)
