import numpy as np
import pytest

from simplexkit.linear.core import LinearConstraint, LinearObjectiveFunction, Relationship
from simplexkit.linear.tableau import SimplexTableau
from simplexkit.optimize import GoalType


def build(constraints, goal=GoalType.MAXIMIZE, non_negative=True, objective=None):
    objective = objective or LinearObjectiveFunction([3.0, 2.0])
    return SimplexTableau(objective, constraints, goal, non_negative, 1e-6)


def test_layout_without_artificial_variables():
    tableau = build(
        [
            LinearConstraint([1.0, 1.0], Relationship.LEQ, 4.0),
            LinearConstraint([1.0, 0.0], Relationship.LEQ, 2.0),
        ]
    )
    assert tableau.column_labels == ["Z", "x0", "x1", "s0", "s1", "RHS"]
    assert tableau.num_objective_functions == 1
    np.testing.assert_array_equal(
        tableau.matrix,
        [
            [1.0, -3.0, -2.0, 0.0, 0.0, 0.0],
            [0.0, 1.0, 1.0, 1.0, 0.0, 4.0],
            [0.0, 1.0, 0.0, 0.0, 1.0, 2.0],
        ],
    )


def test_layout_with_artificial_and_negative_part():
    tableau = build(
        [
            LinearConstraint([1.0, 1.0], Relationship.GEQ, 1.0),
            LinearConstraint([1.0, -1.0], Relationship.EQ, 0.0),
        ],
        goal=GoalType.MINIMIZE,
        non_negative=False,
    )
    assert tableau.column_labels == ["W", "Z", "x0", "x1", "x-", "s0", "a0", "a1", "RHS"]
    assert tableau.num_artificial_variables == 2
    np.testing.assert_array_equal(
        tableau.matrix,
        [
            [-1.0, 0.0, -2.0, 0.0, 2.0, 1.0, 0.0, 0.0, -1.0],
            [0.0, -1.0, 3.0, 2.0, -5.0, 0.0, 0.0, 0.0, 0.0],
            [0.0, 0.0, 1.0, 1.0, -2.0, -1.0, 1.0, 0.0, 1.0],
            [0.0, 0.0, 1.0, -1.0, 0.0, 0.0, 0.0, 1.0, 0.0],
        ],
    )


def test_constraints_are_normalized():
    tableau = build([LinearConstraint([-1.0, 0.0], Relationship.LEQ, -1.0)])
    assert tableau.constraints[0].relationship is Relationship.GEQ
    assert tableau.num_artificial_variables == 1
    assert tableau.matrix[-1, -1] == 1.0


def test_basic_row_requires_unit_column():
    tableau = build([LinearConstraint([1.0, 1.0], Relationship.LEQ, 4.0)])
    assert tableau.basic_row(tableau.column_labels.index("s0")) == 1
    assert tableau.basic_row(tableau.column_labels.index("x0")) is None


def test_pivot_makes_unit_column():
    tableau = build(
        [
            LinearConstraint([1.0, 1.0], Relationship.LEQ, 4.0),
            LinearConstraint([1.0, 0.0], Relationship.LEQ, 2.0),
        ]
    )
    tableau.pivot(2, 1)
    np.testing.assert_allclose(tableau.matrix[:, 1], [0.0, 0.0, 1.0])
    assert tableau.basic_row(1) == 2
    assert not tableau.is_optimal()


def test_drop_phase1_rebuilds_smaller_tableau():
    tableau = build([LinearConstraint([1.0, 1.0], Relationship.EQ, 2.0)], goal=GoalType.MINIMIZE)
    assert tableau.matrix.shape == (3, 6)
    # drive a0 out of the basis by pivoting x0 in
    tableau.pivot(2, 2)
    tableau.drop_phase1_objective()
    assert tableau.num_objective_functions == 1
    assert "W" not in tableau.column_labels
    assert "a0" not in tableau.column_labels
    assert tableau.matrix.shape[0] == 2
    assert tableau.matrix.shape[1] == len(tableau.column_labels)


def test_drop_phase1_without_artificial_is_noop():
    tableau = build([LinearConstraint([1.0, 1.0], Relationship.LEQ, 4.0)])
    before = tableau.matrix.copy()
    tableau.drop_phase1_objective()
    np.testing.assert_array_equal(tableau.matrix, before)


def test_solution_of_initial_tableau_is_origin():
    tableau = build([LinearConstraint([1.0, 1.0], Relationship.LEQ, 4.0)])
    solution = tableau.solution()
    np.testing.assert_array_equal(solution.point, [0.0, 0.0])
    assert solution.value == pytest.approx(0.0)


def test_constraint_dimension_mismatch():
    from simplexkit.exceptions import DimensionMismatchError

    with pytest.raises(DimensionMismatchError):
        build([LinearConstraint([1.0, 1.0, 1.0], Relationship.LEQ, 4.0)])
