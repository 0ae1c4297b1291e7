import numpy as np
import pytest

from simplexkit.exceptions import (
    NoFeasibleSolutionError,
    TooManyIterationsError,
    UnboundedSolutionError,
)
from simplexkit.linear import (
    LinearConstraint,
    LinearObjectiveFunction,
    Relationship,
    SimplexSolver,
    SimplexTableau,
)
from simplexkit.optimize import GoalType


def test_maximize_two_variables():
    f = LinearObjectiveFunction([3.0, 2.0])
    constraints = [
        LinearConstraint([1.0, 1.0], Relationship.LEQ, 4.0),
        LinearConstraint([1.0, 0.0], Relationship.LEQ, 2.0),
    ]
    solution = SimplexSolver().optimize(f, constraints, GoalType.MAXIMIZE, True)
    np.testing.assert_allclose(solution.point, [2.0, 2.0], atol=1e-9)
    assert solution.value == pytest.approx(10.0)


def test_infeasible_constraints():
    f = LinearObjectiveFunction([1.0])
    constraints = [
        LinearConstraint([1.0], Relationship.GEQ, 5.0),
        LinearConstraint([1.0], Relationship.LEQ, 2.0),
    ]
    with pytest.raises(NoFeasibleSolutionError):
        SimplexSolver().optimize(f, constraints, GoalType.MINIMIZE, True)


def test_unbounded_problem():
    f = LinearObjectiveFunction([1.0, 1.0])
    constraints = [LinearConstraint([1.0, -1.0], Relationship.LEQ, 1.0)]
    with pytest.raises(UnboundedSolutionError):
        SimplexSolver().optimize(f, constraints, GoalType.MAXIMIZE, True)


def test_equality_constraint():
    f = LinearObjectiveFunction([1.0, 1.0])
    constraints = [LinearConstraint([1.0, 2.0], Relationship.EQ, 4.0)]
    solution = SimplexSolver().optimize(f, constraints, GoalType.MINIMIZE, True)
    np.testing.assert_allclose(solution.point, [0.0, 2.0], atol=1e-9)
    assert solution.value == pytest.approx(2.0)


def test_greater_or_equal_constraints():
    f = LinearObjectiveFunction([2.0, 3.0])
    constraints = [
        LinearConstraint([1.0, 1.0], Relationship.GEQ, 4.0),
        LinearConstraint([1.0, 0.0], Relationship.GEQ, 1.0),
    ]
    solution = SimplexSolver().optimize(f, constraints, GoalType.MINIMIZE, True)
    np.testing.assert_allclose(solution.point, [4.0, 0.0], atol=1e-9)
    assert solution.value == pytest.approx(8.0)


def test_negative_right_hand_side_is_normalized():
    # -x - y >= -4 is x + y <= 4
    f = LinearObjectiveFunction([3.0, 2.0])
    constraints = [
        LinearConstraint([-1.0, -1.0], Relationship.GEQ, -4.0),
        LinearConstraint([1.0, 0.0], Relationship.LEQ, 2.0),
    ]
    solution = SimplexSolver().optimize(f, constraints, GoalType.MAXIMIZE, True)
    assert solution.value == pytest.approx(10.0)


def test_unrestricted_variable_can_be_negative():
    f = LinearObjectiveFunction([1.0])
    constraints = [LinearConstraint([1.0], Relationship.GEQ, -5.0)]
    solution = SimplexSolver().optimize(f, constraints, GoalType.MINIMIZE, False)
    np.testing.assert_allclose(solution.point, [-5.0], atol=1e-9)
    assert solution.value == pytest.approx(-5.0)


def test_objective_constant_term():
    f = LinearObjectiveFunction([3.0, 2.0], constant_term=-1.5)
    constraints = [
        LinearConstraint([1.0, 1.0], Relationship.LEQ, 4.0),
        LinearConstraint([1.0, 0.0], Relationship.LEQ, 2.0),
    ]
    solution = SimplexSolver().optimize(f, constraints, GoalType.MAXIMIZE, True)
    assert solution.value == pytest.approx(8.5)


def test_constraints_from_both_sides():
    # x <= y + 1 and x + y <= 5, maximize x
    f = LinearObjectiveFunction([1.0, 0.0])
    constraints = [
        LinearConstraint.from_sides([1.0, 0.0], 0.0, Relationship.LEQ, [0.0, 1.0], 1.0),
        LinearConstraint([1.0, 1.0], Relationship.LEQ, 5.0),
    ]
    solution = SimplexSolver().optimize(f, constraints, GoalType.MAXIMIZE, True)
    np.testing.assert_allclose(solution.point, [3.0, 2.0], atol=1e-9)


def test_iteration_budget():
    f = LinearObjectiveFunction([3.0, 2.0])
    constraints = [
        LinearConstraint([1.0, 1.0], Relationship.LEQ, 4.0),
        LinearConstraint([1.0, 0.0], Relationship.LEQ, 2.0),
    ]
    solver = SimplexSolver(max_iterations=1)
    with pytest.raises(TooManyIterationsError):
        solver.optimize(f, constraints, GoalType.MAXIMIZE, True)
    assert solver.iterations == 2


def test_iterations_reset_between_calls():
    f = LinearObjectiveFunction([3.0, 2.0])
    constraints = [
        LinearConstraint([1.0, 1.0], Relationship.LEQ, 4.0),
        LinearConstraint([1.0, 0.0], Relationship.LEQ, 2.0),
    ]
    solver = SimplexSolver()
    solver.optimize(f, constraints, GoalType.MAXIMIZE, True)
    first = solver.iterations
    solver.optimize(f, constraints, GoalType.MAXIMIZE, True)
    assert solver.iterations == first == 2


def test_ratio_tie_prefers_row_with_basic_artificial():
    # x <= 2 and x + y = 2 tie on the ratio test when x enters; the
    # equality row holds the basic artificial and must be chosen
    f = LinearObjectiveFunction([1.0, 1.0])
    constraints = [
        LinearConstraint([1.0, 0.0], Relationship.LEQ, 2.0),
        LinearConstraint([1.0, 1.0], Relationship.EQ, 2.0),
    ]
    solver = SimplexSolver()
    tableau = SimplexTableau(f, constraints, GoalType.MINIMIZE, True, solver.epsilon)
    col = solver._pivot_column(tableau)
    assert tableau.column_labels[col] == "x0"
    assert solver._pivot_row(tableau, col) == 3


def test_ratio_tie_without_artificial_takes_first_row():
    f = LinearObjectiveFunction([1.0, 0.0])
    constraints = [
        LinearConstraint([1.0, 0.0], Relationship.LEQ, 2.0),
        LinearConstraint([2.0, 1.0], Relationship.LEQ, 4.0),
    ]
    solver = SimplexSolver()
    tableau = SimplexTableau(f, constraints, GoalType.MAXIMIZE, True, solver.epsilon)
    assert solver._pivot_row(tableau, 1) == 1


def test_tie_break_problem_solution():
    f = LinearObjectiveFunction([1.0, 0.0])
    constraints = [
        LinearConstraint([1.0, 0.0], Relationship.LEQ, 2.0),
        LinearConstraint([1.0, 1.0], Relationship.EQ, 2.0),
    ]
    solution = SimplexSolver().optimize(f, constraints, GoalType.MAXIMIZE, True)
    np.testing.assert_allclose(solution.point, [2.0, 0.0], atol=1e-9)
    assert solution.value == pytest.approx(2.0)


def test_fresh_solvers_agree():
    f = LinearObjectiveFunction([5.0, 4.0, 3.0])
    constraints = [
        LinearConstraint([2.0, 3.0, 1.0], Relationship.LEQ, 5.0),
        LinearConstraint([4.0, 1.0, 2.0], Relationship.LEQ, 11.0),
        LinearConstraint([3.0, 4.0, 2.0], Relationship.LEQ, 8.0),
    ]
    first = SimplexSolver().optimize(f, constraints, GoalType.MAXIMIZE, True)
    second = SimplexSolver().optimize(f, constraints, GoalType.MAXIMIZE, True)
    np.testing.assert_array_equal(first.point, second.point)
    np.testing.assert_allclose(first.point, [2.0, 0.0, 1.0], atol=1e-9)
    assert first.value == pytest.approx(13.0)
