"""
Example: Linear programming with simplexkit

This example demonstrates the two-phase tableau simplex solver through both
the object API and the matrix-form :func:`simplex` entry point, including
infeasible, unbounded and sign-unrestricted problems.
"""

import numpy as np

from simplexkit.exceptions import NoFeasibleSolutionError
from simplexkit.linear import (
    LinearConstraint,
    LinearObjectiveFunction,
    Relationship,
    SimplexSolver,
    Status,
    linprog_wrapper,
    simplex,
)
from simplexkit.linear.lp import SCIPY_AVAILABLE
from simplexkit.optimize import GoalType


def example_resource_allocation():
    """Example: Maximize profit under resource limits."""
    print("=" * 60)
    print("Example 1: Resource Allocation (matrix form)")
    print("=" * 60)

    # Maximize profit: 3x + 5y
    # Subject to: x + 2y <= 4, 3x + 2y <= 6, x >= 0, y >= 0
    c = np.array([3.0, 5.0])
    G = np.array([[1.0, 2.0], [3.0, 2.0]])
    h = np.array([4.0, 6.0])

    result = simplex(c, g_mat=G, h_vec=h, goal=GoalType.MAXIMIZE)
    print(f"Status: {result.status}")
    if result.status == Status.OPTIMAL:
        print(f"Optimal solution: x = {result.x}")
        print(f"Optimal value: {result.fun}")
        print(f"Slack: {result.slack}")
        print(f"Iterations: {result.nit}")
    print()


def example_object_api():
    """Example: Diet problem with >= and = constraints."""
    print("=" * 60)
    print("Example 2: Diet Problem (object API, two phases)")
    print("=" * 60)

    # Minimize cost 2a + 3b + 4c with nutrient floors and a fixed total.
    cost = LinearObjectiveFunction([2.0, 3.0, 4.0])
    constraints = [
        LinearConstraint([3.0, 2.0, 1.0], Relationship.GEQ, 10.0),
        LinearConstraint([1.0, 2.0, 3.0], Relationship.GEQ, 8.0),
        LinearConstraint([1.0, 1.0, 1.0], Relationship.EQ, 5.0),
    ]
    solver = SimplexSolver()
    optimum = solver.optimize(cost, constraints, GoalType.MINIMIZE, True)
    print(f"Optimal solution: {optimum.point}")
    print(f"Optimal cost: {optimum.value}")
    print(f"Pivots: {solver.iterations}")
    print()


def example_failures():
    """Example: Infeasible and unbounded problems."""
    print("=" * 60)
    print("Example 3: Infeasible and Unbounded Problems")
    print("=" * 60)

    # x <= 1 and x >= 2 cannot both hold.
    infeasible = simplex(np.array([1.0]), g_mat=np.array([[1.0], [-1.0]]), h_vec=np.array([1.0, -2.0]))
    print(f"Infeasible problem status: {infeasible.status}")

    # Maximize x subject to x - y <= 1 grows without bound along y.
    unbounded = simplex(
        np.array([1.0, 0.0]),
        g_mat=np.array([[1.0, -1.0]]),
        h_vec=np.array([1.0]),
        goal=GoalType.MAXIMIZE,
    )
    print(f"Unbounded problem status: {unbounded.status}")

    try:
        SimplexSolver().optimize(
            LinearObjectiveFunction([1.0]),
            [LinearConstraint([1.0], Relationship.EQ, -1.0)],
            GoalType.MINIMIZE,
            True,
        )
    except NoFeasibleSolutionError as exc:
        print(f"Object API raised: {exc}")
    print()


def example_unrestricted():
    """Example: Variables allowed to take negative values."""
    print("=" * 60)
    print("Example 4: Sign-Unrestricted Variables")
    print("=" * 60)

    # Minimize x subject to x >= -3 with x free.
    result = simplex(np.array([1.0]), g_mat=np.array([[-1.0]]), h_vec=np.array([3.0]), non_negative=False)
    print(f"Status: {result.status}")
    print(f"Solution: x = {result.x}, objective = {result.fun}")
    print()


def example_cross_check():
    """Example: Compare against SciPy's HiGHS backend."""
    print("=" * 60)
    print("Example 5: Cross-Check with SciPy")
    print("=" * 60)

    c = np.array([-1.0, -2.0, -1.5])
    A = np.array([[1.0, 1.0, 1.0]])
    b = np.array([4.0])
    G = np.array([[1.0, 3.0, 2.0], [2.0, 1.0, 1.0]])
    h = np.array([9.0, 6.0])

    ours = simplex(c, a_mat=A, b_vec=b, g_mat=G, h_vec=h)
    print(f"simplexkit: status={ours.status}, value={ours.fun}")
    if SCIPY_AVAILABLE:
        ref = linprog_wrapper(c, a_mat=A, b_vec=b, g_mat=G, h_vec=h)
        print(f"HiGHS:      status={ref.status}, value={ref.fun}")
    else:
        print("SciPy not installed; skipping HiGHS comparison")
    print()


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("simplexkit - Linear Programming Examples")
    print("=" * 60 + "\n")

    example_resource_allocation()
    example_object_api()
    example_failures()
    example_unrestricted()
    example_cross_check()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)
