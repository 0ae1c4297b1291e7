"""
Example: Derivative-free optimization with simplexkit

This example walks through the direct-search optimizers: Nelder-Mead and
multi-directional simplex search, Powell's conjugate direction method, Brent's
univariate method with bracketing, multi-start restarts and the functional
``optimize`` entry point.
"""

import numpy as np

from simplexkit.optimize import (
    BracketFinder,
    BrentOptimizer,
    GoalType,
    MultiDirectional,
    MultiStartOptimizer,
    NelderMead,
    PowellOptimizer,
    Problem,
    SimpleRealPointChecker,
    SimpleScalarValueChecker,
    UniformRandomVectorGenerator,
    optimize,
)


def rosen(x: np.ndarray) -> float:
    return 100.0 * (x[1] - x[0] ** 2) ** 2 + (1.0 - x[0]) ** 2


def bowl(x: np.ndarray) -> float:
    return float((x[0] - 1.0) ** 2 + 4.0 * (x[1] + 0.5) ** 2)


def example_nelder_mead():
    """Example: Nelder-Mead on the Rosenbrock valley."""
    print("=" * 60)
    print("Example 1: Nelder-Mead - Rosenbrock Function")
    print("=" * 60)

    optimizer = NelderMead(checker=SimpleScalarValueChecker(-1.0, 1e-10))
    optimizer.set_start_configuration([0.2, 0.2])
    best = optimizer.optimize(rosen, GoalType.MINIMIZE, [-1.2, 1.0])
    print(f"Optimal point: {best.point}")
    print(f"Optimal value: {best.value:.3e}")
    print(f"Iterations: {optimizer.iterations}, evaluations: {optimizer.evaluations}")
    print()


def example_multi_directional():
    """Example: Multi-directional search on a scaled quadratic."""
    print("=" * 60)
    print("Example 2: Multi-Directional Search - Quadratic Bowl")
    print("=" * 60)

    optimizer = MultiDirectional(checker=SimpleRealPointChecker(1e-8, 1e-8))
    best = optimizer.optimize(bowl, GoalType.MINIMIZE, [3.0, 3.0])
    print(f"Optimal point: {best.point}")
    print(f"Optimal value: {best.value:.3e}")
    print(f"Iterations: {optimizer.iterations}, evaluations: {optimizer.evaluations}")
    print()


def example_powell():
    """Example: Powell's method maximizing a concave function."""
    print("=" * 60)
    print("Example 3: Powell's Method - Maximization")
    print("=" * 60)

    def concave(x: np.ndarray) -> float:
        return 5.0 - bowl(x)

    optimizer = PowellOptimizer()
    best = optimizer.optimize(concave, GoalType.MAXIMIZE, [0.0, 0.0])
    print(f"Optimal point: {best.point}")
    print(f"Optimal value: {best.value:.6f}")
    print(f"Iterations: {optimizer.iterations}, evaluations: {optimizer.evaluations}")
    print()


def example_brent():
    """Example: Bracket a minimum and refine it with Brent's method."""
    print("=" * 60)
    print("Example 4: Bracketing and Brent's Method")
    print("=" * 60)

    def f(x: float) -> float:
        return (x - 2.0) ** 2 + np.sin(3.0 * x)

    bracket = BracketFinder()
    bracket.search(f, GoalType.MINIMIZE, 0.0, 1.0)
    print(f"Bracket: ({bracket.lo:.4f}, {bracket.mid:.4f}, {bracket.hi:.4f})")

    brent = BrentOptimizer(relative_accuracy=1e-10, absolute_accuracy=1e-14)
    result = brent.optimize(f, GoalType.MINIMIZE, bracket.lo, bracket.hi, bracket.mid)
    print(f"Minimum at x = {result.x:.8f}, f(x) = {result.value:.8f}")
    print(f"Evaluations: {brent.evaluations}")
    print()


def example_multistart():
    """Example: Escape a local minimum with random restarts."""
    print("=" * 60)
    print("Example 5: Multi-Start Nelder-Mead - Double Well")
    print("=" * 60)

    def double_well(x: np.ndarray) -> float:
        return float((x[0] ** 2 - 1.0) ** 2 + 0.3 * x[0] + x[1] ** 2)

    generator = UniformRandomVectorGenerator([-2.0, -1.0], [2.0, 1.0], rng=np.random.default_rng(7))
    optimizer = MultiStartOptimizer(NelderMead(), starts=6, generator=generator)
    best = optimizer.optimize(double_well, GoalType.MINIMIZE, [1.0, 0.5])
    print(f"Best point: {best.point}")
    print(f"Best value: {best.value:.6f}")
    print(f"Optima found: {[round(o.value, 4) for o in optimizer.optima if o is not None]}")
    print(f"Total evaluations: {optimizer.evaluations}")
    print()


def example_functional():
    """Example: Functional API with iteration history."""
    print("=" * 60)
    print("Example 6: Functional API")
    print("=" * 60)

    problem = Problem(fun=bowl, dim=2)
    for method in ("nelder-mead", "multi-directional", "powell"):
        result = optimize(problem, np.array([3.0, 3.0]), method=method, history=True)
        print(f"{method:>18}: x = {np.round(result.x, 5)}, nfev = {result.nfev}, "
              f"history length = {len(result.history)}")
    print()


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("simplexkit - Direct Search Examples")
    print("=" * 60 + "\n")

    example_nelder_mead()
    example_multi_directional()
    example_powell()
    example_brent()
    example_multistart()
    example_functional()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)
