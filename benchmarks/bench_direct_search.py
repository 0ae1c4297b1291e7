"""Benchmark direct-search optimizers on the Rosenbrock function."""

import time
from typing import Dict

import numpy as np

from simplexkit.optimize import METHODS, GoalType, SimpleScalarValueChecker


def rosen(x: np.ndarray) -> float:
    return float(np.sum(100.0 * (x[1:] - x[:-1] ** 2) ** 2 + (1.0 - x[:-1]) ** 2))


def benchmark_optimizer(method: str, dim: int = 3, repeats: int = 5) -> Dict[str, float]:
    """Benchmark one optimizer.

    Args:
        method: Key of :data:`simplexkit.optimize.METHODS`.
        dim: Problem dimension.
        repeats: Number of timed runs.

    Returns:
        Dictionary with timing and evaluation counts.
    """
    start_point = np.full(dim, -1.0)

    timings = []
    for _ in range(repeats):
        optimizer = METHODS[method]()
        optimizer.convergence_checker = SimpleScalarValueChecker(-1.0, 1e-10)
        optimizer.max_evaluations = 200_000
        start = time.perf_counter()
        best = optimizer.optimize(rosen, GoalType.MINIMIZE, start_point)
        timings.append(time.perf_counter() - start)

    return {
        "dim": dim,
        "mean_time_sec": float(np.mean(timings)),
        "iterations": optimizer.iterations,
        "evaluations": optimizer.evaluations,
        "best_value": best.value,
    }


if __name__ == "__main__":
    print("Benchmarking direct search on Rosenbrock (3-D)...")

    for name in METHODS:
        results = benchmark_optimizer(name)
        print(f"{name}:")
        print(f"  Time: {results['mean_time_sec']*1e3:.2f} ms")
        print(f"  Evaluations: {results['evaluations']}")
        print(f"  Best value: {results['best_value']:.3e}")
