"""Benchmark the tableau simplex solver on random bounded LPs."""

import time
from typing import Dict

import numpy as np

from simplexkit.linear import Status, simplex


def benchmark_simplex(n_vars: int, n_constraints: int, seed: int = 0) -> Dict[str, float]:
    """Benchmark ``minimize -sum(x)`` subject to ``G x <= 1`` with positive ``G``.

    Args:
        n_vars: Number of decision variables.
        n_constraints: Number of inequality constraints.
        seed: Seed of the problem generator.

    Returns:
        Dictionary with timing results.
    """
    rng = np.random.default_rng(seed)
    c = -np.ones(n_vars)
    G = rng.uniform(0.1, 1.0, size=(n_constraints, n_vars))
    h = np.ones(n_constraints)

    # Warmup
    simplex(c, g_mat=G, h_vec=h, max_iterations=10_000)

    start = time.perf_counter()
    result = simplex(c, g_mat=G, h_vec=h, max_iterations=10_000)
    end = time.perf_counter()

    return {
        "n_vars": n_vars,
        "n_constraints": n_constraints,
        "total_time_sec": end - start,
        "pivots": result.nit,
        "optimal": result.status is Status.OPTIMAL,
    }


if __name__ == "__main__":
    print("Benchmarking tableau simplex...")

    for n in (10, 40, 80):
        results = benchmark_simplex(n_vars=n, n_constraints=n)
        print(f"{n} x {n}:")
        print(f"  Time: {results['total_time_sec']*1e3:.2f} ms")
        print(f"  Pivots: {results['pivots']}")
