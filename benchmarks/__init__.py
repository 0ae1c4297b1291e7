"""Performance benchmarks for simplexkit.

This package contains microbenchmarks for the direct-search optimizers and
the tableau simplex solver.
"""
