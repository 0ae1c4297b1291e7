"""Tests for debug mode and the invariant checks it enables."""

import logging
from io import StringIO

import numpy as np
import pytest

from simplexkit.exceptions import TooManyIterationsError
from simplexkit.logging import configure_logging, get_logger
from simplexkit.optimize import GoalType, NelderMead, PointValue, PointValueComparator
from simplexkit.diagnostics import (
    assert_pivoted,
    assert_sorted,
    debug_context,
    is_debug_enabled,
    is_sorted,
    set_debug_enabled,
)
from simplexkit.linear import (
    LinearConstraint,
    LinearObjectiveFunction,
    Relationship,
    SimplexSolver,
    SimplexTableau,
)


def test_debug_mode_toggle_and_context() -> None:
    """Test debug mode toggling and context manager."""
    set_debug_enabled(False)
    assert not is_debug_enabled()

    with debug_context(True):
        assert is_debug_enabled()

    assert not is_debug_enabled()

    set_debug_enabled(True)
    assert is_debug_enabled()

    with debug_context(False):
        assert not is_debug_enabled()

    assert is_debug_enabled()


def test_debug_context_nested() -> None:
    """Test nested debug contexts."""
    set_debug_enabled(False)

    with debug_context(True):
        assert is_debug_enabled()

        with debug_context(False):
            assert not is_debug_enabled()

        assert is_debug_enabled()

    assert not is_debug_enabled()


def test_debug_context_restores_on_error() -> None:
    set_debug_enabled(False)
    with pytest.raises(RuntimeError):
        with debug_context(True):
            raise RuntimeError("boom")
    assert not is_debug_enabled()


def test_assert_sorted_names_first_misordered_vertex() -> None:
    comparator = PointValueComparator(GoalType.MINIMIZE)
    simplex = [PointValue([0.0], 1.0), PointValue([1.0], 3.0), PointValue([2.0], 2.0)]
    assert not is_sorted(simplex, comparator)
    with pytest.raises(ValueError, match="out of order at vertex 1"):
        assert_sorted(simplex, comparator)

    simplex.sort(key=lambda v: v.value)
    assert is_sorted(simplex, comparator)
    assert_sorted(simplex, comparator)


def test_assert_sorted_respects_goal() -> None:
    simplex = [PointValue([0.0], 3.0), PointValue([1.0], 1.0)]
    assert is_sorted(simplex, PointValueComparator(GoalType.MAXIMIZE))
    assert not is_sorted(simplex, PointValueComparator(GoalType.MINIMIZE))


def test_assert_pivoted_checks_unit_column() -> None:
    tableau = SimplexTableau(
        LinearObjectiveFunction([3.0, 2.0]),
        [
            LinearConstraint([1.0, 1.0], Relationship.LEQ, 4.0),
            LinearConstraint([1.0, 0.0], Relationship.LEQ, 2.0),
        ],
        GoalType.MAXIMIZE,
        True,
        1e-6,
    )
    x0 = tableau.column_labels.index("x0")
    s0 = tableau.column_labels.index("s0")
    assert_pivoted(tableau, 1, s0)
    with pytest.raises(ValueError, match="x0"):
        assert_pivoted(tableau, 2, x0)

    tableau.pivot(2, x0)
    assert_pivoted(tableau, 2, x0)


def test_debug_mode_logs_pivots() -> None:
    get_logger("simplexkit.linear.solver")
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        constraints = [
            LinearConstraint([1.0, 1.0], Relationship.LEQ, 4.0),
            LinearConstraint([1.0, 0.0], Relationship.GEQ, 1.0),
        ]
        with debug_context(True):
            optimum = SimplexSolver().optimize(
                LinearObjectiveFunction([3.0, 2.0]), constraints, GoalType.MAXIMIZE, True
            )
        assert optimum.value == pytest.approx(12.0)
        assert "pivot 1: entering" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)


def test_debug_mode_logs_iterations() -> None:
    get_logger("simplexkit.optimize.direct_search")
    stream = StringIO()
    try:
        configure_logging(level=logging.DEBUG, stream=stream)
        optimizer = NelderMead()
        optimizer.max_iterations = 3
        with debug_context(True):
            with pytest.raises(TooManyIterationsError):
                optimizer.optimize(lambda x: float(x @ x), GoalType.MINIMIZE, np.array([3.0, 3.0]))
        assert "iteration 1:" in stream.getvalue()
    finally:
        configure_logging(level=logging.WARNING)
