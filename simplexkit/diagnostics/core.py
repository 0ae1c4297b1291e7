"""Invariant checks for simplices and LP tableaux, run while debug mode is on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ..optimize.core import PointValue, PointValueComparator
    from ..linear.tableau import SimplexTableau


def is_sorted(simplex: Sequence[PointValue], comparator: PointValueComparator) -> bool:
    """Return True if every vertex ranks no worse than its successor."""
    return all(comparator(first, second) <= 0 for first, second in zip(simplex, simplex[1:]))


def assert_sorted(simplex: Sequence[PointValue], comparator: PointValueComparator) -> None:
    """
    Assert that a simplex is ordered best first.

    Raises:
        ValueError: Naming the first pair of vertices that is out of order.
    """
    for i, (first, second) in enumerate(zip(simplex, simplex[1:])):
        if comparator(first, second) > 0:
            raise ValueError(
                f"simplex out of order at vertex {i}: "
                f"{first.value!r} ranked before {second.value!r}"
            )


def assert_pivoted(tableau: SimplexTableau, row: int, col: int) -> None:
    """
    Assert that ``col`` is a unit column with its 1 in ``row``.

    Raises:
        ValueError: If the column is not basic in ``row``.
    """
    basic = tableau.basic_row(col)
    if basic != row:
        raise ValueError(
            f"column {tableau.column_labels[col]} is basic in row {basic}, expected row {row}"
        )


__all__ = ["is_sorted", "assert_sorted", "assert_pivoted"]
