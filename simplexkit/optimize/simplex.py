"""
Start configurations for simplex-based direct search.

A start configuration stores the shape of the initial simplex as the offsets
of vertices ``1..n`` relative to vertex ``0``. It does not depend on any start
point, so the same configuration can be translated to a new start point on
every call to ``optimize``.

Example:
    >>> from simplexkit.optimize.simplex import StartConfiguration
    >>> config = StartConfiguration.from_steps([1.0, 10.0, 2.0])
    >>> [v.point.tolist() for v in config.build([1.0, 1.0, 1.0])]
    [[1.0, 1.0, 1.0], [2.0, 1.0, 1.0], [2.0, 11.0, 1.0], [2.0, 11.0, 3.0]]
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from ..exceptions import DegenerateSimplexError, DimensionMismatchError
from .core import Array, PointValue


class StartConfiguration:
    """Relative vertex offsets describing the initial simplex."""

    def __init__(self, offsets: Array):
        offsets = np.array(offsets, dtype=float)
        if offsets.ndim != 2 or offsets.shape[0] != offsets.shape[1]:
            raise ValueError("Offsets must form an (n, n) array")
        offsets.setflags(write=False)
        self._offsets = offsets

    @classmethod
    def from_steps(cls, steps: Sequence[float]) -> "StartConfiguration":
        """
        Build the simplex from steps along the canonical axes.

        The vertices are the path along the edges of a box from the start
        point to the diagonally opposite corner: vertex ``i`` is offset by
        ``steps[0..i-1]`` in the first ``i`` coordinates. Steps may be negative
        but not zero.
        """
        steps = np.asarray(steps, dtype=float).reshape(-1)
        n = steps.shape[0]
        offsets = np.zeros((n, n))
        for i in range(n):
            for j in range(i + 1):
                if steps[j] == 0.0:
                    raise DegenerateSimplexError(j, j + 1)
            offsets[i, : i + 1] = steps[: i + 1]
        return cls(offsets)

    @classmethod
    def from_reference(cls, reference: Sequence[Sequence[float]]) -> "StartConfiguration":
        """
        Build the simplex from ``n + 1`` explicit vertices of dimension ``n``.

        Only the positions relative to the first vertex are kept.
        """
        vertices = [np.asarray(vertex, dtype=float).reshape(-1) for vertex in reference]
        n = len(vertices) - 1
        if n < 0:
            raise DegenerateSimplexError()
        for i, vertex in enumerate(vertices):
            if vertex.shape[0] != n:
                raise DimensionMismatchError(vertex.shape[0], n)
            for j in range(i):
                if np.array_equal(vertex, vertices[j]):
                    raise DegenerateSimplexError(i, j)
        if n == 0:
            return cls(np.zeros((0, 0)))
        ref0 = vertices[0]
        return cls(np.vstack([vertex - ref0 for vertex in vertices[1:]]))

    @classmethod
    def unit(cls, dimension: int) -> "StartConfiguration":
        """Unit hypercube configuration used when none was supplied."""
        return cls.from_steps(np.ones(dimension))

    @property
    def dimension(self) -> int:
        return self._offsets.shape[0]

    @property
    def offsets(self) -> Array:
        return self._offsets

    def build(self, start_point: Sequence[float]) -> List[PointValue]:
        """Translate the configuration so that vertex 0 sits at ``start_point``."""
        start = np.asarray(start_point, dtype=float).reshape(-1)
        if start.shape[0] != self.dimension:
            raise DimensionMismatchError(start.shape[0], self.dimension)
        vertices = [PointValue(start)]
        vertices.extend(PointValue(start + offset) for offset in self._offsets)
        return vertices

    def __repr__(self) -> str:
        return f"StartConfiguration(offsets={self._offsets.tolist()!r})"


__all__ = ["StartConfiguration"]
