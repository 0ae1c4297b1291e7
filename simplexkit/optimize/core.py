"""Core types shared across the direct-search, Powell and linear optimizers."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass, field
from enum import Enum
from functools import cmp_to_key
from typing import Callable, List, Optional, Sequence

import numpy as np

Array = np.ndarray
Objective = Callable[[Array], float]

EPSILON = float(np.finfo(float).eps)
SAFE_MIN = float(np.finfo(float).tiny)
DEFAULT_MAX_COUNT = sys.maxsize


class GoalType(Enum):
    """Direction of optimization."""

    MINIMIZE = "minimize"
    MAXIMIZE = "maximize"


@dataclass(frozen=True, eq=False)
class PointValue:
    """
    A point in parameter space together with the objective value there.

    The point is stored as a read-only float64 copy. A value of NaN marks a
    point that has not been evaluated yet.
    """

    point: Array
    value: float = math.nan

    def __post_init__(self) -> None:
        arr = np.array(self.point, dtype=float).reshape(-1)
        arr.setflags(write=False)
        object.__setattr__(self, "point", arr)
        object.__setattr__(self, "value", float(self.value))

    @property
    def is_evaluated(self) -> bool:
        return not math.isnan(self.value)

    def __len__(self) -> int:
        return self.point.shape[0]

    def __repr__(self) -> str:
        return f"PointValue(point={self.point.tolist()!r}, value={self.value!r})"


class PointValueComparator:
    """
    Goal-aware three-way comparison of :class:`PointValue` objects.

    Negative means the first argument is better. Missing points (``None``) and
    unevaluated points (NaN value) rank after every evaluated point, so they
    are never chosen as best.
    """

    def __init__(self, goal: GoalType):
        self.goal = goal

    def __call__(self, first: Optional[PointValue], second: Optional[PointValue]) -> int:
        first_missing = first is None or math.isnan(first.value)
        second_missing = second is None or math.isnan(second.value)
        if first_missing:
            return 0 if second_missing else 1
        if second_missing:
            return -1
        v1 = first.value
        v2 = second.value
        if self.goal is GoalType.MAXIMIZE:
            v1, v2 = v2, v1
        return (v1 > v2) - (v1 < v2)

    def sort(self, items: List[Optional[PointValue]]) -> None:
        """Sort ``items`` in place from best to worst."""
        items.sort(key=cmp_to_key(self))

    def sorted(self, items: Sequence[Optional[PointValue]]) -> List[Optional[PointValue]]:
        return sorted(items, key=cmp_to_key(self))


@dataclass(frozen=True)
class Problem:
    """Container describing a scalar optimization problem."""

    fun: Objective
    dim: Optional[int] = None


@dataclass
class OptimizeResult:
    """Result object returned by the functional optimizer wrappers."""

    x: Array
    fun: float
    nit: int
    nfev: int
    goal: GoalType
    message: str
    history: List[Array] = field(default_factory=list)


__all__ = [
    "Array",
    "Objective",
    "EPSILON",
    "SAFE_MIN",
    "DEFAULT_MAX_COUNT",
    "GoalType",
    "PointValue",
    "PointValueComparator",
    "Problem",
    "OptimizeResult",
]
