"""Derivative-free multivariate optimization for simplexkit.

Example
-------
>>> import numpy as np
>>> from simplexkit.optimize import GoalType, NelderMead, SimpleScalarValueChecker
>>> def bowl(x):
...     return (x[0] - 1.0) ** 2 + (x[1] - 2.0) ** 2
>>> optimizer = NelderMead(checker=SimpleScalarValueChecker(1e-10, 1e-14))
>>> best = optimizer.optimize(bowl, GoalType.MINIMIZE, np.zeros(2))
>>> np.round(best.point, 4).tolist()
[1.0, 2.0]
"""

from .base import BaseOptimizer
from .convergence import (
    ConvergenceChecker,
    SimpleRealPointChecker,
    SimpleScalarValueChecker,
)
from .core import (
    DEFAULT_MAX_COUNT,
    EPSILON,
    SAFE_MIN,
    GoalType,
    OptimizeResult,
    PointValue,
    PointValueComparator,
    Problem,
)
from .direct_search import DirectSearchOptimizer
from .functional import METHODS, optimize
from .line_search import LineSearch
from .multi_directional import MultiDirectional
from .multistart import MultiStartOptimizer, MultiStartUnivariateOptimizer, UniformRandomVectorGenerator
from .nelder_mead import NelderMead
from .powell import PowellOptimizer
from .simplex import StartConfiguration
from .univariate import BracketFinder, BrentOptimizer, UnivariatePointValue

__all__ = [
    "BaseOptimizer",
    "BracketFinder",
    "BrentOptimizer",
    "ConvergenceChecker",
    "DEFAULT_MAX_COUNT",
    "DirectSearchOptimizer",
    "EPSILON",
    "GoalType",
    "LineSearch",
    "METHODS",
    "MultiDirectional",
    "MultiStartOptimizer",
    "MultiStartUnivariateOptimizer",
    "NelderMead",
    "OptimizeResult",
    "PointValue",
    "PointValueComparator",
    "PowellOptimizer",
    "Problem",
    "SAFE_MIN",
    "SimpleRealPointChecker",
    "SimpleScalarValueChecker",
    "StartConfiguration",
    "UniformRandomVectorGenerator",
    "UnivariatePointValue",
    "optimize",
]
