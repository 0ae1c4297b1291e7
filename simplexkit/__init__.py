"""simplexkit - derivative-free direct search and tableau simplex optimization."""

__version__ = "0.1.0"

# Errors
from .exceptions import (
    DegenerateSimplexError,
    DimensionMismatchError,
    MaxCountExceededError,
    NoConvergenceError,
    NoFeasibleSolutionError,
    OptimizationError,
    TooManyEvaluationsError,
    TooManyIterationsError,
    UnboundedSolutionError,
)

# Linear programming
from .linear import (
    LinearConstraint,
    LinearObjectiveFunction,
    LPResult,
    Relationship,
    SimplexSolver,
    SimplexTableau,
    Status,
    linprog_wrapper,
    simplex,
)

# Logging and debug mode
from .logging import configure_logging, get_logger, set_log_level

# Direct search and Powell
from .optimize import (
    BracketFinder,
    BrentOptimizer,
    GoalType,
    MultiDirectional,
    MultiStartOptimizer,
    MultiStartUnivariateOptimizer,
    NelderMead,
    OptimizeResult,
    PointValue,
    PointValueComparator,
    PowellOptimizer,
    Problem,
    SimpleRealPointChecker,
    SimpleScalarValueChecker,
    StartConfiguration,
    UniformRandomVectorGenerator,
    optimize,
)
from .diagnostics import debug_context, is_debug_enabled, set_debug_enabled

__all__ = [
    "__version__",
    # Errors
    "DegenerateSimplexError",
    "DimensionMismatchError",
    "MaxCountExceededError",
    "NoConvergenceError",
    "NoFeasibleSolutionError",
    "OptimizationError",
    "TooManyEvaluationsError",
    "TooManyIterationsError",
    "UnboundedSolutionError",
    # Direct search and Powell
    "BracketFinder",
    "BrentOptimizer",
    "GoalType",
    "MultiDirectional",
    "MultiStartOptimizer",
    "MultiStartUnivariateOptimizer",
    "NelderMead",
    "OptimizeResult",
    "PointValue",
    "PointValueComparator",
    "PowellOptimizer",
    "Problem",
    "SimpleRealPointChecker",
    "SimpleScalarValueChecker",
    "StartConfiguration",
    "UniformRandomVectorGenerator",
    "optimize",
    # Linear programming
    "LinearConstraint",
    "LinearObjectiveFunction",
    "LPResult",
    "Relationship",
    "SimplexSolver",
    "SimplexTableau",
    "Status",
    "linprog_wrapper",
    "simplex",
    # Logging and debug mode
    "configure_logging",
    "get_logger",
    "set_log_level",
    "debug_context",
    "is_debug_enabled",
    "set_debug_enabled",
]
