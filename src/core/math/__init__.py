"""
Core math modules для numcore

Числовые примитивы с двумя взаимозаменяемыми стратегиями вычисления
(сходящиеся методы и модуль math) и единым контрактом.
"""

# Constants
from src.core.math.constants import (
    DEG_TO_RAD,
    EPSILON,
    HALF_PI,
    INF,
    MACHINE_EPSILON,
    NAN,
    NEG_INF,
    PI,
    QUARTER_PI,
    RAD_TO_DEG,
    SERIES_MAX_TERMS,
    TWO_PI,
)

# Errors
from src.core.math.errors import (
    NegativeInputError,
    NumericError,
    OrderingError,
    ZeroDivisorError,
    ZeroInputError,
)

# Epsilon comparisons
from src.core.math.comparisons import (
    absolute,
    equals,
    greater_than,
    is_finite,
    less_than,
    sign,
)

# Evaluation context
from src.core.math.context import (
    AHEAD_OF_TIME,
    RUNTIME,
    EvaluationContext,
    EvaluationMode,
)

# Dispatched operations
from src.core.math.dispatch import (
    cos,
    factorial,
    mod,
    pow,
    sin,
    sqrt,
    tan,
)

# Angles & integers
from src.core.math.angles import degrees_to_radians, radians_to_degrees
from src.core.math.integer import euclidean_gcd

# Facade
from src.core.math.core import NumericCore

__all__ = [
    # Constants
    "DEG_TO_RAD",
    "EPSILON",
    "HALF_PI",
    "INF",
    "MACHINE_EPSILON",
    "NAN",
    "NEG_INF",
    "PI",
    "QUARTER_PI",
    "RAD_TO_DEG",
    "SERIES_MAX_TERMS",
    "TWO_PI",
    # Errors
    "NegativeInputError",
    "NumericError",
    "OrderingError",
    "ZeroDivisorError",
    "ZeroInputError",
    # Comparisons
    "absolute",
    "equals",
    "greater_than",
    "is_finite",
    "less_than",
    "sign",
    # Context
    "AHEAD_OF_TIME",
    "RUNTIME",
    "EvaluationContext",
    "EvaluationMode",
    # Operations
    "cos",
    "factorial",
    "mod",
    "pow",
    "sin",
    "sqrt",
    "tan",
    "degrees_to_radians",
    "radians_to_degrees",
    "euclidean_gcd",
    # Facade
    "NumericCore",
]
