"""
Core math modules для statcore

Точностные примитивы и канал нарушений области определения.
"""

# Precision
from src.core.math.precision import (
    # Constants
    DEFAULT_F64_ACC,
    F64_EPS,
    F64_MIN_POSITIVE,
    F64_PREC,
    LN_MIN_F64,
    # Comparisons
    almost_eq,
    convergence,
    # Utilities
    safe_exp,
)

# Domain violations
from src.core.math.domain import (
    DistributionDomainViolation,
    require_ge,
    require_gt,
    require_in_range,
)

__all__ = [
    # Precision — Constants
    "DEFAULT_F64_ACC",
    "F64_EPS",
    "F64_MIN_POSITIVE",
    "F64_PREC",
    "LN_MIN_F64",
    # Precision — Comparisons
    "almost_eq",
    "convergence",
    # Precision — Utilities
    "safe_exp",
    # Domain — Exceptions
    "DistributionDomainViolation",
    # Domain — Preconditions
    "require_ge",
    "require_gt",
    "require_in_range",
]
