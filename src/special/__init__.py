"""
Special Function Engine

Гамма-, дигамма-, неполные гамма-, бета- и неполные бета-функции,
к которым сводятся плотности, CDF и моменты всех распределений.
"""

from src.special.beta import beta, beta_reg, ln_beta
from src.special.convergence import (
    DEFAULT_CONVERGENCE,
    DEFAULT_MAX_ITERATIONS,
    ConvergenceConfig,
)
from src.special.gamma import (
    digamma,
    gamma,
    gamma_lower_reg,
    gamma_upper_reg,
    ln_gamma,
    lower_incomplete_gamma,
    upper_incomplete_gamma,
)

__all__ = [
    # Configuration
    "ConvergenceConfig",
    "DEFAULT_CONVERGENCE",
    "DEFAULT_MAX_ITERATIONS",
    # Gamma
    "gamma",
    "ln_gamma",
    "digamma",
    "gamma_lower_reg",
    "gamma_upper_reg",
    "lower_incomplete_gamma",
    "upper_incomplete_gamma",
    # Beta
    "beta",
    "ln_beta",
    "beta_reg",
]
