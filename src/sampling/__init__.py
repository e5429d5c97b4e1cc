"""
Random Variate Generator

Внедряемый источник равномерных величин и точный генератор
Gamma(shape, rate), общий для Gamma и производных семейств.
"""

from src.sampling.gamma_sampler import SQUEEZE_COEFF, sample_gamma
from src.sampling.uniform_source import (
    UniformSource,
    open_unit_uniform,
    standard_normal,
)

__all__ = [
    "UniformSource",
    "open_unit_uniform",
    "standard_normal",
    "SQUEEZE_COEFF",
    "sample_gamma",
]
