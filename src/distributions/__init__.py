"""
Distributions

Интерфейсы возможностей и конкретные семейства непрерывных
распределений, построенные на Special Function Engine и Gamma Sampler.
"""

from src.distributions.base import (
    CumulativeDistribution,
    Density,
    Entropy,
    Median,
    Mode,
    Moments,
    Sampler,
    Skewness,
)
from src.distributions.chi_squared import ChiSquared
from src.distributions.factory import (
    FAMILIES,
    Distribution,
    build_distribution,
    distribution_spec,
)
from src.distributions.fisher_snedecor import FisherSnedecor
from src.distributions.gamma import Gamma

__all__ = [
    # Capabilities
    "Density",
    "CumulativeDistribution",
    "Moments",
    "Entropy",
    "Skewness",
    "Mode",
    "Median",
    "Sampler",
    # Families
    "Gamma",
    "ChiSquared",
    "FisherSnedecor",
    # Factory
    "FAMILIES",
    "Distribution",
    "build_distribution",
    "distribution_spec",
]
