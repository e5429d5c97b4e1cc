"""
ChiSquared — хи-квадрат распределение χ²(k)

χ²(k) = Gamma(shape = k/2, rate = 1/2).

Распределение владеет внутренним экземпляром Gamma, построенным при
конструировании (композиция, не наследование), и делегирует ему все
запросы, кроме медианы.

Медиана не имеет замкнутой формы; используется разбиение по режиму k:
- k < 1: разложение k - 2/3 + 12/(81k) - 8/(729k²)
- k >= 1: асимптотика k - 2/3
"""

import math
from typing import Any

from pydantic import BaseModel, Field, PrivateAttr, field_validator

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
from src.distributions.gamma import Gamma
from src.sampling.uniform_source import UniformSource


class ChiSquared(
    BaseModel,
    Density,
    CumulativeDistribution,
    Moments,
    Entropy,
    Skewness,
    Mode,
    Median,
    Sampler,
):
    """
    Хи-квадрат распределение с freedom степенями свободы.

    Валидно при freedom > 0 и freedom != NaN (+inf допускается).

    Examples:
        >>> n = ChiSquared(freedom=3.0)
        >>> n.mean()
        3.0
    """

    freedom: float = Field(..., gt=0, description="Число степеней свободы (k)")

    model_config = {"frozen": True}  # Immutable

    _gamma: Gamma = PrivateAttr()

    @field_validator("freedom")
    @classmethod
    def validate_not_nan(cls, v: float) -> float:
        if math.isnan(v):
            raise ValueError("freedom must not be NaN")
        return v

    def model_post_init(self, __context: Any) -> None:
        self._gamma = Gamma(shape=self.freedom / 2.0, rate=0.5)

    @property
    def shape(self) -> float:
        """Параметр формы внутреннего Gamma (k/2)."""
        return self._gamma.shape

    @property
    def rate(self) -> float:
        """Параметр интенсивности внутреннего Gamma (1/2)."""
        return self._gamma.rate

    # -------------------------------------------------------------------------
    # Делегирование Gamma(k/2, 1/2)
    # -------------------------------------------------------------------------

    def pdf(self, x: float) -> float:
        return self._gamma.pdf(x)

    def ln_pdf(self, x: float) -> float:
        return self._gamma.ln_pdf(x)

    def cdf(self, x: float) -> float:
        return self._gamma.cdf(x)

    def min(self) -> float:
        return 0.0

    def max(self) -> float:
        return math.inf

    def mean(self) -> float:
        return self._gamma.mean()

    def variance(self) -> float:
        return self._gamma.variance()

    def std_dev(self) -> float:
        return self._gamma.std_dev()

    def entropy(self) -> float:
        return self._gamma.entropy()

    def skewness(self) -> float:
        return self._gamma.skewness()

    def mode(self) -> float:
        """
        k - 2

        Raises:
            DistributionDomainViolation: если k < 2
        """
        return self._gamma.mode()

    def sample(self, source: UniformSource) -> float:
        return self._gamma.sample(source)

    # -------------------------------------------------------------------------
    # Median
    # -------------------------------------------------------------------------

    def median(self) -> float:
        """
        Аппроксимация медианы.

        Returns:
            k < 1:  k - 2/3 + 12/(81k) - 8/(729k²)
            k >= 1: k - 2/3
        """
        k = self.freedom
        if k < 1.0:
            return k - 2.0 / 3.0 + 12.0 / (81.0 * k) - 8.0 / (729.0 * k * k)
        return k - 2.0 / 3.0
