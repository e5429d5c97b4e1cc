"""
Gamma — гамма-распределение Gamma(shape, rate)

Плотность:
    f(x) = rate^shape · x^(shape-1) · e^(-rate·x) / Γ(shape),  x >= 0

Immutable Pydantic модель. Параметры: shape > 0, rate > 0, не NaN;
+inf допускается и даёт предельное (вырожденное) распределение там,
где предел определён, иначе NaN.

Используется напрямую и как внутреннее представление хи-квадрат
распределения.
"""

import math

from pydantic import BaseModel, Field, field_validator

from src.core.math.domain import require_ge
from src.core.math.precision import safe_exp
from src.distributions.base import (
    CumulativeDistribution,
    Density,
    Entropy,
    Mode,
    Moments,
    Sampler,
    Skewness,
)
from src.sampling.gamma_sampler import sample_gamma
from src.sampling.uniform_source import UniformSource
from src.special.gamma import digamma, gamma_lower_reg, ln_gamma


class Gamma(
    BaseModel,
    Density,
    CumulativeDistribution,
    Moments,
    Entropy,
    Skewness,
    Mode,
    Sampler,
):
    """
    Гамма-распределение в параметризации shape/rate (rate = 1 / scale).

    Examples:
        >>> g = Gamma(shape=2.0, rate=0.5)
        >>> g.mean()
        4.0
    """

    shape: float = Field(..., gt=0, description="Параметр формы (k)")
    rate: float = Field(..., gt=0, description="Параметр интенсивности (1 / scale)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("shape", "rate")
    @classmethod
    def validate_not_nan(cls, v: float) -> float:
        """NaN не является допустимым значением параметра."""
        if math.isnan(v):
            raise ValueError("parameter must not be NaN")
        return v

    def _has_infinite_param(self) -> bool:
        return math.isinf(self.shape) or math.isinf(self.rate)

    # -------------------------------------------------------------------------
    # Density
    # -------------------------------------------------------------------------

    def ln_pdf(self, x: float) -> float:
        """
        Логарифм плотности, вычисленный в лог-пространстве:

            shape·ln(rate) + (shape-1)·ln(x) - rate·x - ln Γ(shape)

        Returns:
            ln f(x); NaN при бесконечном параметре или x = NaN;
            -inf при x = +inf

        Raises:
            DistributionDomainViolation: если x < 0
        """
        if math.isnan(x):
            return math.nan
        require_ge(x, 0.0, "x")
        if self._has_infinite_param():
            return math.nan
        if math.isinf(x):
            return -math.inf
        if self.shape == 1.0:
            return math.log(self.rate) - self.rate * x
        if x == 0.0:
            return math.inf if self.shape < 1.0 else -math.inf
        return (
            self.shape * math.log(self.rate)
            + (self.shape - 1.0) * math.log(x)
            - self.rate * x
            - ln_gamma(self.shape)
        )

    def pdf(self, x: float) -> float:
        """
        Плотность f(x) = exp(ln_pdf(x)).

        Returns:
            f(x); для x = 0: +inf при shape < 1, rate при shape = 1,
            0 при shape > 1; NaN при бесконечном параметре

        Raises:
            DistributionDomainViolation: если x < 0
        """
        if math.isnan(x):
            return math.nan
        require_ge(x, 0.0, "x")
        if self._has_infinite_param():
            return math.nan
        if math.isinf(x):
            return 0.0
        if self.shape == 1.0:
            return self.rate * math.exp(-self.rate * x)
        return safe_exp(self.ln_pdf(x))

    # -------------------------------------------------------------------------
    # Cumulative distribution
    # -------------------------------------------------------------------------

    def cdf(self, x: float) -> float:
        """
        CDF через регуляризованную нижнюю неполную гамма-функцию:

            F(x) = P(shape, rate·x)

        Пределы:
        - x <= 0 → 0
        - x = +inf → 1
        - rate = +inf (масса в нуле) → 1 при x > 0
        - shape = +inf (масса в бесконечности) → 0
        - shape = rate = +inf → NaN
        """
        if math.isnan(x):
            return math.nan
        if x <= 0.0:
            return 0.0
        if math.isinf(self.shape) and math.isinf(self.rate):
            return math.nan
        if math.isinf(x) or math.isinf(self.rate):
            return 1.0
        if math.isinf(self.shape):
            return 0.0
        return gamma_lower_reg(self.shape, x * self.rate)

    def min(self) -> float:
        return 0.0

    def max(self) -> float:
        return math.inf

    # -------------------------------------------------------------------------
    # Moments
    # -------------------------------------------------------------------------

    def mean(self) -> float:
        """shape / rate"""
        return self.shape / self.rate

    def variance(self) -> float:
        """shape / rate^2"""
        return self.shape / (self.rate * self.rate)

    def entropy(self) -> float:
        """shape - ln(rate) + ln Γ(shape) + (1 - shape)·ψ(shape)"""
        return (
            self.shape
            - math.log(self.rate)
            + ln_gamma(self.shape)
            + (1.0 - self.shape) * digamma(self.shape)
        )

    def skewness(self) -> float:
        """2 / sqrt(shape)"""
        return 2.0 / math.sqrt(self.shape)

    def mode(self) -> float:
        """
        (shape - 1) / rate

        Raises:
            DistributionDomainViolation: если shape < 1
        """
        require_ge(self.shape, 1.0, "shape")
        return (self.shape - 1.0) / self.rate

    # -------------------------------------------------------------------------
    # Sampling
    # -------------------------------------------------------------------------

    def sample(self, source: UniformSource) -> float:
        """Реализация методом Марсальи–Цанга (см. sample_gamma)."""
        return sample_gamma(source, self.shape, self.rate)
