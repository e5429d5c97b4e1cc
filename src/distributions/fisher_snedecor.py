"""
FisherSnedecor — F-распределение F(d1, d2)

X = (χ²(d1) / d1) / (χ²(d2) / d2)

Плотность:
    f(x) = sqrt((d1·x)^d1 · d2^d2 / (d1·x + d2)^(d1+d2)) / (x · B(d1/2, d2/2))

CDF:
    F(x) = I_(d1·x / (d1·x + d2))(d1/2, d2/2)

Параметры: d1 > 0, d2 > 0, не NaN; +inf допускается. Моменты при
бесконечных параметрах вычисляются по IEEE-арифметике и дают NaN там,
где предел не определён однозначно.

Области определения моментов (нарушение → DistributionDomainViolation):
- mean:     d2 > 2
- variance: d2 > 4
- skewness: d2 > 6
- mode:     d1 > 2
"""

import math

from pydantic import BaseModel, Field, field_validator

from src.core.math.domain import require_ge, require_gt
from src.core.math.precision import safe_exp
from src.distributions.base import (
    CumulativeDistribution,
    Density,
    Mode,
    Moments,
    Sampler,
    Skewness,
)
from src.sampling.gamma_sampler import sample_gamma
from src.sampling.uniform_source import UniformSource
from src.special.beta import beta_reg, ln_beta


class FisherSnedecor(
    BaseModel,
    Density,
    CumulativeDistribution,
    Moments,
    Skewness,
    Mode,
    Sampler,
):
    """
    Распределение Фишера–Снедекора со степенями свободы freedom_1, freedom_2.

    Examples:
        >>> f = FisherSnedecor(freedom_1=3.0, freedom_2=3.0)
        >>> f.mean()
        3.0
    """

    freedom_1: float = Field(..., gt=0, description="Степени свободы числителя (d1)")
    freedom_2: float = Field(..., gt=0, description="Степени свободы знаменателя (d2)")

    model_config = {"frozen": True}  # Immutable

    @field_validator("freedom_1", "freedom_2")
    @classmethod
    def validate_not_nan(cls, v: float) -> float:
        if math.isnan(v):
            raise ValueError("freedom must not be NaN")
        return v

    def _has_infinite_param(self) -> bool:
        return math.isinf(self.freedom_1) or math.isinf(self.freedom_2)

    # -------------------------------------------------------------------------
    # Density
    # -------------------------------------------------------------------------

    def _density_at_zero(self) -> float:
        # f(x) ~ x^(d1/2 - 1) при x → 0
        if self.freedom_1 < 2.0:
            return math.inf
        if self.freedom_1 == 2.0:
            return 1.0
        return 0.0

    def ln_pdf(self, x: float) -> float:
        """
        Логарифм плотности, вычисленный в лог-пространстве:

            ½[d1·ln(d1·x) + d2·ln(d2) - (d1+d2)·ln(d1·x + d2)] - ln x - ln B(d1/2, d2/2)

        Returns:
            ln f(x); NaN при бесконечном параметре, x = ±inf или x = NaN

        Raises:
            DistributionDomainViolation: если x < 0 (конечный)
        """
        if math.isnan(x) or math.isinf(x) or self._has_infinite_param():
            return math.nan
        require_ge(x, 0.0, "x")
        if x == 0.0:
            density = self._density_at_zero()
            return math.log(density) if density > 0.0 else -math.inf

        d1 = self.freedom_1
        d2 = self.freedom_2
        d1x = d1 * x
        return (
            0.5 * (d1 * math.log(d1x) + d2 * math.log(d2) - (d1 + d2) * math.log(d1x + d2))
            - math.log(x)
            - ln_beta(d1 / 2.0, d2 / 2.0)
        )

    def pdf(self, x: float) -> float:
        """
        Плотность f(x) = exp(ln_pdf(x)).

        Returns:
            f(x); NaN при бесконечном параметре, x = ±inf или x = NaN

        Raises:
            DistributionDomainViolation: если x < 0 (конечный)
        """
        if math.isnan(x) or math.isinf(x) or self._has_infinite_param():
            return math.nan
        require_ge(x, 0.0, "x")
        if x == 0.0:
            return self._density_at_zero()
        return safe_exp(self.ln_pdf(x))

    # -------------------------------------------------------------------------
    # Cumulative distribution
    # -------------------------------------------------------------------------

    def cdf(self, x: float) -> float:
        """
        CDF через регуляризованную неполную бета-функцию.

        Returns:
            I_(d1·x / (d1·x + d2))(d1/2, d2/2); 0 при x <= 0;
            NaN если d1, d2 или x бесконечны
        """
        if math.isnan(x) or math.isinf(x) or self._has_infinite_param():
            return math.nan
        if x <= 0.0:
            return 0.0
        d1x = self.freedom_1 * x
        return beta_reg(self.freedom_1 / 2.0, self.freedom_2 / 2.0, d1x / (d1x + self.freedom_2))

    def min(self) -> float:
        return 0.0

    def max(self) -> float:
        return math.inf

    # -------------------------------------------------------------------------
    # Moments
    # -------------------------------------------------------------------------

    def mean(self) -> float:
        """
        d2 / (d2 - 2)

        Raises:
            DistributionDomainViolation: если freedom_2 <= 2
        """
        require_gt(self.freedom_2, 2.0, "freedom_2")
        return self.freedom_2 / (self.freedom_2 - 2.0)

    def variance(self) -> float:
        """
        2·d2²·(d1 + d2 - 2) / (d1·(d2 - 2)²·(d2 - 4))

        Raises:
            DistributionDomainViolation: если freedom_2 <= 4
        """
        require_gt(self.freedom_2, 4.0, "freedom_2")
        d1 = self.freedom_1
        d2 = self.freedom_2
        return (2.0 * d2 * d2 * (d1 + d2 - 2.0)) / (d1 * (d2 - 2.0) * (d2 - 2.0) * (d2 - 4.0))

    def skewness(self) -> float:
        """
        (2·d1 + d2 - 2)·sqrt(8·(d2 - 4)) / ((d2 - 6)·sqrt(d1·(d1 + d2 - 2)))

        Raises:
            DistributionDomainViolation: если freedom_2 <= 6
        """
        require_gt(self.freedom_2, 6.0, "freedom_2")
        d1 = self.freedom_1
        d2 = self.freedom_2
        return ((2.0 * d1 + d2 - 2.0) * math.sqrt(8.0 * (d2 - 4.0))) / (
            (d2 - 6.0) * math.sqrt(d1 * (d1 + d2 - 2.0))
        )

    def mode(self) -> float:
        """
        d2·(d1 - 2) / (d1·(d2 + 2))

        Raises:
            DistributionDomainViolation: если freedom_1 <= 2
        """
        require_gt(self.freedom_1, 2.0, "freedom_1")
        d1 = self.freedom_1
        d2 = self.freedom_2
        return (d2 * (d1 - 2.0)) / (d1 * (d2 + 2.0))

    # -------------------------------------------------------------------------
    # Sampling
    # -------------------------------------------------------------------------

    def sample(self, source: UniformSource) -> float:
        """
        (g1·d2) / (g2·d1), g1 ~ Gamma(d1/2, 1/2), g2 ~ Gamma(d2/2, 1/2)
        независимы.

        При бесконечных степенях свободы χ²(d)/d → 1:
        - d1 = d2 = +inf → 1
        - d1 = +inf → d2 / χ²(d2)
        - d2 = +inf → χ²(d1) / d1
        """
        d1 = self.freedom_1
        d2 = self.freedom_2
        if math.isinf(d1) and math.isinf(d2):
            return 1.0
        if math.isinf(d1):
            return _ratio(d2, sample_gamma(source, d2 / 2.0, 0.5))
        if math.isinf(d2):
            return sample_gamma(source, d1 / 2.0, 0.5) / d1

        g1 = sample_gamma(source, d1 / 2.0, 0.5)
        g2 = sample_gamma(source, d2 / 2.0, 0.5)
        return _ratio(g1 * d2, g2 * d1)


def _ratio(numerator: float, denominator: float) -> float:
    # g2 может уйти в 0.0 при очень малых степенях свободы (underflow u^(1/shape))
    if denominator == 0.0:
        return math.inf if numerator > 0.0 else math.nan
    return numerator / denominator
