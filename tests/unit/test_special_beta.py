"""
Тесты для Special Function Engine: бета-семейство

Проверяемые инварианты:
1. B(a, b) по известным значениям, без переполнения при больших a, b
2. I_0(a, b) == 0, I_1(a, b) == 1 точно
3. I_x(a, b) + I_(1-x)(b, a) == 1
4. Замкнутые формы для целых параметров (биномиальная сумма)
5. Бесконечный параметр при 0 < x < 1 → NaN
6. Нарушение домена → DistributionDomainViolation
"""

import math

import pytest

from src.core.math.domain import DistributionDomainViolation
from src.core.math.precision import almost_eq
from src.special.beta import beta, beta_reg, ln_beta
from src.special.convergence import ConvergenceConfig


def _binomial_tail(a: int, b: int, x: float) -> float:
    """I_x(a, b) = Σ_{j=a}^{a+b-1} C(a+b-1, j) x^j (1-x)^(a+b-1-j)"""
    n = a + b - 1
    return sum(math.comb(n, j) * x**j * (1.0 - x) ** (n - j) for j in range(a, n + 1))


# =============================================================================
# ТЕСТЫ: beta / ln_beta
# =============================================================================


class TestBeta:
    """Тесты beta(a, b) и ln_beta(a, b)."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            (1.0, 1.0, 1.0),
            (2.0, 3.0, 1.0 / 12.0),
            (3.0, 2.0, 1.0 / 12.0),
            (0.5, 0.5, math.pi),
            (1.5, 1.5, math.pi / 8.0),
            (1.0, 7.0, 1.0 / 7.0),
        ],
    )
    def test_known_values(self, a, b, expected):
        assert beta(a, b) == pytest.approx(expected, rel=1e-13)

    def test_symmetric(self):
        assert beta(0.3, 4.2) == pytest.approx(beta(4.2, 0.3), rel=1e-14)

    def test_large_parameters_no_overflow(self):
        """Γ(500) переполняется, B(500, 500) — нет"""
        expected = math.exp(2.0 * math.lgamma(500.0) - math.lgamma(1000.0))
        assert beta(500.0, 500.0) == pytest.approx(expected, rel=1e-10)
        assert ln_beta(1e6, 1e6) == pytest.approx(
            2.0 * math.lgamma(1e6) - math.lgamma(2e6), rel=1e-12
        )

    def test_infinite_parameter(self):
        """B(a, b) → 0 при a → inf"""
        assert ln_beta(math.inf, 2.0) == -math.inf
        assert beta(math.inf, 2.0) == 0.0
        assert beta(2.0, math.inf) == 0.0

    def test_nan_propagates(self):
        assert math.isnan(ln_beta(math.nan, 1.0))
        assert math.isnan(beta(1.0, math.nan))

    def test_domain_violation(self):
        with pytest.raises(DistributionDomainViolation, match="a must be > 0.0"):
            beta(0.0, 1.0)
        with pytest.raises(DistributionDomainViolation, match="b must be > 0.0"):
            ln_beta(1.0, -2.0)


# =============================================================================
# ТЕСТЫ: beta_reg
# =============================================================================


class TestBetaReg:
    """Тесты регуляризованной неполной бета-функции I_x(a, b)."""

    @pytest.mark.parametrize("x", [0.001, 0.25, 0.5, 0.9, 0.999])
    def test_uniform_case(self, x):
        """I_x(1, 1) = x"""
        assert beta_reg(1.0, 1.0, x) == pytest.approx(x, rel=1e-13)

    @pytest.mark.parametrize("a", [0.5, 2.0, 7.5])
    @pytest.mark.parametrize("x", [0.1, 0.6, 0.95])
    def test_power_case(self, a, x):
        """I_x(a, 1) = x^a, I_x(1, b) = 1 - (1-x)^b"""
        assert beta_reg(a, 1.0, x) == pytest.approx(x**a, rel=1e-12)
        assert beta_reg(1.0, a, x) == pytest.approx(1.0 - (1.0 - x) ** a, rel=1e-12)

    @pytest.mark.parametrize(
        "a, b, x", [(2, 2, 0.3), (3, 5, 0.2), (3, 5, 0.7), (10, 4, 0.55), (20, 30, 0.45)]
    )
    def test_integer_parameters(self, a, b, x):
        assert beta_reg(float(a), float(b), x) == pytest.approx(
            _binomial_tail(a, b, x), rel=1e-11
        )

    @pytest.mark.parametrize("a", [0.5, 3.0, 250.0])
    def test_midpoint_of_symmetric(self, a):
        """I_(1/2)(a, a) = 1/2"""
        assert beta_reg(a, a, 0.5) == pytest.approx(0.5, rel=1e-12)

    @pytest.mark.parametrize("a, b", [(0.5, 3.0), (2.0, 2.0), (7.5, 1.25), (40.0, 60.0)])
    @pytest.mark.parametrize("x", [0.125, 0.25, 0.5, 0.75])
    def test_reflection(self, a, b, x):
        """I_x(a, b) + I_(1-x)(b, a) == 1"""
        total = beta_reg(a, b, x) + beta_reg(b, a, 1.0 - x)
        assert total == pytest.approx(1.0, rel=1e-12)

    @pytest.mark.parametrize("a, b, x", [(1e4, 1e4, 0.5), (1e3, 2e3, 0.3), (500.0, 500.0, 0.49)])
    def test_reflection_large_parameters(self, a, b, x):
        """Префактор по Стирлингу: ln Γ(a+b) - ln Γ(a) - ln Γ(b) не теряет точность"""
        total = beta_reg(a, b, x) + beta_reg(b, a, 1.0 - x)
        assert almost_eq(total, 1.0, 1e-12)

    def test_midpoint_large_symmetric(self):
        assert almost_eq(beta_reg(1e4, 1e4, 0.5), 0.5, 1e-12)

    def test_no_swap_at_threshold(self, caplog):
        """x == (a + 1) / (a + b + 2): цепная дробь считается без замены (a, b, x)"""
        config = ConvergenceConfig(max_iterations=1)
        with caplog.at_level("WARNING", logger="src.special.beta"):
            beta_reg(1.0, 2.0, 0.4, config)
        assert "(a=1.0, b=2.0, x=0.4)" in caplog.text

    def test_swap_above_threshold(self, caplog):
        config = ConvergenceConfig(max_iterations=1)
        with caplog.at_level("WARNING", logger="src.special.beta"):
            beta_reg(1.0, 2.0, 0.5, config)
        assert "(a=2.0, b=1.0, x=0.5)" in caplog.text

    def test_exact_boundaries(self):
        assert beta_reg(2.5, 0.7, 0.0) == 0.0
        assert beta_reg(2.5, 0.7, 1.0) == 1.0
        assert beta_reg(math.inf, 1.0, 0.0) == 0.0
        assert beta_reg(1.0, math.inf, 1.0) == 1.0

    def test_monotone_in_x(self):
        xs = [0.0, 0.05, 0.2, 0.35, 0.5, 0.65, 0.8, 0.95, 1.0]
        values = [beta_reg(2.5, 4.0, x) for x in xs]
        assert values == sorted(values)
        assert all(0.0 <= v <= 1.0 for v in values)

    def test_infinite_parameter_is_nan(self):
        assert math.isnan(beta_reg(math.inf, 1.0, 0.5))
        assert math.isnan(beta_reg(1.0, math.inf, 0.5))

    def test_nan_propagates(self):
        assert math.isnan(beta_reg(math.nan, 1.0, 0.5))
        assert math.isnan(beta_reg(1.0, 1.0, math.nan))

    def test_domain_violation(self):
        with pytest.raises(DistributionDomainViolation, match=r"x must be in \[0.0, 1.0\]"):
            beta_reg(1.0, 1.0, 1.5)
        with pytest.raises(DistributionDomainViolation):
            beta_reg(1.0, 1.0, -0.1)
        with pytest.raises(DistributionDomainViolation):
            beta_reg(0.0, 1.0, 0.5)
        with pytest.raises(DistributionDomainViolation):
            beta_reg(1.0, -1.0, 0.5)

    def test_non_convergence_is_logged(self, caplog):
        config = ConvergenceConfig(max_iterations=1)
        with caplog.at_level("WARNING", logger="src.special.beta"):
            result = beta_reg(100.0, 100.0, 0.4, config)
        assert "did not converge" in caplog.text
        assert math.isfinite(result)


class TestConvergenceConfig:
    """Тесты ConvergenceConfig."""

    def test_defaults(self):
        config = ConvergenceConfig()
        assert config.eps > 0
        assert config.max_iterations == 100_000

    def test_invalid_values(self):
        with pytest.raises(ValueError, match="eps"):
            ConvergenceConfig(eps=0.0)
        with pytest.raises(ValueError, match="max_iterations"):
            ConvergenceConfig(max_iterations=0)

    def test_frozen(self):
        config = ConvergenceConfig()
        with pytest.raises(AttributeError):
            config.eps = 1e-3
