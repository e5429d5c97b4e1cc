"""
Gamma Sampler — точная генерация Gamma(shape, rate)

Алгоритм (Marsaglia & Tsang, 2000, "A Simple Method for Generating
Gamma Variables"):

shape >= 1:
    d = shape - 1/3,  c = 1 / sqrt(9d)
    повторять:
        x ~ N(0, 1),  v = (1 + c·x)^3  (пропуск при 1 + c·x <= 0)
        u ~ U(0, 1]
        squeeze:    u < 1 - 0.0331·x^4                      → принять
        log-тест:   ln u < x²/2 + d - d·v + d·ln v          → принять
    вернуть d·v / rate

0 < shape < 1 (boost):
    g ~ Gamma(shape + 1, rate),  u ~ U(0, 1]
    вернуть g · u^(1/shape)

Цикл отбраковки не ограничен по числу попыток: вероятность отказа
ограничена от единицы (ожидаемое число итераций O(1) для всех shape >= 1),
а любое ограничение смещало бы выборку.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Выборка никогда не отрицательна
2. Источник случайности внедряется вызывающим кодом; глобального
   состояния нет, функция реентерабельна
"""

import math
from typing import Final

from src.core.math.domain import require_gt
from src.sampling.uniform_source import UniformSource, open_unit_uniform, standard_normal

# Коэффициент squeeze-проверки Марсальи–Цанга
SQUEEZE_COEFF: Final[float] = 0.0331


def _sample_standard_gamma(source: UniformSource, shape: float) -> float:
    """Gamma(shape, 1) для shape >= 1."""
    d = shape - 1.0 / 3.0
    c = 1.0 / math.sqrt(9.0 * d)

    while True:
        x = standard_normal(source)
        v = 1.0 + c * x
        if v <= 0.0:
            continue
        v = v * v * v
        u = open_unit_uniform(source)
        x2 = x * x

        if u < 1.0 - SQUEEZE_COEFF * x2 * x2:
            return d * v
        if math.log(u) < 0.5 * x2 + d - d * v + d * math.log(v):
            return d * v


def sample_gamma(source: UniformSource, shape: float, rate: float) -> float:
    """
    Реализация Gamma(shape, rate) (плотность ∝ x^(shape-1) e^(-rate·x)).

    Используется напрямую распределением Gamma и производными
    семействами (хи-квадрат, Фишер–Снедекор).

    Args:
        source: Источник равномерных величин (не сидируется и не
            сохраняется)
        shape: Параметр формы (> 0, допускается +inf)
        rate: Параметр интенсивности, 1 / scale (> 0, допускается +inf)

    Returns:
        Неотрицательная реализация; пределы вырожденных случаев:
        - rate = +inf → 0.0
        - shape = +inf (конечный rate) → +inf
        - shape = rate = +inf → NaN

    Raises:
        DistributionDomainViolation: если shape <= 0, rate <= 0 или NaN
    """
    require_gt(shape, 0.0, "shape")
    require_gt(rate, 0.0, "rate")

    if math.isinf(rate):
        return math.nan if math.isinf(shape) else 0.0
    if math.isinf(shape):
        return math.inf

    if shape < 1.0:
        g = _sample_standard_gamma(source, shape + 1.0)
        u = open_unit_uniform(source)
        return g * u ** (1.0 / shape) / rate

    return _sample_standard_gamma(source, shape) / rate
