"""
Distribution Capabilities — интерфейсы возможностей распределений

Каждая возможность (плотность, CDF, моменты, энтропия, ...) — отдельный
абстрактный интерфейс. Конкретное распределение наследует только те
интерфейсы, которые для него математически определены, поэтому
неопределённые моменты не навязываются монолитным базовым классом.

Контракты:
- pdf / ln_pdf: аргумент вне жёсткой границы носителя
  → DistributionDomainViolation
- cdf: монотонно не убывает; 0 на инфимуме носителя, 1 на супремуме;
  NaN там, где результат не определён при бесконечных параметрах
- моменты: выход за область определения → DistributionDomainViolation;
  бесконечный параметр → NaN
- sample: источник случайности внедряется вызывающим кодом
"""

import math
from abc import ABC, abstractmethod

from src.sampling.uniform_source import UniformSource


class Density(ABC):
    """Плотность распределения."""

    @abstractmethod
    def pdf(self, x: float) -> float:
        """Плотность в точке x."""

    @abstractmethod
    def ln_pdf(self, x: float) -> float:
        """Логарифм плотности в точке x."""


class CumulativeDistribution(ABC):
    """Функция распределения и границы носителя."""

    @abstractmethod
    def cdf(self, x: float) -> float:
        """P(X <= x)."""

    @abstractmethod
    def min(self) -> float:
        """Нижняя граница носителя, представимая в binary64."""

    @abstractmethod
    def max(self) -> float:
        """Верхняя граница носителя, представимая в binary64."""


class Moments(ABC):
    """Среднее и дисперсия."""

    @abstractmethod
    def mean(self) -> float:
        """Математическое ожидание."""

    @abstractmethod
    def variance(self) -> float:
        """Дисперсия."""

    def std_dev(self) -> float:
        """Стандартное отклонение sqrt(variance)."""
        return math.sqrt(self.variance())


class Entropy(ABC):
    @abstractmethod
    def entropy(self) -> float:
        """Дифференциальная энтропия (в натах)."""


class Skewness(ABC):
    @abstractmethod
    def skewness(self) -> float:
        """Коэффициент асимметрии."""


class Mode(ABC):
    @abstractmethod
    def mode(self) -> float:
        """Мода."""


class Median(ABC):
    @abstractmethod
    def median(self) -> float:
        """Медиана (точная или аппроксимация)."""


class Sampler(ABC):
    """Генерация реализаций с внедрённым источником случайности."""

    @abstractmethod
    def sample(self, source: UniformSource) -> float:
        """Одна реализация случайной величины."""
