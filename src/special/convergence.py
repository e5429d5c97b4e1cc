"""
Convergence — конфигурация итерационных алгоритмов

Степенные ряды и цепные дроби (неполные гамма- и бета-функции)
останавливаются по относительному критерию eps либо по исчерпанию
бюджета итераций. При исчерпании бюджета возвращается лучшая оценка,
а в лог модуля пишется предупреждение.
"""

from dataclasses import dataclass
from typing import Final

from src.core.math.precision import F64_EPS

# Бюджет итераций по умолчанию. Для x ~ a число итераций ряда и цепной
# дроби растёт как O(sqrt(a)), поэтому запас рассчитан на a ~ 1e8.
DEFAULT_MAX_ITERATIONS: Final[int] = 100_000


@dataclass(frozen=True)
class ConvergenceConfig:
    """Конфигурация сходимости ряда / цепной дроби.

    Параметры:
        eps: относительный порог остановки
        max_iterations: максимальное число итераций
    """

    eps: float = F64_EPS
    max_iterations: int = DEFAULT_MAX_ITERATIONS

    def __post_init__(self) -> None:
        if not self.eps > 0:
            raise ValueError(f"eps must be positive, got {self.eps}")
        if self.max_iterations < 1:
            raise ValueError(
                f"max_iterations must be >= 1, got {self.max_iterations}"
            )


DEFAULT_CONVERGENCE: Final[ConvergenceConfig] = ConvergenceConfig()
