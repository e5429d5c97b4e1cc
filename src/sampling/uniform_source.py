"""
Uniform Source — внедряемый источник случайности

Библиотека никогда не создаёт, не сидирует и не хранит генератор:
источник передаётся вызывающим кодом в каждый вызов sample().
Любой объект с методом random() -> float в [0, 1) подходит, в том
числе random.Random и numpy.random.Generator.

Потокобезопасность: вызовы с разными источниками не взаимодействуют.
За потокобезопасность общего источника отвечает вызывающий код.
"""

import math
from typing import Protocol, runtime_checkable


@runtime_checkable
class UniformSource(Protocol):
    """Источник равномерно распределённых float в [0, 1)."""

    def random(self) -> float: ...


def open_unit_uniform(source: UniformSource) -> float:
    """
    Равномерная величина в (0, 1].

    Преобразование 1 - U исключает ноль, поэтому результат безопасен
    для log() и отрицательных степеней.
    """
    return 1.0 - source.random()


def standard_normal(source: UniformSource) -> float:
    """
    Стандартная нормальная величина полярным методом Марсальи.

    Повторяет выбор точки (u, v) в квадрате [-1, 1)^2, пока она не попадёт
    внутрь единичного круга (вероятность π/4), затем возвращает
    u · sqrt(-2 ln s / s). Вторая величина пары отбрасывается: функция
    не хранит состояния между вызовами.

    Args:
        source: Источник равномерных величин

    Returns:
        Реализация N(0, 1)
    """
    while True:
        u = 2.0 * source.random() - 1.0
        v = 2.0 * source.random() - 1.0
        s = u * u + v * v
        if 0.0 < s < 1.0:
            return u * math.sqrt(-2.0 * math.log(s) / s)
