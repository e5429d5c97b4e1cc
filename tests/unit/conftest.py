"""
Общие фикстуры unit-тестов

- fixed_source: фабрика детерминированных источников случайности
- rng: воспроизводимый random.Random для статистических тестов
"""

import random

import pytest


class FixedSequence:
    """Детерминированный источник: циклически отдаёт заданные значения."""

    def __init__(self, values):
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self._values[self.calls % len(self._values)]
        self.calls += 1
        return value


@pytest.fixture
def fixed_source():
    """Фабрика FixedSequence."""
    return FixedSequence


@pytest.fixture
def rng():
    """Воспроизводимый генератор для статистических проверок."""
    return random.Random(20240917)
