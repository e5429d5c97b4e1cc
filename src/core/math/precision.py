"""
Precision — сравнение float с учётом машинной точности

Модуль задаёт точностные константы и примитивы сравнения, которые
используются ядром специальных функций, итерационными алгоритмами
(ряды, цепные дроби) и тестами:
- Абсолютное сравнение с допуском (almost_eq)
- Критерий сходимости итераций (convergence)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN никогда не считается равным чему-либо (включая NaN)
2. Бесконечности равны только бесконечностям того же знака
3. Все операции детерминированы и не имеют побочных эффектов
"""

import math
from typing import Final

# =============================================================================
# ТОЧНОСТНЫЕ КОНСТАНТЫ
# =============================================================================

# Половина машинного эпсилона IEEE 754 binary64: 2^-53
# Используется как порог сходимости рядов и цепных дробей
F64_PREC: Final[float] = 1.1102230246251565e-16

# Машинный эпсилон IEEE 754 binary64: 2^-52
# Порог сходимости цепных дробей (|delta - 1| <= F64_EPS)
F64_EPS: Final[float] = 2.220446049250313e-16

# Наименьшее положительное нормализованное число binary64
F64_MIN_POSITIVE: Final[float] = 2.2250738585072014e-308

# exp(x) уходит в ноль при x < LN_MIN_F64 (логарифм наименьшего нормализованного)
LN_MIN_F64: Final[float] = -708.3964185322641

# Абсолютная точность по умолчанию для almost_eq (10 * F64_PREC)
DEFAULT_F64_ACC: Final[float] = 1.1102230246251565e-15


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def almost_eq(a: float, b: float, acc: float = DEFAULT_F64_ACC) -> bool:
    """
    Абсолютное сравнение двух float с допуском acc.

    Алгоритм:
        |a - b| < acc

    Бесконечности сравниваются точно (inf == inf, -inf != inf),
    так как разность двух бесконечностей одного знака равна NaN.

    Args:
        a: Первое значение
        b: Второе значение
        acc: Абсолютный допуск (default: DEFAULT_F64_ACC)

    Returns:
        True если значения совпадают в пределах acc

    Examples:
        >>> almost_eq(1.0, 1.0 + 1e-16)
        True
        >>> almost_eq(float('inf'), float('inf'))
        True
        >>> almost_eq(float('nan'), float('nan'))
        False
    """
    if math.isinf(a) and math.isinf(b):
        return a == b
    return abs(a - b) < acc


def convergence(previous: float, current: float, acc: float = F64_PREC) -> bool:
    """
    Критерий сходимости итерационного процесса.

    Итерация считается сошедшейся, когда относительное изменение
    оценки не превышает acc. Для current == 0 используется абсолютное
    изменение.

    Args:
        previous: Оценка на предыдущем шаге
        current: Оценка на текущем шаге
        acc: Порог относительного изменения (default: F64_PREC)

    Returns:
        True если |current - previous| <= acc * |current|
    """
    if current == 0.0:
        return abs(previous) <= acc
    return abs(current - previous) <= acc * abs(current)


# =============================================================================
# EXP БЕЗ ПЕРЕПОЛНЕНИЯ
# =============================================================================


def safe_exp(value: float) -> float:
    """
    exp(value) с насыщением до +inf вместо OverflowError.

    math.exp бросает OverflowError для value > ~709.78; для плотностей и
    специальных функций переполнение означает предел +inf.

    Examples:
        >>> safe_exp(0.0)
        1.0
        >>> safe_exp(1000.0)
        inf
        >>> safe_exp(-1000.0)
        0.0
    """
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf
