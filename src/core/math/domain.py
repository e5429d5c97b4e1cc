"""
Domain — нарушения области определения (fatal preconditions)

Библиотека различает три канала отказа:
1. Ошибки валидации параметров при конструировании распределения
   (pydantic.ValidationError, восстановимые)
2. Нарушения preconditions после конструирования: момент вне области
   определения, аргумент функции вне её домена
   (DistributionDomainViolation, ошибка программиста)
3. Неопределённые пределы при бесконечных параметрах (NaN, не исключение)

Этот модуль реализует второй канал.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. DistributionDomainViolation НЕ наследуется от ValueError, чтобы не
   перехватываться вместе с ошибками валидации
2. NaN в проверяемом значении всегда нарушает precondition
"""


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DistributionDomainViolation(Exception):
    """
    Нарушение области определения функции или момента распределения.

    Сигнализирует об ошибке вызывающего кода (аналог assertion failure),
    а не об ошибке данных. Не предназначено для перехвата и обработки
    на месте вызова: операция прерывается.

    Примеры:
    - mean() распределения Фишера при freedom_2 <= 2
    - pdf(x) гамма-семейства при x < 0
    - gamma_lower_reg(a, x) при x < 0
    """
    pass


# =============================================================================
# PRECONDITION HELPERS
# =============================================================================


def require_gt(value: float, bound: float, name: str) -> None:
    """
    Проверка value > bound.

    Args:
        value: Проверяемое значение
        bound: Строгая нижняя граница
        name: Имя аргумента (для сообщения)

    Raises:
        DistributionDomainViolation: если value <= bound или NaN
    """
    if not value > bound:
        raise DistributionDomainViolation(f"{name} must be > {bound}, got {value}")


def require_ge(value: float, bound: float, name: str) -> None:
    """
    Проверка value >= bound.

    Raises:
        DistributionDomainViolation: если value < bound или NaN
    """
    if not value >= bound:
        raise DistributionDomainViolation(f"{name} must be >= {bound}, got {value}")


def require_in_range(value: float, lower: float, upper: float, name: str) -> None:
    """
    Проверка lower <= value <= upper.

    Raises:
        DistributionDomainViolation: если value вне [lower, upper] или NaN
    """
    if not lower <= value <= upper:
        raise DistributionDomainViolation(
            f"{name} must be in [{lower}, {upper}], got {value}"
        )
