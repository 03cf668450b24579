"""
Comparisons — Epsilon-сравнения float

Фундамент всех остальных операций numcore. Сравнение абсолютное и
двустороннее: значения внутри полосы ±EPSILON не больше и не меньше друг
друга, а равны.

Граница полосы включает один MACHINE_EPSILON: десятичный EPSILON не
представим точно в binary64, и разность вида 1.00001 - 1.0 оказывается
на 6.6e-17 больше 1e-5. Запас постоянный, не относительный.

Ограничение: для больших по модулю значений полоса EPSILON меньше шага
представимых float, и equals() вырождается в точное сравнение. Это
принятое ограничение, а не ошибка.

Поведение на NaN/Inf не специфицировано (NaN даёт False во всех
сравнениях); вышележащие слои проверяют sentinel-значения явно через
is_finite().
"""

import math
from typing import Final

from src.core.math.constants import EPSILON, MACHINE_EPSILON

# Фактическая граница полосы: EPSILON + запас на представление
_BAND: Final[float] = EPSILON + MACHINE_EPSILON


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def equals(a: float, b: float) -> bool:
    """
    Равенство с точностью до EPSILON.

    Алгоритм:
        absolute(a - b) <= EPSILON

    Examples:
        >>> equals(1.0, 1.00001)
        True
        >>> equals(1.0, 1.001)
        False
    """
    return absolute(a - b) <= _BAND


def greater_than(a: float, b: float) -> bool:
    """
    a > b строго за пределами толерантности.

    Examples:
        >>> greater_than(1.0, 0.5)
        True
        >>> greater_than(1.0, 0.99999)
        False
    """
    return a - b > _BAND


def less_than(a: float, b: float) -> bool:
    """
    a < b строго за пределами толерантности.

    Examples:
        >>> less_than(1.0, 1.001)
        True
        >>> less_than(1.0, 1.000001)
        False
    """
    return b - a > _BAND


def sign(a: float) -> int:
    """
    Знак значения с учётом толерантности.

    Returns:
        0 если equals(a, 0), -1 если less_than(a, 0), иначе 1

    Examples:
        >>> sign(-3.0)
        -1
        >>> sign(1e-7)
        0
        >>> sign(2.5)
        1
    """
    if equals(a, 0.0):
        return 0
    if less_than(a, 0.0):
        return -1
    return 1


def absolute(a: float) -> float:
    """
    Модуль значения с учётом толерантности.

    Значения внутри полосы (-EPSILON, 0) возвращаются без изменений.

    Examples:
        >>> absolute(-2.5)
        2.5
        >>> absolute(3.0)
        3.0
    """
    if less_than(a, 0.0):
        return -a
    return a


def is_finite(a: float) -> bool:
    """True если значение не NaN и не ±Inf."""
    return math.isfinite(a)
