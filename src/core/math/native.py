"""
Native — Вычисления через модуль math

Стратегия RUNTIME. Контракты совпадают со стратегией convergent:
исключения модуля math (OverflowError, ValueError) не выходят наружу,
а превращаются в sentinel-значения так же, как это делает C-библиотека
платформы.
"""

import math

from src.core.math.comparisons import absolute, equals, is_finite
from src.core.math.constants import INF, NAN


def _signed_infinity(base: float, exponent: int) -> float:
    """±Inf для base^exponent: знак base сохраняется только при нечётной степени."""
    if exponent % 2:
        return math.copysign(INF, base)
    return INF


def sqrt(value: float) -> float:
    return math.sqrt(value)


def pow(base: float, exponent: int) -> float:
    """
    math.pow с семантикой C для переполнения и 0^(-n).

    Examples:
        >>> pow(10.0, 400)
        inf
        >>> pow(-10.0, 401)
        -inf
        >>> pow(0.0, -1)
        inf
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return _signed_infinity(base, exponent)
    except ValueError:
        # math.pow отвергает только 0^(-n) при целом exponent
        return _signed_infinity(base, exponent)


def factorial(value: int) -> float:
    """value! как Γ(value + 1); переполнение → Inf."""
    try:
        return math.gamma(value + 1)
    except OverflowError:
        return INF


def mod(value: float, divisor: float) -> float:
    """
    math.fmod с нормализацией граничного остатка.

    Остаток в пределах EPSILON от ±divisor является артефактом точности
    и заменяется на 0.0. Малые ненулевые остатки сохраняются, как в
    math.fmod. Отрицательный ноль возвращается как 0.0.
    """
    if not is_finite(value) or math.isnan(divisor):
        return NAN

    remainder = math.fmod(value, divisor)

    if remainder == 0.0 or equals(absolute(remainder), absolute(divisor)):
        return 0.0

    return remainder


def sin(value: float) -> float:
    if not is_finite(value):
        return NAN
    return math.sin(value)


def cos(value: float) -> float:
    if not is_finite(value):
        return NAN
    return math.cos(value)


def tan(value: float) -> float:
    if not is_finite(value):
        return NAN
    return math.tan(value)
