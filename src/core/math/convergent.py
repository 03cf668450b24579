"""
Convergent — Вычисления без math-библиотеки платформы

Стратегия AHEAD_OF_TIME: только арифметика float и epsilon-сравнения.
- sqrt: итерация Newton-Raphson до неподвижной точки
- pow: square-and-multiply с ранним выходом при переполнении
- factorial: итеративное произведение с ранним выходом при переполнении
- mod: epsilon-подтянутое усечение частного
- sin/cos/tan: ряд Маклорена после приведения аргумента в (-2π, 2π)

Предусловия (знак операнда, нулевой делитель, тип целых аргументов)
проверяются в dispatch; здесь обрабатываются только sentinel-значения
NaN/Inf. Рекурсии нет: глубина стека не зависит от аргументов.

ФОРМУЛЫ:
    sqrt:  x_{k+1} = 0.5 * (x_k + value / x_k),  x_0 = value
    sin:   Σ (-1)^n · x^(2n+1) / (2n+1)!
    cos:   sin(x + π/2)
    tan:   sin(x) / cos(x)
"""

import logging
import math
from typing import Final

from src.core.math.comparisons import absolute, equals, is_finite, sign
from src.core.math.constants import (
    EPSILON,
    HALF_PI,
    INF,
    NAN,
    SERIES_MAX_TERMS,
    TWO_PI,
)

logger = logging.getLogger(__name__)

# Выше этого частного multiplier * divisor не представим точно
_EXACT_QUOTIENT_LIMIT: Final[float] = 2.0**52


# =============================================================================
# КОРЕНЬ И СТЕПЕНИ
# =============================================================================


def sqrt(value: float) -> float:
    """
    Квадратный корень методом Newton-Raphson.

    Итерация начинается с value и продолжается до побитово совпадающей
    неподвижной точки. Если float-арифметика зацикливается между двумя
    соседними значениями, возвращается меньшее из них.

    Args:
        value: Неотрицательное значение

    Returns:
        sqrt(value); sqrt(0) == 0.0, sqrt(NaN) == NaN, sqrt(Inf) == Inf

    Examples:
        >>> sqrt(100.0)
        10.0
        >>> sqrt(0.0)
        0.0
    """
    if math.isnan(value) or value == INF:
        return value

    if value == 0.0:
        return 0.0

    current = value
    previous = 0.0

    while current != previous:
        following = 0.5 * (current + value / current)
        if following == previous and following != current:
            logger.debug(
                "Newton-Raphson sqrt(%r) settled on a 2-cycle %r <-> %r", value, current, following
            )
            return min(current, following)
        previous, current = current, following

    return current


def pow(base: float, exponent: int) -> float:
    """
    Целая степень числа без math.pow.

    Правила:
    - base NaN или ±Inf → NaN
    - exponent == 0 или equals(base, 1) → 1.0
    - exponent > 0 → base^exponent
    - exponent < 0 → 1 / base^(-exponent), при нулевом знаменателе ±Inf

    Examples:
        >>> pow(2.0, 10)
        1024.0
        >>> pow(2.0, -2)
        0.25
        >>> pow(float("inf"), 2)
        nan
    """
    if not is_finite(base):
        return NAN

    if exponent == 0 or equals(base, 1.0):
        return 1.0

    magnitude = _power(base, abs(exponent))

    if exponent > 0:
        return magnitude

    if magnitude == 0.0:
        return math.copysign(INF, magnitude)

    return 1.0 / magnitude


def _power(base: float, exponent: int) -> float:
    """base^exponent для exponent >= 1, square-and-multiply."""
    result = 1.0
    factor = base

    while exponent:
        if exponent & 1:
            result *= factor
        exponent >>= 1

        # 0 и Inf поглощающие, дальнейшие умножения их не изменят
        if result == 0.0 or math.isinf(result):
            break

        if exponent:
            factor *= factor

    return result


def factorial(value: int) -> float:
    """
    value! как float, итеративное произведение.

    При value > 170 результат переполняется в Inf, и цикл завершается.

    Examples:
        >>> factorial(0)
        1.0
        >>> factorial(5)
        120.0
    """
    result = 1.0

    for k in range(2, value + 1):
        result *= k
        if math.isinf(result):
            break

    return result


# =============================================================================
# MODULO
# =============================================================================


def mod(value: float, divisor: float) -> float:
    """
    Остаток от деления с усечением частного.

    Частное подтягивается на EPSILON в сторону своего знака, чтобы значения
    вроде 2.9999999 / 1 усекались до 3, а не до 2. Если подтяжка перескочила
    целое (знак остатка не совпал со знаком value), остаток в пределах
    EPSILON от нуля считается нулём, а больший возвращается на один
    abs(divisor) назад. Остатки, не связанные с подтяжкой, сохраняются
    как есть: mod(10.000005, 1.0) ≈ 5e-6.

    При abs(частного) >= 2^52 произведение multiplier * divisor теряет
    точность, и остаток вычисляется точным вычитанием кратных divisor·2^k
    (результат совпадает с math.fmod).

    Результат:
    - знак совпадает со знаком value
    - abs(результат) < abs(divisor)
    - точный ноль и остаток в пределах EPSILON от ±divisor → ровно 0.0

    Sentinel-значения:
    - value NaN/±Inf или divisor NaN → NaN
    - divisor ±Inf → value

    Examples:
        >>> round(mod(5.3, 2.0), 10)
        1.3
        >>> mod(-3.5, 2.0)
        -1.5
        >>> mod(4.0, 2.0)
        0.0
        >>> mod(1e300, 3.0) == math.fmod(1e300, 3.0)
        True
    """
    if not is_finite(value) or math.isnan(divisor):
        return NAN

    if math.isinf(divisor):
        return value

    if equals(value, 0.0):
        return 0.0

    quotient = value / divisor

    if math.isinf(quotient) or absolute(quotient) >= _EXACT_QUOTIENT_LIMIT:
        remainder = _reduce_exact(value, divisor)
    else:
        multiplier = math.trunc(quotient + EPSILON * sign(quotient))
        remainder = value - multiplier * divisor

        if remainder != 0.0 and (remainder < 0.0) != (value < 0.0):
            # подтяжка перескочила кратное divisor
            if equals(remainder, 0.0):
                return 0.0
            remainder += math.copysign(absolute(divisor), value)

    if remainder == 0.0 or equals(absolute(remainder), absolute(divisor)):
        return 0.0

    return remainder


def _reduce_exact(value: float, divisor: float) -> float:
    """
    Точный остаток через вычитание divisor·2^k, от старших k к младшим.

    Инвариант цикла: scaled <= remaining < 2·scaled перед вычитанием,
    поэтому каждая разность представима точно.
    """
    remaining = absolute(value)
    step = absolute(divisor)

    scaled = step
    while scaled * 2.0 <= remaining:
        scaled *= 2.0

    while scaled >= step:
        if remaining >= scaled:
            remaining -= scaled
        scaled *= 0.5

    return math.copysign(remaining, value)



# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def sin(value: float) -> float:
    """
    Синус через ряд Маклорена.

    Аргумент приводится в (-2π, 2π) через mod(value, 2π). Члены ряда
    накапливаются до первого члена в пределах EPSILON от нуля включительно:
    этот последний член тоже прибавляется, а не отбрасывается перед
    остановкой. Член NaN/Inf останавливает суммирование без накопления.
    Жёсткий лимит: SERIES_MAX_TERMS членов.

    Examples:
        >>> abs(sin(0.5) - 0.479425538604203) < 1e-6
        True
        >>> sin(float("nan"))
        nan
    """
    if not is_finite(value):
        return NAN

    x = mod(value, TWO_PI)

    result = 0.0
    for n in range(SERIES_MAX_TERMS):
        term = pow(-1.0, n) * pow(x, 2 * n + 1) / factorial(2 * n + 1)

        if not is_finite(term):
            break

        result += term

        if equals(term, 0.0):
            break
    else:
        logger.warning(
            "Maclaurin sine series for %r (reduced %r) hit the %d term cap", value, x, SERIES_MAX_TERMS
        )

    return result


def cos(value: float) -> float:
    """Косинус как sin(value + π/2)."""
    if not is_finite(value):
        return NAN

    return sin(value + HALF_PI)


def tan(value: float) -> float:
    """
    Тангенс как sin / cos.

    Кратность π и π/2 проверяется в dispatch; здесь только защита от
    точного нуля в знаменателе.
    """
    if not is_finite(value):
        return NAN

    denominator = cos(value)
    if denominator == 0.0:
        return NAN

    return sin(value) / denominator
