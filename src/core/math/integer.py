"""
Integer — Наибольший общий делитель (алгоритм Евклида)

Целочисленный слой, независимый от float-стека и EvaluationContext.

Предусловия контракта:
- оба операнда — неотрицательные int
- ни один операнд не равен нулю
- первый операнд не меньше второго (вызывающая сторона сортирует сама)

Число шагов логарифмично по меньшему операнду (рост Фибоначчи).
"""

import logging

from src.core.math.errors import NegativeInputError, OrderingError, ZeroInputError

logger = logging.getLogger(__name__)


def euclidean_gcd(a: int, b: int) -> int:
    """
    НОД двух чисел, a >= b > 0.

    Алгоритм:
        m = a mod b; m == 0 → b; иначе (a, b) = (b, m)

    Args:
        a: Больший операнд
        b: Меньший операнд

    Returns:
        Наибольший общий делитель a и b

    Raises:
        TypeError: если операнд не int
        NegativeInputError: если a < 0 или b < 0
        ZeroInputError: если a == 0 или b == 0
        OrderingError: если a < b

    Examples:
        >>> euclidean_gcd(1071, 462)
        21
        >>> euclidean_gcd(7, 7)
        7
    """
    for name, operand in (("a", a), ("b", b)):
        if isinstance(operand, bool) or not isinstance(operand, int):
            raise TypeError(f"{name} must be an int, got {type(operand).__name__}")

    if a < 0 or b < 0:
        logger.debug("euclidean_gcd rejected negative operands a=%r b=%r", a, b)
        raise NegativeInputError(f"gcd operands must be non-negative, got a={a}, b={b}")

    if a == 0 or b == 0:
        logger.debug("euclidean_gcd rejected zero operands a=%r b=%r", a, b)
        raise ZeroInputError(f"gcd operands must not be zero, got a={a}, b={b}")

    if a < b:
        logger.debug("euclidean_gcd rejected unordered operands a=%r b=%r", a, b)
        raise OrderingError(f"gcd requires a >= b, got a={a}, b={b}")

    while True:
        remainder = a % b
        if remainder == 0:
            return b
        a, b = b, remainder
