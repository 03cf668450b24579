"""
Errors — Таксономия ошибок numcore

Каждая ошибка поднимается синхронно в точке нарушения предусловия.
NaN и Inf ошибками не считаются: они распространяются как значения.

Иерархия:
    NumericError
    ├── NegativeInputError  (ValueError)         — отрицательный операнд
    ├── ZeroDivisorError    (ZeroDivisionError)  — делитель ≈ 0
    ├── ZeroInputError      (ValueError)         — нулевой операнд GCD
    └── OrderingError       (ValueError)         — GCD: a < b
"""


class NumericError(Exception):
    """Базовая ошибка всех операций numcore."""
    pass


class NegativeInputError(NumericError, ValueError):
    """
    Значение, которое обязано быть неотрицательным, отрицательно.

    Возникает для:
    - sqrt(value) при value < 0
    - factorial(value) при value < 0
    - euclidean_gcd(a, b) при a < 0 или b < 0
    """
    pass


class ZeroDivisorError(NumericError, ZeroDivisionError):
    """Делитель mod() равен нулю с точностью до EPSILON."""
    pass


class ZeroInputError(NumericError, ValueError):
    """Один из операндов euclidean_gcd() равен нулю."""
    pass


class OrderingError(NumericError, ValueError):
    """Первый операнд euclidean_gcd() меньше второго."""
    pass
