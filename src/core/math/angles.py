"""
Angles — Конверсия радианы ↔ градусы

Коэффициенты выводятся из канонического PI, поэтому
degrees_to_radians(radians_to_degrees(r)) совпадает с r в пределах EPSILON.
"""

from src.core.math.constants import DEG_TO_RAD, RAD_TO_DEG


def radians_to_degrees(radians: float) -> float:
    """
    Радианы → градусы.

    Examples:
        >>> round(radians_to_degrees(1.5707963267948966), 9)
        90.0
    """
    return radians * RAD_TO_DEG


def degrees_to_radians(degrees: float) -> float:
    """
    Градусы → радианы.

    Examples:
        >>> round(degrees_to_radians(-90.0), 2)
        -1.57
    """
    return degrees * DEG_TO_RAD
