"""
Dispatch — Публичные операции numcore

Каждая операция:
1. Проверяет предусловия и поднимает ошибку из errors
2. Выбирает стратегию по EvaluationContext (convergent или native)
3. Возвращает результат с одинаковым контрактом в обоих режимах

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Контекст передаётся явно, по умолчанию RUNTIME
2. Ошибки поднимаются до вызова стратегии, частичных результатов нет
3. NaN/Inf не являются ошибками и распространяются как значения
"""

import logging
from types import ModuleType

from src.core.math import convergent, native
from src.core.math.comparisons import equals, is_finite
from src.core.math.constants import HALF_PI, NAN, PI
from src.core.math.context import RUNTIME, EvaluationContext, EvaluationMode
from src.core.math.errors import NegativeInputError, ZeroDivisorError

logger = logging.getLogger(__name__)

_STRATEGIES: dict[EvaluationMode, ModuleType] = {
    EvaluationMode.AHEAD_OF_TIME: convergent,
    EvaluationMode.RUNTIME: native,
}


def _strategy(context: EvaluationContext) -> ModuleType:
    return _STRATEGIES[context.mode]


def _require_int(value: int, name: str) -> None:
    # bool является подклассом int, но степенью или факториалом не является
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


# =============================================================================
# КОРЕНЬ, СТЕПЕНЬ, ФАКТОРИАЛ
# =============================================================================


def sqrt(value: float, *, context: EvaluationContext = RUNTIME) -> float:
    """
    Квадратный корень.

    Args:
        value: Неотрицательное значение
        context: Стратегия вычисления

    Returns:
        sqrt(value); sqrt(0) == 0.0 ровно

    Raises:
        NegativeInputError: если value < 0

    Examples:
        >>> sqrt(100.0)
        10.0
        >>> round(sqrt(52.0), 2)
        7.21
    """
    if value < 0:
        logger.debug("sqrt rejected negative operand %r", value)
        raise NegativeInputError(f"sqrt operand must be non-negative, got {value}")

    if value == 0:
        return 0.0

    return _strategy(context).sqrt(value)


def pow(base: float, exponent: int, *, context: EvaluationContext = RUNTIME) -> float:
    """
    base в целой степени exponent.

    Raises:
        TypeError: если exponent не int
    """
    _require_int(exponent, "exponent")
    return _strategy(context).pow(base, exponent)


def factorial(value: int, *, context: EvaluationContext = RUNTIME) -> float:
    """
    value! как float.

    Raises:
        TypeError: если value не int
        NegativeInputError: если value < 0
    """
    _require_int(value, "value")

    if value < 0:
        logger.debug("factorial rejected negative argument %r", value)
        raise NegativeInputError(f"factorial argument must be non-negative, got {value}")

    if value == 0:
        return 1.0

    return _strategy(context).factorial(value)


# =============================================================================
# MODULO
# =============================================================================


def mod(value: float, divisor: float, *, context: EvaluationContext = RUNTIME) -> float:
    """
    Остаток от деления value на divisor.

    Знак результата совпадает со знаком value, abs(результат) < abs(divisor),
    кроме явного нулевого случая.

    Raises:
        ZeroDivisorError: если equals(divisor, 0)

    Examples:
        >>> mod(7.0, 7.0)
        0.0
    """
    if equals(divisor, 0.0):
        logger.debug("mod rejected divisor %r for value %r", divisor, value)
        raise ZeroDivisorError(f"mod divisor must not be zero, got {divisor}")

    return _strategy(context).mod(value, divisor)


# =============================================================================
# ТРИГОНОМЕТРИЯ
# =============================================================================


def sin(value: float, *, context: EvaluationContext = RUNTIME) -> float:
    """Синус (радианы); NaN для NaN/±Inf."""
    return _strategy(context).sin(value)


def cos(value: float, *, context: EvaluationContext = RUNTIME) -> float:
    """Косинус (радианы); NaN для NaN/±Inf."""
    return _strategy(context).cos(value)


def tan(value: float, *, context: EvaluationContext = RUNTIME) -> float:
    """
    Тангенс (радианы).

    Порядок проверок:
    1. NaN/±Inf → NaN
    2. value кратно π → 0.0
    3. value ненулевое и кратно π/2 → NaN (тангенс не определён)
    4. Вычисление выбранной стратегией

    Examples:
        >>> tan(0.0)
        0.0
        >>> tan(HALF_PI)
        nan
    """
    if not is_finite(value):
        return NAN

    if equals(mod(value, PI, context=context), 0.0):
        return 0.0

    if not equals(value, 0.0) and equals(mod(value, HALF_PI, context=context), 0.0):
        return NAN

    return _strategy(context).tan(value)
