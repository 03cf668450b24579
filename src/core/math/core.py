"""
NumericCore — Фасад numcore с привязанным контекстом

Объект хранит один EvaluationContext и передаёт его во все операции,
зависящие от стратегии. Операции без контекста (сравнения, углы, НОД)
доступны как статические методы для единообразия вызовов.

Пример:
    core = NumericCore.for_mode(EvaluationMode.AHEAD_OF_TIME)
    core.sqrt(52.0)   # Newton-Raphson
    core.sin(1.0)     # ряд Маклорена
"""

from dataclasses import dataclass

from src.core.math import dispatch
from src.core.math.angles import degrees_to_radians, radians_to_degrees
from src.core.math.comparisons import absolute, equals, greater_than, less_than, sign
from src.core.math.context import RUNTIME, EvaluationContext, EvaluationMode
from src.core.math.integer import euclidean_gcd


@dataclass(frozen=True)
class NumericCore:
    """Набор операций numcore, привязанный к одному контексту."""

    context: EvaluationContext = RUNTIME

    @classmethod
    def for_mode(cls, mode: EvaluationMode | str) -> "NumericCore":
        return cls(context=EvaluationContext(mode=mode))

    # Сравнения и конверсии не зависят от контекста
    equals = staticmethod(equals)
    greater_than = staticmethod(greater_than)
    less_than = staticmethod(less_than)
    sign = staticmethod(sign)
    absolute = staticmethod(absolute)
    radians_to_degrees = staticmethod(radians_to_degrees)
    degrees_to_radians = staticmethod(degrees_to_radians)
    euclidean_gcd = staticmethod(euclidean_gcd)

    def sqrt(self, value: float) -> float:
        return dispatch.sqrt(value, context=self.context)

    def pow(self, base: float, exponent: int) -> float:
        return dispatch.pow(base, exponent, context=self.context)

    def factorial(self, value: int) -> float:
        return dispatch.factorial(value, context=self.context)

    def mod(self, value: float, divisor: float) -> float:
        return dispatch.mod(value, divisor, context=self.context)

    def sin(self, value: float) -> float:
        return dispatch.sin(value, context=self.context)

    def cos(self, value: float) -> float:
        return dispatch.cos(value, context=self.context)

    def tan(self, value: float) -> float:
        return dispatch.tan(value, context=self.context)
