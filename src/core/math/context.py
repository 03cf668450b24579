"""
EvaluationContext — Выбор стратегии вычислений

Immutable Pydantic модель, которая явно передаётся в каждую операцию и
определяет стратегию:
- AHEAD_OF_TIME: сходящиеся методы без math-библиотеки платформы
  (Newton-Raphson, ряд Маклорена, итеративные pow/factorial)
- RUNTIME: делегирование в модуль math

Контракты операций одинаковы в обоих режимах. Глобального изменяемого
состояния нет: контекст либо передаётся явно, либо берётся константа
RUNTIME по умолчанию.
"""

from enum import Enum

from pydantic import BaseModel, Field

# =============================================================================
# ENUMS
# =============================================================================


class EvaluationMode(str, Enum):
    """Режим вычислений"""

    AHEAD_OF_TIME = "ahead_of_time"
    RUNTIME = "runtime"


# =============================================================================
# MODELS
# =============================================================================


class EvaluationContext(BaseModel):
    """
    Контекст вычислений одного вызова.

    Examples:
        >>> EvaluationContext().is_ahead_of_time
        False
        >>> EvaluationContext(mode="ahead_of_time").is_ahead_of_time
        True
    """

    mode: EvaluationMode = Field(
        default=EvaluationMode.RUNTIME,
        description="Стратегия: сходящиеся методы или math платформы",
    )

    model_config = {"frozen": True}

    @property
    def is_ahead_of_time(self) -> bool:
        """True если math-библиотека платформы недоступна"""
        return self.mode == EvaluationMode.AHEAD_OF_TIME


# =============================================================================
# ПРЕДОПРЕДЕЛЁННЫЕ КОНТЕКСТЫ
# =============================================================================

RUNTIME = EvaluationContext(mode=EvaluationMode.RUNTIME)

AHEAD_OF_TIME = EvaluationContext(mode=EvaluationMode.AHEAD_OF_TIME)
