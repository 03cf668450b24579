"""
Тесты для EvaluationContext и NumericCore
"""

import dataclasses

import pytest
from pydantic import ValidationError

from src.core.math.context import (
    AHEAD_OF_TIME,
    RUNTIME,
    EvaluationContext,
    EvaluationMode,
)
from src.core.math.core import NumericCore
from src.core.math.errors import NegativeInputError


class TestEvaluationContext:
    """Тесты для EvaluationContext"""

    def test_default_is_runtime(self) -> None:
        context = EvaluationContext()
        assert context.mode == EvaluationMode.RUNTIME
        assert not context.is_ahead_of_time

    def test_mode_from_string(self) -> None:
        context = EvaluationContext(mode="ahead_of_time")
        assert context.mode is EvaluationMode.AHEAD_OF_TIME
        assert context.is_ahead_of_time

    def test_unknown_mode_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EvaluationContext(mode="compile_time")

    def test_frozen(self) -> None:
        """Контекст нельзя изменить после создания"""
        with pytest.raises(ValidationError):
            RUNTIME.mode = EvaluationMode.AHEAD_OF_TIME  # type: ignore[misc]

    def test_predefined_contexts(self) -> None:
        assert RUNTIME == EvaluationContext()
        assert AHEAD_OF_TIME == EvaluationContext(mode=EvaluationMode.AHEAD_OF_TIME)
        assert len({RUNTIME, AHEAD_OF_TIME, EvaluationContext()}) == 2


class TestNumericCore:
    """Тесты для фасада NumericCore"""

    def test_default_context(self) -> None:
        assert NumericCore().context == RUNTIME

    def test_for_mode(self) -> None:
        core = NumericCore.for_mode("ahead_of_time")
        assert core.context.is_ahead_of_time

        core = NumericCore.for_mode(EvaluationMode.RUNTIME)
        assert not core.context.is_ahead_of_time

    def test_bound_operations(self) -> None:
        for core in (NumericCore(), NumericCore(context=AHEAD_OF_TIME)):
            assert core.sqrt(52.0) == pytest.approx(7.21, abs=0.005)
            assert core.pow(2.0, 5) == pytest.approx(32.0)
            assert core.factorial(4) == pytest.approx(24.0)
            assert core.mod(5.5, 2.0) == pytest.approx(1.5)
            assert core.sin(0.0) == pytest.approx(0.0, abs=1e-9)
            assert core.cos(0.0) == pytest.approx(1.0, abs=1e-6)
            assert core.tan(0.0) == 0.0

    def test_context_free_operations(self) -> None:
        core = NumericCore()
        assert core.equals(1.0, 1.00001)
        assert core.greater_than(2.0, 1.0)
        assert core.less_than(1.0, 2.0)
        assert core.sign(-4.0) == -1
        assert core.absolute(-4.0) == 4.0
        assert core.radians_to_degrees(0.0) == 0.0
        assert core.degrees_to_radians(180.0) == pytest.approx(3.14159, abs=1e-5)
        assert core.euclidean_gcd(1071, 462) == 21

    def test_errors_propagate(self) -> None:
        with pytest.raises(NegativeInputError):
            NumericCore(context=AHEAD_OF_TIME).sqrt(-1.0)

    def test_frozen(self) -> None:
        core = NumericCore()
        with pytest.raises(dataclasses.FrozenInstanceError):
            core.context = AHEAD_OF_TIME  # type: ignore[misc]
