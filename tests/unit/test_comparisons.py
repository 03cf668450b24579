"""
Тесты для модуля Comparisons

Проверяет:
1. Равенство в полосе ±EPSILON
2. Строгие greater_than / less_than за пределами полосы
3. sign / absolute с учётом толерантности
4. Принятое ограничение на больших значениях
"""

import math

from src.core.math.comparisons import (
    absolute,
    equals,
    greater_than,
    is_finite,
    less_than,
    sign,
)
from src.core.math.constants import EPSILON


class TestEquals:
    """Тесты для equals"""

    def test_identical_values(self) -> None:
        """Одинаковые значения равны"""
        assert equals(1.0, 1.0)
        assert equals(0.0, -0.0)

    def test_difference_at_epsilon_is_equal(self) -> None:
        """Разность ровно EPSILON внутри полосы"""
        assert equals(1.0, 1.00001)
        assert equals(1.00001, 1.0)
        assert equals(0.0, EPSILON)
        assert equals(0.0, -EPSILON)

    def test_difference_beyond_epsilon(self) -> None:
        """Разность больше EPSILON — не равны"""
        assert not equals(1.0, 1.001)
        assert not equals(1.0, 1.0001)
        assert not equals(-1.0, 1.0)

    def test_large_magnitudes_degrade_to_float_precision(self) -> None:
        """Большие значения: полоса меньше шага float (принятое ограничение)"""
        assert not equals(42_467_500_000.0, 42_467_500_006.0)
        assert equals(1e20, 1e20 + 1.0)  # 1e20 + 1 не представимо

    def test_nan_never_equal(self) -> None:
        """NaN не равен ничему"""
        assert not equals(math.nan, math.nan)
        assert not equals(math.nan, 0.0)


class TestGreaterLess:
    """Тесты для greater_than и less_than"""

    def test_greater_than(self) -> None:
        """a > b за пределами полосы"""
        assert greater_than(1.0, 0.5)
        assert greater_than(1.0, 0.999)

    def test_greater_than_within_band(self) -> None:
        """Внутри полосы — не больше"""
        assert not greater_than(1.0, 1.0)
        assert not greater_than(1.0, 0.99999)
        assert not greater_than(1.0, 0.999999)

    def test_less_than(self) -> None:
        """a < b за пределами полосы"""
        assert less_than(1.0, 1.001)
        assert less_than(-2.0, 0.0)

    def test_less_than_within_band(self) -> None:
        """Внутри полосы — не меньше"""
        assert not less_than(1.0, 1.0)
        assert not less_than(1.0, 1.00001)
        assert not less_than(1.0, 0.5)

    def test_trichotomy(self) -> None:
        """Ровно одно из equals / greater_than / less_than"""
        pairs = [(1.0, 2.0), (2.0, 1.0), (1.0, 1.000001), (0.0, -1e-6), (-3.0, -3.5)]
        for a, b in pairs:
            outcomes = [equals(a, b), greater_than(a, b), less_than(a, b)]
            assert outcomes.count(True) == 1, (a, b, outcomes)


class TestSignAbsolute:
    """Тесты для sign и absolute"""

    def test_sign(self) -> None:
        """Знак -1 / 0 / 1"""
        assert sign(-3.0) == -1
        assert sign(0.0) == 0
        assert sign(2.5) == 1

    def test_sign_within_band_is_zero(self) -> None:
        """Значения внутри полосы имеют знак 0"""
        assert sign(5e-6) == 0
        assert sign(-5e-6) == 0

    def test_absolute(self) -> None:
        """Модуль значений вне полосы"""
        assert absolute(-2.5) == 2.5
        assert absolute(2.5) == 2.5
        assert absolute(0.0) == 0.0

    def test_absolute_within_band_unchanged(self) -> None:
        """Малые отрицательные значения внутри полосы не меняются"""
        assert absolute(-5e-6) == -5e-6


class TestIsFinite:
    """Тесты для is_finite"""

    def test_sentinels(self) -> None:
        assert is_finite(0.0)
        assert is_finite(-1e308)
        assert not is_finite(math.inf)
        assert not is_finite(-math.inf)
        assert not is_finite(math.nan)
