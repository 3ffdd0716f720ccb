"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Проверки конечности компонент и пары
2. Покомпонентное epsilon-сравнение
3. Функцию Хевисайда (sign(0) = +1)
4. Вещественные cosh/sinh
"""

import math

import pytest

from complexkit.math.numerical_safeguards import (
    EPSILON,
    heaviside_sign,
    is_close_abs,
    is_valid_float,
    is_valid_pair,
    pairs_close,
    real_cosh,
    real_sinh,
)

# =============================================================================
# ТЕСТЫ КОНЕЧНОСТИ
# =============================================================================


class TestFiniteness:
    """Тесты is_valid_float / is_valid_pair"""

    def test_valid_values(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e308)

    def test_invalid_values(self) -> None:
        assert not is_valid_float(math.nan)
        assert not is_valid_float(math.inf)
        assert not is_valid_float(-math.inf)

    def test_pair_requires_finite_product(self) -> None:
        """Конечные компоненты с переполняющимся произведением отвергаются"""
        assert is_valid_pair(1e150, 1e150)
        assert not is_valid_pair(1e200, 1e200)

    def test_pair_with_zero_and_nan(self) -> None:
        assert not is_valid_pair(0.0, math.nan)


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestEpsilonComparisons:
    """Тесты is_close_abs / pairs_close"""

    def test_epsilon_value(self) -> None:
        assert EPSILON == 1e-16

    def test_boundary_is_inclusive(self) -> None:
        assert is_close_abs(0.0, EPSILON)
        assert not is_close_abs(0.0, 2 * EPSILON)

    def test_custom_eps(self) -> None:
        assert is_close_abs(1.0, 1.001, eps=1e-2)

    def test_pairs_close_componentwise(self) -> None:
        """Каждая компонента ограничена независимо"""
        assert pairs_close(0.0, 0.0, EPSILON, EPSILON)
        assert not pairs_close(0.0, 0.0, 0.0, 3 * EPSILON)


# =============================================================================
# ТЕСТЫ ВЕЩЕСТВЕННЫХ ФУНКЦИЙ
# =============================================================================


class TestRealHelpers:
    """Тесты heaviside_sign / real_cosh / real_sinh"""

    def test_heaviside_sign(self) -> None:
        assert heaviside_sign(-0.5) == -1.0
        assert heaviside_sign(0.0) == 1.0
        assert heaviside_sign(-0.0) == 1.0
        assert heaviside_sign(3.0) == 1.0

    @pytest.mark.parametrize("x", [-2.0, -0.5, 0.0, 0.5, 3.0])
    def test_cosh_sinh_match_math(self, x: float) -> None:
        assert real_cosh(x) == pytest.approx(math.cosh(x))
        assert real_sinh(x) == pytest.approx(math.sinh(x), abs=1e-15)

    def test_cosh_overflow_raises(self) -> None:
        """math.exp переполняется → OverflowError (обрабатывается выше)"""
        with pytest.raises(OverflowError):
            real_cosh(1000.0)
