"""
Тесты для операторов Python поверх ComplexValue

Операторы делегируют именованным операциям, поэтому наследуют их
политику граничных случаев (DivisionByZero, 0^w = 0, InvalidParameter).
"""

import pytest

from complexkit import ONE, ZERO, make
from complexkit.errors import DivisionByZero, InvalidParameter


class TestOperators:
    """Тесты + - * / ** abs() и унарного минуса"""

    def test_binary_operators(self) -> None:
        a = make(1, 2)
        b = make(3, 4)
        assert (a + b).to_vector() == [4.0, 6.0]
        assert (b - a).to_vector() == [2.0, 2.0]
        assert (a * b).to_vector() == [-5.0, 10.0]
        assert (make(-5, 10) / b).equals(a)

    def test_operand_normalization(self) -> None:
        """Правый операнд может быть строкой, числом или complex"""
        a = make(1, 1)
        assert (a + "2-3i").to_vector() == [3.0, -2.0]
        assert (a * 2).to_vector() == [2.0, 2.0]
        assert (a - complex(1, 1)) == ZERO

    def test_reflected_operators(self) -> None:
        a = make(1, 1)
        assert (2 + a).to_vector() == [3.0, 1.0]
        assert (2 - a).to_vector() == [1.0, -1.0]
        assert (2 * a).to_vector() == [2.0, 2.0]
        assert (2 / make(0, 2)).to_vector() == [0.0, -1.0]

    def test_power_operators(self) -> None:
        assert (make(2, 0) ** 3).equals(8, 0)
        assert (ZERO ** 0) == ZERO
        assert (2 ** make(3, 0)).equals(8, 0)

    def test_unary(self) -> None:
        assert (-make(1, -1)).to_vector() == [-1.0, 1.0]
        assert abs(make(3, 4)) == 5.0

    def test_true_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            ONE / 0
        with pytest.raises(ZeroDivisionError):
            1 / ZERO

    def test_unsupported_operand_raises(self) -> None:
        with pytest.raises(InvalidParameter):
            ONE + [1, 2]

    def test_exact_equality_operator(self) -> None:
        """== — точное сравнение полей, equals() — с толерантностью"""
        assert make(1, 2) == make("1+2i")
        assert make(0, 0) != make(1e-17, 0)
        assert make(0, 0).equals(1e-17, 0)
