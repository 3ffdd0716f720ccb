"""
ComplexValue — неизменяемое комплексное число

Immutable Pydantic модель, хранящая каноническую пару (re, im).
Любая операция возвращает новый экземпляр; операнды не мутируются.

Бинарные операции (add, sub, mul, div, pow, equals) принимают операнд
в любой форме, поддерживаемой нормализатором: ComplexValue, число,
строку, mapping {r, i} / {abs, arg}, complex или пару (re, im).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. re, im и re·im всегда конечны (иначе InvalidParameter)
2. Деление на число с нулевым модулем → DivisionByZero
3. 0^w = 0 для любого w (включая w = 0)
4. Многозначные функции возвращают главную ветвь
"""

import math
from typing import Any, Callable, Optional

from pydantic import BaseModel, Field, model_validator

from complexkit.contracts import validate_complex_value
from complexkit.domain import formatter
from complexkit.domain.normalizer import normalize, validate_pair
from complexkit.errors import InvalidParameter
from complexkit.math import arithmetic, transcendental, trigonometry
from complexkit.math.numerical_safeguards import is_valid_float, pairs_close
from complexkit.math.pair import CanonicalPair


# =============================================================================
# COMPLEX VALUE MODEL
# =============================================================================


class ComplexValue(BaseModel):
    """
    Комплексное число re + im·i.

    Immutable модель (frozen=True). Создаётся через make() или через
    операции над другими значениями.
    """

    re: float = Field(..., allow_inf_nan=False, description="Вещественная часть")
    im: float = Field(..., allow_inf_nan=False, description="Мнимая часть")

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def validate_finite_product(self) -> "ComplexValue":
        """Произведение компонент тоже должно быть конечным."""
        if not is_valid_float(self.re * self.im):
            raise ValueError(f"re * im must be finite, got re={self.re}, im={self.im}")
        return self

    # -------------------------------------------------------------------------
    # Конструирование
    # -------------------------------------------------------------------------

    @classmethod
    def from_pair(cls, pair: CanonicalPair) -> "ComplexValue":
        """
        Создание из канонической пары с финальной проверкой конечности.

        Raises:
            InvalidParameter: если пара неконечна
        """
        pair = validate_pair(pair)
        return cls(re=pair.re, im=pair.im)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ComplexValue":
        """
        Десериализация из контракта complex_value ({"r": ..., "i": ...}).

        Raises:
            jsonschema.ValidationError: если данные не соответствуют схеме
            InvalidParameter: если компоненты неконечны
        """
        validate_complex_value(data)
        return make(data)

    @property
    def pair(self) -> CanonicalPair:
        return CanonicalPair(self.re, self.im)

    def _apply(
        self,
        operation: Callable[..., CanonicalPair],
        *operands: CanonicalPair,
    ) -> "ComplexValue":
        try:
            result = operation(self.pair, *operands)
        except OverflowError as e:
            raise InvalidParameter(
                f"{operation.__name__} overflowed for {self.to_string()}"
            ) from e
        return ComplexValue.from_pair(result)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, a: Any = None, b: Any = None) -> "ComplexValue":
        return self._apply(arithmetic.add, normalize(a, b))

    def sub(self, a: Any = None, b: Any = None) -> "ComplexValue":
        return self._apply(arithmetic.sub, normalize(a, b))

    def mul(self, a: Any = None, b: Any = None) -> "ComplexValue":
        return self._apply(arithmetic.mul, normalize(a, b))

    def div(self, a: Any = None, b: Any = None) -> "ComplexValue":
        """
        Деление self / operand.

        Raises:
            DivisionByZero: если операнд имеет нулевой модуль
        """
        return self._apply(arithmetic.div, normalize(a, b))

    def pow(self, a: Any = None, b: Any = None) -> "ComplexValue":
        """
        Степень self^operand (главная ветвь).

        Нулевое основание даёт ZERO при любом показателе.
        """
        return self._apply(transcendental.power, normalize(a, b))

    def inverse(self) -> "ComplexValue":
        """
        1 / self.

        Raises:
            DivisionByZero: если self == 0
        """
        return self._apply(arithmetic.inverse)

    def conjugate(self) -> "ComplexValue":
        return self._apply(arithmetic.conjugate)

    def neg(self) -> "ComplexValue":
        return self._apply(arithmetic.neg)

    def clone(self) -> "ComplexValue":
        return self.model_copy()

    def abs(self) -> float:
        """Модуль |z|."""
        return arithmetic.magnitude(self.pair)

    def arg(self) -> float:
        """Аргумент atan2(im, re) ∈ (-π, π]."""
        return arithmetic.argument(self.pair)

    # -------------------------------------------------------------------------
    # Экспонента, логарифм, корень
    # -------------------------------------------------------------------------

    def sqrt(self) -> "ComplexValue":
        return self._apply(transcendental.sqrt)

    def exp(self) -> "ComplexValue":
        return self._apply(transcendental.exp)

    def log(self) -> "ComplexValue":
        """
        Главная ветвь ln z.

        Raises:
            InvalidParameter: для z == 0 (вещественная часть -inf)
        """
        return self._apply(transcendental.log)

    # -------------------------------------------------------------------------
    # Тригонометрия
    # -------------------------------------------------------------------------

    def sin(self) -> "ComplexValue":
        return self._apply(trigonometry.sin)

    def cos(self) -> "ComplexValue":
        return self._apply(trigonometry.cos)

    def tan(self) -> "ComplexValue":
        return self._apply(trigonometry.tan)

    def asin(self) -> "ComplexValue":
        """asin z = -i·log(i·z + sqrt(1 - z²))"""
        root = self.mul(self).neg().add(1).sqrt()
        return root.add(self.mul(I)).log().mul(I).neg()

    def acos(self) -> "ComplexValue":
        """acos z = -i·log(z + i·sqrt(1 - z²))"""
        root = self.mul(self).neg().add(1).sqrt()
        return root.mul(I).add(self).log().mul(I).neg()

    def atan(self) -> "ComplexValue":
        """
        atan z = log((i + z) / (i - z))·i / 2

        Raises:
            DivisionByZero: для z == i
        """
        return I.add(self).div(I.sub(self)).log().mul(I).div(2)

    # -------------------------------------------------------------------------
    # Гиперболические
    # -------------------------------------------------------------------------

    def sinh(self) -> "ComplexValue":
        return self._apply(trigonometry.sinh)

    def cosh(self) -> "ComplexValue":
        return self._apply(trigonometry.cosh)

    def tanh(self) -> "ComplexValue":
        return self._apply(trigonometry.tanh)

    # -------------------------------------------------------------------------
    # Сравнение и представление
    # -------------------------------------------------------------------------

    def equals(self, a: Any = None, b: Any = None) -> bool:
        """
        Покомпонентное сравнение с толерантностью EPSILON = 1e-16.

        Raises:
            InvalidParameter: если операнд не нормализуется
        """
        other = normalize(a, b)
        return pairs_close(self.re, self.im, other.re, other.im)

    def to_string(self) -> str:
        return formatter.to_string(self.re, self.im)

    def to_vector(self) -> list[float]:
        return formatter.to_vector(self.re, self.im)

    def value_of(self) -> Optional[float]:
        """re если im == 0, иначе None."""
        return formatter.value_of(self.re, self.im)

    def to_dict(self) -> dict[str, float]:
        """Сериализация в контракт complex_value."""
        return {"r": self.re, "i": self.im}

    # -------------------------------------------------------------------------
    # Протоколы Python
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return self.to_string()

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __float__(self) -> float:
        value = self.value_of()
        if value is None:
            raise TypeError(f"{self.to_string()} is not a real value")
        return value

    def __abs__(self) -> float:
        return self.abs()

    def __neg__(self) -> "ComplexValue":
        return self.neg()

    def __add__(self, other: Any) -> "ComplexValue":
        return self.add(other)

    def __radd__(self, other: Any) -> "ComplexValue":
        return make(other).add(self)

    def __sub__(self, other: Any) -> "ComplexValue":
        return self.sub(other)

    def __rsub__(self, other: Any) -> "ComplexValue":
        return make(other).sub(self)

    def __mul__(self, other: Any) -> "ComplexValue":
        return self.mul(other)

    def __rmul__(self, other: Any) -> "ComplexValue":
        return make(other).mul(self)

    def __truediv__(self, other: Any) -> "ComplexValue":
        return self.div(other)

    def __rtruediv__(self, other: Any) -> "ComplexValue":
        return make(other).div(self)

    def __pow__(self, other: Any) -> "ComplexValue":
        return self.pow(other)

    def __rpow__(self, other: Any) -> "ComplexValue":
        return make(other).pow(self)


# =============================================================================
# FACTORY
# =============================================================================


def make(a: Any = None, b: Any = None) -> ComplexValue:
    """
    Создание ComplexValue из любого поддерживаемого входа.

    Args:
        a: Число, строка, mapping {r, i} / {abs, arg}, complex, ComplexValue
           либо вещественная часть
        b: Мнимая часть (форма пары)

    Returns:
        Новый ComplexValue

    Raises:
        InvalidParameter: вход не распознан или неконечен

    Examples:
        >>> make("3+2i").to_vector()
        [3.0, 2.0]
        >>> make({"abs": 2, "arg": 0}).to_string()
        '2'
        >>> str(make(1, -1))
        '1-i'
    """
    return ComplexValue.from_pair(normalize(a, b))


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: ComplexValue = make(0, 0)
ONE: ComplexValue = make(1, 0)
I: ComplexValue = make(0, 1)
PI: ComplexValue = make(math.pi, 0)
E: ComplexValue = make(math.e, 0)
