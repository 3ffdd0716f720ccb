"""
Inputs — закрытое множество форм входа нормализатора

Любой вход классифицируется ровно один раз в один из вариантов:

    EmptyInput | PairInput | CartesianInput | PolarInput | ScalarInput | TextInput

Каждый вариант знает, как превратить себя в CanonicalPair (resolve()).
Дальше ядро работает только с канонической парой, без проверки типов.

Приоритет классификации (a, b):
1. a и b отсутствуют                      → EmptyInput
2. b присутствует                         → PairInput(float(a), float(b))
3. a — mapping с ключами r и i            → CartesianInput
   a — mapping с ключами abs и arg        → PolarInput
   a — вещественное число (не bool)       → ScalarInput
   a — строка                             → TextInput
   a — complex / ComplexValue             → CartesianInput
4. иначе                                  → InvalidParameter
"""

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Real
from typing import Any, Union

from complexkit.domain.tokenizer import parse_text
from complexkit.errors import InvalidParameter
from complexkit.math.numerical_safeguards import is_valid_float
from complexkit.math.pair import CanonicalPair

logger = logging.getLogger(__name__)


# =============================================================================
# ВАРИАНТЫ ВХОДА
# =============================================================================


@dataclass(frozen=True)
class EmptyInput:
    """Отсутствующий вход: ноль."""

    def resolve(self) -> CanonicalPair:
        return CanonicalPair(0.0, 0.0)


@dataclass(frozen=True)
class PairInput:
    """Два числовых аргумента (re, im)."""

    re: float
    im: float

    def resolve(self) -> CanonicalPair:
        return CanonicalPair(self.re, self.im)


@dataclass(frozen=True)
class CartesianInput:
    """Структура с декартовыми полями r, i (mapping, complex, ComplexValue)."""

    r: float
    i: float

    def resolve(self) -> CanonicalPair:
        return CanonicalPair(self.r, self.i)


@dataclass(frozen=True)
class PolarInput:
    """Структура с полярными полями abs, arg."""

    abs: float
    arg: float

    def resolve(self) -> CanonicalPair:
        """(abs·cos(arg), abs·sin(arg))"""
        if not is_valid_float(self.arg):
            logger.debug("Non-finite polar angle arg=%r", self.arg)
            raise InvalidParameter(f"Polar angle must be finite, got {self.arg}")

        return CanonicalPair(self.abs * math.cos(self.arg), self.abs * math.sin(self.arg))


@dataclass(frozen=True)
class ScalarInput:
    """Одно вещественное число."""

    value: float

    def resolve(self) -> CanonicalPair:
        return CanonicalPair(self.value, 0.0)


@dataclass(frozen=True)
class TextInput:
    """Текстовая запись, разбираемая токенизатором."""

    text: str

    def resolve(self) -> CanonicalPair:
        return parse_text(self.text)


NormalizerInput = Union[
    EmptyInput, PairInput, CartesianInput, PolarInput, ScalarInput, TextInput
]


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def _coerce(value: Any, name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError, OverflowError):
        logger.debug("Cannot coerce %s=%r to float", name, value)
        raise InvalidParameter(f"{name} must be a number, got {value!r}") from None


def _has_keys(value: Mapping, *keys: str) -> bool:
    return all(key in value for key in keys)


def classify(a: Any = None, b: Any = None) -> NormalizerInput:
    """
    Классификация сырого входа в один из вариантов.

    Args:
        a: Первый аргумент (число, строка, mapping, complex, ComplexValue)
        b: Второй аргумент (мнимая часть в форме пары)

    Returns:
        Вариант входа

    Raises:
        InvalidParameter: если форма входа не поддерживается

    Examples:
        >>> classify()
        EmptyInput()
        >>> classify(3, 2)
        PairInput(re=3.0, im=2.0)
        >>> classify({"abs": 2, "arg": 0})
        PolarInput(abs=2.0, arg=0.0)
        >>> classify("3+2i")
        TextInput(text='3+2i')
    """
    if a is None and b is None:
        return EmptyInput()

    if b is not None:
        return PairInput(_coerce(a, "re"), _coerce(b, "im"))

    if isinstance(a, Mapping):
        if _has_keys(a, "r", "i"):
            return CartesianInput(_coerce(a["r"], "r"), _coerce(a["i"], "i"))
        if _has_keys(a, "abs", "arg"):
            return PolarInput(_coerce(a["abs"], "abs"), _coerce(a["arg"], "arg"))

        logger.debug("Mapping without r/i or abs/arg keys: %r", a)
        raise InvalidParameter(
            f"Mapping input must have keys 'r' and 'i' or 'abs' and 'arg', got {sorted(map(str, a))}"
        )

    if isinstance(a, Real) and not isinstance(a, bool):
        return ScalarInput(_coerce(a, "value"))

    if isinstance(a, str):
        return TextInput(a)

    # complex и ComplexValue (через __complex__)
    if isinstance(a, complex) or hasattr(type(a), "__complex__"):
        c = complex(a)
        return CartesianInput(c.real, c.imag)

    logger.debug("Unsupported input type %s", type(a).__name__)
    raise InvalidParameter(f"Unsupported input type {type(a).__name__}: {a!r}")
