"""
Formatter — детерминированное текстовое представление и проекции

Строковая форма совместима с грамматикой токенизатора: make(to_string(z))
восстанавливает z для значений, чьи компоненты печатаются без экспоненты.

Правила to_string:
- re·im неконечно                          → "NaN"
- re != 0                                  → печатается re
- im != 0                                  → "+" только если re напечатан и im > 0;
                                             коэффициент 1 опускается, -1 → "-";
                                             затем маркер "i"
- ничего не напечатано                     → "0"

Числа печатаются кратчайшими цифрами repr(float), но с позиционной записью
при 1e-6 <= |x| < 1e21 и экспонентой вида "1e-7" / "1.5e+300" вне этого
диапазона.
"""

from decimal import Decimal
from typing import Final, Optional

from complexkit.domain.tokenizer import IMAGINARY_UNIT
from complexkit.math.numerical_safeguards import is_valid_float

# =============================================================================
# ПАРАМЕТРЫ ПЕЧАТИ
# =============================================================================

# Позиция десятичной точки n (|x| = 0.d1d2…dk · 10^n), при которой
# запись ещё позиционная: POSITIONAL_MIN_POINT < n <= POSITIONAL_MAX_POINT
POSITIONAL_MAX_POINT: Final[int] = 21
POSITIONAL_MIN_POINT: Final[int] = -6


# =============================================================================
# ЧИСЛА
# =============================================================================


def _shortest_digits(x: float) -> tuple[str, int]:
    """Кратчайшие цифры |x| без хвостовых нулей и позиция десятичной точки."""
    _, digits, exponent = Decimal(repr(abs(x))).normalize().as_tuple()
    text = "".join(map(str, digits))
    return text, len(text) + exponent


def format_number(x: float) -> str:
    """
    Печать одной компоненты.

    Args:
        x: Конечное число

    Returns:
        Позиционная запись для 1e-6 <= |x| < 1e21, иначе экспоненциальная

    Examples:
        >>> format_number(3.0)
        '3'
        >>> format_number(-2.5)
        '-2.5'
        >>> format_number(1e-05)
        '0.00001'
        >>> format_number(1e-07)
        '1e-7'
        >>> format_number(1e21)
        '1e+21'
    """
    if x == 0:
        return "0"

    sign = "-" if x < 0 else ""
    digits, point = _shortest_digits(x)
    k = len(digits)

    if k <= point <= POSITIONAL_MAX_POINT:
        return sign + digits + "0" * (point - k)
    if 0 < point <= POSITIONAL_MAX_POINT:
        return sign + digits[:point] + "." + digits[point:]
    if POSITIONAL_MIN_POINT < point <= 0:
        return sign + "0." + "0" * -point + digits

    exponent = point - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"


def to_string(re: float, im: float) -> str:
    """
    Каноническая строка комплексного числа.

    Examples:
        >>> to_string(0.0, 0.0)
        '0'
        >>> to_string(1.0, 1.0)
        '1+i'
        >>> to_string(0.0, -1.0)
        '-i'
        >>> to_string(3.0, -2.5)
        '3-2.5i'
    """
    if not is_valid_float(re * im):
        return "NaN"

    parts: list[str] = []

    if re != 0:
        parts.append(format_number(re))

    if im != 0:
        if re != 0 and im > 0:
            parts.append("+")

        if im == 1:
            pass
        elif im == -1:
            parts.append("-")
        else:
            parts.append(format_number(im))

        parts.append(IMAGINARY_UNIT)

    return "".join(parts) or "0"


def to_vector(re: float, im: float) -> list[float]:
    """Упорядоченная пара [re, im]."""
    return [re, im]


def value_of(re: float, im: float) -> Optional[float]:
    """
    Вещественное значение, если мнимая часть ровно 0.

    Returns:
        re при im == 0, иначе None (явный признак "не вещественное")
    """
    if im == 0:
        return re
    return None
