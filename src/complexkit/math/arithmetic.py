"""
Arithmetic — арифметическое ядро над каноническими парами

Чистые функции: принимают CanonicalPair, возвращают новую CanonicalPair.
Проверка конечности результата выполняется на уровне ComplexValue.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на пару с нулевым модулем → DivisionByZero (без fallback)
2. Операнды никогда не мутируются
"""

import logging
import math

from complexkit.errors import DivisionByZero
from complexkit.math.pair import CanonicalPair

logger = logging.getLogger(__name__)


# =============================================================================
# СЛОЖЕНИЕ / ВЫЧИТАНИЕ / УМНОЖЕНИЕ
# =============================================================================


def add(z: CanonicalPair, w: CanonicalPair) -> CanonicalPair:
    return CanonicalPair(z.re + w.re, z.im + w.im)


def sub(z: CanonicalPair, w: CanonicalPair) -> CanonicalPair:
    return CanonicalPair(z.re - w.re, z.im - w.im)


def mul(z: CanonicalPair, w: CanonicalPair) -> CanonicalPair:
    """
    Произведение: (a + bi)(c + di) = (ac - bd) + (ad + bc)i
    """
    return CanonicalPair(
        z.re * w.re - z.im * w.im,
        z.re * w.im + z.im * w.re,
    )


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def div(z: CanonicalPair, w: CanonicalPair) -> CanonicalPair:
    """
    Частное z / w.

    Формула:
        t = c² + d²
        (a + bi) / (c + di) = ((ca + db) + (cb - da)i) / t

    Args:
        z: Делимое
        w: Делитель

    Returns:
        Новая пара z / w

    Raises:
        DivisionByZero: если t == 0 (в т.ч. при underflow c² + d² в ноль)
    """
    t = w.re * w.re + w.im * w.im

    if t == 0:
        logger.debug("Division by zero-magnitude divisor: %r / %r", z, w)
        raise DivisionByZero(f"Division by zero: divisor {tuple(w)} has zero magnitude")

    return CanonicalPair(
        (w.re * z.re + w.im * z.im) / t,
        (w.re * z.im - w.im * z.re) / t,
    )


def inverse(z: CanonicalPair) -> CanonicalPair:
    """Обратное значение 1 / z."""
    return div(CanonicalPair(1.0, 0.0), z)


# =============================================================================
# УНАРНЫЕ ОПЕРАЦИИ
# =============================================================================


def conjugate(z: CanonicalPair) -> CanonicalPair:
    return CanonicalPair(z.re, -z.im)


def neg(z: CanonicalPair) -> CanonicalPair:
    return CanonicalPair(-z.re, -z.im)


def magnitude(z: CanonicalPair) -> float:
    """Евклидова норма sqrt(re² + im²)."""
    return math.hypot(z.re, z.im)


def argument(z: CanonicalPair) -> float:
    """Аргумент atan2(im, re) в диапазоне (-π, π]."""
    return math.atan2(z.im, z.re)
