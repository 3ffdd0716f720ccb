"""
Trigonometry — тригонометрические и гиперболические функции

Прямые функции выражены через вещественные sin/cos и cosh/sinh
(numerical_safeguards). Обратные функции (asin, acos, atan) собираются
из log/sqrt/div на уровне ComplexValue.

ФОРМУЛЫ:
    sin z  = sin re·cosh im + i·cos re·sinh im
    cos z  = cos re·cosh im - i·sin re·sinh im
    tan z  = (sin 2re + i·sinh 2im) / (cos 2re + cosh 2im)
    sinh z = sinh re·cos im + i·cosh re·sin im
    cosh z = cosh re·cos im + i·sinh re·sin im
    tanh z = (sinh 2re + i·sin 2im) / (cosh 2re + cos 2im)
"""

import math

from complexkit.math.numerical_safeguards import real_cosh, real_sinh
from complexkit.math.pair import CanonicalPair

# Полюс tan/tanh: знаменатель ровно 0, результат неконечен
_POLE: CanonicalPair = CanonicalPair(math.nan, math.nan)


# =============================================================================
# ТРИГОНОМЕТРИЧЕСКИЕ
# =============================================================================


def sin(z: CanonicalPair) -> CanonicalPair:
    return CanonicalPair(
        math.sin(z.re) * real_cosh(z.im),
        math.cos(z.re) * real_sinh(z.im),
    )


def cos(z: CanonicalPair) -> CanonicalPair:
    return CanonicalPair(
        math.cos(z.re) * real_cosh(z.im),
        -math.sin(z.re) * real_sinh(z.im),
    )


def tan(z: CanonicalPair) -> CanonicalPair:
    """
    Тангенс через удвоенные аргументы.

    Знаменатель d = cos 2re + cosh 2im обращается в ноль только при
    im == 0 и cos 2re == -1; в этой точке возвращается полюс (NaN).
    """
    d = math.cos(2 * z.re) + real_cosh(2 * z.im)

    if d == 0:
        return _POLE

    return CanonicalPair(math.sin(2 * z.re) / d, real_sinh(2 * z.im) / d)


# =============================================================================
# ГИПЕРБОЛИЧЕСКИЕ
# =============================================================================


def sinh(z: CanonicalPair) -> CanonicalPair:
    return CanonicalPair(
        real_sinh(z.re) * math.cos(z.im),
        real_cosh(z.re) * math.sin(z.im),
    )


def cosh(z: CanonicalPair) -> CanonicalPair:
    return CanonicalPair(
        real_cosh(z.re) * math.cos(z.im),
        real_sinh(z.re) * math.sin(z.im),
    )


def tanh(z: CanonicalPair) -> CanonicalPair:
    d = real_cosh(2 * z.re) + math.cos(2 * z.im)

    if d == 0:
        return _POLE

    return CanonicalPair(real_sinh(2 * z.re) / d, math.sin(2 * z.im) / d)
