"""
Transcendental — степень, корень, экспонента, логарифм

Все многозначные функции возвращают главную ветвь:
- sqrt: Re(result) >= 0, знак мнимой части по Хевисайду от im (sign(0) = +1)
- log: мнимая часть = atan2(im, re) ∈ (-π, π]

ФОРМУЛЫ:
    z^w, |z| > 0:
        factor = |z|^er · e^(-ei·arg z)
        angle  = ei·ln|z| + er·arg z
        z^w    = factor · (cos angle + i·sin angle)
    z^w, |z| = 0:
        z^w = 0 (для любого w, включая w = 0)

Функции могут вернуть неконечную пару (переполнение exp, log(0) = -inf)
или бросить OverflowError из math.exp / float.__pow__. Оба случая
превращаются в InvalidParameter на уровне ComplexValue.
"""

import math

from complexkit.math.arithmetic import argument, magnitude
from complexkit.math.numerical_safeguards import heaviside_sign
from complexkit.math.pair import CanonicalPair


def power(z: CanonicalPair, w: CanonicalPair) -> CanonicalPair:
    """
    Комплексная степень z^w через полярную форму z.

    Нулевое основание даёт ровно (0, 0) при любом показателе: это правило
    проверяется раньше, чем показатель, поэтому 0^0 = 0.

    Args:
        z: Основание
        w: Показатель (er, ei)

    Returns:
        Новая пара z^w

    Examples:
        >>> power(CanonicalPair(0.0, 0.0), CanonicalPair(0.0, 0.0))
        CanonicalPair(re=0.0, im=0.0)
        >>> power(CanonicalPair(2.0, 0.0), CanonicalPair(3.0, 0.0))
        CanonicalPair(re=8.0, im=0.0)
    """
    abs_z = magnitude(z)

    if abs_z == 0:
        return CanonicalPair(0.0, 0.0)

    arg_z = argument(z)

    factor = abs_z ** w.re * math.exp(-w.im * arg_z)
    angle = w.im * math.log(abs_z) + w.re * arg_z

    return CanonicalPair(factor * math.cos(angle), factor * math.sin(angle))


def sqrt(z: CanonicalPair) -> CanonicalPair:
    """
    Главный квадратный корень.

    Формула:
        r = |z|
        sqrt(z) = sqrt((r + re) / 2) + i·sign(im)·sqrt((r - re) / 2)

    Examples:
        >>> sqrt(CanonicalPair(-1.0, 0.0))
        CanonicalPair(re=0.0, im=1.0)
        >>> sqrt(CanonicalPair(4.0, 0.0))
        CanonicalPair(re=2.0, im=0.0)
    """
    r = magnitude(z)

    return CanonicalPair(
        math.sqrt((r + z.re) / 2),
        heaviside_sign(z.im) * math.sqrt((r - z.re) / 2),
    )


def exp(z: CanonicalPair) -> CanonicalPair:
    """e^z = e^re · (cos im + i·sin im)"""
    scale = math.exp(z.re)
    return CanonicalPair(scale * math.cos(z.im), scale * math.sin(z.im))


def log(z: CanonicalPair) -> CanonicalPair:
    """
    Главная ветвь натурального логарифма: (ln|z|, atan2(im, re)).

    |z| берётся через hypot, поэтому большие компоненты не переполняются
    (ln|1e200| ≈ 460.5). Для нулевого модуля вещественная часть равна -inf
    (результат будет отвергнут как неконечный).
    """
    abs_z = magnitude(z)
    log_abs = math.log(abs_z) if abs_z > 0 else -math.inf

    return CanonicalPair(log_abs, argument(z))
