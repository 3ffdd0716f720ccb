"""
Numerical Safeguards — примитивы численной устойчивости

Модуль содержит базовые проверки, на которые опираются все операции
над комплексными числами:
- Epsilon-параметр для покомпонентного сравнения
- Проверка конечности (NaN/Inf) отдельных компонент и канонической пары
- Функция Хевисайда для выбора главной ветви sqrt
- Вещественные cosh/sinh через экспоненту

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не санитизируются молча: вызывающий код получает False
   и обязан отказать во входе
2. Сравнение покомпонентное, а не по модулю разности
3. sign(0) = +1 (главная ветвь корня из отрицательного вещественного = +i)
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность для equals(): каждая компонента сравнивается отдельно
EPSILON: Final[float] = 1e-16


# =============================================================================
# ПРОВЕРКИ КОНЕЧНОСТИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_valid_pair(re: float, im: float) -> bool:
    """
    Проверка канонической пары на конечность.

    Пара валидна, если обе компоненты конечны И их произведение конечно.
    Второе условие отсекает пары вроде (1e200, 1e200), у которых
    произведение переполняется.

    Args:
        re: Вещественная часть
        im: Мнимая часть

    Returns:
        True если пара пригодна для ComplexValue

    Examples:
        >>> is_valid_pair(3.0, 2.0)
        True
        >>> is_valid_pair(float('nan'), 0.0)
        False
        >>> is_valid_pair(1e200, 1e200)
        False
    """
    return is_valid_float(re) and is_valid_float(im) and is_valid_float(re * im)


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def is_close_abs(a: float, b: float, eps: float = EPSILON) -> bool:
    """
    Абсолютное сравнение двух float: |a - b| <= eps.

    В отличие от math.isclose, относительная толерантность не применяется.
    """
    return abs(a - b) <= eps


def pairs_close(
    re1: float,
    im1: float,
    re2: float,
    im2: float,
    eps: float = EPSILON,
) -> bool:
    """
    Покомпонентное сравнение двух канонических пар.

    Алгоритм:
        |re1 - re2| <= eps AND |im1 - im2| <= eps

    Это НЕ проверка |z1 - z2| <= eps: каждая компонента ограничена
    независимо.

    Args:
        re1, im1: Первая пара
        re2, im2: Вторая пара
        eps: Абсолютная толерантность (default: EPSILON)

    Returns:
        True если обе компоненты в пределах eps
    """
    return is_close_abs(re1, re2, eps) and is_close_abs(im1, im2, eps)


# =============================================================================
# ВЕЩЕСТВЕННЫЕ ВСПОМОГАТЕЛЬНЫЕ ФУНКЦИИ
# =============================================================================


def heaviside_sign(x: float) -> float:
    """
    Знак в смысле функции Хевисайда: -1 для x < 0, иначе +1.

    Examples:
        >>> heaviside_sign(-2.5)
        -1.0
        >>> heaviside_sign(0.0)
        1.0
    """
    return -1.0 if x < 0 else 1.0


def real_cosh(x: float) -> float:
    """Гиперболический косинус: (e^x + e^-x) / 2."""
    return (math.exp(x) + math.exp(-x)) / 2


def real_sinh(x: float) -> float:
    """Гиперболический синус: (e^x - e^-x) / 2."""
    return (math.exp(x) - math.exp(-x)) / 2
