"""
Normalizer — приведение любого входа к канонической паре

Единственная точка входа для сырых данных: конструктор ComplexValue,
операнды бинарных операций и equals() проходят через normalize().

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый вызов возвращает новую CanonicalPair; разделяемого
   изменяемого состояния между вызовами нет
2. Обе компоненты результата конечны и их произведение конечно,
   иначе InvalidParameter
3. Отказ детерминирован: один и тот же вход всегда даёт один и тот же
   результат или одно и то же исключение
"""

import logging
from typing import Any

from complexkit.domain.inputs import classify
from complexkit.errors import InvalidParameter
from complexkit.math.numerical_safeguards import is_valid_pair
from complexkit.math.pair import CanonicalPair

logger = logging.getLogger(__name__)


def validate_pair(pair: CanonicalPair) -> CanonicalPair:
    """
    Финальная проверка канонической пары.

    Raises:
        InvalidParameter: если re, im или re·im не конечны
    """
    if not is_valid_pair(pair.re, pair.im):
        logger.debug("Non-finite canonical pair %r", pair)
        raise InvalidParameter(
            f"Complex components must be finite numbers, got re={pair.re}, im={pair.im}"
        )

    return pair


def normalize(a: Any = None, b: Any = None) -> CanonicalPair:
    """
    Нормализация входа в каноническую пару (re, im).

    Args:
        a: Число, строка, mapping {r, i} / {abs, arg}, complex, ComplexValue
           либо вещественная часть в форме пары
        b: Мнимая часть в форме пары

    Returns:
        Новая каноническая пара

    Raises:
        InvalidParameter: вход не распознан или результат неконечен

    Examples:
        >>> normalize()
        CanonicalPair(re=0.0, im=0.0)
        >>> normalize("3+2i")
        CanonicalPair(re=3.0, im=2.0)
        >>> normalize({"r": 1, "i": -1})
        CanonicalPair(re=1.0, im=-1.0)
    """
    return validate_pair(classify(a, b).resolve())
