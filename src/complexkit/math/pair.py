"""
CanonicalPair — каноническое представление (re, im)

Результат нормализации любого входа. Создаётся заново при каждом вызове
normalize() и никогда не переиспользуется между вызовами.
"""

from typing import NamedTuple


class CanonicalPair(NamedTuple):
    """Каноническая пара (вещественная часть, мнимая часть)."""

    re: float
    im: float
