"""
complexkit — неизменяемые комплексные числа с детерминированной нормализацией входа

Пример:

    >>> from complexkit import make
    >>> make("3+2i").mul(2).sub(0, 1).to_string()
    '6+3i'
"""

from complexkit.domain import E, I, ONE, PI, ZERO, ComplexValue, make, normalize
from complexkit.errors import ComplexError, DivisionByZero, InvalidParameter

__version__ = "1.5.0"

__all__ = [
    "ComplexValue",
    "make",
    "normalize",
    "ZERO",
    "ONE",
    "I",
    "PI",
    "E",
    "ComplexError",
    "InvalidParameter",
    "DivisionByZero",
]
