"""
Tokenizer — разбор текстовой записи комплексного числа

Грамматика токена (сканирование слева направо, максимальные токены):

    token := sign? body marker?
    sign  := '+' | '-'
    body  := ('0'..'9' | '.')*
    marker:= 'i'

Токен обязан содержать хотя бы один символ body или маркер. Символы,
с которых токен начаться не может, пропускаются; знак, за которым сразу
не следует символ body/маркер, тоже пропускается.

Семантика:
- Токен с маркером → коэффициент мнимой части. Пустой коэффициент или
  голый знак означают ±1.
- Токен без маркера → слагаемое вещественной части.
- Слагаемые одного типа суммируются: "1+2+3i" → (3, 3).

ВАЖНО: пробел разрывает связь знака с числом, т.е. "3 - 2i" разбирается
как токены "3" и "2i" → (3, 2).
"""

import logging
import re
from typing import Final, NamedTuple

from complexkit.errors import InvalidParameter
from complexkit.math.pair import CanonicalPair

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ ГРАММАТИКИ
# =============================================================================

IMAGINARY_UNIT: Final[str] = "i"
SIGNS: Final[str] = "+-"
NUMBER_BODY_CHARS: Final[str] = "0123456789."

# Числовой префикс тела токена: знак, цифры, не более одной точки, цифры
_NUMBER_PREFIX: Final = re.compile(r"[+-]?[0-9]*\.?[0-9]*")


# =============================================================================
# TOKEN
# =============================================================================


class Token(NamedTuple):
    """
    Распознанный токен.

    text — исходный фрагмент строки (со знаком и маркером),
    start — позиция начала в исходной строке.
    """

    text: str
    start: int
    imaginary: bool

    def coefficient(self) -> float:
        """
        Числовой коэффициент токена.

        Берётся самый длинный числовой префикс тела (цифры, одна точка,
        цифры): "1.2.3" → 1.2.

        Raises:
            InvalidParameter: если префикс не содержит ни одной цифры ("." или "-.")

        Examples:
            >>> Token("-i", 0, True).coefficient()
            -1.0
            >>> Token("+2.5", 0, False).coefficient()
            2.5
            >>> Token("1.2.3i", 0, True).coefficient()
            1.2
        """
        body = self.text[:-1] if self.imaginary else self.text

        if body in ("", "+", "-"):
            body += "1"

        prefix = _NUMBER_PREFIX.match(body).group()
        if not any(ch.isdigit() for ch in prefix):
            logger.debug("Malformed numeric token %r at position %d", self.text, self.start)
            raise InvalidParameter(f"Malformed number {self.text!r} at position {self.start}")

        return float(prefix)


# =============================================================================
# СКАНЕР
# =============================================================================


def tokenize(text: str) -> list[Token]:
    """
    Разбиение строки на токены.

    Args:
        text: Произвольная строка

    Returns:
        Список токенов в порядке появления (может быть пустым)

    Examples:
        >>> [t.text for t in tokenize("3+2i")]
        ['3', '+2i']
        >>> [t.text for t in tokenize("-i")]
        ['-i']
        >>> tokenize("bogus")
        []
    """
    tokens: list[Token] = []
    pos = 0
    n = len(text)

    while pos < n:
        start = pos

        if text[pos] in SIGNS:
            pos += 1

        body_start = pos
        while pos < n and text[pos] in NUMBER_BODY_CHARS:
            pos += 1

        imaginary = pos < n and text[pos] == IMAGINARY_UNIT
        if imaginary:
            pos += 1

        if pos == body_start:
            # Ни тела, ни маркера: сдвигаемся на один символ от начала
            pos = start + 1
            continue

        tokens.append(Token(text[start:pos], start, imaginary))

    return tokens


def parse_text(text: str) -> CanonicalPair:
    """
    Разбор строки в каноническую пару.

    Args:
        text: Текстовая запись ("3+2i", "-i", "5", "1+2+3i")

    Returns:
        Новая пара (сумма вещественных токенов, сумма мнимых коэффициентов)

    Raises:
        InvalidParameter: если не найдено ни одного токена или токен некорректен
    """
    tokens = tokenize(text)

    if not tokens:
        logger.debug("No numeric tokens in %r", text)
        raise InvalidParameter(f"No complex number terms found in {text!r}")

    real = 0.0
    imag = 0.0

    for token in tokens:
        if token.imaginary:
            imag += token.coefficient()
        else:
            real += token.coefficient()

    return CanonicalPair(real, imag)
