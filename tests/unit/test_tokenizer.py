"""
Тесты для токенизатора текстовой записи

Проверяет:
1. Разбиение на токены (знак, тело, маркер i)
2. Коэффициенты ±1 для голого маркера
3. Суммирование повторяющихся слагаемых
4. Отказ при отсутствии токенов и некорректном теле
"""

import pytest

from complexkit.domain.tokenizer import Token, parse_text, tokenize
from complexkit.errors import InvalidParameter

# =============================================================================
# ТЕСТЫ СКАНЕРА
# =============================================================================


class TestTokenize:
    """Тесты tokenize"""

    def test_real_and_imaginary_terms(self) -> None:
        """Вещественный и мнимый токены распознаются по порядку"""
        tokens = tokenize("3+2i")
        assert [t.text for t in tokens] == ["3", "+2i"]
        assert [t.imaginary for t in tokens] == [False, True]

    def test_token_positions(self) -> None:
        """Позиция начала токена сохраняется"""
        tokens = tokenize("12-4.5i")
        assert [t.start for t in tokens] == [0, 2]

    def test_bare_marker_is_token(self) -> None:
        """Голый маркер i — полноценный токен"""
        assert tokenize("i") == [Token("i", 0, True)]
        assert tokenize("-i") == [Token("-i", 0, True)]

    def test_no_tokens(self) -> None:
        """Строка без цифр и маркера не даёт токенов"""
        assert tokenize("") == []
        assert tokenize("bogus") == []
        assert tokenize("+-") == []

    def test_skips_unrelated_characters(self) -> None:
        """Посторонние символы пропускаются"""
        assert [t.text for t in tokenize("(3, 2i)")] == ["3", "2i"]

    def test_sign_separated_by_space_is_dropped(self) -> None:
        """Знак, отделённый пробелом, не связывается с числом"""
        assert [t.text for t in tokenize("3 - 2i")] == ["3", "2i"]

    def test_marker_ends_token(self) -> None:
        """После маркера начинается новый токен"""
        assert [t.text for t in tokenize("2i3")] == ["2i", "3"]

    def test_double_sign(self) -> None:
        """Из двух знаков подряд к числу относится последний"""
        assert [t.text for t in tokenize("+-5")] == ["-5"]


# =============================================================================
# ТЕСТЫ КОЭФФИЦИЕНТОВ
# =============================================================================


class TestTokenCoefficient:
    """Тесты Token.coefficient"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("i", 1.0),
            ("+i", 1.0),
            ("-i", -1.0),
            ("2i", 2.0),
            ("-2.5i", -2.5),
            (".5i", 0.5),
        ],
    )
    def test_imaginary_coefficients(self, text: str, expected: float) -> None:
        """Коэффициент мнимого токена"""
        assert Token(text, 0, True).coefficient() == expected

    def test_real_coefficient(self) -> None:
        """Коэффициент вещественного токена"""
        assert Token("-7", 0, False).coefficient() == -7.0
        assert Token("3.", 0, False).coefficient() == 3.0

    @pytest.mark.parametrize(
        "text, imaginary, expected",
        [
            ("1.2.3", False, 1.2),
            ("-1.2.3", False, -1.2),
            ("1.2.3i", True, 1.2),
            ("5..", False, 5.0),
            (".5.", False, 0.5),
        ],
    )
    def test_longest_numeric_prefix(self, text: str, imaginary: bool, expected: float) -> None:
        """Лишние точки и цифры после числового префикса отбрасываются"""
        assert Token(text, 0, imaginary).coefficient() == expected

    @pytest.mark.parametrize("text", [".", "-.", "+..5"])
    def test_malformed_body_raises(self, text: str) -> None:
        """Префикс без единой цифры отвергается"""
        with pytest.raises(InvalidParameter, match="Malformed number"):
            Token(text, 0, False).coefficient()


# =============================================================================
# ТЕСТЫ РАЗБОРА
# =============================================================================


class TestParseText:
    """Тесты parse_text"""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("3+2i", (3.0, 2.0)),
            ("-i", (0.0, -1.0)),
            ("i", (0.0, 1.0)),
            ("5", (5.0, 0.0)),
            ("1+2+3i", (3.0, 3.0)),
            ("3-i", (3.0, -1.0)),
            ("15+3i", (15.0, 3.0)),
            ("23.1337", (23.1337, 0.0)),
            ("i+i", (0.0, 2.0)),
            ("-0.5-0.25i", (-0.5, -0.25)),
        ],
    )
    def test_grammar_table(self, text: str, expected: tuple[float, float]) -> None:
        """Таблица допустимых записей"""
        assert tuple(parse_text(text)) == expected

    def test_space_breaks_sign(self) -> None:
        """'3 - 2i' разбирается как 3 + 2i (знак отделён пробелом)"""
        assert tuple(parse_text("3 - 2i")) == (3.0, 2.0)

    def test_fresh_result_per_call(self) -> None:
        """Каждый вызов возвращает независимый результат"""
        first = parse_text("1+i")
        second = parse_text("2+2i")
        assert tuple(first) == (1.0, 1.0)
        assert tuple(second) == (2.0, 2.0)

    def test_no_terms_raises(self) -> None:
        """Нет ни одного токена → InvalidParameter"""
        with pytest.raises(InvalidParameter, match="No complex number terms"):
            parse_text("bogus")

    def test_repeated_dots_use_prefix(self) -> None:
        """'1.2.3+4.5.6i' → (1.2, 4.5)"""
        assert tuple(parse_text("1.2.3+4.5.6i")) == (1.2, 4.5)

    def test_malformed_term_raises(self) -> None:
        """Некорректный токен → InvalidParameter"""
        with pytest.raises(InvalidParameter):
            parse_text("1+.i")
