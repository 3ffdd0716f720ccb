"""
Исключения complexkit

Две различимые по типу категории отказов:
- InvalidParameter: вход не распознан нормализатором или результат
  содержит NaN/Inf
- DivisionByZero: делитель (или self для inverse) имеет нулевой модуль

Обе категории сигнализируются синхронно и никогда не подавляются внутри
библиотеки. Вызывающий код различает их по типу, а не по тексту сообщения.
"""


class ComplexError(Exception):
    """Базовое исключение complexkit."""

    pass


class InvalidParameter(ComplexError, ValueError):
    """
    Вход не соответствует ни одной поддерживаемой форме, либо
    каноническая пара содержит неконечную компоненту.
    """

    pass


class DivisionByZero(ComplexError, ZeroDivisionError):
    """
    Деление на комплексное число с нулевым модулем.

    Возникает в div/inverse и транзитивно в составных операциях (atan).
    """

    pass
