"""
Errors — иерархия исключений точной арифметики

Все ошибки локальные (валидация входа), повторять операцию бессмысленно.
Библиотека ничего не печатает: исключение несёт исходный ввод, а текст
сообщения для пользователя формирует вызывающая сторона.

Иерархия:
    ExactArithmeticError
    ├── ParseError            — невалидный целочисленный литерал
    │   └── LiteralParseError — невалидный комплексный литерал
    ├── InvalidFraction       — нулевой знаменатель или невалидный операнд
    └── DivisionByZero        — quotient/remainder/divide на ноль
"""

from typing import Optional


class ExactArithmeticError(Exception):
    """Базовое исключение для всех ошибок exactnum."""


class ParseError(ExactArithmeticError, ValueError):
    """
    Строка не является валидным десятичным целым.

    Attributes:
        text: Отклонённая строка (как была передана)
        reason: Краткое описание нарушения
    """

    kind: str = "integer"

    def __init__(self, text: str, reason: str = "not a canonical decimal integer"):
        super().__init__(f"{text!r} is an invalid {self.kind}: {reason}")
        self.text = text
        self.reason = reason


class LiteralParseError(ParseError):
    """Строка не является валидным литералом комплексного числа."""

    kind = "complex literal"


class InvalidFraction(ExactArithmeticError, ValueError):
    """
    Дробь не может быть построена.

    Причины:
    - знаменатель равен нулю
    - числитель или знаменатель не является валидным целым

    Attributes:
        numerator: Числитель в исходном виде
        denominator: Знаменатель в исходном виде
    """

    def __init__(
        self,
        numerator: object,
        denominator: object,
        reason: Optional[str] = None,
    ):
        message = f"{numerator}/{denominator} is an invalid fraction"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.numerator = numerator
        self.denominator = denominator
        self.reason = reason


class DivisionByZero(ExactArithmeticError, ZeroDivisionError):
    """Делитель равен нулю (BigInt quotient/remainder, Fraction/Complex divide)."""
