"""
BigInt — знаковое целое произвольной точности

Immutable Pydantic модель: флаг знака + tuple десятичных цифр
(least-significant first). Вся арифметика над цифрами делегирована
модулю digits; здесь только знаковые правила и валидация.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. digits не пустой, без лишних старших нулей, каждая цифра в [0, 9]
2. Ноль всегда неотрицательный (нет "-0")
3. Экземпляр никогда не изменяется: каждая операция возвращает новый BigInt
4. to_string() — точная инверсия parse() для любого валидного литерала
"""

import logging
import re
from typing import Final

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from exactnum.core.math.digits import (
    ONE_DIGITS,
    RADIX,
    ZERO_DIGITS,
    Digits,
    compare_magnitudes,
    digits_from_text,
    digits_to_text,
    magnitude_add,
    magnitude_multiply,
    magnitude_quotient,
    magnitude_subtract_larger,
    trim,
)
from exactnum.core.math.errors import DivisionByZero, ParseError

logger = logging.getLogger(__name__)

# Канонический десятичный литерал: "0" или опциональный минус + цифры без ведущего нуля
_INTEGER_LITERAL: Final[re.Pattern[str]] = re.compile(r"0|-?[1-9][0-9]*")


# =============================================================================
# BIGINT MODEL
# =============================================================================


class BigInt(BaseModel):
    """
    Целое произвольной точности в десятичном представлении.

    Создаётся через BigInt.parse() (валидирующий конструктор) или как
    результат арифметической операции. Прямое создание BigInt(sign=...,
    digits=...) тоже валидирует все инварианты.

    Operators: +, -, *, унарный -, abs(), <, <=, >, >=, ==.
    Операторы // и % намеренно не определены: quotient() округляет к нулю,
    а не к минус бесконечности, как в Python.
    """

    sign: bool = Field(
        True, description="True для неотрицательных (включая 0), False для отрицательных"
    )
    digits: tuple[int, ...] = Field(
        ..., min_length=1, description="Десятичные цифры, младшая первой"
    )

    model_config = {"frozen": True}

    @field_validator("digits")
    @classmethod
    def validate_canonical_digits(cls, v: Digits, info: ValidationInfo) -> Digits:
        """Цифры в [0, 9], без лишних старших нулей, ноль без минуса."""
        for digit in v:
            if not 0 <= digit < RADIX:
                raise ValueError(f"digit {digit} out of range [0, {RADIX - 1}]")
        if trim(v) != v:
            raise ValueError("digits contain redundant leading zeros")
        if info.data.get("sign") is False and v == ZERO_DIGITS:
            raise ValueError("zero cannot be negative")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "BigInt":
        """
        Разбор десятичной строки.

        Валидный литерал: опциональный '-' и хотя бы одна цифра.
        Невалидны: "", "-", "-0", "00", "007", любые нецифровые символы.

        Args:
            text: Десятичная строка

        Returns:
            Новый BigInt

        Raises:
            ParseError: если строка не является каноническим целым
            TypeError: если text не str

        Examples:
            >>> str(BigInt.parse("-12"))
            '-12'
            >>> BigInt.parse("-0")  # doctest: +SKIP
            Traceback (most recent call last):
                ...
            ParseError: '-0' is an invalid integer: zero cannot be negative
        """
        if not isinstance(text, str):
            raise TypeError(f"BigInt.parse expects str, got {type(text).__name__}")

        if _INTEGER_LITERAL.fullmatch(text) is None:
            reason = _describe_invalid_literal(text)
            logger.debug("Rejected integer literal %r: %s", text, reason)
            raise ParseError(text, reason)

        if text.startswith("-"):
            return _build(False, digits_from_text(text[1:]))
        return _build(True, digits_from_text(text))

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        """Конверсия встроенного int (удобно для тестов и констант)."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"BigInt.from_int expects int, got {type(value).__name__}")
        return cls.parse(str(value))

    @classmethod
    def zero(cls) -> "BigInt":
        return _build(True, ZERO_DIGITS)

    @classmethod
    def one(cls) -> "BigInt":
        return _build(True, ONE_DIGITS)

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.digits == ZERO_DIGITS

    def is_negative(self) -> bool:
        return not self.sign

    def digit_count(self) -> int:
        """Количество десятичных цифр магнитуды (для 0 — одна)."""
        return len(self.digits)

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def equals(self, other: "BigInt") -> bool:
        """True если знаки и цифры совпадают."""
        return self.sign == other.sign and self.digits == other.digits

    def greater_than(self, other: "BigInt") -> bool:
        """
        self > other.

        Разные знаки: неотрицательный больше. Одинаковые знаки: сравниваем
        магнитуды; для отрицательных большая магнитуда — меньшее значение.
        """
        if self.sign != other.sign:
            return self.sign

        order = compare_magnitudes(self.digits, other.digits)
        if self.sign:
            return order > 0
        return order < 0

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def negate(self) -> "BigInt":
        return _build(not self.sign, self.digits)

    def magnitude(self) -> "BigInt":
        """|self|"""
        return _build(True, self.digits)

    def add(self, other: "BigInt") -> "BigInt":
        """self + other"""
        return _signed_sum(self.sign, self.digits, other.sign, other.digits)

    def subtract(self, other: "BigInt") -> "BigInt":
        """self - other (знак other инвертируется без создания копии)"""
        return _signed_sum(self.sign, self.digits, not other.sign, other.digits)

    def multiply(self, other: "BigInt") -> "BigInt":
        """
        self * other — школьное умножение.

        Знак: положительный если один из операндов 0 или знаки совпадают.
        """
        return _build(self.sign == other.sign, magnitude_multiply(self.digits, other.digits))

    def quotient(self, other: "BigInt") -> "BigInt":
        """
        Частное self / other с округлением к нулю.

        Raises:
            DivisionByZero: если other == 0

        Examples:
            >>> str(BigInt.parse("-7").quotient(BigInt.parse("2")))
            '-3'
        """
        if other.is_zero():
            raise DivisionByZero(f"cannot divide {self} by zero")
        return _build(self.sign == other.sign, magnitude_quotient(self.digits, other.digits))

    def remainder(self, other: "BigInt") -> "BigInt":
        """
        Остаток: self - other * quotient(self, other).

        Знак остатка совпадает со знаком делимого. Для любых n и m != 0
        выполняется n == m * n.quotient(m) + n.remainder(m).

        Raises:
            DivisionByZero: если other == 0

        Examples:
            >>> str(BigInt.parse("-7").remainder(BigInt.parse("2")))
            '-1'
        """
        if other.is_zero():
            raise DivisionByZero(f"cannot take remainder of {self} by zero")
        return self.subtract(other.multiply(self.quotient(other)))

    # -------------------------------------------------------------------------
    # Строковое представление
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """Каноническая десятичная строка ("-" только для отрицательных)."""
        text = digits_to_text(self.digits)
        return text if self.sign else "-" + text

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInt('{self.to_string()}')"

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.sign, self.digits))

    def __lt__(self, other: "BigInt") -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return other.greater_than(self)

    def __le__(self, other: "BigInt") -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return not self.greater_than(other)

    def __gt__(self, other: "BigInt") -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.greater_than(other)

    def __ge__(self, other: "BigInt") -> bool:
        if not isinstance(other, BigInt):
            return NotImplemented
        return not other.greater_than(self)

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __neg__(self) -> "BigInt":
        return self.negate()

    def __abs__(self) -> "BigInt":
        return self.magnitude()

    def __add__(self, other: "BigInt") -> "BigInt":
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "BigInt") -> "BigInt":
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: "BigInt") -> "BigInt":
        if not isinstance(other, BigInt):
            return NotImplemented
        return self.multiply(other)


# =============================================================================
# ВНУТРЕННИЕ ПОМОЩНИКИ
# =============================================================================


def _build(sign: bool, digits: Digits) -> BigInt:
    """
    Сборка BigInt из уже канонической магнитуды без повторной валидации.

    Ноль всегда получает неотрицательный знак.
    """
    if digits == ZERO_DIGITS:
        sign = True
    return BigInt.model_construct(sign=sign, digits=digits)


def _signed_sum(a_sign: bool, a_digits: Digits, b_sign: bool, b_digits: Digits) -> BigInt:
    """
    Сумма двух знаковых магнитуд.

    Одинаковые знаки → сложение магнитуд с общим знаком.
    Разные знаки → большая минус меньшая, знак операнда с большей
    магнитудой; равные магнитуды дают канонический ноль.
    """
    if a_sign == b_sign:
        return _build(a_sign, magnitude_add(a_digits, b_digits))

    order = compare_magnitudes(a_digits, b_digits)
    if order == 0:
        return _build(True, ZERO_DIGITS)

    difference = magnitude_subtract_larger(a_digits, b_digits)
    return _build(a_sign if order > 0 else b_sign, difference)


def _describe_invalid_literal(text: str) -> str:
    """Причина отказа для сообщения ParseError."""
    if text == "":
        return "empty string"
    body = text[1:] if text.startswith("-") else text
    if body == "":
        return "missing digits after sign"
    if any(ch not in "0123456789" for ch in body):
        return "unexpected character"
    if body == "0":
        return "zero cannot be negative"
    return "redundant leading zeros"
