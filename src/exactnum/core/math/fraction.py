"""
Fraction — каноническая несократимая дробь

Immutable Pydantic модель: флаг знака + неотрицательный числитель BigInt +
положительный знаменатель BigInt. Построена только на публичных
операциях BigInt.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gcd(numerator, denominator) == 1
2. denominator > 0
3. numerator == 0 → negative is False и denominator == 1
4. Знак хранится только в negative; numerator и denominator всегда неотрицательны
5. Каждая операция заканчивается сокращением: неканоническая дробь
   никогда не возвращается
"""

import logging
from enum import Enum

from pydantic import BaseModel, Field, ValidationInfo, field_validator

from exactnum.core.math.bigint import BigInt
from exactnum.core.math.errors import DivisionByZero, InvalidFraction, ParseError

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class Ordering(str, Enum):
    """Результат сравнения двух дробей"""

    GREATER = "greater"
    EQUAL = "equal"
    LESS = "less"


# =============================================================================
# GCD
# =============================================================================


def gcd(a: BigInt, b: BigInt) -> BigInt:
    """
    Наибольший общий делитель двух строго положительных BigInt.

    Алгоритм Евклида: gcd(big, small) = small если big mod small == 0,
    иначе gcd(small, big mod small). Реализован циклом; ноль никогда не
    становится делителем, потому что цикл завершается раньше.

    Args:
        a: Положительное целое (> 0)
        b: Положительное целое (> 0)

    Returns:
        gcd(a, b) (> 0)

    Raises:
        ValueError: если a или b не строго положительны

    Examples:
        >>> str(gcd(BigInt.parse("12"), BigInt.parse("34")))
        '2'
        >>> str(gcd(BigInt.parse("7"), BigInt.parse("7")))
        '7'
    """
    for name, value in (("a", a), ("b", b)):
        if value.is_zero() or value.is_negative():
            raise ValueError(f"gcd requires strictly positive arguments, got {name}={value}")

    if b.greater_than(a):
        big, small = b, a
    else:
        big, small = a, b

    while True:
        rest = big.remainder(small)
        if rest.is_zero():
            return small
        big, small = small, rest


# =============================================================================
# FRACTION MODEL
# =============================================================================


class Fraction(BaseModel):
    """
    Рациональное число в канонической форме.

    Создаётся через Fraction.create() (из строк), Fraction.from_bigints()
    или как результат операции. Прямое создание Fraction(negative=...,
    numerator=..., denominator=...) валидирует каноничность, но не
    сокращает: для несокращённого ввода используйте from_bigints().

    Operators: +, -, *, /, унарный -, abs(), <, <=, >, >=, ==.
    """

    negative: bool = Field(False, description="True только для строго отрицательных значений")
    numerator: BigInt = Field(..., description="Числитель (>= 0)")
    denominator: BigInt = Field(..., description="Знаменатель (> 0)")

    model_config = {"frozen": True}

    @field_validator("numerator")
    @classmethod
    def validate_numerator_non_negative(cls, v: BigInt) -> BigInt:
        """Знак хранится в negative, не в числителе."""
        if v.is_negative():
            raise ValueError(f"numerator must be non-negative, got {v}")
        return v

    @field_validator("denominator")
    @classmethod
    def validate_denominator_canonical(cls, v: BigInt, info: ValidationInfo) -> BigInt:
        """Знаменатель > 0; ноль только как 0/1 без минуса; дробь несократима."""
        if v.is_zero() or v.is_negative():
            raise ValueError(f"denominator must be positive, got {v}")

        numerator = info.data.get("numerator")
        if numerator is None:
            return v

        if numerator.is_zero():
            if info.data.get("negative"):
                raise ValueError("zero cannot be negative")
            if v != BigInt.one():
                raise ValueError(f"zero must have denominator 1, got {v}")
        elif gcd(numerator, v) != BigInt.one():
            raise ValueError(f"{numerator}/{v} is not reduced")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def create(cls, numerator: str, denominator: str) -> "Fraction":
        """
        Создание сокращённой дроби из двух десятичных строк.

        Args:
            numerator: Целое (может быть отрицательным)
            denominator: Ненулевое целое (может быть отрицательным)

        Returns:
            Каноническая Fraction

        Raises:
            InvalidFraction: если строка невалидна или знаменатель равен 0

        Examples:
            >>> str(Fraction.create("12", "34"))
            '6/17'
            >>> str(Fraction.create("-1", "-2"))
            '1/2'
        """
        try:
            numerator_value = BigInt.parse(numerator)
            denominator_value = BigInt.parse(denominator)
        except ParseError as err:
            logger.debug("Rejected fraction operand %r/%r: %s", numerator, denominator, err)
            raise InvalidFraction(numerator, denominator, err.reason) from err

        return cls.from_bigints(numerator_value, denominator_value)

    @classmethod
    def from_bigints(cls, numerator: BigInt, denominator: BigInt) -> "Fraction":
        """
        Создание сокращённой дроби из двух знаковых BigInt.

        Raises:
            InvalidFraction: если denominator == 0
        """
        if denominator.is_zero():
            logger.debug("Rejected fraction %s/%s: zero denominator", numerator, denominator)
            raise InvalidFraction(numerator, denominator, "denominator cannot be zero")
        return _reduce(numerator, denominator)

    @classmethod
    def parse(cls, text: str) -> "Fraction":
        """
        Разбор строки вида "n" или "n/d" (инверсия to_string()).

        Raises:
            InvalidFraction: если части невалидны или знаменатель равен 0
        """
        if not isinstance(text, str):
            raise TypeError(f"Fraction.parse expects str, got {type(text).__name__}")

        numerator, slash, denominator = text.partition("/")
        if not slash:
            denominator = "1"
        return cls.create(numerator, denominator)

    @classmethod
    def from_int(cls, value: int) -> "Fraction":
        return _build(value < 0, BigInt.from_int(abs(value)), BigInt.one())

    @classmethod
    def zero(cls) -> "Fraction":
        return _build(False, BigInt.zero(), BigInt.one())

    @classmethod
    def one(cls) -> "Fraction":
        return _build(False, BigInt.one(), BigInt.one())

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.numerator.is_zero()

    def is_fraction(self) -> bool:
        """True если знаменатель != 1 (значение не целое)."""
        return self.denominator != BigInt.one()

    def is_integer(self) -> bool:
        return not self.is_fraction()

    # -------------------------------------------------------------------------
    # Знак
    # -------------------------------------------------------------------------

    def signed_numerator(self) -> BigInt:
        """Числитель со знаком дроби (временное значение для арифметики)."""
        if self.negative:
            return self.numerator.negate()
        return self.numerator

    def negate(self) -> "Fraction":
        if self.is_zero():
            return self
        return _build(not self.negative, self.numerator, self.denominator)

    def abs(self) -> "Fraction":
        return _build(False, self.numerator, self.denominator)

    def reciprocal(self) -> "Fraction":
        """
        1 / self: числитель и знаменатель меняются местами, знак сохраняется.

        Raises:
            DivisionByZero: если self == 0
        """
        if self.is_zero():
            raise DivisionByZero("zero has no reciprocal")
        return _build(self.negative, self.denominator, self.numerator)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "Fraction") -> "Fraction":
        """
        self + other.

        При равных знаменателях числители складываются напрямую. Иначе
        общий знаменатель строится через gcd знаменателей: каждый числитель
        умножается на дополняющий кофактор.

        Examples:
            >>> str(Fraction.create("1", "2").add(Fraction.create("1", "3")))
            '5/6'
        """
        if self.denominator == other.denominator:
            numerator = self.signed_numerator().add(other.signed_numerator())
            return _reduce(numerator, self.denominator)

        common = gcd(self.denominator, other.denominator)
        self_cofactor = other.denominator.quotient(common)
        other_cofactor = self.denominator.quotient(common)

        numerator = self.signed_numerator().multiply(self_cofactor).add(
            other.signed_numerator().multiply(other_cofactor)
        )
        denominator = self.denominator.multiply(self_cofactor)
        return _reduce(numerator, denominator)

    def subtract(self, other: "Fraction") -> "Fraction":
        """self - other = self + (-other)"""
        return self.add(other.negate())

    def multiply(self, other: "Fraction") -> "Fraction":
        """
        self * other.

        Результат отрицательный только если знаки разные и ни один
        числитель не равен 0.
        """
        numerator = self.signed_numerator().multiply(other.signed_numerator())
        denominator = self.denominator.multiply(other.denominator)
        return _reduce(numerator, denominator)

    def divide(self, other: "Fraction") -> "Fraction":
        """
        self / other = self * reciprocal(other).

        Raises:
            DivisionByZero: если other == 0
        """
        if other.is_zero():
            raise DivisionByZero(f"cannot divide {self} by zero")
        return self.multiply(other.reciprocal())

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: "Fraction") -> Ordering:
        """Сравнение по знаку разности self - other."""
        difference = self.subtract(other)
        if difference.negative:
            return Ordering.LESS
        if difference.is_zero():
            return Ordering.EQUAL
        return Ordering.GREATER

    # -------------------------------------------------------------------------
    # Строковое представление
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        """
        "n" для целых, "n/d" для дробей, с "-" для отрицательных.

        Examples:
            >>> Fraction.create("4", "-2").to_string()
            '-2'
        """
        text = self.numerator.to_string()
        if self.is_fraction():
            text += "/" + self.denominator.to_string()
        return "-" + text if self.negative else text

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Fraction('{self.to_string()}')"

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return (
            self.negative == other.negative
            and self.numerator == other.numerator
            and self.denominator == other.denominator
        )

    def __hash__(self) -> int:
        return hash((self.negative, self.numerator, self.denominator))

    def __lt__(self, other: "Fraction") -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __le__(self, other: "Fraction") -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other: "Fraction") -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other: "Fraction") -> bool:
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.compare(other) is not Ordering.LESS

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __neg__(self) -> "Fraction":
        return self.negate()

    def __abs__(self) -> "Fraction":
        return self.abs()

    def __add__(self, other: "Fraction") -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Fraction") -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: "Fraction") -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: "Fraction") -> "Fraction":
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.divide(other)


# =============================================================================
# ВНУТРЕННИЕ ПОМОЩНИКИ
# =============================================================================


def _build(negative: bool, numerator: BigInt, denominator: BigInt) -> Fraction:
    """Сборка Fraction из уже канонических частей без повторной валидации."""
    return Fraction.model_construct(
        negative=negative, numerator=numerator, denominator=denominator
    )


def _reduce(numerator: BigInt, denominator: BigInt) -> Fraction:
    """
    Приведение знаковой пары numerator/denominator к канонической форме.

    Требует denominator != 0 (проверяется вызывающим кодом).
    """
    if numerator.is_zero():
        return _build(False, BigInt.zero(), BigInt.one())

    negative = numerator.is_negative() != denominator.is_negative()
    numerator_abs = numerator.magnitude()
    denominator_abs = denominator.magnitude()

    if numerator_abs == denominator_abs:
        return _build(negative, BigInt.one(), BigInt.one())

    common = gcd(numerator_abs, denominator_abs)
    return _build(
        negative,
        numerator_abs.quotient(common),
        denominator_abs.quotient(common),
    )
