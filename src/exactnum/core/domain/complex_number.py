"""
ComplexNumber — гауссово рациональное число a + bi

Immutable Pydantic модель из двух Fraction (действительная и мнимая
части). Использует только публичные операции Fraction, собственных
численных алгоритмов не содержит.
"""

from typing import Optional

from pydantic import BaseModel, Field

from exactnum.core.domain.formatting import format_complex
from exactnum.core.domain.notation import NotationConfig
from exactnum.core.math.errors import DivisionByZero
from exactnum.core.math.fraction import Fraction


class ComplexNumber(BaseModel):
    """
    Комплексное число с рациональными компонентами.

    Operators: +, -, *, /, унарный -, ==.
    """

    real: Fraction = Field(..., description="Действительная часть")
    imaginary: Fraction = Field(..., description="Мнимая часть")

    model_config = {"frozen": True}

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def create(
        cls,
        real_numerator: str,
        real_denominator: str,
        imaginary_numerator: str,
        imaginary_denominator: str,
    ) -> "ComplexNumber":
        """
        Создание из четырёх десятичных строк.

        Raises:
            InvalidFraction: если хотя бы одна из частей невалидна

        Examples:
            >>> str(ComplexNumber.create("12", "34", "1", "2"))
            '6/17+(1/2)i'
        """
        real = Fraction.create(real_numerator, real_denominator)
        imaginary = Fraction.create(imaginary_numerator, imaginary_denominator)
        return cls(real=real, imaginary=imaginary)

    @classmethod
    def from_fractions(cls, real: Fraction, imaginary: Optional[Fraction] = None) -> "ComplexNumber":
        return cls(real=real, imaginary=imaginary if imaginary is not None else Fraction.zero())

    @classmethod
    def zero(cls) -> "ComplexNumber":
        return cls(real=Fraction.zero(), imaginary=Fraction.zero())

    @classmethod
    def one(cls) -> "ComplexNumber":
        return cls(real=Fraction.one(), imaginary=Fraction.zero())

    @classmethod
    def unit(cls) -> "ComplexNumber":
        """Мнимая единица i."""
        return cls(real=Fraction.zero(), imaginary=Fraction.one())

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.real.is_zero() and self.imaginary.is_zero()

    def is_one(self) -> bool:
        return self.imaginary.is_zero() and self.real == Fraction.one()

    def is_real(self) -> bool:
        return self.imaginary.is_zero()

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def conjugate(self) -> "ComplexNumber":
        """a - bi"""
        return ComplexNumber(real=self.real, imaginary=self.imaginary.negate())

    def negate(self) -> "ComplexNumber":
        return ComplexNumber(real=self.real.negate(), imaginary=self.imaginary.negate())

    def add(self, other: "ComplexNumber") -> "ComplexNumber":
        return ComplexNumber(
            real=self.real.add(other.real),
            imaginary=self.imaginary.add(other.imaginary),
        )

    def subtract(self, other: "ComplexNumber") -> "ComplexNumber":
        return ComplexNumber(
            real=self.real.subtract(other.real),
            imaginary=self.imaginary.subtract(other.imaginary),
        )

    def multiply(self, other: "ComplexNumber") -> "ComplexNumber":
        """(a + bi)(c + di) = (ac - bd) + (ad + bc)i"""
        real = self.real.multiply(other.real).subtract(
            self.imaginary.multiply(other.imaginary)
        )
        imaginary = self.real.multiply(other.imaginary).add(
            self.imaginary.multiply(other.real)
        )
        return ComplexNumber(real=real, imaginary=imaginary)

    def norm(self) -> Fraction:
        """a^2 + b^2 (всегда неотрицательная дробь)."""
        return self.real.multiply(self.real).add(self.imaginary.multiply(self.imaginary))

    def divide(self, other: "ComplexNumber") -> "ComplexNumber":
        """
        self / other: числитель и делитель умножаются на сопряжённое к other,
        затем обе части делятся на норму other.

        Raises:
            DivisionByZero: если other == 0
        """
        if other.is_zero():
            raise DivisionByZero(f"cannot divide {self} by zero")

        scaled = self.multiply(other.conjugate())
        norm = other.norm()
        return ComplexNumber(
            real=scaled.real.divide(norm),
            imaginary=scaled.imaginary.divide(norm),
        )

    # -------------------------------------------------------------------------
    # Строковое представление
    # -------------------------------------------------------------------------

    def to_string(self, config: Optional[NotationConfig] = None) -> str:
        return format_complex(self, config)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"ComplexNumber('{self.to_string()}')"

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.real == other.real and self.imaginary == other.imaginary

    def __hash__(self) -> int:
        return hash((self.real, self.imaginary))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __neg__(self) -> "ComplexNumber":
        return self.negate()

    def __add__(self, other: "ComplexNumber") -> "ComplexNumber":
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "ComplexNumber") -> "ComplexNumber":
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: "ComplexNumber") -> "ComplexNumber":
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: "ComplexNumber") -> "ComplexNumber":
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.divide(other)
