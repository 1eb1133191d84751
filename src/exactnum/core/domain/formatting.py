"""
Formatting — текстовое представление дробей и комплексных чисел

Правила записи a + bi:
- оба компонента нулевые → "0"
- ненулевая действительная часть печатается как дробь ("6/17", "-2")
- ненулевая мнимая часть: "-" если b < 0, "+" только если перед ней
  напечатана действительная часть; коэффициент |b| в скобках если он
  дробный ("(1/2)i"), опускается если равен 1 ("i"), иначе как есть ("3i")

Результат format_complex() всегда разбирается обратно через
literal.parse_complex_literal() в то же значение (при той же NotationConfig).
"""

from typing import TYPE_CHECKING, Optional

from exactnum.core.domain.notation import DEFAULT_NOTATION, NotationConfig
from exactnum.core.math.fraction import Fraction

if TYPE_CHECKING:
    from exactnum.core.domain.complex_number import ComplexNumber


def format_fraction(value: Fraction) -> str:
    """Каноническая запись дроби: "n" или "n/d" со знаком."""
    return value.to_string()


def format_imaginary_coefficient(value: Fraction, config: NotationConfig) -> str:
    """
    Модуль мнимого коэффициента без знака и без единицы.

    Returns:
        "" для 1 (если omit_unit_coefficient), "(n/d)" для дробей
        (если parenthesize_fractional_imaginary), иначе "n" / "n/d"
    """
    magnitude = value.abs()
    if config.omit_unit_coefficient and magnitude == Fraction.one():
        return ""
    text = magnitude.to_string()
    if magnitude.is_fraction() and config.parenthesize_fractional_imaginary:
        return f"({text})"
    return text


def format_complex(value: "ComplexNumber", config: Optional[NotationConfig] = None) -> str:
    """
    Запись комплексного числа.

    Args:
        value: Комплексное число
        config: Конфигурация записи (default: DEFAULT_NOTATION)

    Returns:
        Строка вида "a", "bi", "a+bi", "a-bi"

    Examples:
        >>> format_complex(ComplexNumber.create("12", "34", "1", "2"))  # doctest: +SKIP
        '6/17+(1/2)i'
        >>> format_complex(ComplexNumber.create("-1", "2", "-3", "3"))  # doctest: +SKIP
        '-1/2-i'
    """
    config = config or DEFAULT_NOTATION
    real, imaginary = value.real, value.imaginary

    if real.is_zero() and imaginary.is_zero():
        return "0"

    text = "" if real.is_zero() else format_fraction(real)

    if not imaginary.is_zero():
        if imaginary.negative:
            text += "-"
        elif text:
            text += "+"
        text += format_imaginary_coefficient(imaginary, config) + config.imaginary_unit

    return text
