"""
exactnum — точная арифметика над целыми произвольной точности,
рациональными и гауссовыми рациональными числами.
"""

from exactnum.core.domain import ComplexNumber, parse_complex_literal
from exactnum.core.math import (
    BigInt,
    DivisionByZero,
    ExactArithmeticError,
    Fraction,
    InvalidFraction,
    LiteralParseError,
    Ordering,
    ParseError,
)

__version__ = "0.1.0"

__all__ = [
    "BigInt",
    "Fraction",
    "Ordering",
    "ComplexNumber",
    "parse_complex_literal",
    "ExactArithmeticError",
    "ParseError",
    "LiteralParseError",
    "InvalidFraction",
    "DivisionByZero",
]
