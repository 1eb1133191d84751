"""
Core math modules для exactnum

Целые произвольной точности и несократимые дроби.
"""

# Errors
from exactnum.core.math.errors import (
    DivisionByZero,
    ExactArithmeticError,
    InvalidFraction,
    LiteralParseError,
    ParseError,
)

# Digits (магнитуды)
from exactnum.core.math.digits import (
    ONE_DIGITS,
    RADIX,
    ZERO_DIGITS,
    compare_magnitudes,
    digits_from_text,
    digits_to_text,
    magnitude_add,
    magnitude_multiply,
    magnitude_quotient,
    magnitude_subtract_larger,
    shift_left,
    trim,
)

# BigInt
from exactnum.core.math.bigint import BigInt

# Fraction
from exactnum.core.math.fraction import Fraction, Ordering, gcd

__all__ = [
    # Errors
    "ExactArithmeticError",
    "ParseError",
    "LiteralParseError",
    "InvalidFraction",
    "DivisionByZero",
    # Digits: Constants
    "RADIX",
    "ZERO_DIGITS",
    "ONE_DIGITS",
    # Digits: Functions
    "trim",
    "digits_from_text",
    "digits_to_text",
    "compare_magnitudes",
    "magnitude_add",
    "magnitude_subtract_larger",
    "magnitude_multiply",
    "magnitude_quotient",
    "shift_left",
    # BigInt
    "BigInt",
    # Fraction
    "Fraction",
    "Ordering",
    "gcd",
]
