"""
Domain layer: complex numbers, literal parsing and formatting.
"""

from exactnum.core.domain.complex_number import ComplexNumber
from exactnum.core.domain.formatting import (
    format_complex,
    format_fraction,
    format_imaginary_coefficient,
)
from exactnum.core.domain.literal import (
    ComplexLiteralParts,
    parse_complex_literal,
    split_complex_literal,
)
from exactnum.core.domain.notation import DEFAULT_NOTATION, NotationConfig

__all__ = [
    # Complex model
    "ComplexNumber",
    # Notation config
    "NotationConfig",
    "DEFAULT_NOTATION",
    # Formatting
    "format_complex",
    "format_fraction",
    "format_imaginary_coefficient",
    # Literal parsing
    "ComplexLiteralParts",
    "parse_complex_literal",
    "split_complex_literal",
]
