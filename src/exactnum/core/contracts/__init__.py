"""
Contract Validation Module

JSON Schema контракты для обмена числами exactnum.
"""

from .codec import (
    SCHEMA_VERSION,
    complex_from_contract,
    complex_to_contract,
    fraction_from_contract,
    fraction_to_contract,
    integer_from_contract,
    integer_to_contract,
)
from .validators import (
    SCHEMA_NAMES,
    ComplexNumberValidator,
    ContractValidator,
    FractionValidator,
    IntegerValidator,
    SchemaLoader,
    validate_complex_number,
    validate_fraction,
    validate_integer,
)

__all__ = [
    "SCHEMA_NAMES",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "IntegerValidator",
    "FractionValidator",
    "ComplexNumberValidator",
    # Functions
    "validate_integer",
    "validate_fraction",
    "validate_complex_number",
    # Codec
    "SCHEMA_VERSION",
    "integer_to_contract",
    "integer_from_contract",
    "fraction_to_contract",
    "fraction_from_contract",
    "complex_to_contract",
    "complex_from_contract",
]
