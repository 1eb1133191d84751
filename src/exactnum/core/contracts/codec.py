"""
Contract Codec — конверсия чисел exactnum в JSON документы и обратно

Кодирование всегда даёт документ, проходящий соответствующую схему.
Декодирование сначала валидирует документ против схемы, затем строит
значение через канонизирующие конструкторы (несокращённая дробь будет
сокращена).
"""

from typing import Any, Dict, Final

from exactnum.core.contracts.validators import (
    validate_complex_number,
    validate_fraction,
    validate_integer,
)
from exactnum.core.domain.complex_number import ComplexNumber
from exactnum.core.math.bigint import BigInt
from exactnum.core.math.fraction import Fraction

SCHEMA_VERSION: Final[str] = "1"


# =============================================================================
# INTEGER
# =============================================================================


def integer_to_contract(value: BigInt) -> Dict[str, Any]:
    return {"schema_version": SCHEMA_VERSION, "value": value.to_string()}


def integer_from_contract(data: Dict[str, Any]) -> BigInt:
    """
    Raises:
        jsonschema.ValidationError: Если документ не соответствует схеме
    """
    validate_integer(data)
    return BigInt.parse(data["value"])


# =============================================================================
# FRACTION
# =============================================================================


def _fraction_body(value: Fraction) -> Dict[str, Any]:
    return {
        "negative": value.negative,
        "numerator": value.numerator.to_string(),
        "denominator": value.denominator.to_string(),
    }


def _fraction_from_body(body: Dict[str, Any]) -> Fraction:
    numerator = BigInt.parse(body["numerator"])
    if body["negative"]:
        numerator = numerator.negate()
    return Fraction.from_bigints(numerator, BigInt.parse(body["denominator"]))


def fraction_to_contract(value: Fraction) -> Dict[str, Any]:
    return {"schema_version": SCHEMA_VERSION, **_fraction_body(value)}


def fraction_from_contract(data: Dict[str, Any]) -> Fraction:
    """
    Raises:
        jsonschema.ValidationError: Если документ не соответствует схеме
    """
    validate_fraction(data)
    return _fraction_from_body(data)


# =============================================================================
# COMPLEX NUMBER
# =============================================================================


def complex_to_contract(value: ComplexNumber) -> Dict[str, Any]:
    return {
        "schema_version": SCHEMA_VERSION,
        "real": _fraction_body(value.real),
        "imaginary": _fraction_body(value.imaginary),
    }


def complex_from_contract(data: Dict[str, Any]) -> ComplexNumber:
    """
    Raises:
        jsonschema.ValidationError: Если документ не соответствует схеме
    """
    validate_complex_number(data)
    return ComplexNumber(
        real=_fraction_from_body(data["real"]),
        imaginary=_fraction_from_body(data["imaginary"]),
    )
