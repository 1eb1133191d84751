"""
Literal — разбор текстовых литералов комплексных чисел

Допустимые формы (пробелы игнорируются):
    0, 12, -123                       целые
    1/2, -2/3, 4/2                    дроби
    i, -i, -3i, (2/3)i, -(2/3)i       только мнимая часть
    2+3i, -1/2-(3/4)i, 2/3-4i, 2+i    действительная и мнимая части

Ведущий "+" не допускается: "+3" и "+3i" отклоняются одинаково.

Разбор в два шага:
1. split_complex_literal() режет литерал на четыре строки-целых
   (числитель/знаменатель действительной и мнимой частей) и проверяет
   только структуру (единица в конце, скобки, знаки)
2. Валидацию самих целых выполняет Fraction.create() → InvalidFraction
"""

import logging
from typing import NamedTuple, NoReturn, Optional

from exactnum.core.domain.complex_number import ComplexNumber
from exactnum.core.domain.notation import DEFAULT_NOTATION, NotationConfig
from exactnum.core.math.errors import LiteralParseError

logger = logging.getLogger(__name__)

_SIGNS = ("+", "-")


class ComplexLiteralParts(NamedTuple):
    """Четыре десятичные строки, из которых строится ComplexNumber."""

    real_numerator: str
    real_denominator: str
    imaginary_numerator: str
    imaginary_denominator: str


# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================


def split_complex_literal(
    text: str, config: Optional[NotationConfig] = None
) -> ComplexLiteralParts:
    """
    Разрезание литерала на части.

    Отсутствующие части получают значения по умолчанию ("0" для числителя,
    "1" для знаменателя); неявный коэффициент мнимой единицы равен "1".

    Args:
        text: Литерал комплексного числа
        config: Конфигурация записи (default: DEFAULT_NOTATION)

    Returns:
        ComplexLiteralParts

    Raises:
        LiteralParseError: если нарушена структура литерала
        TypeError: если text не str

    Examples:
        >>> split_complex_literal("-1/2-(3/4)i")
        ComplexLiteralParts(real_numerator='-1', real_denominator='2', imaginary_numerator='-3', imaginary_denominator='4')
        >>> split_complex_literal("i")
        ComplexLiteralParts(real_numerator='0', real_denominator='1', imaginary_numerator='1', imaginary_denominator='1')
    """
    if not isinstance(text, str):
        raise TypeError(f"complex literal must be str, got {type(text).__name__}")

    config = config or DEFAULT_NOTATION
    unit = config.imaginary_unit
    literal = "".join(text.split())

    if not literal:
        _reject(text, "empty literal")
    if literal.startswith("+"):
        _reject(text, "leading plus sign")

    boundary = _find_term_boundary(text, literal)

    if unit not in literal:
        if boundary > 0:
            _reject(text, "two terms without an imaginary unit")
        real_part, imaginary_part = literal, ""
    else:
        if literal.count(unit) != 1 or not literal.endswith(unit):
            _reject(text, f"imaginary unit {unit!r} must appear once, at the end")
        real_part, imaginary_part = literal[:boundary], literal[boundary:]

    real_numerator, real_denominator = _split_real(text, real_part)
    imaginary_numerator, imaginary_denominator = _split_imaginary(text, imaginary_part, unit)

    return ComplexLiteralParts(
        real_numerator=real_numerator,
        real_denominator=real_denominator,
        imaginary_numerator=imaginary_numerator,
        imaginary_denominator=imaginary_denominator,
    )


def parse_complex_literal(text: str, config: Optional[NotationConfig] = None) -> ComplexNumber:
    """
    Разбор литерала в ComplexNumber.

    Raises:
        LiteralParseError: если нарушена структура литерала
        InvalidFraction: если числитель/знаменатель невалидны или знаменатель равен 0

    Examples:
        >>> str(parse_complex_literal("12/34+(1/2)i"))
        '6/17+(1/2)i'
    """
    parts = split_complex_literal(text, config)
    return ComplexNumber.create(*parts)


# =============================================================================
# ВНУТРЕННИЕ ПОМОЩНИКИ
# =============================================================================


def _reject(text: str, reason: str) -> NoReturn:
    logger.debug("Rejected complex literal %r: %s", text, reason)
    raise LiteralParseError(text, reason)


def _find_term_boundary(text: str, literal: str) -> int:
    """
    Индекс знака, начинающего второй член (мнимую часть), или 0.

    Учитываются только знаки вне скобок и не на первой позиции.
    """
    depth = 0
    boundary = 0

    for index, ch in enumerate(literal):
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                _reject(text, "unbalanced parentheses")
        elif ch in _SIGNS and depth == 0 and index > 0:
            if literal[index - 1] in _SIGNS:
                _reject(text, "double sign")
            if boundary:
                _reject(text, "more than two terms")
            boundary = index

    if depth != 0:
        _reject(text, "unbalanced parentheses")
    return boundary


def _split_fraction(text: str, body: str) -> tuple[str, str]:
    """ "n/d" → (n, d); "n" → (n, "1")."""
    numerator, slash, denominator = body.partition("/")
    if not slash:
        return numerator, "1"
    if not numerator or not denominator:
        _reject(text, "empty numerator or denominator")
    return numerator, denominator


def _split_real(text: str, part: str) -> tuple[str, str]:
    if not part:
        return "0", "1"
    if "(" in part or ")" in part:
        _reject(text, "parentheses are only allowed around the imaginary coefficient")
    return _split_fraction(text, part)


def _split_imaginary(text: str, part: str, unit: str) -> tuple[str, str]:
    if not part:
        return "0", "1"

    body = part[: -len(unit)]
    sign = ""
    if body[:1] in _SIGNS:
        sign, body = body[0], body[1:]

    if body.startswith("("):
        if not body.endswith(")"):
            _reject(text, "imaginary coefficient must be fully parenthesized")
        body = body[1:-1]
        if not body:
            _reject(text, "empty parentheses")
    if "(" in body or ")" in body:
        _reject(text, "misplaced parentheses")

    if not body:
        numerator, denominator = "1", "1"
    else:
        if sign and body[:1] in _SIGNS:
            _reject(text, "double sign")
        numerator, denominator = _split_fraction(text, body)

    if sign == "-":
        numerator = "-" + numerator
    return numerator, denominator
