"""
Notation — конфигурация текстовой записи комплексных чисел

Общая конфигурация для formatting (вывод) и literal (разбор).
"""

from dataclasses import dataclass

# Символы, которые не могут входить в обозначение мнимой единицы:
# они уже заняты грамматикой литерала
_RESERVED_CHARS = frozenset("0123456789+-/()")


@dataclass(frozen=True)
class NotationConfig:
    """Конфигурация записи комплексных чисел.

    - imaginary_unit: обозначение мнимой единицы ("i", "j", ...)
    - parenthesize_fractional_imaginary: "(1/2)i" вместо "1/2i"
    - omit_unit_coefficient: "i" / "-i" вместо "1i" / "-1i"
    """

    imaginary_unit: str = "i"
    parenthesize_fractional_imaginary: bool = True
    omit_unit_coefficient: bool = True

    def __post_init__(self) -> None:
        if not self.imaginary_unit or any(ch.isspace() for ch in self.imaginary_unit):
            raise ValueError(
                f"imaginary_unit must be a non-empty token without whitespace, "
                f"got {self.imaginary_unit!r}"
            )
        reserved = _RESERVED_CHARS.intersection(self.imaginary_unit)
        if reserved:
            raise ValueError(
                f"imaginary_unit {self.imaginary_unit!r} contains reserved characters: "
                f"{''.join(sorted(reserved))}"
            )


DEFAULT_NOTATION = NotationConfig()
