"""
Тесты для NotationConfig
"""

from dataclasses import FrozenInstanceError

import pytest

from exactnum.core.domain.notation import DEFAULT_NOTATION, NotationConfig


class TestNotationConfig:
    """Тесты для конфигурации записи комплексных чисел"""

    def test_defaults(self) -> None:
        assert DEFAULT_NOTATION.imaginary_unit == "i"
        assert DEFAULT_NOTATION.parenthesize_fractional_imaginary is True
        assert DEFAULT_NOTATION.omit_unit_coefficient is True

    def test_custom_unit(self) -> None:
        assert NotationConfig(imaginary_unit="j").imaginary_unit == "j"
        assert NotationConfig(imaginary_unit="im").imaginary_unit == "im"

    def test_empty_unit_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            NotationConfig(imaginary_unit="")

    def test_whitespace_in_unit_rejected(self) -> None:
        for unit in (" i", "i ", "i m"):
            with pytest.raises(ValueError, match="without whitespace"):
                NotationConfig(imaginary_unit=unit)

    def test_reserved_characters_rejected(self) -> None:
        for unit in ("1", "i2", "+", "-i", "/", "(i)"):
            with pytest.raises(ValueError, match="reserved characters"):
                NotationConfig(imaginary_unit=unit)

    def test_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            DEFAULT_NOTATION.imaginary_unit = "j"  # type: ignore[misc]

    def test_value_equality(self) -> None:
        assert NotationConfig() == DEFAULT_NOTATION
        assert NotationConfig(omit_unit_coefficient=False) != DEFAULT_NOTATION
