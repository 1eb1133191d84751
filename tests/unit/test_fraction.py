"""
Тесты для Fraction (каноническая несократимая дробь) и gcd

Проверяет:
1. gcd: терминальные случаи и отказ на неположительных аргументах
2. Создание и сокращение (create / from_bigints / parse)
3. InvalidFraction с сохранённой причиной ParseError
4. Арифметику (add/subtract/multiply/divide) против int-оракула
5. Сравнение (Ordering) и trichotomy
6. Инварианты канонической формы после каждой операции
"""

import math
import random

import pytest
from pydantic import ValidationError

from exactnum.core.math.bigint import BigInt
from exactnum.core.math.errors import DivisionByZero, InvalidFraction, ParseError
from exactnum.core.math.fraction import Fraction, Ordering, gcd


def big(value: int) -> BigInt:
    return BigInt.from_int(value)


def frac(numerator: int, denominator: int = 1) -> Fraction:
    return Fraction.create(str(numerator), str(denominator))


def as_pair(value: Fraction) -> tuple[int, int]:
    """(signed numerator, denominator) как int для сравнения с оракулом"""
    numerator = int(value.numerator.to_string())
    if value.negative:
        numerator = -numerator
    return numerator, int(value.denominator.to_string())


def reduced_pair(numerator: int, denominator: int) -> tuple[int, int]:
    """Канонический вид дроби, посчитанный на int"""
    if numerator == 0:
        return 0, 1
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    common = math.gcd(numerator, denominator)
    return numerator // common, denominator // common


def assert_canonical(value: Fraction) -> None:
    assert not value.numerator.is_negative()
    assert not value.denominator.is_negative()
    assert not value.denominator.is_zero()
    if value.numerator.is_zero():
        assert value.negative is False
        assert value.denominator == BigInt.one()
    else:
        assert gcd(value.numerator, value.denominator) == BigInt.one()


def _random_pairs(seed: int, count: int = 60) -> list[tuple[int, int]]:
    rng = random.Random(seed)
    pairs = []
    for _ in range(count):
        numerator = rng.randint(-(10**6), 10**6)
        denominator = 0
        while denominator == 0:
            denominator = rng.randint(-(10**4), 10**4)
        pairs.append((numerator, denominator))
    return pairs


# =============================================================================
# ТЕСТЫ GCD
# =============================================================================


class TestGcd:
    """Тесты для gcd"""

    def test_basic(self) -> None:
        assert gcd(big(12), big(34)) == big(2)
        assert gcd(big(34), big(12)) == big(2)

    def test_equal_arguments(self) -> None:
        """gcd(a, a) = a"""
        for value in (1, 7, 408, 123456789):
            assert gcd(big(value), big(value)) == big(value)

    def test_one_is_coprime_to_everything(self) -> None:
        """gcd(1, n) = 1"""
        for value in (1, 2, 97, 10**20):
            assert gcd(big(1), big(value)) == big(1)
            assert gcd(big(value), big(1)) == big(1)

    def test_divisor_of_other(self) -> None:
        assert gcd(big(7), big(91)) == big(7)

    def test_coprime(self) -> None:
        assert gcd(big(17), big(6)) == big(1)

    def test_zero_rejected(self) -> None:
        with pytest.raises(ValueError, match="strictly positive"):
            gcd(big(0), big(5))
        with pytest.raises(ValueError, match="strictly positive"):
            gcd(big(5), big(0))

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError, match="strictly positive"):
            gcd(big(-4), big(6))

    def test_matches_math_gcd(self) -> None:
        rng = random.Random(21)
        for _ in range(100):
            a, b = rng.randint(1, 10**9), rng.randint(1, 10**9)
            assert gcd(big(a), big(b)) == big(math.gcd(a, b))


# =============================================================================
# ТЕСТЫ СОЗДАНИЯ
# =============================================================================


class TestFractionCreate:
    """Тесты для Fraction.create"""

    def test_reduces(self) -> None:
        assert str(Fraction.create("12", "34")) == "6/17"

    def test_sign_moves_to_flag(self) -> None:
        value = Fraction.create("4", "-6")
        assert value.negative is True
        assert value.numerator == big(2)
        assert value.denominator == big(3)
        assert str(value) == "-2/3"

    def test_two_negatives_give_positive(self) -> None:
        assert str(Fraction.create("-1", "-2")) == "1/2"

    def test_integer_result(self) -> None:
        assert str(Fraction.create("4", "-2")) == "-2"
        assert Fraction.create("4", "-2").is_integer()

    def test_equal_magnitudes_give_one(self) -> None:
        assert Fraction.create("-6", "-6") == Fraction.one()
        assert Fraction.create("6", "-6") == frac(-1)

    def test_zero_numerator_is_canonical(self) -> None:
        value = Fraction.create("0", "-5")
        assert value == Fraction.zero()
        assert value.negative is False
        assert value.denominator == BigInt.one()
        assert str(value) == "0"

    def test_zero_denominator_rejected(self) -> None:
        with pytest.raises(InvalidFraction, match="denominator cannot be zero"):
            Fraction.create("1", "0")

    def test_invalid_numerator_rejected(self) -> None:
        with pytest.raises(InvalidFraction) as exc_info:
            Fraction.create("1x", "2")
        error = exc_info.value
        assert error.numerator == "1x"
        assert error.denominator == "2"
        assert error.reason == "unexpected character"
        assert isinstance(error.__cause__, ParseError)

    def test_invalid_denominator_rejected(self) -> None:
        with pytest.raises(InvalidFraction, match="zero cannot be negative"):
            Fraction.create("1", "-0")

    def test_invalid_fraction_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Fraction.create("", "1")

    def test_matches_int_reduction(self) -> None:
        for numerator, denominator in _random_pairs(seed=22):
            value = frac(numerator, denominator)
            assert as_pair(value) == reduced_pair(numerator, denominator)
            assert_canonical(value)

    def test_reduction_idempotent(self) -> None:
        """Повторное создание из собственных частей даёт ту же дробь"""
        for numerator, denominator in _random_pairs(seed=23):
            value = frac(numerator, denominator)
            rebuilt = Fraction.create(
                value.signed_numerator().to_string(), value.denominator.to_string()
            )
            assert rebuilt == value


class TestFractionConstructors:
    """Тесты для from_bigints / parse / from_int"""

    def test_from_bigints(self) -> None:
        assert Fraction.from_bigints(big(-10), big(4)) == frac(-5, 2)

    def test_from_bigints_zero_denominator(self) -> None:
        with pytest.raises(InvalidFraction):
            Fraction.from_bigints(big(1), big(0))

    def test_parse(self) -> None:
        assert Fraction.parse("6/17") == frac(6, 17)
        assert Fraction.parse("-3") == frac(-3)
        assert Fraction.parse("12/34") == frac(6, 17)

    def test_parse_rejects_garbage(self) -> None:
        for text in ("1/", "/2", "1/2/3", "a/b", "1/0"):
            with pytest.raises(InvalidFraction):
                Fraction.parse(text)

    def test_parse_non_str(self) -> None:
        with pytest.raises(TypeError):
            Fraction.parse(0.5)  # type: ignore[arg-type]

    def test_string_round_trip(self) -> None:
        for text in ("0", "1", "-1", "6/17", "-2/3", "123456789/1000000000"):
            assert Fraction.parse(text).to_string() == text

    def test_from_int(self) -> None:
        assert Fraction.from_int(-7) == frac(-7)
        assert Fraction.from_int(0) == Fraction.zero()

    def test_repr(self) -> None:
        assert repr(frac(-6, 17)) == "Fraction('-6/17')"


# =============================================================================
# ТЕСТЫ ВАЛИДАЦИИ
# =============================================================================


class TestFractionValidation:
    """Прямое создание Fraction(...) проверяет каноничность"""

    def test_valid_direct_construction(self) -> None:
        value = Fraction(negative=True, numerator=big(6), denominator=big(17))
        assert value == frac(-6, 17)

    def test_not_reduced_rejected(self) -> None:
        with pytest.raises(ValidationError, match="not reduced"):
            Fraction(numerator=big(2), denominator=big(4))

    def test_negative_numerator_rejected(self) -> None:
        with pytest.raises(ValidationError, match="non-negative"):
            Fraction(numerator=big(-1), denominator=big(2))

    def test_non_positive_denominator_rejected(self) -> None:
        with pytest.raises(ValidationError, match="positive"):
            Fraction(numerator=big(1), denominator=big(0))
        with pytest.raises(ValidationError, match="positive"):
            Fraction(numerator=big(1), denominator=big(-2))

    def test_negative_zero_rejected(self) -> None:
        with pytest.raises(ValidationError, match="zero cannot be negative"):
            Fraction(negative=True, numerator=big(0), denominator=big(1))

    def test_zero_with_non_unit_denominator_rejected(self) -> None:
        with pytest.raises(ValidationError, match="denominator 1"):
            Fraction(numerator=big(0), denominator=big(3))

    def test_frozen(self) -> None:
        value = frac(1, 2)
        with pytest.raises(ValidationError):
            value.negative = True  # type: ignore[misc]


# =============================================================================
# ТЕСТЫ АРИФМЕТИКИ
# =============================================================================


class TestFractionArithmetic:
    """Тесты для add / subtract / multiply / divide"""

    def test_add_scenario(self) -> None:
        assert str(frac(1, 2).add(frac(1, 3))) == "5/6"

    def test_add_same_denominator(self) -> None:
        assert frac(1, 4).add(frac(1, 4)) == frac(1, 2)

    def test_add_with_common_factor(self) -> None:
        assert frac(1, 6).add(frac(1, 4)) == frac(5, 12)

    def test_add_opposites_gives_canonical_zero(self) -> None:
        result = frac(-3, 7).add(frac(3, 7))
        assert result == Fraction.zero()
        assert result.negative is False

    def test_subtract(self) -> None:
        assert frac(1, 3).subtract(frac(1, 2)) == frac(-1, 6)

    def test_multiply(self) -> None:
        assert frac(2, 3).multiply(frac(3, 4)) == frac(1, 2)
        assert frac(-2, 3).multiply(frac(3, 4)) == frac(-1, 2)
        assert frac(-2, 3).multiply(frac(-3, 4)) == frac(1, 2)

    def test_multiply_by_zero_is_non_negative(self) -> None:
        result = frac(-2, 3).multiply(Fraction.zero())
        assert result == Fraction.zero()
        assert result.negative is False

    def test_divide(self) -> None:
        assert frac(1, 2).divide(frac(1, 4)) == frac(2)
        assert frac(1, 2).divide(frac(-3)) == frac(-1, 6)

    def test_divide_by_zero(self) -> None:
        with pytest.raises(DivisionByZero):
            frac(1, 2).divide(Fraction.zero())

    def test_divide_zero(self) -> None:
        assert Fraction.zero().divide(frac(5, 7)) == Fraction.zero()

    def test_reciprocal(self) -> None:
        assert frac(-2, 3).reciprocal() == frac(-3, 2)
        with pytest.raises(DivisionByZero):
            Fraction.zero().reciprocal()

    def test_negate_and_abs(self) -> None:
        assert frac(2, 3).negate() == frac(-2, 3)
        assert Fraction.zero().negate().negative is False
        assert frac(-2, 3).abs() == frac(2, 3)
        assert abs(frac(-2, 3)) == frac(2, 3)

    def test_operators(self) -> None:
        assert frac(1, 2) + frac(1, 3) == frac(5, 6)
        assert frac(1, 2) - frac(1, 3) == frac(1, 6)
        assert frac(1, 2) * frac(2, 3) == frac(1, 3)
        assert frac(1, 2) / frac(1, 3) == frac(3, 2)
        assert -frac(1, 2) == frac(-1, 2)
        assert bool(Fraction.zero()) is False

    def test_matches_int_oracle(self) -> None:
        pairs = _random_pairs(seed=24)
        for (a, b), (c, d) in zip(pairs, reversed(pairs)):
            x, y = frac(a, b), frac(c, d)

            total = x.add(y)
            assert as_pair(total) == reduced_pair(a * d + c * b, b * d)
            assert_canonical(total)

            difference = x.subtract(y)
            assert as_pair(difference) == reduced_pair(a * d - c * b, b * d)
            assert_canonical(difference)

            product = x.multiply(y)
            assert as_pair(product) == reduced_pair(a * c, b * d)
            assert_canonical(product)

            if c != 0:
                ratio = x.divide(y)
                assert as_pair(ratio) == reduced_pair(a * d, b * c)
                assert_canonical(ratio)

    def test_commutativity_and_associativity(self) -> None:
        pairs = _random_pairs(seed=25, count=30)
        values = [frac(n, d) for n, d in pairs]
        for x, y, z in zip(values[0::3], values[1::3], values[2::3]):
            assert x.add(y) == y.add(x)
            assert x.multiply(y) == y.multiply(x)
            assert x.add(y).add(z) == x.add(y.add(z))
            assert x.multiply(y).multiply(z) == x.multiply(y.multiply(z))


# =============================================================================
# ТЕСТЫ СРАВНЕНИЯ
# =============================================================================


class TestFractionCompare:
    """Тесты для compare и операторов сравнения"""

    def test_greater(self) -> None:
        assert frac(1, 2).compare(frac(1, 3)) is Ordering.GREATER

    def test_less(self) -> None:
        assert frac(-1, 2).compare(frac(1, 3)) is Ordering.LESS

    def test_equal(self) -> None:
        assert frac(2, 4).compare(frac(1, 2)) is Ordering.EQUAL

    def test_ordering_values(self) -> None:
        assert Ordering.GREATER.value == "greater"
        assert Ordering.EQUAL == "equal"

    def test_operators(self) -> None:
        assert frac(1, 3) < frac(1, 2)
        assert frac(1, 2) <= frac(2, 4)
        assert frac(-1, 3) > frac(-1, 2)
        assert frac(0) >= frac(-5, 3)

    def test_trichotomy(self) -> None:
        pairs = _random_pairs(seed=26, count=40)
        for (a, b), (c, d) in zip(pairs, pairs[1:]):
            ordering = frac(a, b).compare(frac(c, d))
            left, right = a * d * (b * d), c * b * (b * d)
            if left > right:
                assert ordering is Ordering.GREATER
            elif left < right:
                assert ordering is Ordering.LESS
            else:
                assert ordering is Ordering.EQUAL

    def test_hash_consistent_with_eq(self) -> None:
        assert hash(frac(2, 4)) == hash(frac(1, 2))
        assert len({frac(2, 4), frac(1, 2), frac(-1, 2)}) == 2
