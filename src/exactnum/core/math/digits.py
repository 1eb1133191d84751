"""
Digits — алгоритмы над десятичными магнитудами

Магнитуда — это tuple десятичных цифр в порядке от младшей к старшей
(least-significant first). Каноническая магнитуда не содержит лишних
старших нулей; ноль представлен как (0,).

Модуль не знает о знаке: знак добавляет BigInt. Все функции чистые,
входы не изменяются, каждый результат — новый tuple.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат любой операции — каноническая магнитуда
2. Каждая цифра в диапазоне [0, 9]
3. Деление реализовано вычитаниями (schoolbook), без оценки цифр
"""

from typing import Final, Sequence

Digits = tuple[int, ...]

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

RADIX: Final[int] = 10

ZERO_DIGITS: Final[Digits] = (0,)
ONE_DIGITS: Final[Digits] = (1,)


# =============================================================================
# НОРМАЛИЗАЦИЯ И КОНВЕРСИЯ
# =============================================================================


def trim(digits: Sequence[int]) -> Digits:
    """
    Удаление лишних старших нулей.

    Args:
        digits: Цифры (least-significant first), возможно с нулями в конце

    Returns:
        Каноническая магнитуда; пустой вход или одни нули → (0,)

    Examples:
        >>> trim([3, 0, 1, 0, 0])
        (3, 0, 1)
        >>> trim([0, 0])
        (0,)
    """
    end = len(digits)
    while end > 1 and digits[end - 1] == 0:
        end -= 1
    if end == 0:
        return ZERO_DIGITS
    return tuple(digits[:end])


def is_zero_magnitude(digits: Digits) -> bool:
    """True если магнитуда равна нулю (ожидается каноническая форма)."""
    return digits == ZERO_DIGITS


def digits_from_text(text: str) -> Digits:
    """
    Конверсия строки из ASCII-цифр в магнитуду.

    Строка должна быть уже провалидирована (только '0'-'9', без знака).

    Examples:
        >>> digits_from_text("408")
        (8, 0, 4)
    """
    return tuple(ord(ch) - ord("0") for ch in reversed(text))


def digits_to_text(digits: Digits) -> str:
    """
    Конверсия магнитуды в десятичную строку (most-significant first).

    Examples:
        >>> digits_to_text((8, 0, 4))
        '408'
    """
    return "".join(chr(ord("0") + d) for d in reversed(digits))


# =============================================================================
# СРАВНЕНИЕ
# =============================================================================


def compare_magnitudes(a: Digits, b: Digits) -> int:
    """
    Сравнение двух канонических магнитуд.

    Больше цифр → больше. При равной длине сравниваем от старшей цифры,
    первое отличие решает.

    Returns:
        -1 если |a| < |b|, 0 если равны, +1 если |a| > |b|
    """
    if len(a) != len(b):
        return 1 if len(a) > len(b) else -1

    for i in range(len(a) - 1, -1, -1):
        if a[i] != b[i]:
            return 1 if a[i] > b[i] else -1

    return 0


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


def magnitude_add(a: Digits, b: Digits) -> Digits:
    """
    |a| + |b| поразрядно с переносом.

    Под результат резервируется max(len) + 1 цифр, затем лишние нули
    отрезаются.

    Examples:
        >>> magnitude_add((9, 9), (1,))
        (0, 0, 1)
    """
    width = max(len(a), len(b)) + 1
    result = [0] * width
    carry = 0

    for i in range(width):
        total = carry
        if i < len(a):
            total += a[i]
        if i < len(b):
            total += b[i]
        result[i] = total % RADIX
        carry = total // RADIX

    return trim(result)


def magnitude_subtract_larger(a: Digits, b: Digits) -> Digits:
    """
    max(|a|, |b|) - min(|a|, |b|) поразрядно с заёмом.

    Какая магнитуда больше, функция определяет сама, поэтому результат
    всегда неотрицательный.

    Examples:
        >>> magnitude_subtract_larger((0, 0, 1), (1,))
        (9, 9)
        >>> magnitude_subtract_larger((1,), (0, 0, 1))
        (9, 9)
    """
    if compare_magnitudes(a, b) >= 0:
        big, small = a, b
    else:
        big, small = b, a

    result = [0] * len(big)
    borrow = 0

    for i in range(len(big)):
        diff = big[i] - borrow
        if i < len(small):
            diff -= small[i]
        if diff < 0:
            diff += RADIX
            borrow = 1
        else:
            borrow = 0
        result[i] = diff

    return trim(result)


# =============================================================================
# УМНОЖЕНИЕ
# =============================================================================


def magnitude_multiply(a: Digits, b: Digits) -> Digits:
    """
    |a| * |b| — школьное умножение столбиком.

    Для каждой пары позиций (i, j) в ячейку i + j накапливается
    a[i] * b[j] + перенос + уже лежащая там частичная сумма.
    Перенос строки i записывается в позицию i + len(b).

    Сложность: O(len(a) * len(b))

    Examples:
        >>> magnitude_multiply((2, 1), (4, 3))  # 12 * 34
        (8, 0, 4)
    """
    width = len(a) + len(b)
    result = [0] * width

    for i, a_digit in enumerate(a):
        carry = 0
        for j, b_digit in enumerate(b):
            total = a_digit * b_digit + result[i + j] + carry
            result[i + j] = total % RADIX
            carry = total // RADIX
        result[i + len(b)] = carry

    return trim(result)


def shift_left(digits: Digits, places: int) -> Digits:
    """
    |digits| * 10^places (дописывание нулей в младшие разряды).

    Raises:
        ValueError: если places < 0
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")
    if places == 0 or is_zero_magnitude(digits):
        return digits
    return ZERO_DIGITS * places + digits


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def magnitude_quotient(dividend: Digits, divisor: Digits) -> Digits:
    """
    floor(|dividend| / |divisor|) — деление столбиком через вычитания.

    Для каждой позиции делимого, от старшей к младшей, делитель
    масштабируется на 10^k (выравнивается с текущим префиксом остатка)
    и вычитается из остатка, пока это возможно. Количество вычитаний
    (0-9) — очередная цифра частного.

    Сложность: O(len(dividend)) позиций * до 9 вычитаний по O(len) каждое.

    Raises:
        ZeroDivisionError: если divisor == 0 (проверяется и на уровне BigInt)

    Examples:
        >>> magnitude_quotient((7,), (2,))
        (3,)
        >>> magnitude_quotient((1,), (2,))
        (0,)
    """
    if is_zero_magnitude(divisor):
        raise ZeroDivisionError("magnitude division by zero")

    if compare_magnitudes(dividend, divisor) < 0:
        return ZERO_DIGITS

    remainder = dividend
    # Цифры частного накапливаются от старшей к младшей
    quotient_msd_first: list[int] = []

    for places in range(len(dividend) - len(divisor), -1, -1):
        scaled_divisor = shift_left(divisor, places)
        count = 0
        while compare_magnitudes(remainder, scaled_divisor) >= 0:
            remainder = magnitude_subtract_larger(remainder, scaled_divisor)
            count += 1
        quotient_msd_first.append(count)

    return trim(quotient_msd_first[::-1])
