"""
Normalization — нормализация дробной части

Дробная часть числа хранится как целое без хвостовых нулей
(.0120 → significand=12) плюс количество ведущих нулей после точки
(.0120 → leading_zeros=1). Модуль содержит примитивы, через которые проходит
любое конструирование DecimalNumber.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. significand никогда не оканчивается на 0, если он не равен 0
2. normalize_fraction(0) == (0, 0)
3. Знак raw-значения отбрасывается (знак числа хранится отдельно)
"""

import math
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Фиксированная точность разбиения float на целую и дробную часть
FLOAT_FRACTION_DIGITS: Final[int] = 15

_LOG10_2: Final[float] = math.log10(2)

# Длина блока для str(int) / int(str), заведомо ниже sys.get_int_max_str_digits()
DIGIT_CHUNK_SIZE: Final[int] = 1000


# =============================================================================
# ПРИМИТИВЫ
# =============================================================================


def digit_count(value: int) -> int:
    """
    Количество десятичных цифр в abs(value).

    Не использует str(): длинные int упираются в лимит
    sys.get_int_max_str_digits().

    Examples:
        >>> digit_count(0)
        1
        >>> digit_count(-999)
        3
        >>> digit_count(10 ** 5000)
        5001
    """
    value = abs(value)
    if value == 0:
        return 1

    # Оценка через bit_length, затем точная коррекция
    estimate = int(value.bit_length() * _LOG10_2) + 1
    while estimate > 1 and 10 ** (estimate - 1) > value:
        estimate -= 1
    while 10 ** estimate <= value:
        estimate += 1

    return estimate


def normalize_fraction(raw: int) -> tuple[int, int]:
    """
    Нормализация raw дробной части: отбрасывание знака и хвостовых нулей.

    Args:
        raw: Дробные разряды как целое (может быть отрицательным)

    Returns:
        (significand, digits):
            - significand: raw без знака и хвостовых нулей
            - digits: количество цифр в significand (0 для нуля)

    Examples:
        >>> normalize_fraction(1200)
        (12, 2)
        >>> normalize_fraction(-305)
        (305, 3)
        >>> normalize_fraction(0)
        (0, 0)
    """
    significand = abs(raw)

    if significand == 0:
        return (0, 0)

    while significand % 10 == 0:
        significand //= 10

    return (significand, digit_count(significand))


def count_leading_zeros(digits: str) -> int:
    """
    Количество нулей в начале строки дробных разрядов (до нормализации).

    Examples:
        >>> count_leading_zeros("001200")
        2
        >>> count_leading_zeros("5")
        0
    """
    return len(digits) - len(digits.lstrip("0"))


def leading_zeros_within(fraction: int, width: int) -> int:
    """
    Количество ведущих нулей дробной части, записанной ровно в width разрядах.

    Используется после сложения/вычитания выровненных дробей:
    fraction=5 при width=3 соответствует .005 → 2 ведущих нуля.

    Returns:
        width - digit_count(fraction), либо 0 для нулевой дроби
    """
    if fraction == 0:
        return 0
    return max(0, width - digit_count(fraction))


def split_float(value: float) -> tuple[str, str]:
    """
    Разбиение abs(value) на строки целых и дробных разрядов.

    Дробная часть всегда содержит ровно FLOAT_FRACTION_DIGITS цифр
    (с ведущими и хвостовыми нулями, до нормализации).

    Examples:
        >>> split_float(-2.5)
        ('2', '500000000000000')
    """
    text = format(abs(value), f".{FLOAT_FRACTION_DIGITS}f")
    whole, _, fraction = text.partition(".")
    return (whole, fraction)


# =============================================================================
# ДЕСЯТИЧНАЯ ЗАПИСЬ ДЛИННЫХ ЦЕЛЫХ
# =============================================================================


def render_digits(value: int, width: int = 0) -> str:
    """
    Десятичная запись abs(value) без ограничения длины.

    Длинные значения делятся пополам через divmod на 10^k, каждая половина
    записывается рекурсивно; блоки не длиннее DIGIT_CHUNK_SIZE идут через
    str(). Младшая половина дополняется нулями до k разрядов.

    Args:
        value: Целое (знак отбрасывается)
        width: Минимальная ширина записи, недостающие разряды слева нулями

    Examples:
        >>> render_digits(-1205)
        '1205'
        >>> render_digits(7, width=3)
        '007'
        >>> len(render_digits(10 ** 6000))
        6001
    """
    value = abs(value)
    digits = digit_count(value)

    if digits <= DIGIT_CHUNK_SIZE:
        return str(value).zfill(width)

    half = digits // 2
    high, low = divmod(value, 10 ** half)
    return render_digits(high, max(0, width - half)) + render_digits(low, half)


def parse_digits(digits: str) -> int:
    """
    Неотрицательное целое из строки десятичных цифр без ограничения длины.

    Обратная операция к render_digits: строка делится пополам,
    старшая половина умножается на 10^len(младшей).

    Raises:
        ValueError: Если строка пуста или содержит не только цифры

    Examples:
        >>> parse_digits("001200")
        1200
    """
    if not digits or not digits.isdecimal():
        raise ValueError(f"Not a digit string: {digits[:20]!r}")

    if len(digits) <= DIGIT_CHUNK_SIZE:
        return int(digits)

    half = len(digits) // 2
    return parse_digits(digits[:-half]) * 10 ** half + parse_digits(digits[-half:])
