"""
Arithmetic Engine — сложение, умножение, деление, побитовые операции

Функции модуля принимают готовые DecimalNumber и возвращают RawDecimal:
сырые части результата (целая часть, raw дробь, ведущие нули, знак).
Конструирование итогового значения (нормализация, каноникализация знака)
выполняет DecimalNumber.from_raw.

ПОЛИТИКА ОСОБЫХ ЗНАЧЕНИЙ:
- a / 0        → +inf (никогда не бросает)
- 0 / b        → 0
- a / inf      → 0
- inf / b      → ±inf (b конечное ненулевое)
- inf * 0      → 0
- inf * b      → ±inf (b ненулевое)
- inf + (-inf) → UndefinedOperationError
- bitwise      → только integer_part, дробь и масштаб отбрасываются

Все операции над конечными значениями точные, кроме деления, которое
ограничено accuracy дробными разрядами (усечение, без округления).
"""

import logging
from typing import TYPE_CHECKING, NamedTuple

from uncontrolled.core.math.alignment import align_complete_integers, align_fractions
from uncontrolled.core.math.normalization import digit_count, leading_zeros_within
from uncontrolled.errors import UndefinedOperationError

if TYPE_CHECKING:
    from uncontrolled.core.domain.decimal_number import DecimalNumber

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


class RawDecimal(NamedTuple):
    """Сырые части результата операции (до нормализации)."""

    integer: int  # Целая часть (знак допускается)
    fraction: int  # Raw дробные разряды (хвостовые нули допускаются)
    leading_zeros: int  # Нули между точкой и первой значащей цифрой fraction
    negative: bool  # Знак результата
    infinity: bool = False

    @classmethod
    def zero(cls) -> "RawDecimal":
        return cls(0, 0, 0, False)

    @classmethod
    def infinite(cls, negative: bool = False) -> "RawDecimal":
        return cls(0, 0, 0, negative, infinity=True)


# =============================================================================
# NEGATION
# =============================================================================


def negate(a: "DecimalNumber") -> RawDecimal:
    """
    Смена знака.

    Для ненулевой целой части меняется её знак, для нулевой меняется force_negative.
    Бесконечность остаётся бесконечностью противоположного знака.
    """
    if a.is_infinity:
        return RawDecimal.infinite(not a.is_negative)

    return RawDecimal(
        integer=abs(a.integer_part),
        fraction=a.fraction_significand,
        leading_zeros=a.leading_zero_count,
        negative=not a.is_negative,
    )


# =============================================================================
# ADDITION
# =============================================================================


def _add_infinity(a: "DecimalNumber", b: "DecimalNumber") -> RawDecimal:
    if a.is_infinity and b.is_infinity and a.is_negative != b.is_negative:
        raise UndefinedOperationError(
            "Sum of infinities with opposite signs is undefined"
        )

    source = a if a.is_infinity else b
    logger.debug("infinity propagated through addition: %s + %s", a, b)
    return RawDecimal.infinite(source.is_negative)


def add(a: "DecimalNumber", b: "DecimalNumber") -> RawDecimal:
    """
    Сложение.

    Случай «a отрицательное, b положительное» обрабатывается одной веткой
    вычитания; симметричный случай сводится к add(b, a).

    Одинаковые знаки:
        дроби складываются в общем масштабе; при выходе суммы за ширину
        выравнивания 1 переносится в целую часть.
    Разные знаки:
        из бОльшего модуля вычитается меньший; если разность дробей
        отрицательна, из целой части занимается 1.

    Raises:
        UndefinedOperationError: inf + (-inf)
    """
    if a.is_infinity or b.is_infinity:
        return _add_infinity(a, b)

    if a.is_negative != b.is_negative and b.is_negative:
        return add(b, a)

    fractions = align_fractions(a.fraction, b.fraction)
    unit = 10 ** fractions.width
    a_whole, b_whole = abs(a.integer_part), abs(b.integer_part)

    if a.is_negative == b.is_negative:
        whole = a_whole + b_whole
        fraction = fractions.first + fractions.second
        if fraction >= unit:
            # Перенос в целую часть
            whole += 1
            fraction -= unit
        negative = a.is_negative
    else:
        # a отрицательное, b положительное
        a_magnitude = a_whole * unit + fractions.first
        b_magnitude = b_whole * unit + fractions.second

        if a_magnitude > b_magnitude:
            negative = True
            whole = a_whole - b_whole
            fraction = fractions.first - fractions.second
        else:
            negative = False
            whole = b_whole - a_whole
            fraction = fractions.second - fractions.first

        if fraction < 0:
            # Заём из целой части
            whole -= 1
            fraction += unit

    return RawDecimal(
        integer=whole,
        fraction=fraction,
        leading_zeros=leading_zeros_within(fraction, fractions.width),
        negative=negative,
    )


# =============================================================================
# MULTIPLICATION
# =============================================================================


def _reverse_digits(value: int) -> int:
    """Разворот десятичных цифр неотрицательного целого (1230 → 321)."""
    reversed_value = 0
    while value > 0:
        value, digit = divmod(value, 10)
        reversed_value = reversed_value * 10 + digit
    return reversed_value


def _peel_fraction_digits(product: int, count: int) -> tuple[int, int, int]:
    """
    Отделение count младших разрядов произведения как дробной части.

    Разряды снимаются по одному, начиная с младшего; серия нулей, снятых
    последними, это ведущие нули дроби.

    Returns:
        (whole, significand, leading_zeros)

    Examples:
        >>> _peel_fraction_digits(12050, 3)
        (12, 5, 1)
    """
    peeled = 0
    zero_run = 0

    for _ in range(count):
        product, digit = divmod(product, 10)
        peeled = peeled * 10 + digit
        zero_run = zero_run + 1 if digit == 0 else 0

    if peeled == 0:
        zero_run = 0

    return (product, _reverse_digits(peeled), zero_run)


def multiply(a: "DecimalNumber", b: "DecimalNumber") -> RawDecimal:
    """
    Умножение.

    Модули complete_integer перемножаются, затем от произведения отделяется
    scale_a + scale_b дробных разрядов.

    Бесконечность: inf * 0 → 0, inf * b → inf со знаком xor знаков.
    """
    negative = a.is_negative != b.is_negative

    if a.is_infinity or b.is_infinity:
        if a.is_zero or b.is_zero:
            return RawDecimal.zero()
        logger.debug("infinity propagated through multiplication: %s * %s", a, b)
        return RawDecimal.infinite(negative)

    product = abs(a.complete_integer) * abs(b.complete_integer)
    whole, significand, leading_zeros = _peel_fraction_digits(
        product, a.scale + b.scale
    )

    return RawDecimal(whole, significand, leading_zeros, negative)


# =============================================================================
# DIVISION
# =============================================================================


def divide(a: "DecimalNumber", b: "DecimalNumber", accuracy: int) -> RawDecimal:
    """
    Деление с ограничением точности.

    Алгоритм:
        1. Модули приводятся к выровненным полным целым
        2. divmod даёт целую часть результата
        3. Остаток масштабируется на 10^(accuracy-1) и снова делится:
           это дробные разряды результата (усечение)
        4. leading_zeros = max(0, accuracy - 1 - digits(дроби))

    Args:
        a: Делимое
        b: Делитель
        accuracy: Количество дробных разрядов (>= 1)

    Returns:
        RawDecimal результата

    Examples:
        1 / 3 при accuracy=5 → 0.3333
        1 / 8 при accuracy=30 → 0.125
    """
    if b.is_zero:
        logger.debug("division by zero: %s / 0 -> inf", a)
        return RawDecimal.infinite()

    if a.is_zero or b.is_infinity:
        return RawDecimal.zero()

    negative = a.is_negative != b.is_negative

    if a.is_infinity:
        logger.debug("infinity propagated through division: %s / %s", a, b)
        return RawDecimal.infinite(negative)

    dividend, divisor, _ = align_complete_integers(a, b)
    quotient, remainder = divmod(dividend, divisor)

    fraction = remainder * 10 ** (accuracy - 1) // divisor
    leading_zeros = max(0, accuracy - 1 - digit_count(fraction))

    return RawDecimal(quotient, fraction, leading_zeros, negative)


# =============================================================================
# BITWISE
# =============================================================================


def bitwise_xor(a: "DecimalNumber", b: "DecimalNumber") -> RawDecimal:
    return RawDecimal(a.integer_part ^ b.integer_part, 0, 0, False)


def bitwise_or(a: "DecimalNumber", b: "DecimalNumber") -> RawDecimal:
    return RawDecimal(a.integer_part | b.integer_part, 0, 0, False)


def bitwise_and(a: "DecimalNumber", b: "DecimalNumber") -> RawDecimal:
    return RawDecimal(a.integer_part & b.integer_part, 0, 0, False)
