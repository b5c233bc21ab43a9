"""
Alignment — приведение дробных частей к общему масштабу

Две дроби могут отличаться и количеством значащих цифр, и количеством
ведущих нулей. Выравнивание превращает их в целые, которые можно напрямую
сравнивать и складывать как истинные дробные величины:

    1. Короткий significand дополняется хвостовыми нулями до
       max(digits_a, digits_b)
    2. d = leading_zeros_a - leading_zeros_b; операнд с МЕНЬШИМ числом
       ведущих нулей (более «крупная» дробь) умножается на 10^|d|

Пример: .5 и .05
    digits: 1 и 1 → без изменений (5, 5)
    d = 0 - 1 = -1 → .5 крупнее → (50, 5), width=2
    50/10^2 = .50, 5/10^2 = .05

Выровненные полные целые (align_complete_integers) используются делением
и сравнением величин с разным масштабом.
"""

from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from uncontrolled.core.domain.decimal_number import DecimalNumber


# =============================================================================
# TYPES
# =============================================================================


class FractionScale(NamedTuple):
    """Дробная часть числа: significand + масштаб."""

    significand: int  # Дробные цифры без хвостовых нулей
    digits: int  # Количество цифр в significand
    leading_zeros: int  # Нули между точкой и первой значащей цифрой


class AlignedFractions(NamedTuple):
    """Две дроби, записанные целыми в одном масштабе 10^-width."""

    first: int
    second: int
    width: int  # Общее количество дробных разрядов


# =============================================================================
# ALIGNMENT
# =============================================================================


def align_fractions(a: FractionScale, b: FractionScale) -> AlignedFractions:
    """
    Выравнивание двух дробей к общей ширине и масштабу.

    Args:
        a: Первая дробь
        b: Вторая дробь

    Returns:
        AlignedFractions: first/second как целые в масштабе 10^-width

    Examples:
        >>> align_fractions(FractionScale(5, 1, 0), FractionScale(5, 1, 1))
        AlignedFractions(first=50, second=5, width=2)
        >>> align_fractions(FractionScale(12, 2, 0), FractionScale(3, 1, 0))
        AlignedFractions(first=12, second=30, width=2)
    """
    digits = max(a.digits, b.digits)

    # Шаг 1: выравнивание количества цифр
    first = a.significand * 10 ** (digits - a.digits)
    second = b.significand * 10 ** (digits - b.digits)

    # Шаг 2: выравнивание порядка по ведущим нулям
    order_difference = a.leading_zeros - b.leading_zeros
    if order_difference > 0:
        # b крупнее: сдвигаем b на разницу порядков
        second *= 10 ** order_difference
    elif order_difference < 0:
        first *= 10 ** -order_difference

    width = digits + max(a.leading_zeros, b.leading_zeros)
    return AlignedFractions(first, second, width)


def align_complete_integers(a: "DecimalNumber", b: "DecimalNumber") -> AlignedFractions:
    """
    Модули двух конечных чисел как целые в общем масштабе.

    Целая часть подмешивается к выровненной дроби:
        |integer_part| * 10^width + aligned_fraction

    Знак не учитывается (возвращаются только неотрицательные значения).

    Examples:
        1.5 и 0.25 → AlignedFractions(first=150, second=25, width=2)
    """
    fractions = align_fractions(a.fraction, b.fraction)
    unit = 10 ** fractions.width

    return AlignedFractions(
        first=abs(a.integer_part) * unit + fractions.first,
        second=abs(b.integer_part) * unit + fractions.second,
        width=fractions.width,
    )
