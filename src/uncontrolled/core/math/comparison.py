"""
Comparison — полный порядок на DecimalNumber

Порядок сравнения:
1. Бесконечности: по эффективному знаковому значению (-inf < finite < +inf)
2. Знак: отрицательное < положительного
3. integer_part
4. Выровненные дроби (больше ведущих нулей → меньше величина);
   для двух отрицательных чисел направление инвертируется

Равенство проверяет знак, бесконечность, integer_part, significand и
leading_zero_count. Представление DecimalNumber каноническое, поэтому
equals(a, b) ⇔ compare(a, b) == 0.
"""

from typing import TYPE_CHECKING, Final, Optional

from uncontrolled.core.math.alignment import align_fractions

if TYPE_CHECKING:
    from uncontrolled.core.domain.decimal_number import DecimalNumber


# Результат compare_to для объектов постороннего типа
INCOMPARABLE: Final[None] = None


def _infinity_rank(number: "DecimalNumber") -> int:
    """-1 для -inf, +1 для +inf, 0 для конечного числа."""
    if not number.is_infinity:
        return 0
    return -1 if number.is_negative else 1


def compare(a: "DecimalNumber", b: "DecimalNumber") -> int:
    """
    Трёхзначное сравнение.

    Returns:
        -1 если a < b, 0 если a == b, +1 если a > b
    """
    if a.is_infinity or b.is_infinity:
        rank_a, rank_b = _infinity_rank(a), _infinity_rank(b)
        if rank_a != rank_b:
            return -1 if rank_a < rank_b else 1
        # Бесконечности одного знака
        return 0

    a_negative, b_negative = a.is_negative, b.is_negative
    if a_negative != b_negative:
        return -1 if a_negative else 1

    if a.integer_part != b.integer_part:
        return -1 if a.integer_part < b.integer_part else 1

    fractions = align_fractions(a.fraction, b.fraction)
    if fractions.first == fractions.second:
        return 0

    order = -1 if fractions.first < fractions.second else 1
    # Для отрицательных чисел бОльшая дробь означает меньшее число
    return -order if a_negative else order


def equals(a: "DecimalNumber", b: "DecimalNumber") -> bool:
    """Поле-в-поле равенство (включая масштаб дроби)."""
    return (
        a.is_infinity == b.is_infinity
        and a.is_negative == b.is_negative
        and a.integer_part == b.integer_part
        and a.fraction_significand == b.fraction_significand
        and a.leading_zero_count == b.leading_zero_count
    )


def compare_to(a: "DecimalNumber", other: object) -> Optional[int]:
    """
    Generic-сравнение с произвольным объектом.

    Для объекта постороннего типа не бросает исключение, а возвращает
    INCOMPARABLE.
    """
    if not isinstance(other, type(a)):
        return INCOMPARABLE
    return compare(a, other)
