"""
Formatting — каноническое строковое представление и конверсия в float

Формат:
    [-]<integer_part>[.<leading zeros><significand>]

    "inf" / "-inf" для бесконечностей.

Знак записывается отдельно от модуля integer_part, поэтому -0.5
(integer_part == 0, force_negative) и -12.5 получают минус одним правилом.
Цифры выводит render_digits: str(int) для длинных значений упирается в
sys.get_int_max_str_digits().
"""

import math
from typing import TYPE_CHECKING

from uncontrolled.core.math.normalization import render_digits

if TYPE_CHECKING:
    from uncontrolled.core.domain.decimal_number import DecimalNumber


INFINITY_TEXT = "inf"


def to_string(number: "DecimalNumber") -> str:
    """
    Каноническая строка.

    Examples:
        1.05   → "1.05"
        -0.5   → "-0.5"
        -12    → "-12"
    """
    if number.is_infinity:
        return f"-{INFINITY_TEXT}" if number.is_negative else INFINITY_TEXT

    sign = "-" if number.is_negative else ""
    text = sign + render_digits(number.integer_part)

    if number.fraction_significand == 0:
        return text

    fraction = render_digits(
        number.fraction_significand,
        width=number.leading_zero_count + number.fraction_digit_count,
    )
    return f"{text}.{fraction}"


def to_double(number: "DecimalNumber") -> float:
    """
    Конверсия в float через каноническую строку.

    ВНИМАНИЕ: конверсия с потерей точности (ограничения IEEE 754 double).
    Значения за пределами диапазона double становятся ±inf.
    """
    if number.is_infinity:
        return -math.inf if number.is_negative else math.inf
    return float(to_string(number))
