"""
Core math modules для uncontrolled-number

Примитивы над встроенным int: нормализация дроби, выравнивание масштабов,
сравнение, арифметика и форматирование. Модули не импортируют DecimalNumber
во время выполнения: они работают с готовыми значениями и возвращают сырые
части (RawDecimal), из которых DecimalNumber собирает результат.
"""

# Normalization
from uncontrolled.core.math.normalization import (
    DIGIT_CHUNK_SIZE,
    FLOAT_FRACTION_DIGITS,
    count_leading_zeros,
    digit_count,
    leading_zeros_within,
    normalize_fraction,
    parse_digits,
    render_digits,
    split_float,
)

# Alignment
from uncontrolled.core.math.alignment import (
    AlignedFractions,
    FractionScale,
    align_complete_integers,
    align_fractions,
)

# Comparison
from uncontrolled.core.math.comparison import (
    INCOMPARABLE,
    compare,
    compare_to,
    equals,
)

# Arithmetic
from uncontrolled.core.math.arithmetic import (
    RawDecimal,
    add,
    bitwise_and,
    bitwise_or,
    bitwise_xor,
    divide,
    multiply,
    negate,
)

# Formatting
from uncontrolled.core.math.formatting import (
    INFINITY_TEXT,
    to_double,
    to_string,
)

__all__ = [
    # Normalization
    "DIGIT_CHUNK_SIZE",
    "FLOAT_FRACTION_DIGITS",
    "count_leading_zeros",
    "digit_count",
    "leading_zeros_within",
    "normalize_fraction",
    "parse_digits",
    "render_digits",
    "split_float",
    # Alignment
    "AlignedFractions",
    "FractionScale",
    "align_complete_integers",
    "align_fractions",
    # Comparison
    "INCOMPARABLE",
    "compare",
    "compare_to",
    "equals",
    # Arithmetic
    "RawDecimal",
    "add",
    "bitwise_and",
    "bitwise_or",
    "bitwise_xor",
    "divide",
    "multiply",
    "negate",
    # Formatting
    "INFINITY_TEXT",
    "to_double",
    "to_string",
]
