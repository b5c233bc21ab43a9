"""
DecimalNumber — десятичное число неограниченной точности

Immutable Pydantic модель. Ни целая, ни дробная часть не ограничены по
разрядности; точность ограничена только для деления (division accuracy).

Представление:
    integer_part          целая часть, несёт знак когда ненулевая
    fraction_significand  дробные цифры без хвостовых нулей (.0120 → 12)
    fraction_digit_count  количество цифр в significand
    leading_zero_count    нули между точкой и significand (.0120 → 1)
    is_infinity           бесконечность (знак берётся из force_negative)
    force_negative        знак для чисел с integer_part == 0 (-0.5)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. significand не оканчивается на 0, если он не равен 0
2. significand == 0 → fraction_digit_count == leading_zero_count == 0
3. force_negative допустим только при integer_part == 0
4. Ноль никогда не бывает отрицательным
5. Каждая операция возвращает новый экземпляр

Представление каноническое: равные величины имеют равные поля.
"""

import math
import re
from typing import Any, Final, Optional

from pydantic import BaseModel, Field, model_validator

from uncontrolled.config import get_division_accuracy, validate_division_accuracy
from uncontrolled.core.math import arithmetic, comparison, formatting
from uncontrolled.core.math.alignment import FractionScale
from uncontrolled.core.math.arithmetic import RawDecimal
from uncontrolled.core.math.normalization import (
    count_leading_zeros,
    digit_count,
    normalize_fraction,
    parse_digits,
    split_float,
)
from uncontrolled.errors import InvalidArgumentError

_NUMBER_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?P<sign>[+-])?(?P<whole>\d+)(?:\.(?P<fraction>\d+))?$"
)
_INFINITY_PATTERN: Final[re.Pattern[str]] = re.compile(r"^(?P<sign>[+-])?inf$")


def validate_leading_zeros(leading_zeros: int) -> None:
    """
    Проверка количества ведущих нулей.

    Raises:
        InvalidArgumentError: Если leading_zeros < 0
    """
    if leading_zeros < 0:
        raise InvalidArgumentError(
            f"leading_zeros must be non-negative, got {leading_zeros}"
        )


class DecimalNumber(BaseModel):
    """
    Десятичное число неограниченной точности.

    Прямой вызов конструктора с полями проверяет инварианты; для обычного
    использования предназначены фабрики from_float / from_int / from_parts /
    parse.
    """

    integer_part: int = Field(0, description="Целая часть со знаком")
    fraction_significand: int = Field(0, description="Дробные цифры без хвостовых нулей")
    fraction_digit_count: int = Field(
        0, ge=0, description="Количество цифр в fraction_significand"
    )
    leading_zero_count: int = Field(
        0, ge=0, description="Нули между точкой и первой значащей цифрой"
    )
    is_infinity: bool = Field(False, description="Бесконечность")
    force_negative: bool = Field(
        False, description="Знак минус при нулевой целой части"
    )

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_canonical_form(self) -> "DecimalNumber":
        """Проверка инвариантов представления."""
        significand = self.fraction_significand

        if significand < 0:
            raise ValueError(
                f"fraction_significand must be non-negative, got {significand}"
            )

        if significand == 0:
            if self.fraction_digit_count != 0 or self.leading_zero_count != 0:
                raise ValueError(
                    "zero fraction must have fraction_digit_count == "
                    "leading_zero_count == 0"
                )
        else:
            if significand % 10 == 0:
                raise ValueError(
                    f"fraction_significand {significand} has trailing zeros"
                )
            if self.fraction_digit_count != digit_count(significand):
                raise ValueError(
                    f"fraction_digit_count {self.fraction_digit_count} does not "
                    f"match fraction_significand {significand}"
                )

        if self.force_negative and self.integer_part != 0:
            raise ValueError("force_negative requires integer_part == 0")

        if self.is_infinity:
            if self.integer_part != 0 or significand != 0:
                raise ValueError("infinity must not carry integer or fraction digits")
        elif self.force_negative and significand == 0:
            raise ValueError("zero cannot be negative")

        return self

    # =========================================================================
    # ФАБРИКИ
    # =========================================================================

    @classmethod
    def zero(cls) -> "DecimalNumber":
        return cls()

    @classmethod
    def infinity(cls, negative: bool = False) -> "DecimalNumber":
        return cls(is_infinity=True, force_negative=negative)

    @classmethod
    def from_parts(
        cls,
        integer: int,
        fraction: int,
        leading_zeros: int,
        negative: bool,
    ) -> "DecimalNumber":
        """
        Конструирование из явных частей.

        Args:
            integer: Целая часть (знак учитывается)
            fraction: Raw дробные разряды; знак и хвостовые нули отбрасываются
            leading_zeros: Нули между точкой и первой значащей цифрой
            negative: Число отрицательно (даже если integer == 0)

        Returns:
            Нормализованный DecimalNumber; число отрицательно, если
            integer < 0 или negative

        Raises:
            InvalidArgumentError: Если leading_zeros < 0

        Examples:
            >>> str(DecimalNumber.from_parts(1, 50, 1, False))
            '1.05'
            >>> str(DecimalNumber.from_parts(0, 5, 0, True))
            '-0.5'
        """
        validate_leading_zeros(leading_zeros)

        significand, digits = normalize_fraction(fraction)
        if significand == 0:
            leading_zeros = 0

        whole = abs(integer)
        is_negative = (integer < 0 or negative) and (whole != 0 or significand != 0)

        return cls(
            integer_part=-whole if is_negative else whole,
            fraction_significand=significand,
            fraction_digit_count=digits,
            leading_zero_count=leading_zeros,
            force_negative=is_negative and whole == 0,
        )

    @classmethod
    def from_int(cls, value: int) -> "DecimalNumber":
        """Целое число без дробной части."""
        return cls.from_parts(value, 0, 0, False)

    @classmethod
    def from_float(cls, value: float) -> "DecimalNumber":
        """
        Конструирование из float.

        Дробная часть берётся с фиксированной точностью 15 разрядов, поэтому
        результат наследует погрешность двоичного представления float.

        Raises:
            InvalidArgumentError: Если value равно NaN

        Examples:
            >>> str(DecimalNumber.from_float(-0.25))
            '-0.25'
            >>> str(DecimalNumber.from_float(float("inf")))
            'inf'
        """
        if math.isnan(value):
            raise InvalidArgumentError("Cannot construct DecimalNumber from NaN")

        if math.isinf(value):
            return cls.infinity(negative=value < 0)

        whole, fraction = split_float(value)
        return cls.from_parts(
            int(whole),
            int(fraction),
            count_leading_zeros(fraction),
            value < 0,
        )

    @classmethod
    def from_raw(cls, raw: RawDecimal) -> "DecimalNumber":
        """Конструирование из результата arithmetic-функции."""
        if raw.infinity:
            return cls.infinity(negative=raw.negative)
        return cls.from_parts(raw.integer, raw.fraction, raw.leading_zeros, raw.negative)

    @classmethod
    def parse(cls, text: str) -> "DecimalNumber":
        """
        Разбор канонической строки (обратная операция к to_string).

        Допускается необязательный знак и пробелы по краям.

        Raises:
            InvalidArgumentError: Если строка не является числом

        Examples:
            >>> DecimalNumber.parse("-0.0012").leading_zero_count
            2
        """
        stripped = text.strip()

        infinity_match = _INFINITY_PATTERN.match(stripped)
        if infinity_match:
            return cls.infinity(negative=infinity_match.group("sign") == "-")

        match = _NUMBER_PATTERN.match(stripped)
        if match is None:
            raise InvalidArgumentError(f"Invalid decimal literal: {text!r}")

        fraction = match.group("fraction") or "0"
        return cls.from_parts(
            parse_digits(match.group("whole")),
            parse_digits(fraction),
            count_leading_zeros(fraction),
            match.group("sign") == "-",
        )

    # =========================================================================
    # ПРОИЗВОДНЫЕ СВОЙСТВА
    # =========================================================================

    @property
    def is_zero(self) -> bool:
        return (
            not self.is_infinity
            and self.integer_part == 0
            and self.fraction_significand == 0
        )

    @property
    def is_negative(self) -> bool:
        if self.is_zero:
            return False
        return self.integer_part < 0 or self.force_negative

    @property
    def scale(self) -> int:
        """Количество дробных разрядов (digits + leading zeros)."""
        return self.fraction_digit_count + self.leading_zero_count

    @property
    def fraction(self) -> FractionScale:
        return FractionScale(
            self.fraction_significand,
            self.fraction_digit_count,
            self.leading_zero_count,
        )

    @property
    def complete_integer(self) -> int:
        """
        Целая и дробная части, записанные одним целым.

        Examples:
            1.3 → 13, -0.05 → -5, -12.5 → -125
        """
        magnitude = abs(self.integer_part) * 10 ** self.scale + self.fraction_significand
        return -magnitude if self.is_negative else magnitude

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def divide(self, other: "DecimalNumber", accuracy: Optional[int] = None) -> "DecimalNumber":
        """
        Деление с явной или глобальной точностью.

        Args:
            other: Делитель
            accuracy: Количество дробных разрядов; None → process-wide настройка

        Returns:
            self / other; деление на ноль возвращает +inf
        """
        if accuracy is None:
            accuracy = get_division_accuracy()
        else:
            validate_division_accuracy(accuracy)
        return type(self).from_raw(arithmetic.divide(self, other, accuracy))

    def truncate(self) -> "DecimalNumber":
        """Отбрасывание дробной части (округление к нулю)."""
        if self.is_infinity:
            return self
        return type(self).from_parts(self.integer_part, 0, 0, self.is_negative)

    def __neg__(self) -> "DecimalNumber":
        return type(self).from_raw(arithmetic.negate(self))

    def __pos__(self) -> "DecimalNumber":
        return self

    def __abs__(self) -> "DecimalNumber":
        return -self if self.is_negative else self

    def __add__(self, other: Any) -> "DecimalNumber":
        if not isinstance(other, DecimalNumber):
            return NotImplemented
        return type(self).from_raw(arithmetic.add(self, other))

    def __sub__(self, other: Any) -> "DecimalNumber":
        if not isinstance(other, DecimalNumber):
            return NotImplemented
        return self + (-other)

    def __mul__(self, other: Any) -> "DecimalNumber":
        if not isinstance(other, DecimalNumber):
            return NotImplemented
        return type(self).from_raw(arithmetic.multiply(self, other))

    def __truediv__(self, other: Any) -> "DecimalNumber":
        if not isinstance(other, DecimalNumber):
            return NotImplemented
        return self.divide(other)

    def __mod__(self, other: Any) -> "DecimalNumber":
        """
        Остаток: a - b * truncate(a / b), усечение к нулю.

        Остаток по нулю возвращает делимое без изменений (в отличие от
        деления, которое возвращает бесконечность).
        """
        if not isinstance(other, DecimalNumber):
            return NotImplemented
        if other.is_zero:
            return self
        if self.is_infinity:
            return type(self).zero()

        whole = self.divide(other).truncate()
        return self - other * whole

    def __xor__(self, other: Any) -> "DecimalNumber":
        if not isinstance(other, DecimalNumber):
            return NotImplemented
        return type(self).from_raw(arithmetic.bitwise_xor(self, other))

    def __or__(self, other: Any) -> "DecimalNumber":
        if not isinstance(other, DecimalNumber):
            return NotImplemented
        return type(self).from_raw(arithmetic.bitwise_or(self, other))

    def __and__(self, other: Any) -> "DecimalNumber":
        if not isinstance(other, DecimalNumber):
            return NotImplemented
        return type(self).from_raw(arithmetic.bitwise_and(self, other))

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def compare_to(self, other: object) -> Optional[int]:
        """
        -1 / 0 / 1; для объекта другого типа comparison.INCOMPARABLE.
        """
        return comparison.compare_to(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecimalNumber):
            return NotImplemented
        return comparison.equals(self, other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, DecimalNumber):
            return NotImplemented
        return not comparison.equals(self, other)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, DecimalNumber):
            return NotImplemented
        return comparison.compare(self, other) < 0

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, DecimalNumber):
            return NotImplemented
        return comparison.compare(self, other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, DecimalNumber):
            return NotImplemented
        return comparison.compare(self, other) > 0

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, DecimalNumber):
            return NotImplemented
        return comparison.compare(self, other) >= 0

    def __hash__(self) -> int:
        return hash(
            (
                self.is_infinity,
                self.is_negative,
                self.integer_part,
                self.fraction_significand,
                self.leading_zero_count,
            )
        )

    # =========================================================================
    # КОНВЕРСИИ
    # =========================================================================

    def to_string(self) -> str:
        return formatting.to_string(self)

    def to_double(self) -> float:
        return formatting.to_double(self)

    def __str__(self) -> str:
        return formatting.to_string(self)

    def __repr__(self) -> str:
        return f"DecimalNumber('{formatting.to_string(self)}')"

    def __float__(self) -> float:
        return formatting.to_double(self)

    def __int__(self) -> int:
        """
        Усечение к нулю.

        Raises:
            OverflowError: Для бесконечности (как int(float("inf")))
        """
        if self.is_infinity:
            raise OverflowError("cannot convert infinity to integer")
        return self.integer_part

    def __bool__(self) -> bool:
        return not self.is_zero
