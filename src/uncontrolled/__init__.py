"""
uncontrolled-number — десятичные числа неограниченной точности

Ни целая, ни дробная часть не ограничены по разрядности. Единственный
настраиваемый предел: количество дробных разрядов, которое производит
деление (division accuracy, по умолчанию 30).
"""

from uncontrolled.config import (
    DIVISION_ACCURACY_DEFAULT,
    division_accuracy,
    get_division_accuracy,
    set_division_accuracy,
)
from uncontrolled.core.domain.decimal_number import DecimalNumber
from uncontrolled.core.math.comparison import INCOMPARABLE
from uncontrolled.errors import (
    InvalidArgumentError,
    UncontrolledNumberError,
    UndefinedOperationError,
)

__version__ = "1.0.0"

__all__ = [
    # Value
    "DecimalNumber",
    "INCOMPARABLE",
    # Configuration
    "DIVISION_ACCURACY_DEFAULT",
    "division_accuracy",
    "get_division_accuracy",
    "set_division_accuracy",
    # Errors
    "InvalidArgumentError",
    "UncontrolledNumberError",
    "UndefinedOperationError",
]
