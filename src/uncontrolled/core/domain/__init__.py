"""
Domain models and value objects.

Contains the DecimalNumber value object.
"""

from uncontrolled.core.domain.decimal_number import DecimalNumber, validate_leading_zeros

__all__ = [
    "DecimalNumber",
    "validate_leading_zeros",
]
