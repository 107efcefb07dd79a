"""
Core math modules для bignum

Поразрядная арифметика над векторами десятичных цифр.
"""

# Digit-Vector Arithmetic
from bignum.core.math.digit_vector import (
    # Constants
    RADIX,
    ZERO_DIGITS,
    # Digit access
    digit_at,
    set_digit,
    # Normalization and conversion
    digits_to_int,
    int_to_digits,
    is_zero_digits,
    normalize_digits,
    # Magnitude arithmetic
    add_magnitudes,
    compare_magnitudes,
    subtract_magnitudes,
)

__all__ = [
    # Digit-Vector Arithmetic — Constants
    "RADIX",
    "ZERO_DIGITS",
    # Digit-Vector Arithmetic — Digit access
    "digit_at",
    "set_digit",
    # Digit-Vector Arithmetic — Normalization and conversion
    "digits_to_int",
    "int_to_digits",
    "is_zero_digits",
    "normalize_digits",
    # Digit-Vector Arithmetic — Magnitude arithmetic
    "add_magnitudes",
    "compare_magnitudes",
    "subtract_magnitudes",
]
