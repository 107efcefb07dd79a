"""
Domain models and value objects.

Contains the BigInteger value type and its functional API.
"""

from bignum.core.domain.big_integer import (
    ONE,
    ZERO,
    BigInteger,
    Ordering,
    ParseError,
    Sign,
    add,
    compare,
    from_integer,
    negate,
    parse,
    scaled,
    subtract,
    to_string,
)

__all__ = [
    # Types
    "BigInteger",
    "Sign",
    "Ordering",
    # Exceptions
    "ParseError",
    # Constants
    "ZERO",
    "ONE",
    # Construction
    "parse",
    "from_integer",
    "scaled",
    "to_string",
    # Arithmetic and comparison
    "add",
    "subtract",
    "negate",
    "compare",
]
