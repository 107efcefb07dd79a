"""
bignum — signed arbitrary-precision decimal integers

Contains:
- bignum.core.math       : digit-vector arithmetic
- bignum.core.domain     : BigInteger value type
- bignum.core.contracts  : JSON Schema request/result contracts
- bignum.calculator      : request evaluation and interactive session
"""

from bignum.core.domain import (
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

__version__ = "0.1.0"

__all__ = [
    "BigInteger",
    "Sign",
    "Ordering",
    "ParseError",
    "ZERO",
    "ONE",
    "parse",
    "from_integer",
    "scaled",
    "to_string",
    "add",
    "subtract",
    "negate",
    "compare",
]
