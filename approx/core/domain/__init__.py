"""
Domain models and value objects.

Contains the ApproximateNumber value model, its operations, notation and errors.
"""

from approx.core.domain.approximate import (
    ApproximateNumber,
    add,
    apply,
    div,
    format_approximate,
    from_min_max,
    ge,
    gt,
    le,
    lt,
    mul,
    new,
    overlap,
    parse,
    scale,
    sub,
)
from approx.core.domain.errors import (
    ApproxError,
    InvalidRangeError,
    ParseError,
    ParseErrorCause,
)
from approx.core.domain.notation import (
    UNCERTAINTY_SIGN,
    format_notation,
    split_notation,
)

__all__ = [
    # Model
    "ApproximateNumber",
    # Construction
    "new",
    "from_min_max",
    "parse",
    "format_approximate",
    # Arithmetic
    "add",
    "sub",
    "mul",
    "div",
    "scale",
    # Ordering
    "lt",
    "le",
    "gt",
    "ge",
    "overlap",
    # Function application
    "apply",
    # Errors
    "ApproxError",
    "InvalidRangeError",
    "ParseError",
    "ParseErrorCause",
    # Notation
    "UNCERTAINTY_SIGN",
    "format_notation",
    "split_notation",
]
