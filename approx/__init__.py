"""
approx — approximate numbers with worst-case error propagation.

An approximate number is a value plus or minus some uncertainty, which is what
any real-world measurement yields. Measuring a table with a tape measure:

    >>> width = parse("50±0.5")
    >>> length = parse("100±0.5")
    >>> str((width + length).mul(2))
    '300.0±2.0'
    >>> str(length - width)
    '50.0±1.0'

Errors add even when values subtract: in the worst case they conspire.
"""

from approx.core.domain import (
    UNCERTAINTY_SIGN,
    ApproximateNumber,
    ApproxError,
    InvalidRangeError,
    ParseError,
    ParseErrorCause,
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
from approx.core.math import FunctionKind
from approx.logger_config import configure_logging

__version__ = "0.1.0"

__all__ = [
    "ApproximateNumber",
    "FunctionKind",
    "UNCERTAINTY_SIGN",
    "new",
    "from_min_max",
    "parse",
    "format_approximate",
    "add",
    "sub",
    "mul",
    "div",
    "scale",
    "lt",
    "le",
    "gt",
    "ge",
    "overlap",
    "apply",
    "ApproxError",
    "InvalidRangeError",
    "ParseError",
    "ParseErrorCause",
    "configure_logging",
]
