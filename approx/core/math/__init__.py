"""
Core math modules для approx

Численные примитивы с семантикой IEEE-754 и распространение погрешности
через функции (Taylor).
"""

# Numerical Safeguards
from approx.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # IEEE-754 primitives
    ieee_divide,
    ieee_exp,
    ieee_log,
    # Checks
    is_close,
    is_valid_float,
)

# Taylor
from approx.core.math.taylor import (
    KNOWN_FUNCTIONS,
    FunctionKind,
    ScalarFunction,
    central_difference,
    resolve_function_kind,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — IEEE-754 primitives
    "ieee_divide",
    "ieee_exp",
    "ieee_log",
    # Numerical Safeguards — Checks
    "is_close",
    "is_valid_float",
    # Taylor — Types
    "FunctionKind",
    "ScalarFunction",
    # Taylor — Registry
    "KNOWN_FUNCTIONS",
    # Taylor — Functions
    "central_difference",
    "resolve_function_kind",
]
