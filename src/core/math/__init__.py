"""
Core math modules для calc3d

Арифметические примитивы, численные допуски и таксономия ошибок.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_DISPLAY_ZERO,
    EPS_INTEGER,
    EPS_ROOT_CONVERGENCE,
    ROOT_MAX_ITERATIONS,
    # Checks
    has_converged,
    is_effectively_integer,
    is_valid_float,
    is_zero,
    nearest_integer,
    # Utilities
    clamp,
    snap_to_zero,
)

# Errors
from src.core.math.errors import (
    CalculatorError,
    DivideByZero,
    ErrorKind,
    InvalidArgument,
    Overflow,
    ParseError,
)

# Primitives
from src.core.math.primitives import (
    add,
    div,
    fact,
    is_integer,
    modulo,
    mul,
    power,
    root,
    sub,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_DISPLAY_ZERO",
    "EPS_INTEGER",
    "EPS_ROOT_CONVERGENCE",
    "ROOT_MAX_ITERATIONS",
    # Numerical Safeguards — Checks
    "has_converged",
    "is_effectively_integer",
    "is_valid_float",
    "is_zero",
    "nearest_integer",
    # Numerical Safeguards — Utilities
    "clamp",
    "snap_to_zero",
    # Errors
    "CalculatorError",
    "DivideByZero",
    "ErrorKind",
    "InvalidArgument",
    "Overflow",
    "ParseError",
    # Primitives
    "add",
    "div",
    "fact",
    "is_integer",
    "modulo",
    "mul",
    "power",
    "root",
    "sub",
]
