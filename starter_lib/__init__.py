"""Librería de ejemplo: helpers aritméticos y de formato de strings."""

__version__ = "0.1.0"

from starter_lib.calc import (
    OPERATIONS,
    DivisionByZeroError,
    InvalidOperationError,
    Operation,
    add,
    calculate,
    divide,
    multiply,
    subtract,
)
from starter_lib.greeting import GreetingOptions, greet
from starter_lib.utils import is_even, is_valid_email

__all__ = [
    "OPERATIONS",
    "DivisionByZeroError",
    "InvalidOperationError",
    "Operation",
    "GreetingOptions",
    "add",
    "subtract",
    "multiply",
    "divide",
    "calculate",
    "is_even",
    "is_valid_email",
    "greet",
    "__version__",
]
