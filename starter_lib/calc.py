"""Operaciones aritméticas y despachador por etiqueta de operación."""

from __future__ import annotations

from typing import Callable, Literal

Number = int | float
Operation = Literal["add", "subtract", "multiply", "divide"]

DIVISION_BY_ZERO_MESSAGE = "Division by zero is not allowed"


class DivisionByZeroError(ZeroDivisionError):
    """Divisor igual a cero en divide/calculate."""

    def __init__(self) -> None:
        super().__init__(DIVISION_BY_ZERO_MESSAGE)


class InvalidOperationError(ValueError):
    """Etiqueta de operación fuera de OPERATIONS."""

    def __init__(self, operation: object) -> None:
        self.operation = operation
        super().__init__(f"Invalid operation: {operation}")


def add(a: Number, b: Number) -> Number:
    """Suma dos números."""
    return a + b


def subtract(a: Number, b: Number) -> Number:
    """Resta b de a."""
    return a - b


def multiply(a: Number, b: Number) -> Number:
    return a * b


def divide(a: Number, b: Number) -> float:
    """Divide a entre b.

    Nunca devuelve inf/nan: con divisor cero (incluido 0/0) lanza
    DivisionByZeroError antes de calcular nada.
    """
    if b == 0:
        raise DivisionByZeroError()
    return a / b


OPERATIONS: dict[str, Callable[[Number, Number], Number]] = {
    "add": add,
    "subtract": subtract,
    "multiply": multiply,
    "divide": divide,
}


def calculate(a: Number, b: Number, operation: Operation) -> Number:
    """Aplica la operación indicada por la etiqueta (coincidencia exacta)."""
    fn = OPERATIONS.get(operation) if isinstance(operation, str) else None
    if fn is None:
        raise InvalidOperationError(operation)
    return fn(a, b)
