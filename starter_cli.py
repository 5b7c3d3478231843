#!/usr/bin/env python3
"""
starter_cli - CLI para ejecutar los helpers de starter_lib desde la consola.
Solo usa la biblioteca estándar de Python.
"""

from __future__ import annotations

import argparse
import json
import math
import re
import sys
from datetime import datetime, timezone
from typing import Any

from starter_lib import (
    DivisionByZeroError,
    GreetingOptions,
    InvalidOperationError,
    calculate,
    greet,
    is_even,
    is_valid_email,
)

INT_PATTERN = re.compile(r"[+-]?\d+")

# Rango de enteros exactos en un double
MAX_SAFE_INTEGER = 2**53 - 1


def parse_number(value: str) -> int | float:
    """Convierte un operando a int si parece entero, si no a float."""
    if INT_PATTERN.fullmatch(value.strip()):
        number: int | float = int(value)
        if abs(number) > MAX_SAFE_INTEGER:
            raise argparse.ArgumentTypeError(f"entero fuera de rango: {value!r}")
        return number
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"número inválido: {value!r}") from None
    if not math.isfinite(number):
        raise argparse.ArgumentTypeError(f"número no finito: {value!r}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea argumentos del CLI."""
    parser = argparse.ArgumentParser(
        prog="starter-cli",
        description="Ejecuta los helpers aritméticos y de formato de starter_lib.",
    )
    parser.add_argument(
        "--out",
        choices=("json", "text"),
        default="json",
        help="Formato de salida: json o text (default: json)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    calc = sub.add_parser("calc", help="Aplica una operación a dos operandos")
    calc.add_argument("a", type=parse_number)
    calc.add_argument("b", type=parse_number)
    # Sin choices: las etiquetas inválidas las reporta calculate()
    calc.add_argument(
        "--op",
        required=True,
        metavar="OP",
        help="add, subtract, multiply o divide",
    )

    greet_cmd = sub.add_parser("greet", help="Construye un saludo")
    greet_cmd.add_argument("name")
    greet_cmd.add_argument("--formal", action="store_true", help="Saludo formal (ignora --prefix)")
    greet_cmd.add_argument("--prefix", default=None, help="Prefijo del saludo (default: Hello)")

    even = sub.add_parser("is-even", help="Indica si un entero es par")
    even.add_argument("n", type=int)
    even.add_argument("--check", action="store_true", help="En CI: exit 1 si no es par")

    email = sub.add_parser("email", help="Comprueba la forma de un email")
    email.add_argument("address")
    email.add_argument("--check", action="store_true", help="En CI: exit 1 si no es válido")

    return parser.parse_args(argv)


def run_command(args: argparse.Namespace) -> tuple[dict[str, Any], Any]:
    """Ejecuta el subcomando y devuelve (entrada, resultado)."""
    if args.command == "calc":
        inputs = {"a": args.a, "b": args.b, "operation": args.op}
        result = calculate(args.a, args.b, args.op)
        if isinstance(result, float) and not math.isfinite(result):
            raise OverflowError("resultado fuera del rango de float")
        return inputs, result
    if args.command == "greet":
        options = GreetingOptions(args.name, args.formal, "Hello" if args.prefix is None else args.prefix)
        return {"name": options.name, "formal": options.formal, "prefix": options.prefix}, greet(options)
    if args.command == "is-even":
        return {"n": args.n}, is_even(args.n)
    return {"email": args.address}, is_valid_email(args.address)


def build_report(command: str, inputs: dict[str, Any], result: Any) -> dict:
    """Construye el reporte para salida JSON."""
    return {
        "command": command,
        "input": inputs,
        "result": result,
        "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
    }


def output_json(report: dict) -> None:
    """Imprime el reporte en JSON."""
    print(json.dumps(report, indent=2, ensure_ascii=False, allow_nan=False))


def output_text(report: dict) -> None:
    result = report["result"]
    if isinstance(result, bool):
        result = "yes" if result else "no"
    print(f"{report['command']}: {result}")


def main(argv: list[str] | None = None) -> int:
    """Punto de entrada."""
    args = parse_args(argv)

    try:
        inputs, result = run_command(args)
    except (DivisionByZeroError, InvalidOperationError, OverflowError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    report = build_report(args.command, inputs, result)
    if args.out == "text":
        output_text(report)
    else:
        output_json(report)

    if getattr(args, "check", False) and result is False:
        print(f"Check {args.command} no superado.", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
