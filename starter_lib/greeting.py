"""Formateo de saludos."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass
class GreetingOptions:
    """Opciones de saludo. Si formal es True, prefix se ignora."""
    name: str
    formal: bool = False
    prefix: str = "Hello"


def greet(options: GreetingOptions | Mapping[str, Any]) -> str:
    """Devuelve el saludo para las opciones dadas.

    Acepta un GreetingOptions o un mapping con las mismas claves; las
    claves ausentes o con valor None toman el valor por defecto.
    """
    if isinstance(options, Mapping):
        options = GreetingOptions(**{k: v for k, v in options.items() if v is not None})
    if options.formal:
        return f"Good day, {options.name}."
    return f"{options.prefix}, {options.name}!"
