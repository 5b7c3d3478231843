"""Predicados simples: paridad y forma de un email."""

import re

# Espacios en blanco del \s de ECMAScript; el \s de Python incluye
# U+001C-U+001F y no incluye U+FEFF.
_WHITESPACE = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
_PART = f"[^{_WHITESPACE}@]+"

# Aproximado a propósito: no es validación RFC de direcciones
EMAIL_PATTERN = re.compile(rf"{_PART}@{_PART}\.{_PART}")


def is_even(n: int) -> bool:
    """True si n es par (también para negativos)."""
    return n % 2 == 0


def is_valid_email(email: str) -> bool:
    """True si el string completo tiene forma usuario@dominio.tld."""
    return EMAIL_PATTERN.fullmatch(email) is not None
