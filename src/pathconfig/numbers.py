"""Literal-preserving JSON numbers and numeric literal parsing."""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Any

__all__ = [
    "JsonNumber",
    "INT64_MIN",
    "INT64_MAX",
    "parse_int_literal",
    "parse_float_literal",
]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
_INT64_MAX_DIGITS = len(str(INT64_MAX))

_JSON_INT_RE = re.compile(r"-?(?:0|[1-9][0-9]*)")

# Base is picked from the prefix; a bare leading zero means octal.
_INT_LITERAL_RE = re.compile(
    r"(?P<sign>[+-]?)"
    r"(?:0[xX](?P<hex>[0-9a-fA-F]+)"
    r"|0[oO](?P<oct>[0-7]+)"
    r"|0[bB](?P<bin>[01]+)"
    r"|(?P<zoct>0[0-7]*)"
    r"|(?P<dec>[1-9][0-9]*))"
)

_DEC_FLOAT_RE = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf|infinity|nan)",
    re.IGNORECASE,
)
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)


def parse_int_literal(text: str) -> int | None:
    """Parse a signed 64-bit integer literal with its base taken from the prefix.

    Accepts decimal (``"26"``), hex (``"0x1A"``), octal (``"032"`` or
    ``"0o32"``) and binary (``"0b11010"``) forms. Returns None when the text
    is not such a literal or the value does not fit in 64 bits.
    """
    match = _INT_LITERAL_RE.fullmatch(text)
    if match is None:
        return None

    if match["hex"] is not None:
        value = int(match["hex"], 16)
    elif match["oct"] is not None:
        value = int(match["oct"], 8)
    elif match["bin"] is not None:
        value = int(match["bin"], 2)
    elif match["zoct"] is not None:
        value = int(match["zoct"], 8)
    else:
        if len(match["dec"]) > _INT64_MAX_DIGITS:
            return None
        value = int(match["dec"])

    if match["sign"] == "-":
        value = -value
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def parse_float_literal(text: str) -> float | None:
    """Parse a decimal or hexadecimal floating-point literal.

    Hex literals need a binary exponent (``"0x1Ap0"``), so ``"0x1A"`` is not
    a float literal. Returns None for anything else, including finite
    literals that overflow to infinity.
    """
    if _DEC_FLOAT_RE.fullmatch(text):
        value = float(text)
        if math.isinf(value) and "inf" not in text.lower():
            return None
        return value
    if _HEX_FLOAT_RE.fullmatch(text):
        try:
            return float.fromhex(text)
        except OverflowError:
            return None
    return None


class JsonNumber:
    """A JSON number kept as its exact source literal.

    Nothing is rounded at decode time; the literal is interpreted only when
    an integer or float is asked for. Compares equal to other numbers by
    numeric value.
    """

    __slots__ = ("_literal",)

    def __init__(self, literal: str) -> None:
        self._literal = literal

    @property
    def literal(self) -> str:
        return self._literal

    def is_integer(self) -> bool:
        """True when the literal has no fraction or exponent part."""
        return _JSON_INT_RE.fullmatch(self._literal) is not None

    def to_int(self) -> int | None:
        return parse_int_literal(self._literal)

    def to_float(self) -> float | None:
        return parse_float_literal(self._literal)

    def to_python(self) -> int | float:
        """Convert to ``int`` for integer literals and ``float`` otherwise."""
        if self.is_integer():
            try:
                return int(self._literal)
            except ValueError:
                # past the int-string conversion digit limit
                return int(Decimal(self._literal))
        return float(self._literal)

    def __int__(self) -> int:
        return int(self.to_python())

    def __float__(self) -> float:
        return float(self._literal)

    def __str__(self) -> str:
        return self._literal

    def __repr__(self) -> str:
        return f"JsonNumber({self._literal!r})"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, JsonNumber):
            return self.to_python() == other.to_python()
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return self.to_python() == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.to_python())
