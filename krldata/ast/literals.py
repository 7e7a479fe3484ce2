"""Literal decoding helpers shared by the parser and the serializer.

Decoders return `None` when the text is not a well-formed literal of their
kind; callers decide how to report that.
"""

from __future__ import annotations

import math
import re
from typing import Final

_INT_RE = re.compile(r"[+-]?\d+")
_REAL_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")
_BIT_STRING_RE = re.compile(r"'B([01]*)'")

NON_FINITE_REALS: Final[dict[str, float]] = {
    "NaN": math.nan,
    "Infinity": math.inf,
    "+Infinity": math.inf,
    "-Infinity": -math.inf,
}


def is_identifier(text: str) -> bool:
    if not text or not (text[0].isalpha() or text[0] == "_"):
        return False
    return all(ch.isalnum() or ch == "_" for ch in text)


def decode_bool(text: str) -> bool | None:
    if text == "TRUE":
        return True
    if text == "FALSE":
        return False
    return None


def decode_int(text: str) -> int | None:
    if not _INT_RE.fullmatch(text) or not text.lstrip("+-").isascii():
        return None
    return int(text)


def decode_real(text: str) -> float | None:
    if text in NON_FINITE_REALS:
        return NON_FINITE_REALS[text]
    if not _REAL_RE.fullmatch(text) or not text.isascii():
        return None
    return float(text)


def decode_enum(text: str) -> str | None:
    if not text.startswith("#") or not is_identifier(text[1:]):
        return None
    return text[1:]


def decode_quoted(text: str) -> str | None:
    """Strip the matching outer quotes. No escape sequences are processed."""
    if len(text) < 2 or text[0] not in ('"', "'") or text[-1] != text[0]:
        return None
    return text[1:-1]


def decode_bit_string(text: str) -> tuple[bool, ...] | None:
    match = _BIT_STRING_RE.fullmatch(text)
    if match is None:
        return None
    return tuple(digit == "1" for digit in match.group(1))


def format_real(value: float) -> str:
    """Shortest round-trip decimal form, independent of locale."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return repr(float(value))


__all__ = [
    "NON_FINITE_REALS",
    "decode_bit_string",
    "decode_bool",
    "decode_enum",
    "decode_int",
    "decode_quoted",
    "decode_real",
    "format_real",
    "is_identifier",
]
