"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from krldata.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic reported by the lexer, parser or serializer."""

    code: str
    message: str
    range: TextRange | None
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
