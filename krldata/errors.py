"""Exception hierarchy raised by the lexer, parser and serializer.

Every error is terminal for the call that raised it. Each class is bound to a
`DiagnosticSpec` so callers that prefer reporting over raising can turn any
error into a `Diagnostic` with `to_diagnostic()`.
"""

from __future__ import annotations

from typing import ClassVar

from krldata.diagnostics import (
    LEXER_UNRECOGNIZED_INPUT,
    LEXER_UNTERMINATED_STRING,
    PARSER_DUPLICATE_MEMBER,
    PARSER_MALFORMED_LITERAL,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNEXPECTED_EOF,
    PARSER_UNEXPECTED_TOKEN,
    SERIAL_INVALID_PAYLOAD,
    SERIAL_UNKNOWN_DISCRIMINATOR,
    Diagnostic,
    DiagnosticSpec,
)
from krldata.text import TextRange


class KrlDataError(Exception):
    """Base class for every error raised by krldata."""

    spec: ClassVar[DiagnosticSpec]

    def __init__(self, message: str, *, range: TextRange | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.range = range

    @property
    def position(self) -> int | None:
        return self.range.start.value if self.range is not None else None

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic(
            code=self.spec.code,
            message=self.message,
            range=self.range,
            severity=self.spec.severity,
            hint=self.spec.hint,
            category=self.spec.category,
        )


class LexError(KrlDataError):
    """No token pattern matches at `position`."""

    spec = LEXER_UNRECOGNIZED_INPUT

    def __init__(self, position: int, snippet: str, *, line: int = 1, column: int = 1) -> None:
        super().__init__(
            f"{self.spec.message} at {line}:{column} near {snippet!r}",
            range=TextRange(position, position + len(snippet)),
        )
        self.snippet = snippet
        self.line = line
        self.column = column


class UnterminatedString(LexError):
    spec = LEXER_UNTERMINATED_STRING


class ParseError(KrlDataError):
    """Malformed token sequence. `expected`/`found` describe the failing token."""

    spec = PARSER_UNEXPECTED_TOKEN

    def __init__(
        self,
        message: str,
        *,
        expected: str | None = None,
        found: str | None = None,
        range: TextRange | None = None,
    ) -> None:
        super().__init__(message, range=range)
        self.expected = expected
        self.found = found


class UnexpectedEndOfInput(ParseError):
    spec = PARSER_UNEXPECTED_EOF

    def __init__(self, expected: str, *, range: TextRange | None = None) -> None:
        super().__init__(
            f"{self.spec.message}: expected {expected}",
            expected=expected,
            found="EOF",
            range=range,
        )


class UnexpectedToken(ParseError):
    spec = PARSER_UNEXPECTED_TOKEN

    def __init__(
        self,
        expected: str,
        found: str,
        *,
        text: str = "",
        range: TextRange | None = None,
    ) -> None:
        detail = f"{found} {text!r}" if text else found
        super().__init__(
            f"{self.spec.message}: expected {expected}, got {detail}",
            expected=expected,
            found=found,
            range=range,
        )
        self.text = text


class DuplicateStructMember(ParseError):
    spec = PARSER_DUPLICATE_MEMBER

    def __init__(self, name: str, *, range: TextRange | None = None) -> None:
        super().__init__(f"{self.spec.message} {name!r}", found=name, range=range)
        self.name = name


class MalformedLiteral(ParseError):
    spec = PARSER_MALFORMED_LITERAL

    def __init__(self, raw: str, reason: str, *, range: TextRange | None = None) -> None:
        super().__init__(f"{self.spec.message} {raw!r}: {reason}", found=raw, range=range)
        self.raw = raw
        self.reason = reason


class NestingTooDeep(ParseError):
    spec = PARSER_NESTING_TOO_DEEP

    def __init__(self, max_depth: int, *, range: TextRange | None = None) -> None:
        super().__init__(f"{self.spec.message} ({max_depth})", range=range)
        self.max_depth = max_depth


class SerializationError(KrlDataError):
    spec = SERIAL_INVALID_PAYLOAD


class UnknownDiscriminator(SerializationError):
    spec = SERIAL_UNKNOWN_DISCRIMINATOR

    def __init__(self, discriminator: object) -> None:
        super().__init__(f"{self.spec.message}: {discriminator!r}")
        self.discriminator = discriminator


class InvalidPayload(SerializationError):
    spec = SERIAL_INVALID_PAYLOAD

    def __init__(self, reason: str) -> None:
        super().__init__(f"{self.spec.message}: {reason}")
        self.reason = reason


__all__ = [
    "DuplicateStructMember",
    "InvalidPayload",
    "KrlDataError",
    "LexError",
    "MalformedLiteral",
    "NestingTooDeep",
    "ParseError",
    "SerializationError",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
    "UnknownDiscriminator",
    "UnterminatedString",
]
