"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


LEXER_UNRECOGNIZED_INPUT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNRECOGNIZED_INPUT",
    message="No token matches the input.",
    severity="error",
    category="lexer",
)

LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="Unterminated string literal.",
    hint="Close the string with the same quote character it was opened with.",
    severity="error",
    category="lexer",
)

PARSER_UNEXPECTED_EOF: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_EOF",
    message="Unexpected end of input",
    severity="error",
    category="parser",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="Unexpected token",
    severity="error",
    category="parser",
)

PARSER_DUPLICATE_MEMBER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_DUPLICATE_MEMBER",
    message="Duplicate struct member",
    hint="Member names must be unique within the enclosing struct.",
    severity="error",
    category="parser",
)

PARSER_MALFORMED_LITERAL: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MALFORMED_LITERAL",
    message="Malformed literal",
    severity="error",
    category="parser",
)

PARSER_NESTING_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NESTING_TOO_DEEP",
    message="Struct nesting exceeds the maximum depth",
    hint="Raise `ParserOptions.max_depth`; input nested past the interpreter stack cannot be parsed.",
    severity="error",
    category="parser",
)

SERIAL_UNKNOWN_DISCRIMINATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SERIAL_UNKNOWN_DISCRIMINATOR",
    message="Unknown data object discriminator",
    severity="error",
    category="serialization",
)

SERIAL_INVALID_PAYLOAD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="SERIAL_INVALID_PAYLOAD",
    message="Invalid data object payload",
    severity="error",
    category="serialization",
)
