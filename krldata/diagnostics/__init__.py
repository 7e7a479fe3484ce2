"""Diagnostics."""

from krldata.diagnostics.codes import (
    LEXER_UNRECOGNIZED_INPUT,
    LEXER_UNTERMINATED_STRING,
    PARSER_DUPLICATE_MEMBER,
    PARSER_MALFORMED_LITERAL,
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNEXPECTED_EOF,
    PARSER_UNEXPECTED_TOKEN,
    SERIAL_INVALID_PAYLOAD,
    SERIAL_UNKNOWN_DISCRIMINATOR,
    DiagnosticSpec,
)
from krldata.diagnostics.diagnostic import Diagnostic, Severity
from krldata.diagnostics.report import has_errors

__all__ = [
    "LEXER_UNRECOGNIZED_INPUT",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_DUPLICATE_MEMBER",
    "PARSER_MALFORMED_LITERAL",
    "PARSER_NESTING_TOO_DEEP",
    "PARSER_UNEXPECTED_EOF",
    "PARSER_UNEXPECTED_TOKEN",
    "SERIAL_INVALID_PAYLOAD",
    "SERIAL_UNKNOWN_DISCRIMINATOR",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "has_errors",
]
