"""Lexer."""

from krldata.lexer.lexer import Lexer, dump_tokens, tokenize
from krldata.lexer.tokens import Token, TokenKind

__all__ = [
    "Lexer",
    "Token",
    "TokenKind",
    "dump_tokens",
    "tokenize",
]
