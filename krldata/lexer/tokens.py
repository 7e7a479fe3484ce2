"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum

from krldata.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 1

    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 20
    BOOL = 21  # TRUE / FALSE
    INT = 22
    REAL = 23
    NAN = 24  # NaN / Infinity / -Infinity
    ENUM = 25  # #IDENT
    DOUBLE_QUOTED_STRING = 26
    SINGLE_QUOTED_STRING = 27
    BIT_STRING = 28  # 'B0101'

    # -------------------------
    # Punctuation / separators
    # -------------------------
    COMMA = 40  # ,
    COLON = 41  # :

    LBRACE = 60  # {
    RBRACE = 61  # }
    LBRACKET = 62  # [
    RBRACKET = 63  # ]

    @property
    def is_quoted_string(self) -> bool:
        return self in (TokenKind.DOUBLE_QUOTED_STRING, TokenKind.SINGLE_QUOTED_STRING)

    @property
    def is_literal(self) -> bool:
        return self in (
            TokenKind.BOOL,
            TokenKind.INT,
            TokenKind.REAL,
            TokenKind.NAN,
            TokenKind.ENUM,
            TokenKind.DOUBLE_QUOTED_STRING,
            TokenKind.SINGLE_QUOTED_STRING,
            TokenKind.BIT_STRING,
        )


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token and the slice of source text it covers."""

    kind: TokenKind
    range: TextRange
    text: str

    @property
    def position(self) -> int:
        return self.range.start.value
