"""Cursor over a lexed token sequence."""

from collections.abc import Sequence

from krldata.lexer import Token, TokenKind
from krldata.text import TextRange, TextSize


class TokenSource:
    """Read-only cursor over tokens that always ends in an EOF token.

    A sequence without a trailing EOF (as returned by `tokenize`) gets one
    synthesized at the end of its last token.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = list(tokens)
        if not self._tokens or self._tokens[-1].kind != TokenKind.EOF:
            end = self._tokens[-1].range.end if self._tokens else TextSize(0)
            self._tokens.append(Token(TokenKind.EOF, TextRange.empty(end), ""))
        self._index = 0

    @property
    def current(self) -> TokenKind:
        return self._tokens[self._index].kind

    @property
    def current_token(self) -> Token:
        return self._tokens[self._index]

    @property
    def current_range(self) -> TextRange:
        return self._tokens[self._index].range

    @property
    def index(self) -> int:
        return self._index

    @property
    def token_count(self) -> int:
        """Number of tokens, excluding the EOF sentinel."""
        return len(self._tokens) - 1

    def nth(self, n: int) -> TokenKind:
        return self.nth_token(n).kind

    def nth_token(self, n: int) -> Token:
        index = min(self._index + n, len(self._tokens) - 1)
        return self._tokens[index]

    def bump(self) -> Token:
        token = self._tokens[self._index]
        if token.kind != TokenKind.EOF:
            self._index += 1
        return token
