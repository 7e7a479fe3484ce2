"""Recursive-descent parser core."""

from collections.abc import Iterator
from contextlib import contextmanager

from krldata.errors import NestingTooDeep, UnexpectedEndOfInput, UnexpectedToken
from krldata.lexer import Token, TokenKind
from krldata.parser.options import ParserOptions
from krldata.parser.token_source import TokenSource
from krldata.text import TextRange


class Parser:
    """Token cursor plus the helpers grammar routines share.

    Errors are raised, never collected: the first one ends the parse.
    """

    def __init__(self, source: TokenSource, options: ParserOptions | None = None) -> None:
        self._source = source
        self._options = options or ParserOptions()
        self._depth = 0

    @property
    def source(self) -> TokenSource:
        return self._source

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def current(self) -> TokenKind:
        return self._source.current

    @property
    def current_token(self) -> Token:
        return self._source.current_token

    @property
    def current_range(self) -> TextRange:
        return self._source.current_range

    @property
    def depth(self) -> int:
        return self._depth

    def at(self, kind: TokenKind) -> bool:
        return self.current == kind

    def nth(self, n: int) -> TokenKind:
        return self._source.nth(n)

    def bump(self) -> Token:
        return self._source.bump()

    def eat(self, kind: TokenKind) -> bool:
        if self.current == kind:
            self.bump()
            return True
        return False

    def expect(self, kind: TokenKind, expected: str) -> Token:
        if self.current != kind:
            raise self.unexpected(expected)
        return self.bump()

    def unexpected(self, expected: str) -> UnexpectedEndOfInput | UnexpectedToken:
        """Build the error for finding the current token where `expected` should be."""
        token = self.current_token
        if token.kind == TokenKind.EOF:
            return UnexpectedEndOfInput(expected, range=token.range)
        return UnexpectedToken(expected, token.kind.name, text=token.text, range=token.range)

    @contextmanager
    def nested(self, opening: Token) -> Iterator[None]:
        self._depth += 1
        try:
            max_depth = self._options.max_depth
            if max_depth is not None and self._depth > max_depth:
                raise NestingTooDeep(max_depth, range=opening.range)
            yield
        except RecursionError:
            # Out of interpreter stack; outer levels retry once frames unwind.
            raise NestingTooDeep(self._depth, range=opening.range) from None
        finally:
            self._depth -= 1
