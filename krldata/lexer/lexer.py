"""Lexer."""

from krldata.errors import LexError, UnterminatedString
from krldata.lexer.tokens import Token, TokenKind
from krldata.text import TextRange, TextSize, line_col

_PUNCTUATION: dict[str, TokenKind] = {
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
}

_KEYWORDS: dict[str, TokenKind] = {
    "TRUE": TokenKind.BOOL,
    "FALSE": TokenKind.BOOL,
    "NaN": TokenKind.NAN,
    "Infinity": TokenKind.NAN,
}

_SNIPPET_LENGTH = 16


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    """Single-pass lexer. Whitespace separates tokens and is never emitted."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._current_start = 0

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def current_range(self) -> TextRange:
        return TextRange(self._current_start, self._position)

    def next_token(self) -> Token:
        self._skip_whitespace()
        self._current_start = self._position

        if self.is_eof:
            return Token(TokenKind.EOF, TextRange.empty(TextSize(self._position)), "")

        kind = self._lex_token()
        return Token(kind, self.current_range, self._source[self._current_start : self._position])

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        punctuation = _PUNCTUATION.get(ch)
        if punctuation is not None:
            self._advance(1)
            return punctuation

        if ch == "#":
            return self._lex_enum()

        if ch == '"':
            return self._lex_string('"', TokenKind.DOUBLE_QUOTED_STRING)

        if ch == "'":
            # 'B0101' wins over a single-quoted string starting with B.
            bit_string_end = self._bit_string_end()
            if bit_string_end is not None:
                self._position = bit_string_end
                return TokenKind.BIT_STRING
            return self._lex_string("'", TokenKind.SINGLE_QUOTED_STRING)

        if ch == "+" or ch == "-":
            if self._word_at(self._position + 1) == "Infinity":
                self._advance(1 + len("Infinity"))
                return TokenKind.NAN
            return self._lex_number()

        if _is_digit(ch) or (ch == "." and _is_digit(self._peek_char())):
            return self._lex_number()

        if ch.isalpha() or ch == "_":
            return self._lex_identifier()

        raise self._error()

    def _lex_enum(self) -> TokenKind:
        first = self._peek_char()
        if not (first.isalpha() or first == "_"):
            raise self._error()
        self._advance(1)
        self._consume_identifier_body()
        return TokenKind.ENUM

    def _lex_string(self, quote: str, kind: TokenKind) -> TokenKind:
        # No escape sequences: the literal ends at the next matching quote.
        end = self._source.find(quote, self._position + 1)
        if end == -1:
            raise self._error(UnterminatedString)
        self._position = end + 1
        return kind

    def _bit_string_end(self) -> int | None:
        if self._peek_char() != "B":
            return None
        index = self._position + 2
        while index < len(self._source) and self._source[index] in "01":
            index += 1
        if index < len(self._source) and self._source[index] == "'":
            return index + 1
        return None

    def _lex_number(self) -> TokenKind:
        start = self._position
        if self._current_char() in "+-":
            self._advance(1)

        int_digits = self._consume_digits()
        is_real = False
        if self._current_char() == "." and (int_digits or _is_digit(self._peek_char())):
            is_real = True
            self._advance(1)
            self._consume_digits()

        if int_digits == 0 and not is_real:
            self._position = start
            raise self._error()

        if self._current_char() in ("e", "E"):
            offset = 2 if self._peek_char() in ("+", "-") else 1
            if _is_digit(self._peek_char(offset)):
                is_real = True
                self._advance(offset)
                self._consume_digits()

        return TokenKind.REAL if is_real else TokenKind.INT

    def _lex_identifier(self) -> TokenKind:
        self._consume_identifier_body()
        text = self._source[self._current_start : self._position]
        return _KEYWORDS.get(text, TokenKind.IDENTIFIER)

    def _consume_identifier_body(self) -> None:
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch.isalnum() or ch == "_":
                self._advance(1)
                continue
            break

    def _consume_digits(self) -> int:
        count = 0
        while _is_digit(self._current_char()):
            self._advance(1)
            count += 1
        return count

    def _skip_whitespace(self) -> None:
        while not self.is_eof and self._source[self._position].isspace():
            self._advance(1)

    def _word_at(self, index: int) -> str:
        end = index
        while end < len(self._source) and (self._source[end].isalnum() or self._source[end] == "_"):
            end += 1
        return self._source[index:end]

    def _error(self, error_type: type[LexError] = LexError) -> LexError:
        position = self._current_start
        line, column = line_col(self._source, position)
        snippet = self._source[position : position + _SNIPPET_LENGTH]
        return error_type(position, snippet, line=line, column=column)

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def tokenize(text: str) -> list[Token]:
    """Lex `text` into its tokens, without the trailing EOF sentinel."""
    return [token for token in Lexer(text).lex() if token.kind != TokenKind.EOF]


def dump_tokens(tokens: list[Token], source: str | None = None) -> None:
    """Print token list with kind, range, position and text for debugging."""
    for i, tok in enumerate(tokens):
        location = ""
        if source is not None:
            line, column = line_col(source, tok.position)
            location = f" at={line}:{column}"
        print(f"{i:03d} {tok.kind.name:<22} range={tok.range.as_tuple()}{location} text={tok.text!r}")
