import pytest

from krldata.lexer import Lexer
from krldata.text import TextRange, TextSize, line_col


def test_text_range_invariants() -> None:
    with pytest.raises(ValueError):
        TextRange(3, 1)
    with pytest.raises(ValueError):
        TextSize(-1)


def test_eof_token_has_empty_range_at_end_of_input() -> None:
    eof = Lexer("A 1  ").lex()[-1]

    assert eof.range == TextRange.empty(TextSize(5))
    assert eof.range.is_empty()
    assert eof.range.start == eof.range.end == TextSize(5)


@pytest.mark.parametrize(
    ("source", "offset", "expected"),
    [
        ("abc", 0, (1, 1)),
        ("abc", 2, (1, 3)),
        ("a\nbc", 3, (2, 2)),
        ("a\r\nb", 3, (2, 1)),
        ("a\rb", 2, (2, 1)),
        ("ab", 99, (1, 3)),
    ],
)
def test_line_col(source: str, offset: int, expected: tuple[int, int]) -> None:
    assert line_col(source, offset) == expected
    assert line_col(source, TextSize(offset)) == expected
