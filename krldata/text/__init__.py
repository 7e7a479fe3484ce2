"""Text offsets and ranges."""

from krldata.text.text import TextRange, TextSize, line_col

__all__ = [
    "TextRange",
    "TextSize",
    "line_col",
]
