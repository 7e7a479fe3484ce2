from dataclasses import dataclass


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Offset into source text, in characters."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) over source text.

    Invariant:
    - 0 <= start <= end
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def empty(offset: TextSize) -> "TextRange":
        return TextRange(offset.value, offset.value)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def is_empty(self) -> bool:
        return self._start == self._end

    def as_tuple(self) -> tuple[int, int]:
        return (self._start, self._end)

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def line_col(source: str, offset: TextSize | int) -> tuple[int, int]:
    """Translate an offset into a 1-based (line, column) pair.

    `\\r\\n` counts as a single line break. Offsets past the end clamp to the end.
    """
    position = offset.value if isinstance(offset, TextSize) else offset
    position = min(max(position, 0), len(source))

    line = 1
    line_start = 0
    index = 0
    while index < position:
        ch = source[index]
        if ch == "\n" or (ch == "\r" and not source.startswith("\n", index + 1)):
            line += 1
            line_start = index + 1
        index += 1
    return line, position - line_start + 1
