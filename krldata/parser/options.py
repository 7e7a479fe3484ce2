"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STANDARD = "standard"
    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling which data-list forms are accepted."""

    mode: ParseMode = ParseMode.STANDARD
    require_top_level_names: bool = False
    allow_empty_struc: bool = True
    allow_trailing_comma: bool = False
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError("max_depth cannot be negative")

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.STRICT:
            return ParserOptions(
                mode=mode,
                require_top_level_names=True,
                allow_empty_struc=False,
                allow_trailing_comma=False,
            )

        if mode == ParseMode.PERMISSIVE:
            return ParserOptions(
                mode=mode,
                require_top_level_names=False,
                allow_empty_struc=True,
                allow_trailing_comma=True,
            )

        return ParserOptions(mode=mode)
