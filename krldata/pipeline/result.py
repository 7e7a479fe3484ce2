"""Parse carrier for callers that want diagnostics instead of exceptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from krldata.diagnostics import has_errors
from krldata.parser.options import ParserOptions

if TYPE_CHECKING:
    from krldata.ast import DataObject
    from krldata.diagnostics import Diagnostic
    from krldata.lexer import Token


@dataclass(slots=True)
class KrlParseResult:
    """Outcome of one parse. `data` is empty when `diagnostics` holds an error."""

    source_text: str
    options: ParserOptions
    data: list[DataObject]
    diagnostics: list[Diagnostic]
    tokens: list[Token] = field(default_factory=list, repr=False)
    _formatted: str | None = field(default=None, init=False, repr=False)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def formatted(self) -> str:
        if self._formatted is None:
            from krldata.format.printer import format_data_list

            self._formatted = format_data_list(self.data)
        return self._formatted
