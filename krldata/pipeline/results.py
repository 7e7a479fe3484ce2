"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from krldata.diagnostics import Diagnostic
    from krldata.pipeline.result import KrlParseResult


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of formatting from a shared parse result."""

    parse: KrlParseResult
    formatted_text: str
    diagnostics: list[Diagnostic]
    changed: bool
