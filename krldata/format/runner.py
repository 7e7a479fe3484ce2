"""Format runner over a shared KRL parse result."""

from __future__ import annotations

from typing import TYPE_CHECKING

from krldata.parser import ParseMode, ParserOptions
from krldata.parser import parse_result
from krldata.pipeline.results import FormatRunResult

if TYPE_CHECKING:
    from krldata.pipeline.result import KrlParseResult


def run_format(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    parse: KrlParseResult | None = None,
) -> FormatRunResult:
    """Re-render source text canonically. Text that fails to parse is returned unchanged."""
    resolved_parse = _resolve_parse(text, options=options, mode=mode, parse=parse)

    if resolved_parse.has_errors:
        formatted_text = resolved_parse.source_text
    else:
        formatted_text = resolved_parse.formatted()

    return FormatRunResult(
        parse=resolved_parse,
        formatted_text=formatted_text,
        diagnostics=list(resolved_parse.diagnostics),
        changed=formatted_text != resolved_parse.source_text,
    )


def _resolve_parse(
    text: str,
    *,
    options: ParserOptions | None,
    mode: ParseMode | None,
    parse: KrlParseResult | None,
) -> KrlParseResult:
    if parse is not None:
        if options is not None or mode is not None:
            raise ValueError("Pass either parse or options/mode, not both")
        return parse
    return parse_result(text, options=options, mode=mode)
