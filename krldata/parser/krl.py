"""High-level parse entrypoints for KRL data-list text."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from krldata.ast import DataObject
from krldata.errors import KrlDataError, UnexpectedToken
from krldata.lexer import Lexer, Token
from krldata.parser.grammar import parse_data_list
from krldata.parser.options import ParseMode, ParserOptions
from krldata.parser.parser import Parser
from krldata.parser.token_source import TokenSource

if TYPE_CHECKING:
    from krldata.pipeline import KrlParseResult

logger = logging.getLogger(__name__)


def resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> list[DataObject]:
    """Parse a data list. Raises the first `LexError` or `ParseError` encountered."""
    resolved_options = resolve_options(options=options, mode=mode)
    tokens = Lexer(text).lex()
    return _parse_tokens(tokens, resolved_options)


def parse_tokens(
    tokens: Sequence[Token],
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> list[DataObject]:
    """Parse an already lexed token sequence, with or without its EOF token."""
    resolved_options = resolve_options(options=options, mode=mode)
    return _parse_tokens(tokens, resolved_options)


def parse_one(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> DataObject:
    """Parse text holding exactly one data element and return it."""
    resolved_options = resolve_options(options=options, mode=mode)
    data_list = _parse_tokens(Lexer(text).lex(), resolved_options)
    if len(data_list) != 1:
        raise UnexpectedToken(
            "exactly one data element",
            f"{len(data_list)} elements",
        )
    return data_list[0]


def _parse_tokens(tokens: Sequence[Token], options: ParserOptions) -> list[DataObject]:
    source = TokenSource(tokens)
    parser = Parser(source, options=options)
    data_list = parse_data_list(parser)
    logger.debug(
        "Parsed %d data element(s) from %d token(s) in %s mode",
        len(data_list),
        source.token_count,
        options.mode,
    )
    return data_list


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> KrlParseResult:
    """Parse without raising: lexer and parser errors become diagnostics."""
    from krldata.pipeline import KrlParseResult

    resolved_options = resolve_options(options=options, mode=mode)
    tokens: list[Token] = []
    try:
        tokens = Lexer(text).lex()
        data_list = _parse_tokens(tokens, resolved_options)
    except KrlDataError as exc:
        logger.debug("Parse failed: %s", exc)
        return KrlParseResult(
            source_text=text,
            options=resolved_options,
            data=[],
            diagnostics=[exc.to_diagnostic()],
            tokens=tokens,
        )

    return KrlParseResult(
        source_text=text,
        options=resolved_options,
        data=data_list,
        diagnostics=[],
        tokens=tokens,
    )
