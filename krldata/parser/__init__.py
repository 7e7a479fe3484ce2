"""Parser infrastructure (token source + recursive-descent grammar)."""

from krldata.parser.grammar import (
    parse_data,
    parse_data_list,
    parse_name,
    parse_struc,
    parse_value,
)
from krldata.parser.krl import parse, parse_one, parse_result, parse_tokens, resolve_options
from krldata.parser.options import ParseMode, ParserOptions
from krldata.parser.parser import Parser
from krldata.parser.token_source import TokenSource

__all__ = [
    "ParseMode",
    "Parser",
    "ParserOptions",
    "TokenSource",
    "parse",
    "parse_data",
    "parse_data_list",
    "parse_name",
    "parse_one",
    "parse_result",
    "parse_struc",
    "parse_tokens",
    "parse_value",
    "resolve_options",
]
