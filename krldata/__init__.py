"""Parser, data model and serializer for KUKA KRL data lists."""

from krldata.ast import (
    BitArrayData,
    BoolData,
    CharData,
    DataObject,
    DataObjectType,
    EnumData,
    IntData,
    RealData,
    StringData,
    StrucData,
)
from krldata.errors import (
    DuplicateStructMember,
    InvalidPayload,
    KrlDataError,
    LexError,
    MalformedLiteral,
    NestingTooDeep,
    ParseError,
    SerializationError,
    UnexpectedEndOfInput,
    UnexpectedToken,
    UnknownDiscriminator,
    UnterminatedString,
)
from krldata.format import format_data, format_data_list, run_format
from krldata.lexer import Token, TokenKind, tokenize
from krldata.parser import ParseMode, ParserOptions, parse, parse_one, parse_result, parse_tokens
from krldata.pipeline import FormatRunResult, KrlParseResult
from krldata.serialization import dumps, from_record, loads, to_record

__all__ = [
    "BitArrayData",
    "BoolData",
    "CharData",
    "DataObject",
    "DataObjectType",
    "DuplicateStructMember",
    "EnumData",
    "FormatRunResult",
    "IntData",
    "InvalidPayload",
    "KrlDataError",
    "KrlParseResult",
    "LexError",
    "MalformedLiteral",
    "NestingTooDeep",
    "ParseError",
    "ParseMode",
    "ParserOptions",
    "RealData",
    "SerializationError",
    "StringData",
    "StrucData",
    "Token",
    "TokenKind",
    "UnexpectedEndOfInput",
    "UnexpectedToken",
    "UnknownDiscriminator",
    "UnterminatedString",
    "dumps",
    "format_data",
    "format_data_list",
    "from_record",
    "loads",
    "parse",
    "parse_one",
    "parse_result",
    "parse_tokens",
    "run_format",
    "to_record",
    "tokenize",
]
