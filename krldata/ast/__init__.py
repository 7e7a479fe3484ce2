"""Typed data model for KRL data lists."""

from krldata.ast.literals import (
    decode_bit_string,
    decode_bool,
    decode_enum,
    decode_int,
    decode_quoted,
    decode_real,
    format_real,
    is_identifier,
)
from krldata.ast.model import (
    ARRAY_MARKER,
    DATA_OBJECT_CLASSES,
    INT_MAX,
    INT_MIN,
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
    is_data_object,
)

__all__ = [
    "ARRAY_MARKER",
    "DATA_OBJECT_CLASSES",
    "INT_MAX",
    "INT_MIN",
    "BitArrayData",
    "BoolData",
    "CharData",
    "DataObject",
    "DataObjectType",
    "EnumData",
    "IntData",
    "RealData",
    "StringData",
    "StrucData",
    "decode_bit_string",
    "decode_bool",
    "decode_enum",
    "decode_int",
    "decode_quoted",
    "decode_real",
    "format_real",
    "is_data_object",
    "is_identifier",
]
