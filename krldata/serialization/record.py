"""Discriminator-first records for `DataObject` trees.

A record is a plain dict:

    {"type": <DataObjectType value>, "name": str, "value": payload}

plus `"struc_type"` for structs. Decoding reads `"type"` before anything else
and dispatches on it alone.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final, assert_never

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
from krldata.errors import InvalidPayload, MalformedLiteral, UnknownDiscriminator

TYPE_KEY: Final[str] = "type"
NAME_KEY: Final[str] = "name"
VALUE_KEY: Final[str] = "value"
STRUC_TYPE_KEY: Final[str] = "struc_type"

type Record = dict[str, Any]


def to_record(data: DataObject) -> Record:
    record: Record = {TYPE_KEY: int(data.type_tag), NAME_KEY: data.name}

    match data:
        case BoolData() | IntData() | RealData() | CharData() | EnumData() | StringData():
            record[VALUE_KEY] = data.value
        case BitArrayData():
            record[VALUE_KEY] = [int(bit) for bit in data.value]
        case StrucData():
            record[STRUC_TYPE_KEY] = data.struc_type
            record[VALUE_KEY] = [to_record(member) for member in data.values()]
        case _:
            assert_never(data)

    return record


def from_record(record: Mapping[str, Any]) -> DataObject:
    if not isinstance(record, Mapping):
        raise InvalidPayload(f"record must be a mapping, got {type(record).__name__}")

    discriminator = _read_discriminator(record)
    name = record.get(NAME_KEY, "")
    if not isinstance(name, str):
        raise InvalidPayload(f"name must be a string, got {type(name).__name__}")
    if VALUE_KEY not in record:
        raise InvalidPayload(f"record {name!r} has no value")
    value = record[VALUE_KEY]

    try:
        match discriminator:
            case DataObjectType.BOOL:
                return BoolData(_expect(value, bool, name), name=name)
            case DataObjectType.INT:
                if isinstance(value, bool):
                    raise InvalidPayload(f"value of {name!r} must be int")
                return IntData(_expect(value, int, name), name=name)
            case DataObjectType.REAL:
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise InvalidPayload(f"value of {name!r} must be a number")
                return RealData(float(value), name=name)
            case DataObjectType.CHAR:
                return CharData(_expect(value, str, name), name=name)
            case DataObjectType.ENUM:
                return EnumData(_expect(value, str, name), name=name)
            case DataObjectType.STRING:
                return StringData(_expect(value, str, name), name=name)
            case DataObjectType.BITARRAY:
                return BitArrayData(_decode_bits(value, name), name=name)
            case DataObjectType.STRUC:
                return _decode_struc(record, value, name)
            case _:
                assert_never(discriminator)
    except MalformedLiteral as exc:
        raise InvalidPayload(exc.message) from exc


def _read_discriminator(record: Mapping[str, Any]) -> DataObjectType:
    if TYPE_KEY not in record:
        raise UnknownDiscriminator(None)
    raw = record[TYPE_KEY]
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise UnknownDiscriminator(raw)
    try:
        return DataObjectType(raw)
    except ValueError:
        raise UnknownDiscriminator(raw) from None


def _decode_struc(record: Mapping[str, Any], value: Any, name: str) -> StrucData:
    struc_type = record.get(STRUC_TYPE_KEY, "")
    if not isinstance(struc_type, str):
        raise InvalidPayload(f"struc_type of {name!r} must be a string")
    if not isinstance(value, list):
        raise InvalidPayload(f"members of {name!r} must be a list of records")

    members = [from_record(member) for member in value]
    for member in members:
        if not member.name:
            raise InvalidPayload(f"struct {name!r} has an unnamed member")
    return StrucData.from_members(members, struc_type=struc_type, name=name)


def _decode_bits(value: Any, name: str) -> tuple[bool, ...]:
    if not isinstance(value, list) or any(bit not in (0, 1) or isinstance(bit, float) for bit in value):
        raise InvalidPayload(f"value of {name!r} must be a list of 0/1 bits")
    return tuple(bit == 1 for bit in value)


def _expect[T](value: Any, expected: type[T], name: str) -> T:
    if not isinstance(value, expected):
        raise InvalidPayload(f"value of {name!r} must be {expected.__name__}, got {type(value).__name__}")
    return value
