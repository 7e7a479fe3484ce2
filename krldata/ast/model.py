"""Data model for parsed KRL data lists.

Every parsed value is one of eight frozen variants. The set is closed: the
`DataObject` union lists all of them and consumers match on `type_tag` or on
the variant class.
"""

from __future__ import annotations

import dataclasses
import math
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import ClassVar, Final, final

from krldata.ast.literals import format_real, is_identifier
from krldata.errors import DuplicateStructMember, MalformedLiteral

ARRAY_MARKER: Final[str] = "[]"

INT_MIN: Final[int] = -(2**63)
INT_MAX: Final[int] = 2**63 - 1


class DataObjectType(IntEnum):
    """Discriminator of a `DataObject` variant. Values are part of the serialized form."""

    BOOL = 0
    INT = 1
    REAL = 2
    CHAR = 3
    ENUM = 4
    STRING = 5
    BITARRAY = 6
    STRUC = 7


@dataclass(frozen=True, slots=True)
class _DataObjectBase:
    name: str = field(default="", kw_only=True)

    type_tag: ClassVar[DataObjectType]
    is_scalar: ClassVar[bool] = False
    is_struc: ClassVar[bool] = False
    is_array: ClassVar[bool] = False
    _krl_type: ClassVar[str] = ""

    @property
    def krl_type_name(self) -> str:
        return self._krl_type

    @property
    def has_array_marker(self) -> bool:
        return self.name.endswith(ARRAY_MARKER)

    @property
    def base_name(self) -> str:
        """Name without the trailing `[]` marker."""
        if self.has_array_marker:
            return self.name[: -len(ARRAY_MARKER)]
        return self.name

    def with_name(self, name: str):
        return dataclasses.replace(self, name=name)

    # Every variant of the closed union defines `format_value`.
    def __str__(self) -> str:
        if self.name:
            return f"{self.name} {self.format_value()}"
        return self.format_value()


@final
@dataclass(frozen=True, slots=True)
class BoolData(_DataObjectBase):
    value: bool

    type_tag = DataObjectType.BOOL
    is_scalar = True
    _krl_type = "BOOL"

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise MalformedLiteral(repr(self.value), "boolean value expected")

    def format_value(self) -> str:
        return "TRUE" if self.value else "FALSE"


@final
@dataclass(frozen=True, slots=True)
class IntData(_DataObjectBase):
    value: int

    type_tag = DataObjectType.INT
    is_scalar = True
    _krl_type = "INT"

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise MalformedLiteral(repr(self.value), "integer value expected")
        if not INT_MIN <= self.value <= INT_MAX:
            raise MalformedLiteral(str(self.value), "integer out of 64-bit range")

    def format_value(self) -> str:
        return str(self.value)


@final
@dataclass(frozen=True, slots=True, eq=False)
class RealData(_DataObjectBase):
    value: float

    type_tag = DataObjectType.REAL
    is_scalar = True
    _krl_type = "REAL"

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise MalformedLiteral(repr(self.value), "real value expected")
        object.__setattr__(self, "value", float(self.value))

    def format_value(self) -> str:
        return format_real(self.value)

    # NaN never equals itself; two NaN payloads still describe the same literal.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RealData):
            return NotImplemented
        if self.name != other.name:
            return False
        if math.isnan(self.value) and math.isnan(other.value):
            return True
        return self.value == other.value

    def __hash__(self) -> int:
        return hash((self.name, "NaN" if math.isnan(self.value) else self.value))


@final
@dataclass(frozen=True, slots=True)
class CharData(_DataObjectBase):
    value: str

    type_tag = DataObjectType.CHAR
    is_scalar = True
    _krl_type = "CHAR"

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or len(self.value) != 1:
            raise MalformedLiteral(repr(self.value), "char must be exactly one character")

    def format_value(self) -> str:
        # 'B' would re-lex as an empty bit string.
        if self.value in ("'", "B"):
            return f'"{self.value}"'
        return f"'{self.value}'"


@final
@dataclass(frozen=True, slots=True)
class EnumData(_DataObjectBase):
    """Enum literal. `value` is stored without the leading `#`."""

    value: str

    type_tag = DataObjectType.ENUM
    is_scalar = True
    _krl_type = "ENUM"

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not is_identifier(self.value):
            raise MalformedLiteral(repr(self.value), "enum value must be an identifier")

    def format_value(self) -> str:
        return f"#{self.value}"


@final
@dataclass(frozen=True, slots=True)
class StringData(_DataObjectBase):
    value: str

    type_tag = DataObjectType.STRING
    is_array = True
    _krl_type = "CHAR"

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise MalformedLiteral(repr(self.value), "string value expected")
        if len(self.value) == 1:
            raise MalformedLiteral(self.value, "one-character literals are chars")
        if '"' in self.value and "'" in self.value:
            raise MalformedLiteral(self.value, "string cannot contain both quote characters")

    def format_value(self) -> str:
        if '"' in self.value:
            return f"'{self.value}'"
        return f'"{self.value}"'


@final
@dataclass(frozen=True, slots=True)
class BitArrayData(_DataObjectBase):
    """Fixed-length bit sequence, first bit first."""

    value: tuple[bool, ...]

    type_tag = DataObjectType.BITARRAY
    is_array = True
    _krl_type = "BOOL"

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", tuple(bool(bit) for bit in self.value))

    @staticmethod
    def from_digits(digits: str, *, name: str = "") -> BitArrayData:
        if any(digit not in "01" for digit in digits):
            raise MalformedLiteral(digits, "bit digits must be 0 or 1")
        return BitArrayData(tuple(digit == "1" for digit in digits), name=name)

    @property
    def digits(self) -> str:
        return "".join("1" if bit else "0" for bit in self.value)

    def __len__(self) -> int:
        return len(self.value)

    def format_value(self) -> str:
        return f"'B{self.digits}'"


@final
@dataclass(frozen=True, slots=True, eq=False)
class StrucData(_DataObjectBase):
    """Ordered, uniquely named members with an optional struct type tag."""

    members: Mapping[str, DataObject] = field(default_factory=dict)
    struc_type: str = ""

    type_tag = DataObjectType.STRUC
    is_struc = True

    def __post_init__(self) -> None:
        members = dict(self.members)
        for key, member in members.items():
            if not member.name:
                raise ValueError("Struct members must be named")
            if key != member.name:
                raise ValueError(f"Member key {key!r} does not match member name {member.name!r}")
        object.__setattr__(self, "members", MappingProxyType(members))

    @staticmethod
    def from_members(
        members: Iterable[DataObject],
        *,
        struc_type: str = "",
        name: str = "",
    ) -> StrucData:
        mapping: dict[str, DataObject] = {}
        for member in members:
            if not member.name:
                raise ValueError("Struct members must be named")
            if member.name in mapping:
                raise DuplicateStructMember(member.name)
            mapping[member.name] = member
        return StrucData(mapping, struc_type=struc_type, name=name)

    @property
    def krl_type_name(self) -> str:
        return self.struc_type

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self.members)

    def get(self, name: str) -> DataObject | None:
        return self.members.get(name)

    def values(self) -> Iterable[DataObject]:
        return self.members.values()

    def items(self) -> Iterable[tuple[str, DataObject]]:
        return self.members.items()

    def __getitem__(self, name: str) -> DataObject:
        return self.members[name]

    def __contains__(self, name: object) -> bool:
        return name in self.members

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def format_value(self) -> str:
        head = f"{self.struc_type}: " if self.struc_type else ""
        body = ", ".join(str(member) for member in self.members.values())
        return "{" + head + body + "}"

    # Member order is part of a struct's identity.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StrucData):
            return NotImplemented
        return (
            self.name == other.name
            and self.struc_type == other.struc_type
            and list(self.members.items()) == list(other.members.items())
        )

    __hash__ = None  # type: ignore[assignment]


type DataObject = (
    BoolData | IntData | RealData | CharData | EnumData | StringData | BitArrayData | StrucData
)

DATA_OBJECT_CLASSES: Final[tuple[type, ...]] = (
    BoolData,
    IntData,
    RealData,
    CharData,
    EnumData,
    StringData,
    BitArrayData,
    StrucData,
)


def is_data_object(value: object) -> bool:
    return isinstance(value, DATA_OBJECT_CLASSES)


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
    "is_data_object",
]
