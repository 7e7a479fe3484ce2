"""Serialization contract: discriminator-first records and their JSON form."""

from krldata.serialization.json_io import dumps, loads
from krldata.serialization.record import (
    NAME_KEY,
    STRUC_TYPE_KEY,
    TYPE_KEY,
    VALUE_KEY,
    Record,
    from_record,
    to_record,
)

__all__ = [
    "NAME_KEY",
    "STRUC_TYPE_KEY",
    "TYPE_KEY",
    "VALUE_KEY",
    "Record",
    "dumps",
    "from_record",
    "loads",
    "to_record",
]
