"""JSON text form of the record contract."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from krldata.ast import DataObject
from krldata.errors import InvalidPayload
from krldata.serialization.record import from_record, to_record

logger = logging.getLogger(__name__)


def dumps(data_list: Iterable[DataObject], *, indent: int | None = None) -> str:
    records = [to_record(data) for data in data_list]
    logger.debug("Serialized %d data element(s)", len(records))
    return json.dumps(records, indent=indent, ensure_ascii=False)


def loads(text: str) -> list[DataObject]:
    try:
        records = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidPayload(f"invalid JSON: {exc.msg} at line {exc.lineno} column {exc.colno}") from exc

    if not isinstance(records, list):
        raise InvalidPayload("top-level JSON value must be a list of records")

    data_list = [from_record(record) for record in records]
    logger.debug("Deserialized %d data element(s)", len(data_list))
    return data_list
