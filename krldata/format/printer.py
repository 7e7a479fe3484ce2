"""Render data objects back to data-list text."""

from __future__ import annotations

from collections.abc import Iterable

from krldata.ast import DataObject


def format_data(data: DataObject) -> str:
    """Render one element as `name value`, or just `value` when unnamed."""
    return str(data)


def format_data_list(data_list: Iterable[DataObject]) -> str:
    return ", ".join(format_data(data) for data in data_list)
