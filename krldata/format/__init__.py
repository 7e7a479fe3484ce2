"""Data-list text rendering."""

from krldata.format.printer import format_data, format_data_list
from krldata.format.runner import run_format

__all__ = [
    "format_data",
    "format_data_list",
    "run_format",
]
