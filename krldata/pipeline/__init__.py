"""Parse-once result carriers."""

from krldata.pipeline.result import KrlParseResult
from krldata.pipeline.results import FormatRunResult

__all__ = [
    "FormatRunResult",
    "KrlParseResult",
]
