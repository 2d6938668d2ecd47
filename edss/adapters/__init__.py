"""Adapters between external record formats and the EDSS core."""

from .records import (
    RecordParseError,
    calculate_from_record,
    calculate_from_record_with,
    extract_scores,
    resolve_naming,
)

__all__ = [
    "RecordParseError",
    "calculate_from_record",
    "calculate_from_record_with",
    "extract_scores",
    "resolve_naming",
]
