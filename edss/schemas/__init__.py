"""Pydantic schemas shared across the calculator."""

from .edss import (
    SCALE_VALUES,
    FieldNaming,
    FunctionalSystem,
    FunctionalSystemScores,
    RecordMapping,
    ScaleValue,
)

__all__ = [
    "SCALE_VALUES",
    "FieldNaming",
    "FunctionalSystem",
    "FunctionalSystemScores",
    "RecordMapping",
    "ScaleValue",
]
