"""EDSS (Expanded Disability Status Scale) calculator."""

from .adapters.records import RecordParseError, calculate_from_record
from .content import NAMING_DEFAULT, NAMING_REDCAP_PT, UnknownNamingError, load_naming
from .core.scores.edss import compute_from_scores, compute_scale_value
from .schemas.edss import SCALE_VALUES, FieldNaming, FunctionalSystem, FunctionalSystemScores, RecordMapping

__all__ = [
    "NAMING_DEFAULT",
    "NAMING_REDCAP_PT",
    "SCALE_VALUES",
    "FieldNaming",
    "FunctionalSystem",
    "FunctionalSystemScores",
    "RecordMapping",
    "RecordParseError",
    "UnknownNamingError",
    "calculate_from_record",
    "compute_from_scores",
    "compute_scale_value",
    "load_naming",
]
