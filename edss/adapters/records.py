"""Map key/value records (e.g. REDCap exports) onto EDSS inputs."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from ..content import load_naming
from ..core.config import get_settings
from ..core.scores.edss import compute_from_scores
from ..schemas.edss import FieldNaming, FunctionalSystem, FunctionalSystemScores, RecordMapping, ScaleValue

__all__ = [
    "RecordParseError",
    "calculate_from_record",
    "calculate_from_record_with",
    "extract_scores",
    "resolve_naming",
]

logger = logging.getLogger(__name__)

NamingLike = Union[str, FieldNaming, Mapping[Any, str]]

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(eq=False)
class RecordParseError(ValueError):
    field: str
    value: str

    def __str__(self) -> str:
        return f"Field '{self.field}' is not an integer score: {self.value!r}"


def resolve_naming(naming: NamingLike) -> FieldNaming:
    """Return a :class:`FieldNaming` for a built-in id, a model or a plain mapping."""

    if isinstance(naming, FieldNaming):
        return naming
    if isinstance(naming, str):
        return load_naming(naming)
    return FieldNaming.model_validate({"fields": dict(naming)})


def _raw_value(record: Mapping[str, Any], field: str) -> str:
    value = record.get(field)
    if value is None:
        return ""
    return str(value).strip()


def extract_scores(record: Mapping[str, Any], mapping: RecordMapping) -> Optional[FunctionalSystemScores]:
    """Read the eight scores from *record*; ``None`` when any field is missing or empty."""

    naming = resolve_naming(mapping.naming)
    values: Dict[str, int] = {}
    for system in FunctionalSystem:
        field = naming.field_for(system, mapping.suffix)
        raw = _raw_value(record, field)
        if not raw:
            logger.info("Incomplete EDSS record: missing '%s'", field)
            return None
        if not _INTEGER_RE.fullmatch(raw):
            raise RecordParseError(field=field, value=raw)
        values[system.value] = int(raw)
    return FunctionalSystemScores(**values)


def calculate_from_record_with(record: Mapping[str, Any], mapping: RecordMapping) -> Optional[ScaleValue]:
    scores = extract_scores(record, mapping)
    if scores is None:
        return None
    return compute_from_scores(scores)


def calculate_from_record(
    record: Mapping[str, Any],
    naming: Optional[NamingLike] = None,
    suffix: Optional[str] = None,
) -> Optional[ScaleValue]:
    """Calculate EDSS from a record, or ``None`` if the data is incomplete.

    *naming* is ``"default"``, ``"redcap_pt"`` (alias ``"legacy"``), a
    :class:`FieldNaming` or a ``{system: field_name}`` mapping. *suffix* is
    appended to every field name, e.g. ``"_long"`` for longitudinal
    repeats. Both default to the values in :func:`get_settings`.
    """

    settings = get_settings()
    resolved = resolve_naming(settings.field_naming if naming is None else naming)
    mapping = RecordMapping(
        naming=resolved,
        suffix=settings.field_suffix if suffix is None else suffix,
    )
    return calculate_from_record_with(record, mapping)
