"""Schemas describing EDSS inputs, outputs and record field namings."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Literal, Tuple, Union, get_args

from pydantic import BaseModel, ConfigDict, field_validator

ScaleValue = Literal[
    "0", "1", "1.5", "2", "2.5", "3", "3.5", "4", "4.5", "5",
    "5.5", "6", "6.5", "7", "7.5", "8", "8.5", "9", "9.5", "10",
]

SCALE_VALUES: Tuple[str, ...] = get_args(ScaleValue)


class StrictModel(BaseModel):
    """Immutable base model forbidding unexpected fields."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class FunctionalSystem(str, Enum):
    """Field identifiers in Neurostatus-EDSS order."""

    VISUAL = "visual"
    BRAINSTEM = "brainstem"
    PYRAMIDAL = "pyramidal"
    CEREBELLAR = "cerebellar"
    SENSORY = "sensory"
    BOWEL_BLADDER = "bowel_bladder"
    CEREBRAL = "cerebral"
    AMBULATION = "ambulation"


class FunctionalSystemScores(StrictModel):
    """Raw scores for one examination.

    Ranges are documented but not enforced: visual 0-6, brainstem 0-5,
    pyramidal 0-6, cerebellar 0-5, sensory 0-6, bowel/bladder 0-6,
    cerebral 0-5, ambulation 0-16.
    """

    visual: int
    brainstem: int
    pyramidal: int
    cerebellar: int
    sensory: int
    bowel_bladder: int
    cerebral: int
    ambulation: int

    def functional_systems(self) -> List[int]:
        """Return the seven non-ambulation raw scores in canonical order."""

        return [
            self.visual,
            self.brainstem,
            self.pyramidal,
            self.cerebellar,
            self.sensory,
            self.bowel_bladder,
            self.cerebral,
        ]


class FieldNaming(StrictModel):
    """Record field names for each functional system."""

    fields: Dict[FunctionalSystem, str]

    @field_validator("fields")
    @classmethod
    def _complete_and_named(cls, value: Dict[FunctionalSystem, str]) -> Dict[FunctionalSystem, str]:
        missing = [system.value for system in FunctionalSystem if system not in value]
        if missing:
            raise ValueError(f"field naming lacks: {', '.join(missing)}")
        empty = [system.value for system, name in value.items() if not name or not name.strip()]
        if empty:
            raise ValueError(f"empty field name for: {', '.join(empty)}")
        return value

    def field_for(self, system: FunctionalSystem, suffix: str = "") -> str:
        return self.fields[system] + suffix


class RecordMapping(StrictModel):
    """How a key/value record maps onto :class:`FunctionalSystemScores`."""

    naming: Union[Literal["default", "redcap_pt", "legacy"], FieldNaming] = "default"
    suffix: str = ""
