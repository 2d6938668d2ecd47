"""Expanded Disability Status Scale (Kurtzke / Neurostatus-EDSS) decision table.

The score is derived in two phases:

* Phase 1: an ambulation score of 3 or more maps directly to EDSS 5.0-10.0.
* Phase 2: otherwise the seven Functional System (FS) scores are ranked and
  the ordered rule chain below yields EDSS 0-5.0. Ambulation 1 and 2 still
  take part as tie-breakers.

Several guards in Phase 2 overlap, so the order of the checks is part of the
table and must not be rearranged.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence

from ...schemas.edss import FunctionalSystemScores, ScaleValue
from ..normalizer.functional_systems import convert_bowel_bladder_score, convert_visual_score
from .ranking import find_max_and_count, find_second_max_and_count

__all__ = [
    "ambulation_edss",
    "compute_from_scores",
    "compute_scale_value",
    "edss_from_functional_systems",
]

logger = logging.getLogger(__name__)

_AMBULATION_EDSS: Dict[int, ScaleValue] = {
    16: "10",  # death due to MS
    15: "9.5",  # totally helpless bed patient
    14: "9",  # helpless bed patient; can communicate and eat
    13: "8.5",  # restricted to bed; some use of arms
    12: "8",  # restricted to bed or chair
    11: "7.5",  # wheelchair with help
    10: "7",  # wheelchair without help
    9: "6.5",  # bilateral assistance, under 120 m
    8: "6.5",
    7: "6",  # unilateral or bilateral assistance, 120 m or more
    6: "6",
    5: "6",
    4: "5.5",  # walks 100-200 m without help
    3: "5",  # walks 200-300 m without help
}


def ambulation_edss(ambulation: int) -> Optional[ScaleValue]:
    """Return the EDSS fixed by ambulation alone, or ``None`` for 0-2."""

    return _AMBULATION_EDSS.get(ambulation)


def edss_from_functional_systems(
    functional_systems: Sequence[int],
    max_value: int,
    max_count: int,
    ambulation: int,
) -> ScaleValue:
    """Phase 2: EDSS 0-5.0 from the adjusted FS scores.

    *functional_systems* must already hold the compressed visual and
    bowel/bladder values.
    """

    # EDSS 5.0 from FS alone
    if max_value >= 5:
        return "5"
    if max_value == 4 and max_count >= 2:
        return "5"
    if max_value == 4 and max_count == 1:
        second_max, second_count = find_second_max_and_count(functional_systems, max_value)
        if second_max == 3 and second_count > 2:
            return "5"
        if second_max == 3 or second_max == 2:
            return "4.5"
        if ambulation < 2 and second_max < 2:
            return "4"
    # only way to 5.0 that ambulation 2 cannot pre-empt
    if max_value == 3 and max_count >= 6:
        return "5"

    if ambulation == 2:
        return "4.5"

    if max_value == 3:
        if max_count == 5:
            return "4.5"
        if max_count >= 2:
            if max_count == 2:
                second_max, _ = find_second_max_and_count(functional_systems, max_value)
                if second_max <= 1:
                    return "3.5"
            return "4"
        second_max, second_count = find_second_max_and_count(functional_systems, max_value)
        if second_max == 2:
            if second_count >= 3:
                return "4"
            return "3.5"
        return "3"

    if max_value == 2:
        if max_count >= 6:
            return "4"
        if max_count == 5:
            return "3.5"
        if max_count == 3 or max_count == 4:
            return "3"
        if max_count == 2:
            return "2.5"
        return "2"

    if ambulation == 1:
        return "2"

    if max_value == 1:
        if max_count >= 2:
            return "1.5"
        return "1"

    return "0"


def compute_scale_value(
    visual: int,
    brainstem: int,
    pyramidal: int,
    cerebellar: int,
    sensory: int,
    bowel_bladder: int,
    cerebral: int,
    ambulation: int,
) -> ScaleValue:
    """Calculate the EDSS step from raw FS scores and the ambulation score.

    Visual and bowel/bladder are passed raw (0-6) and compressed here.

    >>> compute_scale_value(1, 2, 1, 3, 1, 4, 2, 1)
    '4'
    """

    result = ambulation_edss(ambulation)
    if result is not None:
        logger.debug("Ambulation %s determines EDSS %s", ambulation, result)
        return result

    functional_systems = [
        convert_visual_score(visual),
        brainstem,
        pyramidal,
        cerebellar,
        sensory,
        convert_bowel_bladder_score(bowel_bladder),
        cerebral,
    ]
    max_value, max_count = find_max_and_count(functional_systems)
    result = edss_from_functional_systems(functional_systems, max_value, max_count, ambulation)
    logger.debug(
        "FS max %s (x%s) with ambulation %s determines EDSS %s",
        max_value,
        max_count,
        ambulation,
        result,
    )
    return result


def compute_from_scores(scores: FunctionalSystemScores) -> ScaleValue:
    """Same as :func:`compute_scale_value` for a typed score record."""

    return compute_scale_value(
        scores.visual,
        scores.brainstem,
        scores.pyramidal,
        scores.cerebellar,
        scores.sensory,
        scores.bowel_bladder,
        scores.cerebral,
        scores.ambulation,
    )
