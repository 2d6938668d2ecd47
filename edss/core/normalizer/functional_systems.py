"""Compression of raw Functional System scores to their EDSS-adjusted ranges."""

from __future__ import annotations

__all__ = ["convert_bowel_bladder_score", "convert_visual_score"]


def convert_visual_score(raw_score: int) -> int:
    """Compress the raw Visual (optic) score from 0-6 to 0-4.

    0 -> 0, 1 -> 1, 2-3 -> 2, 4-5 -> 3, 6 -> 4. Values outside 0-6 are
    returned as given.
    """

    if raw_score == 6:
        return 4
    if raw_score >= 4:
        return 3
    if raw_score >= 2:
        return 2
    return raw_score


def convert_bowel_bladder_score(raw_score: int) -> int:
    """Compress the raw Bowel & Bladder score from 0-6 to 0-5.

    0-2 unchanged, 3-4 -> 3, 5 -> 4, 6 -> 5.
    """

    if raw_score == 6:
        return 5
    if raw_score == 5:
        return 4
    if raw_score >= 3:
        return 3
    return raw_score
