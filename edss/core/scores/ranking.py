"""Max / second-max helpers used by the EDSS decision chain."""

from __future__ import annotations

from typing import Sequence, Tuple

__all__ = ["find_max_and_count", "find_second_max_and_count"]


def find_max_and_count(scores: Sequence[int]) -> Tuple[int, int]:
    """Return the highest score and how many systems share it."""

    max_value = max(scores)
    return max_value, sum(1 for score in scores if score == max_value)


def find_second_max_and_count(scores: Sequence[int], max_value: int) -> Tuple[int, int]:
    """Return the highest score below *max_value* and its count, or ``(0, 0)``."""

    below = [score for score in scores if score < max_value]
    if not below:
        return 0, 0
    second_max = max(below)
    return second_max, sum(1 for score in below if score == second_max)
