"""EDSS decision table and its ranking helpers."""

from .edss import ambulation_edss, compute_from_scores, compute_scale_value, edss_from_functional_systems
from .ranking import find_max_and_count, find_second_max_and_count

__all__ = [
    "ambulation_edss",
    "compute_from_scores",
    "compute_scale_value",
    "edss_from_functional_systems",
    "find_max_and_count",
    "find_second_max_and_count",
]
