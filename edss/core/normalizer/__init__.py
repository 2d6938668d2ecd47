"""Normalisation helpers applied before EDSS ranking."""

from .functional_systems import convert_bowel_bladder_score, convert_visual_score

__all__ = ["convert_bowel_bladder_score", "convert_visual_score"]
