from __future__ import annotations

import pytest

from edss.core.normalizer import convert_bowel_bladder_score, convert_visual_score


@pytest.mark.parametrize(
    ("raw", "adjusted"),
    [(0, 0), (1, 1), (2, 2), (3, 2), (4, 3), (5, 3), (6, 4)],
)
def test_visual_score_compressed_to_zero_four(raw, adjusted):
    assert convert_visual_score(raw) == adjusted


@pytest.mark.parametrize(
    ("raw", "adjusted"),
    [(0, 0), (1, 1), (2, 2), (3, 3), (4, 3), (5, 4), (6, 5)],
)
def test_bowel_bladder_score_compressed_to_zero_five(raw, adjusted):
    assert convert_bowel_bladder_score(raw) == adjusted


def test_out_of_range_values_pass_through_unchanged():
    assert convert_visual_score(-1) == -1
    assert convert_bowel_bladder_score(-3) == -3
    # above the table falls into the ">=" branches
    assert convert_visual_score(9) == 3
    assert convert_bowel_bladder_score(8) == 3
