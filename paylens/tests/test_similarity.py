from __future__ import annotations

import pytest

from paylens.boq import similarity


def test_exact_after_normalization() -> None:
    assert similarity("  18MM   Plywood", "18mm plywood") == 100


def test_containment_scores_85_in_both_directions() -> None:
    assert similarity("plywood", "18mm plywood sheet") == 85
    assert similarity("18mm plywood sheet", "plywood") == 85


def test_edit_distance_score() -> None:
    # one deletion over seven characters
    assert similarity("Plywood", "Plywod") == pytest.approx((1 - 1 / 7) * 100)


@pytest.mark.parametrize(("a", "b"), [("", ""), ("", "plywood"), ("plywood", "   "), (None, "x")])
def test_empty_input_scores_zero(a, b) -> None:
    assert similarity(a, b) == 0


@pytest.mark.parametrize(
    ("a", "b"),
    [("abc", "xyz"), ("Hettich hinge", "Hafele"), ("8x4 feet", "8x4"), ("a", "bbbbbbbbbb")],
)
def test_scores_stay_within_bounds(a: str, b: str) -> None:
    assert 0 <= similarity(a, b) <= 100
