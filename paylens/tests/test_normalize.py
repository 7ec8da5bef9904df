from __future__ import annotations

import pytest

from paylens.extraction.normalize import (
    clean_lines,
    collapse_whitespace,
    normalize_for_match,
    normalize_text,
    title_case,
)


def test_collapse_whitespace_trims_and_joins_runs() -> None:
    assert collapse_whitespace("  Paid \t to\n Ramesh  ") == "Paid to Ramesh"


def test_normalize_for_match_lowercases_only() -> None:
    assert normalize_for_match("  18MM   Plywood ") == "18mm plywood"


def test_normalize_text_strips_punctuation_noise() -> None:
    assert normalize_text("Paid!! to *Ramesh* (₹500)") == "paid to ramesh ₹500"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("FURNILI FURNITURE", "Furnili Furniture"),
        ("sharma   traders", "Sharma Traders"),
        ("", ""),
    ],
)
def test_title_case(raw: str, expected: str) -> None:
    assert title_case(raw) == expected


def test_clean_lines_splits_blobs_and_drops_blanks() -> None:
    assert clean_lines(["₹672\n\n  Paid to X  ", "   ", "12/08/2024"]) == ["₹672", "Paid to X", "12/08/2024"]
