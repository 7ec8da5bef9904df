from __future__ import annotations

import pytest

from paylens.domain.payment import RawLine
from paylens.extraction.extractors import TransactionIdExtractor


def _scan(*texts: str):
    return TransactionIdExtractor().scan([RawLine(text=text, position=i) for i, text in enumerate(texts)])


def _best(candidates):
    return max(candidates, key=lambda c: c.confidence)


def test_labelled_reference() -> None:
    best = _best(_scan("UPI Ref No: 123456789012"))
    assert (best.value, best.strategy) == ("123456789012", "labelled")
    assert best.confidence == pytest.approx(0.9)


def test_labelled_alphanumeric_id_is_uppercased() -> None:
    best = _best(_scan("Transaction ID: t2408121234567890"))
    assert best.value == "T2408121234567890"


def test_label_on_previous_line_boosts_bare_reference() -> None:
    candidates = _scan("UTR", "412345678901")
    assert [(c.value, c.strategy) for c in candidates] == [("412345678901", "long_numeric")]
    assert candidates[0].confidence == pytest.approx(0.95)


def test_letter_prefixed_reference() -> None:
    candidates = _scan("AXIS12345678")
    assert [(c.value, c.strategy) for c in candidates] == [("AXIS12345678", "alphanumeric_ref")]


def test_short_numbers_are_not_references() -> None:
    assert _scan("₹672", "Order 12345") == []
