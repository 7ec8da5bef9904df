from __future__ import annotations

import random
from decimal import Decimal

import pytest

from paylens.domain.payment import MAX_AMOUNT, MIN_AMOUNT, RawLine
from paylens.extraction.extractors import AmountExtractor


def _lines(*texts: str) -> list[RawLine]:
    return [RawLine(text=text, position=i) for i, text in enumerate(texts)]


def _best(candidates, value: Decimal) -> float:
    return max(c.confidence for c in candidates if c.value == value)


def test_currency_prefixed_amount_is_capped_at_one() -> None:
    candidates = AmountExtractor().scan(_lines("₹672", "Paid to FURNILI FURNITURE"))

    best = max(candidates, key=lambda c: c.confidence)
    assert best.value == Decimal("672")
    assert best.confidence == 1.0
    assert {c.strategy for c in candidates if c.value == Decimal("672")} >= {"currency_prefixed", "standalone_display"}


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Rs. 1,250", Decimal("1250")),
        ("INR 499.50", Decimal("499.50")),
        ("Amount paid: 2,00,000", Decimal("200000")),
        ("500/-", Decimal("500")),
        ("Total ₹ 1,23,456.75", Decimal("123456.75")),
    ],
)
def test_amount_families(text: str, expected: Decimal) -> None:
    values = {c.value for c in AmountExtractor().scan(_lines(text))}
    assert expected in values


def test_lines_with_dates_times_or_long_ids_are_skipped() -> None:
    candidates = AmountExtractor().scan(
        _lines(
            "12 Aug 2026 2026",
            "Aug 12, 2026",
            "10:45 am",
            "UPI Ref 412345678901",
        )
    )
    assert candidates == []


def test_bare_numbers_skip_indicator_lines() -> None:
    candidates = AmountExtractor().scan(_lines("Mobile 98765", "Card no 4321"))
    assert candidates == []


def test_indicator_words_do_not_hide_currency_amounts() -> None:
    values = {c.value for c in AmountExtractor().scan(_lines("Ref ₹350"))}
    assert values == {Decimal("350")}


def test_keyword_on_adjacent_line_boosts_confidence() -> None:
    alone = AmountExtractor().scan(_lines("250"))
    with_keyword = AmountExtractor().scan(_lines("Amount", "250"))

    assert _best(with_keyword, Decimal("250")) == pytest.approx(_best(alone, Decimal("250")) + 0.15)


def test_keyword_boosts_do_not_stack() -> None:
    candidates = AmountExtractor().scan(_lines("Total", "Paid 300", "Amount"))
    bare = [c for c in candidates if c.strategy == "bare_number"]
    # 0.5 base + 0.2 for the keyword on the line; neighbours add nothing more.
    assert bare[0].confidence == pytest.approx(0.7)


def test_only_in_range_numbers_become_candidates() -> None:
    rng = random.Random(20240812)
    extractor = AmountExtractor()
    for _ in range(200):
        n = rng.randint(0, 2_000_000)
        candidates = extractor.scan(_lines(f"₹{n}"))
        assert all(MIN_AMOUNT <= c.value <= MAX_AMOUNT for c in candidates)
        if MIN_AMOUNT <= n <= MAX_AMOUNT:
            assert Decimal(n) in {c.value for c in candidates}
        else:
            assert candidates == []


@pytest.mark.parametrize("number", ["7", "672", "1,250", "99999.99"])
def test_currency_marker_never_lowers_confidence(number: str) -> None:
    value = Decimal(number.replace(",", ""))
    plain = AmountExtractor().scan(_lines(number))
    marked = AmountExtractor().scan(_lines(f"₹{number}"))

    assert _best(marked, value) >= _best(plain, value)
