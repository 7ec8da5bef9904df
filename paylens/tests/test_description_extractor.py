from __future__ import annotations

from paylens.domain.payment import RawLine
from paylens.extraction.extractors import DescriptionExtractor
from paylens.extraction.extractors.description import is_description_noise


def _lines(*texts: str) -> list[RawLine]:
    return [RawLine(text=text, position=i) for i, text in enumerate(texts)]


def test_business_keyword_line_outranks_longest_line() -> None:
    candidates = DescriptionExtractor(("plywood",)).scan(
        _lines("Google Pay", "Plywood sheets for site", "Thanks for shopping with us today", "Transaction ID 1234567890")
    )

    by_strategy = {c.strategy: c for c in candidates}
    assert by_strategy["business_keyword"].value == "Plywood sheets for site"
    assert by_strategy["business_keyword"].confidence == 0.8
    assert by_strategy["longest_line"].value == "Thanks for shopping with us today"


def test_metadata_and_corrupted_lines_are_skipped() -> None:
    candidates = DescriptionExtractor().scan(
        _lines("Payment completed successfully", "$500 office chairs", "12/08/2024", "Tea")
    )
    assert [(c.value, c.strategy) for c in candidates] == [("Tea", "longest_line")]


def test_purpose_lines_sharing_words_with_screen_chrome_survive() -> None:
    candidates = DescriptionExtractor().scan(
        _lines("Share", "View receipt", "Shared office rent", "Receipt printer purchase")
    )

    assert [c.value for c in candidates] == ["Receipt printer purchase"]
    assert not is_description_noise("Shared office rent")
    assert is_description_noise("Share receipt")


def test_nothing_usable_yields_no_candidates() -> None:
    assert DescriptionExtractor(("food",)).scan(_lines("₹120", "1", "10:45")) == []
