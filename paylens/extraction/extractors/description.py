"""Free-text description candidates."""

from __future__ import annotations

import re
from collections.abc import Sequence

from paylens.domain.payment import FieldCandidate, FieldKind, RawLine
from paylens.extraction.normalize import collapse_whitespace
from paylens.runtime import get_logger

from .common import (
    MISREAD_CURRENCY_GLYPHS,
    has_long_digit_run,
    letter_count,
    looks_like_date,
    looks_like_time,
    make_candidate,
)

logger = get_logger(__name__)

BUSINESS_KEYWORD_CONFIDENCE = 0.8
LONGEST_LINE_CONFIDENCE = 0.5
DESCRIPTION_STRATEGIES = ("business_keyword", "longest_line")

METADATA_LINE = re.compile(
    r"transaction|completed|successful|upi\s*id|upi\s*ref|google\s*pay|gpay|phone\s*pe|paytm|bhim|\bshare\b|\b(?:view|download)\s+receipt\b",
    re.IGNORECASE,
)
# "$500" or "&1,200": a rupee sign OCR turned into another glyph.
CORRUPTED_AMOUNT = re.compile(rf"[{re.escape(MISREAD_CURRENCY_GLYPHS)}]\s?\d")


def is_description_noise(text: str) -> bool:
    if letter_count(text) < 2:
        return True
    if METADATA_LINE.search(text) or CORRUPTED_AMOUNT.search(text):
        return True
    return looks_like_date(text) or looks_like_time(text) or has_long_digit_run(text)


class DescriptionExtractor:
    """Prefers lines mentioning known business vocabulary, then the longest clean line."""

    field = FieldKind.DESCRIPTION

    def __init__(self, keywords: Sequence[str] = ()) -> None:
        self.keywords = tuple(k.lower() for k in keywords if k.strip())
        self._keyword_pattern = (
            re.compile(r"\b(?:" + "|".join(re.escape(k) for k in self.keywords) + r")\b", re.IGNORECASE)
            if self.keywords
            else None
        )

    def scan(self, lines: Sequence[RawLine]) -> list[FieldCandidate]:
        usable = [line for line in lines if not is_description_noise(line.text)]
        candidates: list[FieldCandidate] = []
        if self._keyword_pattern is not None:
            for line in usable:
                match = self._keyword_pattern.search(line.text)
                if match:
                    candidates.append(
                        make_candidate(
                            self.field,
                            collapse_whitespace(line.text),
                            BUSINESS_KEYWORD_CONFIDENCE,
                            "business_keyword",
                            line,
                            matched_text=match.group(0),
                        )
                    )
        if usable:
            # max() keeps the first of equally long lines.
            longest = max(usable, key=lambda line: len(line.text.strip()))
            candidates.append(
                make_candidate(
                    self.field, collapse_whitespace(longest.text), LONGEST_LINE_CONFIDENCE, "longest_line", longest
                )
            )
        logger.debug("Description candidates: %s", [(c.value, c.confidence, c.strategy) for c in candidates])
        return candidates
