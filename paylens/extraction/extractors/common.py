"""Shared rule types, patterns and helpers for candidate extractors."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Literal, Protocol

from paylens.domain.payment import FieldCandidate, FieldKind, RawLine
from paylens.extraction.date_utils import MONTH_NAME_PATTERN

MAX_CONFIDENCE = 1.0

# Explicit currency markers (the rupee sign and its spelled-out forms).
CURRENCY_MARKER = re.compile(r"₹|\brs(?![a-z])\.?|\binr(?![a-z])|\brupees?\b", re.IGNORECASE)

# Glyphs OCR commonly produces when it misreads the rupee sign.
MISREAD_CURRENCY_GLYPHS = "£$@€¥¢&"

PAYMENT_KEYWORDS = re.compile(
    r"\b(?:paid|amount|total|sent|received|bill|debited|credited|payment)\b",
    re.IGNORECASE,
)

# Lines that look like dates or times are never scanned for amounts.
DATE_LIKE_PATTERNS = (
    re.compile(r"\b\d{1,2}[/.\-]\d{1,2}[/.\-]\d{2,4}\b"),
    re.compile(r"\b\d{4}[/.\-]\d{1,2}[/.\-]\d{1,2}\b"),
    re.compile(rf"\b\d{{1,2}}(?:st|nd|rd|th)?\s+{MONTH_NAME_PATTERN}", re.IGNORECASE),
    re.compile(rf"\b{MONTH_NAME_PATTERN}\s*\d{{0,2}}(?:st|nd|rd|th)?,?\s*(?:19|20)\d{{2}}\b", re.IGNORECASE),
)
TIME_PATTERN = re.compile(r"\b\d{1,2}:\d{2}(?::\d{2})?(?:\s*[ap]\.?m\.?)?", re.IGNORECASE)
LONG_DIGIT_RUN = re.compile(r"\d{10,}")


def looks_like_date(text: str) -> bool:
    return any(pattern.search(text) for pattern in DATE_LIKE_PATTERNS)


def looks_like_time(text: str) -> bool:
    return TIME_PATTERN.search(text) is not None


def has_long_digit_run(text: str) -> bool:
    """Return True for runs of 10+ digits (transaction ids, phone numbers)."""
    return LONG_DIGIT_RUN.search(text) is not None


def has_currency_marker(text: str) -> bool:
    return CURRENCY_MARKER.search(text) is not None


def letter_count(text: str) -> int:
    return sum(1 for ch in text if ch.isalpha())


@dataclass(frozen=True)
class ContextBoost:
    """Confidence added when ``pattern`` is found around the matched line.

    Boosts sharing a ``group`` do not stack: only the largest applicable one
    counts, so "keyword on this line" and "keyword on the next line" are
    alternatives rather than a sum.
    """

    name: str
    pattern: re.Pattern[str]
    amount: float
    scope: Literal["line", "adjacent"] = "line"
    group: str = ""

    def applies(self, lines: Sequence[RawLine], index: int) -> bool:
        if self.scope == "line":
            return self.pattern.search(lines[index].text) is not None
        for neighbour in (index - 1, index + 1):
            if 0 <= neighbour < len(lines) and self.pattern.search(lines[neighbour].text):
                return True
        return False


@dataclass(frozen=True)
class PatternRule:
    """One ordered pattern family: (pattern, base confidence, context boosts)."""

    name: str
    pattern: re.Pattern[str]
    base_confidence: float
    boosts: tuple[ContextBoost, ...] = field(default_factory=tuple)

    def score(self, lines: Sequence[RawLine], index: int) -> float:
        """Base confidence plus the best applicable boost per group, capped at 1.0."""
        best_by_group: dict[str, float] = {}
        for boost in self.boosts:
            if boost.applies(lines, index):
                key = boost.group or boost.name
                best_by_group[key] = max(best_by_group.get(key, 0.0), boost.amount)
        return min(MAX_CONFIDENCE, self.base_confidence + sum(best_by_group.values()))


def make_candidate(
    kind: FieldKind,
    value: Any,
    confidence: float,
    strategy: str,
    line: RawLine,
    matched_text: str = "",
) -> FieldCandidate:
    return FieldCandidate(
        field=kind,
        value=value,
        confidence=round(min(MAX_CONFIDENCE, max(0.0, confidence)), 4),
        strategy=strategy,
        raw_match=line,
        matched_text=matched_text,
    )


class CandidateExtractor(Protocol):
    """A strategy family that proposes candidates for one field."""

    field: FieldKind

    def scan(self, lines: Sequence[RawLine]) -> list[FieldCandidate]: ...
