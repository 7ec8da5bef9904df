"""Amount candidates from payment-document lines."""

from __future__ import annotations

import re
from collections.abc import Sequence
from decimal import Decimal, InvalidOperation

from paylens.domain.payment import FieldCandidate, FieldKind, RawLine, is_valid_amount
from paylens.runtime import get_logger

from .common import (
    CURRENCY_MARKER,
    PAYMENT_KEYWORDS,
    ContextBoost,
    PatternRule,
    has_long_digit_run,
    looks_like_date,
    looks_like_time,
    make_candidate,
)

logger = get_logger(__name__)

# Indian (1,23,456) and western (123,456) grouping, or a plain number.
_NUMBER = r"(\d{1,3}(?:,\d{2,3})+(?:\.\d{1,2})?|\d+(?:\.\d{1,2})?)"

CURRENCY_BOOST = ContextBoost("currency_marker", CURRENCY_MARKER, 0.25)
KEYWORD_LINE_BOOST = ContextBoost("keyword_on_line", PAYMENT_KEYWORDS, 0.2, group="keyword")
KEYWORD_ADJACENT_BOOST = ContextBoost("keyword_adjacent_line", PAYMENT_KEYWORDS, 0.15, scope="adjacent", group="keyword")
_BOOSTS = (CURRENCY_BOOST, KEYWORD_LINE_BOOST, KEYWORD_ADJACENT_BOOST)

AMOUNT_RULES: tuple[PatternRule, ...] = (
    PatternRule("currency_prefixed", re.compile(rf"₹\s*{_NUMBER}"), 0.8, _BOOSTS),
    PatternRule(
        "rupee_word_prefixed",
        re.compile(rf"\b(?:rs(?![a-z])|inr(?![a-z])|rupees?\b)\.?\s*[:\-]?\s*{_NUMBER}", re.IGNORECASE),
        0.75,
        _BOOSTS,
    ),
    PatternRule(
        "keyword_adjacent",
        re.compile(
            rf"\b(?:paid|amount|total|sent|received|bill|debited)\b[^\d₹\n]{{0,12}}₹?\s*{_NUMBER}",
            re.IGNORECASE,
        ),
        0.7,
        _BOOSTS,
    ),
    PatternRule(
        "currency_suffixed",
        re.compile(rf"{_NUMBER}\s*(?:₹|/-|\brs(?![a-z])\.?|\brupees?\b)", re.IGNORECASE),
        0.65,
        _BOOSTS,
    ),
    PatternRule("standalone_display", re.compile(rf"^[\s₹]*{_NUMBER}\s*(?:/-)?\s*$"), 0.6, _BOOSTS),
    PatternRule("comma_grouped", re.compile(r"(?<![\d,.])(\d{1,3}(?:,\d{2,3})+(?:\.\d{1,2})?)(?![\d,])"), 0.55, _BOOSTS),
    PatternRule("bare_number", re.compile(r"(?<![\d,.])(\d{1,7}(?:\.\d{1,2})?)(?![\d,]|\.\d)"), 0.5, _BOOSTS),
)

AMOUNT_STRATEGIES = tuple(rule.name for rule in AMOUNT_RULES)

# Words that mark a line's bare numbers as something other than money.
NON_AMOUNT_INDICATORS = re.compile(
    r"\b(?:phone|mobile|mob|account|a/c|card\s*no|ref|reference|pin|otp|code|id|qty|no\.)\b",
    re.IGNORECASE,
)


def parse_amount(raw: str) -> Decimal | None:
    """Parse "1,250.50" into Decimal, returning None when it is not a number."""
    try:
        return Decimal(raw.replace(",", ""))
    except InvalidOperation:
        return None


def is_amount_excluded_line(text: str) -> bool:
    """Dates, times and long id runs are never scanned for amounts."""
    return looks_like_date(text) or looks_like_time(text) or has_long_digit_run(text)


class AmountExtractor:
    """Runs every amount pattern family over every eligible line."""

    field = FieldKind.AMOUNT

    def __init__(self, rules: Sequence[PatternRule] = AMOUNT_RULES) -> None:
        self.rules = tuple(rules)

    def scan(self, lines: Sequence[RawLine]) -> list[FieldCandidate]:
        candidates: list[FieldCandidate] = []
        for index, line in enumerate(lines):
            if is_amount_excluded_line(line.text):
                continue
            for rule in self.rules:
                if rule.name == "bare_number" and NON_AMOUNT_INDICATORS.search(line.text):
                    continue
                for match in rule.pattern.finditer(line.text):
                    value = parse_amount(match.group(1))
                    if value is None or not is_valid_amount(value):
                        continue
                    candidates.append(
                        make_candidate(
                            self.field,
                            value,
                            rule.score(lines, index),
                            rule.name,
                            line,
                            matched_text=match.group(0).strip(),
                        )
                    )
        logger.debug("Amount candidates: %s", [(str(c.value), c.confidence, c.strategy) for c in candidates])
        return candidates
