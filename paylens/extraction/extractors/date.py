"""Transaction date candidates."""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date, timedelta

from paylens.domain.payment import FieldCandidate, FieldKind, RawLine
from paylens.extraction.date_utils import MONTH_NAME_PATTERN, month_from_name, safe_date
from paylens.runtime import get_logger

from .common import make_candidate

logger = get_logger(__name__)

DATE_KEYWORD = re.compile(r"\b(?:date|dated|on|paid\s+on)\b", re.IGNORECASE)
DATE_KEYWORD_BOOST = 0.1


def _two_digit_year(raw: str) -> int:
    year = int(raw)
    return year + 2000 if len(raw) == 2 else year


def _from_iso(m: re.Match[str], _reference: date) -> date | None:
    return safe_date(int(m.group("y")), int(m.group("m")), int(m.group("d")))


def _from_dmy(m: re.Match[str], _reference: date) -> date | None:
    # Day first: Indian receipts never print month-first numeric dates.
    return safe_date(_two_digit_year(m.group("y")), int(m.group("m")), int(m.group("d")))


def _from_month_name(m: re.Match[str], _reference: date) -> date | None:
    month = month_from_name(m.group("mon"))
    if month is None:
        return None
    return safe_date(_two_digit_year(m.group("y")), month, int(m.group("d")))


def _from_relative(m: re.Match[str], reference: date) -> date | None:
    if m.group("word").lower() == "yesterday":
        return reference - timedelta(days=1)
    return reference


@dataclass(frozen=True)
class DateRule:
    name: str
    pattern: re.Pattern[str]
    base_confidence: float
    build: Callable[[re.Match[str], date], date | None]


DATE_RULES: tuple[DateRule, ...] = (
    DateRule("iso", re.compile(r"\b(?P<y>\d{4})-(?P<m>\d{1,2})-(?P<d>\d{1,2})\b"), 0.85, _from_iso),
    DateRule("dmy_slash", re.compile(r"\b(?P<d>\d{1,2})/(?P<m>\d{1,2})/(?P<y>\d{4}|\d{2})\b"), 0.8, _from_dmy),
    DateRule("dmy_dash", re.compile(r"\b(?P<d>\d{1,2})-(?P<m>\d{1,2})-(?P<y>\d{4}|\d{2})\b"), 0.8, _from_dmy),
    DateRule(
        "day_month_name",
        re.compile(
            rf"\b(?P<d>\d{{1,2}})(?:st|nd|rd|th)?\s+(?P<mon>{MONTH_NAME_PATTERN}),?\s+(?P<y>\d{{4}}|\d{{2}})\b",
            re.IGNORECASE,
        ),
        0.75,
        _from_month_name,
    ),
    DateRule(
        "month_name_day",
        re.compile(
            rf"\b(?P<mon>{MONTH_NAME_PATTERN})\s+(?P<d>\d{{1,2}})(?:st|nd|rd|th)?,?\s+(?P<y>\d{{4}})\b",
            re.IGNORECASE,
        ),
        0.7,
        _from_month_name,
    ),
    DateRule("relative", re.compile(r"\b(?P<word>today|yesterday)\b", re.IGNORECASE), 0.5, _from_relative),
)

DATE_STRATEGIES = tuple(rule.name for rule in DATE_RULES)


class DateExtractor:
    """Parses every recognised date notation; ``reference_date`` anchors relative words."""

    field = FieldKind.DATE

    def __init__(self, reference_date: date | None = None, rules: Sequence[DateRule] = DATE_RULES) -> None:
        self.reference_date = reference_date or date.today()
        self.rules = tuple(rules)

    def scan(self, lines: Sequence[RawLine]) -> list[FieldCandidate]:
        candidates: list[FieldCandidate] = []
        for line in lines:
            boost = DATE_KEYWORD_BOOST if DATE_KEYWORD.search(line.text) else 0.0
            for rule in self.rules:
                for match in rule.pattern.finditer(line.text):
                    value = rule.build(match, self.reference_date)
                    if value is None:
                        continue
                    candidates.append(
                        make_candidate(
                            self.field,
                            value,
                            rule.base_confidence + boost,
                            rule.name,
                            line,
                            matched_text=match.group(0),
                        )
                    )
        logger.debug("Date candidates: %s", [(c.value.isoformat(), c.confidence, c.strategy) for c in candidates])
        return candidates
