"""Vendor / recipient candidates."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from paylens.domain.payment import FieldCandidate, FieldKind, RawLine
from paylens.extraction.normalize import collapse_whitespace, title_case
from paylens.runtime import get_logger

from .common import letter_count, make_candidate

logger = get_logger(__name__)

MIN_VENDOR_LENGTH = 3
MAX_VENDOR_LENGTH = 50
PROPER_NOUN_BOOST = 0.1
BUSINESS_WORD_BOOST = 0.1

# Payment-app branding that OCR often glues onto the recipient name.
VENDOR_NOISE = re.compile(
    r"\b(?:google\s*pay|g\s*pay|gpay|phone\s*pe|phonepe|paytm|bhim|via|using)\b",
    re.IGNORECASE,
)
# Everything after one of these belongs to the sentence, not the name.
_NAME_TERMINATOR = re.compile(r"\s+(?:on|via|using|for|at|from)\b.*$|[\d₹].*$", re.IGNORECASE)

PROPER_NOUN = re.compile(r"^[A-Z][A-Za-z&.'-]*(?:\s+[A-Z][A-Za-z&.'-]*)*$")
BUSINESS_WORDS = re.compile(
    r"\b(?:pvt|private|ltd|limited|llp|traders?|enterprises?|stores?|mart|agency|agencies"
    r"|industries|furniture|hardware|company|co|corporation|services|solutions|suppliers?)\b",
    re.IGNORECASE,
)
# ALL-CAPS lines that are screen chrome, not names.
METADATA_WORDS = re.compile(
    r"\b(?:upi|transaction|successful|success|completed|paid|payment|received|debited|credited"
    r"|bank|ref|id|to|from|date|time|amount|total|google|phonepe|paytm|bhim|gpay|share|done)\b",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class VendorRule:
    name: str
    pattern: re.Pattern[str]
    base_confidence: float


VENDOR_RULES: tuple[VendorRule, ...] = (
    VendorRule(
        "paid_to",
        re.compile(r"\b(?:paid|sent|transferred|payment)\s+to\s*:?\s*(?P<name>.+)$", re.IGNORECASE),
        0.8,
    ),
    VendorRule(
        "recipient_label",
        re.compile(r"^(?:to|recipient|payee|beneficiary)\b\s*[:\-]?\s*(?P<name>.+)$", re.IGNORECASE),
        0.75,
    ),
    VendorRule("upi_id", re.compile(r"\b(?P<name>[a-z][a-z0-9._\-]{1,})@[a-z]{2,}\b", re.IGNORECASE), 0.65),
    VendorRule("caps_business", re.compile(r"^(?P<name>[A-Z][A-Z&.' ]{2,48}[A-Z.])$"), 0.55),
)

VENDOR_STRATEGIES = tuple(rule.name for rule in VENDOR_RULES)


def clean_vendor_name(raw: str) -> str | None:
    """Strip platform noise, title-case and validate a captured name."""
    cleaned = collapse_whitespace(VENDOR_NOISE.sub(" ", raw)).strip(" :-,.")
    if not MIN_VENDOR_LENGTH <= len(cleaned) <= MAX_VENDOR_LENGTH:
        return None
    if letter_count(cleaned) < 2:
        return None
    return title_case(cleaned)


def _upi_handle_to_name(handle: str) -> str:
    # "furnili.furniture99" -> "furnili furniture"
    return " ".join(part for part in re.split(r"[._\-\d]+", handle) if part)


def _strip_upi_handle(name: str) -> str:
    # "ravi@okaxis" -> "ravi"; "Ravi Kumar ravi.k@okaxis" -> "Ravi Kumar"
    head = name.split("@", 1)[0].strip()
    words = head.split()
    if len(words) <= 1:
        return _upi_handle_to_name(head)
    return " ".join(words[:-1])


def _captured_name(rule: VendorRule, match: re.Match[str]) -> str | None:
    name = match.group("name").strip()
    if rule.name in ("paid_to", "recipient_label"):
        if "@" in name:
            name = _strip_upi_handle(name)
        name = _NAME_TERMINATOR.sub("", name).strip()
    elif rule.name == "upi_id":
        name = _upi_handle_to_name(name)
    elif rule.name == "caps_business":
        if len(name.split()) > 5 or METADATA_WORDS.search(name):
            return None
    return name or None


class VendorExtractor:
    """Proposes recipient names from "paid to" sentences, labels, UPI ids and shop-name lines."""

    field = FieldKind.VENDOR

    def __init__(self, rules: Sequence[VendorRule] = VENDOR_RULES) -> None:
        self.rules = tuple(rules)

    def scan(self, lines: Sequence[RawLine]) -> list[FieldCandidate]:
        candidates: list[FieldCandidate] = []
        for line in lines:
            text = line.text.strip()
            for rule in self.rules:
                for match in rule.pattern.finditer(text):
                    captured = _captured_name(rule, match)
                    if captured is None:
                        continue
                    value = clean_vendor_name(captured)
                    if value is None:
                        continue
                    confidence = rule.base_confidence
                    if rule.name == "caps_business" and BUSINESS_WORDS.search(captured):
                        confidence += BUSINESS_WORD_BOOST
                    if PROPER_NOUN.match(captured):
                        confidence += PROPER_NOUN_BOOST
                    candidates.append(
                        make_candidate(self.field, value, confidence, rule.name, line, matched_text=captured)
                    )
        logger.debug("Vendor candidates: %s", [(c.value, c.confidence, c.strategy) for c in candidates])
        return candidates
