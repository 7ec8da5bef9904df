"""Payment platform detection."""

from __future__ import annotations

import re
from collections.abc import Sequence

from paylens.domain.payment import FieldCandidate, FieldKind, Platform, RawLine
from paylens.runtime import get_logger

from .common import make_candidate

logger = get_logger(__name__)

KEYWORD_CONFIDENCE = 0.9
DIGITAL_FALLBACK_CONFIDENCE = 0.4
GENERIC_CONFIDENCE = 0.2
PLATFORM_STRATEGIES = ("keyword", "digital_fallback", "generic_fallback")

# Checked in order; the first platform with a matching keyword wins.
PLATFORM_RULES: tuple[tuple[Platform, re.Pattern[str]], ...] = (
    (Platform.GOOGLEPAY, re.compile(r"google\s*pay|\bgpay\b|\bg\s+pay\b")),
    (Platform.PHONEPE, re.compile(r"phone\s*pe")),
    (Platform.PAYTM, re.compile(r"paytm")),
    (Platform.CRED, re.compile(r"\bcred\b")),
    (Platform.UPI, re.compile(r"\bupi\b|unified\s+payment")),
    (Platform.CASH, re.compile(r"\bcash\b")),
    (Platform.CARD, re.compile(r"\bcard\b|\bvisa\b|mastercard|\brupay\b|\bamex\b")),
    (Platform.BANK_TRANSFER, re.compile(r"bank\s+transfer|\bneft\b|\brtgs\b|\bimps\b|\bbank\b")),
)

# Wording typical of a digital receipt with no named app.
DIGITAL_SIGNALS = re.compile(
    r"[a-z0-9._\-]+@[a-z]{2,}|\d{10,}|\btransaction\b|\bpaid\s+to\b|\bsuccessful(?:ly)?\b"
)


def detect_platform(text: str) -> tuple[Platform, float]:
    """Classify lowercased document text into a platform and its confidence."""
    lowered = text.lower()
    for platform, pattern in PLATFORM_RULES:
        if pattern.search(lowered):
            return platform, KEYWORD_CONFIDENCE
    if DIGITAL_SIGNALS.search(lowered):
        return Platform.UPI, DIGITAL_FALLBACK_CONFIDENCE
    return Platform.GENERIC, GENERIC_CONFIDENCE


class PlatformDetector:
    """Emits exactly one platform candidate for any non-empty document."""

    field = FieldKind.PLATFORM

    def scan(self, lines: Sequence[RawLine]) -> list[FieldCandidate]:
        if not lines:
            return []
        platform, confidence = detect_platform("\n".join(line.text for line in lines))
        origin = lines[0]
        if confidence == KEYWORD_CONFIDENCE:
            pattern = dict(PLATFORM_RULES)[platform]
            origin = next((line for line in lines if pattern.search(line.text.lower())), origin)
            strategy = "keyword"
        elif platform is Platform.UPI:
            strategy = "digital_fallback"
        else:
            strategy = "generic_fallback"
        logger.debug("Platform detected: %s (%s)", platform.value, strategy)
        return [make_candidate(self.field, platform, confidence, strategy, origin)]
