"""Transaction / UTR reference candidates."""

from __future__ import annotations

import re
from collections.abc import Sequence

from paylens.domain.payment import FieldCandidate, FieldKind, RawLine
from paylens.runtime import get_logger

from .common import make_candidate

logger = get_logger(__name__)

TRANSACTION_LABEL = re.compile(
    r"\b(?:transaction\s*(?:id|no\.?|number)|txn\s*(?:id|no\.?)?|utr(?:\s*no\.?)?|upi\s*ref(?:erence)?\s*(?:no\.?|id)?"
    r"|ref(?:erence)?\s*(?:no\.?|id|number))",
    re.IGNORECASE,
)
LABELLED = re.compile(TRANSACTION_LABEL.pattern + r"\s*[:#\-]?\s*(?P<id>[A-Z0-9]{8,})\b", re.IGNORECASE)
LONG_NUMERIC = re.compile(r"(?<![\d.,])(?P<id>\d{10,})(?![\d.,]\d)")
ALPHANUMERIC_REF = re.compile(r"\b(?P<id>[A-Z]{1,4}\d{8,})\b")

LABELLED_CONFIDENCE = 0.9
LONG_NUMERIC_CONFIDENCE = 0.7
ALPHANUMERIC_CONFIDENCE = 0.6
UPI_REFERENCE_BOOST = 0.1  # UPI references are exactly 12 digits
LABEL_ON_PREVIOUS_LINE_BOOST = 0.15

TRANSACTION_ID_STRATEGIES = ("labelled", "long_numeric", "alphanumeric_ref")


class TransactionIdExtractor:
    """Finds labelled ids, long numeric references and letter-prefixed references."""

    field = FieldKind.TRANSACTION_ID

    def scan(self, lines: Sequence[RawLine]) -> list[FieldCandidate]:
        candidates: list[FieldCandidate] = []
        for index, line in enumerate(lines):
            text = line.text
            for match in LABELLED.finditer(text):
                value = match.group("id").upper()
                if any(ch.isdigit() for ch in value):
                    candidates.append(
                        make_candidate(self.field, value, LABELLED_CONFIDENCE, "labelled", line, match.group(0))
                    )

            # A label alone on the previous line ("UPI Ref No." / "123456789012").
            label_above = index > 0 and TRANSACTION_LABEL.search(lines[index - 1].text) is not None
            context = LABEL_ON_PREVIOUS_LINE_BOOST if label_above else 0.0

            for match in LONG_NUMERIC.finditer(text):
                value = match.group("id")
                confidence = LONG_NUMERIC_CONFIDENCE + context
                if len(value) == 12:
                    confidence += UPI_REFERENCE_BOOST
                candidates.append(make_candidate(self.field, value, confidence, "long_numeric", line, value))

            for match in ALPHANUMERIC_REF.finditer(text):
                value = match.group("id")
                candidates.append(
                    make_candidate(
                        self.field, value, ALPHANUMERIC_CONFIDENCE + context, "alphanumeric_ref", line, value
                    )
                )
        logger.debug("Transaction id candidates: %s", [(c.value, c.confidence, c.strategy) for c in candidates])
        return candidates
