"""Pick one winning candidate per field and score the whole record."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping, Sequence
from datetime import date
from decimal import Decimal

from paylens.domain.payment import (
    DEFAULT_DESCRIPTION,
    DEFAULT_VENDOR,
    ExtractionResult,
    FieldCandidate,
    FieldKind,
    Platform,
    is_valid_amount,
)
from paylens.extraction.extractors import (
    AMOUNT_STRATEGIES,
    DATE_STRATEGIES,
    DESCRIPTION_STRATEGIES,
    PLATFORM_STRATEGIES,
    TRANSACTION_ID_STRATEGIES,
    VENDOR_STRATEGIES,
    has_currency_marker,
)
from paylens.extraction.extractors.vendor import PROPER_NOUN

STRATEGY_ORDER: dict[FieldKind, tuple[str, ...]] = {
    FieldKind.AMOUNT: AMOUNT_STRATEGIES,
    FieldKind.VENDOR: VENDOR_STRATEGIES,
    FieldKind.DATE: DATE_STRATEGIES,
    FieldKind.DESCRIPTION: DESCRIPTION_STRATEGIES,
    FieldKind.PLATFORM: PLATFORM_STRATEGIES,
    FieldKind.TRANSACTION_ID: TRANSACTION_ID_STRATEGIES,
}

# Record confidence weights; description, platform and id do not contribute.
CONFIDENCE_WEIGHTS: dict[FieldKind, float] = {
    FieldKind.AMOUNT: 0.4,
    FieldKind.VENDOR: 0.4,
    FieldKind.DATE: 0.2,
}


def _strategy_rank(candidate: FieldCandidate) -> int:
    order = STRATEGY_ORDER.get(candidate.field, ())
    try:
        return order.index(candidate.strategy)
    except ValueError:
        return len(order)


def _field_preference(candidate: FieldCandidate) -> int:
    """0 when the field-specific tie-break favours this candidate, else 1."""
    if candidate.field is FieldKind.AMOUNT:
        return 0 if has_currency_marker(candidate.raw_match.text) else 1
    if candidate.field is FieldKind.VENDOR:
        return 0 if PROPER_NOUN.match(candidate.matched_text or "") else 1
    if candidate.field is FieldKind.DATE:
        return _strategy_rank(candidate)
    return 0


def _sort_key(candidate: FieldCandidate) -> tuple[float, int, int, int]:
    return (
        -candidate.confidence,
        _field_preference(candidate),
        candidate.raw_match.position,
        _strategy_rank(candidate),
    )


def rank(candidates: Iterable[FieldCandidate]) -> list[FieldCandidate]:
    """Order candidates best-first; the order is total and deterministic."""
    usable = [
        c
        for c in candidates
        if not (c.field is FieldKind.AMOUNT and not is_valid_amount(Decimal(c.value)))
    ]
    return sorted(usable, key=_sort_key)


def select(field: FieldKind, candidates: Iterable[FieldCandidate]) -> FieldCandidate | None:
    """Return the winning candidate for ``field`` or None when there is none."""
    ranked = rank(c for c in candidates if c.field is field)
    return ranked[0] if ranked else None


def overall_confidence(winners: Mapping[FieldKind, FieldCandidate | None]) -> int:
    """Weighted 0-100 record confidence from the winning candidates."""
    total = 0.0
    for field, weight in CONFIDENCE_WEIGHTS.items():
        winner = winners.get(field)
        if winner is not None:
            total += weight * winner.confidence
    # Round half up; round() would bank 0.5 down to even.
    score = math.floor(total * 100 + 0.5)
    return max(0, min(100, score))


def build_result(candidates: Sequence[FieldCandidate], reference_date: date) -> ExtractionResult:
    """Select every field, fall back to defaults and assemble the record."""
    winners = {field: select(field, candidates) for field in FieldKind}

    def value_or(field: FieldKind, default):
        winner = winners[field]
        return default if winner is None else winner.value

    return ExtractionResult(
        amount=value_or(FieldKind.AMOUNT, Decimal("0")),
        vendor=value_or(FieldKind.VENDOR, DEFAULT_VENDOR),
        date=value_or(FieldKind.DATE, reference_date),
        platform=value_or(FieldKind.PLATFORM, Platform.GENERIC),
        description=value_or(FieldKind.DESCRIPTION, DEFAULT_DESCRIPTION),
        transaction_id=value_or(FieldKind.TRANSACTION_ID, ""),
        confidence=overall_confidence(winners),
    )
