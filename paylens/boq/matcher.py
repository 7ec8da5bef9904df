"""Match BOQ line items to catalog products.

Each product is scored independently against the parsed BOQ description:

- name, thickness, size and brand contribute ``similarity * weight`` when both
  sides have the field and the similarity clears that field's minimum
- a similar unit adds a flat bonus
- products are kept only when at least one weighted field contributed and
  the total clears ``min_total_confidence``

Results are ranked by confidence; ties keep catalog order.
"""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import Executor, ThreadPoolExecutor
from dataclasses import dataclass

from paylens.boq.description_parser import parse_boq_description
from paylens.boq.similarity import similarity
from paylens.domain.boq import AutoMatch, BOQLineItem, MatchResult, ParsedBOQFields, Product, ReconciliationResult
from paylens.runtime import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class MatchConfig:
    """Weights and thresholds for catalog matching."""

    name_weight: float = 0.50
    thickness_weight: float = 0.25
    size_weight: float = 0.15
    brand_weight: float = 0.10

    # A field contributes only when its similarity is strictly above its minimum.
    name_min: float = 30.0
    thickness_min: float = 70.0
    size_min: float = 60.0
    brand_min: float = 60.0
    unit_min: float = 70.0
    unit_bonus: float = 5.0

    min_total_confidence: float = 25.0
    max_confidence: float = 100.0
    auto_match_threshold: float = 70.0


DEFAULT_CONFIG = MatchConfig()


def score_product(
    item: BOQLineItem,
    parsed: ParsedBOQFields,
    product: Product,
    config: MatchConfig = DEFAULT_CONFIG,
) -> MatchResult | None:
    """Score one product, or return None when it does not qualify."""
    fields = (
        ("Name", parsed.product_name, product.name, config.name_weight, config.name_min),
        ("Thickness", parsed.thickness, product.thickness, config.thickness_weight, config.thickness_min),
        ("Size", parsed.size, product.size, config.size_weight, config.size_min),
        ("Brand", parsed.brand, product.brand, config.brand_weight, config.brand_min),
    )
    total = 0.0
    match_count = 0
    matched_fields: list[str] = []

    for label, boq_value, product_value, weight, minimum in fields:
        if not boq_value or not product_value:
            continue
        score = similarity(boq_value, product_value)
        if score > minimum:
            total += score * weight
            match_count += 1
            matched_fields.append(f"{label}: {score:.0f}%")

    if item.unit and product.unit:
        unit_score = similarity(item.unit, product.unit)
        if unit_score > config.unit_min:
            total += config.unit_bonus
            matched_fields.append(f"Unit: {unit_score:.0f}%")

    if match_count == 0 or total <= config.min_total_confidence:
        return None
    return MatchResult(
        product_id=product.id,
        confidence=min(config.max_confidence, total),
        matched_fields=matched_fields,
    )


def find_product_matches(
    item: BOQLineItem,
    catalog: Sequence[Product],
    config: MatchConfig | None = None,
    executor: Executor | None = None,
) -> list[MatchResult]:
    """
    Rank catalog products for one BOQ item, best first.

    Args:
        item: BOQ line item; its description is parsed once.
        catalog: Full product catalog.
        config: Matching weights and thresholds.
        executor: Optional executor to score products in parallel. Results
            are collected in catalog order, so the ranking is the same either way.

    Returns:
        Qualifying matches sorted by confidence (highest first). Empty when
        nothing qualifies.
    """
    config = config or DEFAULT_CONFIG
    parsed = parse_boq_description(item.description)

    if executor is not None:
        futures = [executor.submit(score_product, item, parsed, product, config) for product in catalog]
        scored = [future.result() for future in futures]
    else:
        scored = [score_product(item, parsed, product, config) for product in catalog]

    matches = [m for m in scored if m is not None]
    # list.sort is stable: equal confidences keep catalog order.
    matches.sort(key=lambda m: m.confidence, reverse=True)
    return matches


def best_match(
    item: BOQLineItem,
    catalog: Sequence[Product],
    config: MatchConfig | None = None,
    executor: Executor | None = None,
) -> MatchResult | None:
    matches = find_product_matches(item, catalog, config, executor)
    return matches[0] if matches else None


def reconcile_boq_items(
    items: Sequence[BOQLineItem],
    catalog: Sequence[Product],
    config: MatchConfig | None = None,
    max_workers: int | None = None,
) -> ReconciliationResult:
    """Auto-match items whose best match reaches the threshold; leave the rest unmatched."""
    config = config or DEFAULT_CONFIG
    result = ReconciliationResult()

    def reconcile_with(executor: Executor | None) -> None:
        for item in items:
            match = best_match(item, catalog, config, executor)
            if match is not None and match.confidence >= config.auto_match_threshold:
                result.auto_matched.append(AutoMatch(item=item, match=match))
            else:
                result.unmatched.append(item)

    if max_workers is not None and max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            reconcile_with(executor)
    else:
        reconcile_with(None)

    logger.info(
        "Reconciled %d BOQ items: %d auto-matched, %d unmatched",
        len(items),
        len(result.auto_matched),
        len(result.unmatched),
    )
    return result
