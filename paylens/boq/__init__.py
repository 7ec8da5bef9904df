"""BOQ description parsing and catalog reconciliation."""

from paylens.boq.description_parser import parse_boq_description
from paylens.boq.matcher import (
    DEFAULT_CONFIG,
    MatchConfig,
    best_match,
    find_product_matches,
    reconcile_boq_items,
    score_product,
)
from paylens.boq.rows import parse_boq_row, parse_boq_rows
from paylens.boq.similarity import similarity

__all__ = [
    "parse_boq_description",
    "DEFAULT_CONFIG",
    "MatchConfig",
    "best_match",
    "find_product_matches",
    "reconcile_boq_items",
    "score_product",
    "parse_boq_row",
    "parse_boq_rows",
    "similarity",
]
