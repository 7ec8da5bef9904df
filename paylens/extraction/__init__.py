"""Payment-document field extraction.

Usage:
    from paylens.extraction import extract_payment_fields

    result = extract_payment_fields(["₹672", "Paid to FURNILI FURNITURE", "12/08/2024"])
"""

from paylens.extraction.pipeline import collect_candidates, extract_payment_fields, to_raw_lines
from paylens.extraction.selector import overall_confidence, rank, select

__all__ = [
    "collect_candidates",
    "extract_payment_fields",
    "overall_confidence",
    "rank",
    "select",
    "to_raw_lines",
]
