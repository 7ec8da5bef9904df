"""Core domain models for paylens.

This module provides the data models used throughout the project:
- RawLine, FieldCandidate, ExtractionResult: payment-document extraction
- BOQLineItem, ParsedBOQFields, Product, MatchResult: BOQ reconciliation

Usage:
    from paylens.domain import ExtractionResult, Product
"""

from paylens.domain.boq import (
    AutoMatch,
    BOQLineItem,
    MatchResult,
    ParsedBOQFields,
    Product,
    ReconciliationResult,
)
from paylens.domain.payment import (
    DEFAULT_DESCRIPTION,
    DEFAULT_VENDOR,
    MAX_AMOUNT,
    MIN_AMOUNT,
    ExtractionResult,
    FieldCandidate,
    FieldKind,
    Platform,
    RawLine,
    is_valid_amount,
)

__all__ = [
    "AutoMatch",
    "BOQLineItem",
    "MatchResult",
    "ParsedBOQFields",
    "Product",
    "ReconciliationResult",
    "DEFAULT_DESCRIPTION",
    "DEFAULT_VENDOR",
    "MAX_AMOUNT",
    "MIN_AMOUNT",
    "ExtractionResult",
    "FieldCandidate",
    "FieldKind",
    "Platform",
    "RawLine",
    "is_valid_amount",
]
