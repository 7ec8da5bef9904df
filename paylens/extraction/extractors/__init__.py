"""Candidate extractors, one per ExtractionResult field."""

from .amount import AMOUNT_STRATEGIES, AmountExtractor
from .common import CandidateExtractor, has_currency_marker
from .date import DATE_STRATEGIES, DateExtractor
from .description import DESCRIPTION_STRATEGIES, DescriptionExtractor
from .platform import PLATFORM_STRATEGIES, PlatformDetector, detect_platform
from .transaction_id import TRANSACTION_ID_STRATEGIES, TransactionIdExtractor
from .vendor import VENDOR_STRATEGIES, VendorExtractor, clean_vendor_name

__all__ = [
    "AMOUNT_STRATEGIES",
    "AmountExtractor",
    "CandidateExtractor",
    "DATE_STRATEGIES",
    "DateExtractor",
    "DESCRIPTION_STRATEGIES",
    "DescriptionExtractor",
    "PLATFORM_STRATEGIES",
    "PlatformDetector",
    "TRANSACTION_ID_STRATEGIES",
    "TransactionIdExtractor",
    "VENDOR_STRATEGIES",
    "VendorExtractor",
    "clean_vendor_name",
    "detect_platform",
    "has_currency_marker",
]
