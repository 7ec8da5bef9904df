"""Data models for payment-document extraction."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any

MIN_AMOUNT = Decimal("1")
MAX_AMOUNT = Decimal("1000000")

DEFAULT_VENDOR = "Unknown Vendor"
DEFAULT_DESCRIPTION = "Payment"


class FieldKind(str, Enum):
    """Which ExtractionResult field a candidate proposes a value for."""

    AMOUNT = "amount"
    VENDOR = "vendor"
    DATE = "date"
    DESCRIPTION = "description"
    PLATFORM = "platform"
    TRANSACTION_ID = "transaction_id"


class Platform(str, Enum):
    """Payment application or channel inferred from document text."""

    GOOGLEPAY = "googlepay"
    PHONEPE = "phonepe"
    PAYTM = "paytm"
    CRED = "cred"
    UPI = "upi"
    CASH = "cash"
    CARD = "card"
    BANK_TRANSFER = "bank_transfer"
    GENERIC = "generic"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str | None) -> Platform:
        """Coerce a collaborator-supplied string; unrecognized values map to UNKNOWN."""
        if not value:
            return cls.UNKNOWN
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.UNKNOWN


def is_valid_amount(value: Decimal) -> bool:
    """Return True if value is inside the accepted transaction range."""
    return MIN_AMOUNT <= value <= MAX_AMOUNT


@dataclass(frozen=True)
class RawLine:
    """A single line of OCR output, in document order."""

    text: str
    position: int
    engine: str | None = None


@dataclass(frozen=True)
class FieldCandidate:
    """A provisional, confidence-scored value proposed by one strategy."""

    field: FieldKind
    value: Any  # Decimal for amounts, date for dates, str otherwise
    confidence: float  # 0.0 to 1.0
    strategy: str
    raw_match: RawLine
    # Exact substring the strategy matched; raw_match keeps the whole line.
    matched_text: str = ""


def _json_number(value: Decimal) -> int | float:
    if value == value.to_integral_value():
        return int(value)
    return float(value)


@dataclass(frozen=True)
class ExtractionResult:
    """Final structured record for one payment document."""

    amount: Decimal
    vendor: str
    date: date
    platform: Platform
    description: str
    transaction_id: str
    confidence: int  # 0 to 100

    def __post_init__(self) -> None:
        if self.amount != 0 and not is_valid_amount(self.amount):
            raise ValueError(f"Amount out of range: {self.amount}")
        if not 0 <= self.confidence <= 100:
            raise ValueError(f"Confidence out of range: {self.confidence}")

    @classmethod
    def empty(cls, reference_date: date) -> ExtractionResult:
        """Record with every field at its default sentinel and zero confidence."""
        return cls(
            amount=Decimal("0"),
            vendor=DEFAULT_VENDOR,
            date=reference_date,
            platform=Platform.GENERIC,
            description=DEFAULT_DESCRIPTION,
            transaction_id="",
            confidence=0,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-serializable record handed to the collaborator."""
        return {
            "amount": _json_number(self.amount),
            "vendor": self.vendor,
            "date": self.date.isoformat(),
            "platform": self.platform.value,
            "description": self.description,
            "transactionId": self.transaction_id,
            "confidence": self.confidence,
        }
