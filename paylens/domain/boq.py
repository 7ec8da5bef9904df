"""Data models for bill-of-quantities reconciliation."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any

# Printed BOQ amounts are accepted within max(absolute, percent * computed).
AMOUNT_TOLERANCE = Decimal("1.00")
AMOUNT_TOLERANCE_PERCENT = Decimal("0.01")


def _to_decimal(value: Any, default: str = "0") -> Decimal:
    if value is None or value == "":
        return Decimal(default)
    try:
        return Decimal(str(value).replace(",", ""))
    except InvalidOperation:
        return Decimal(default)


@dataclass
class BOQLineItem:
    """One row of a procurement document."""

    description: str
    quantity: Decimal
    unit: str
    rate: Decimal
    printed_amount: Decimal | None = None

    @property
    def amount(self) -> Decimal:
        return self.quantity * self.rate

    def amount_matches_printed(
        self,
        tolerance: Decimal = AMOUNT_TOLERANCE,
        tolerance_percent: Decimal = AMOUNT_TOLERANCE_PERCENT,
    ) -> bool:
        """Return True if no amount was printed or it agrees with quantity x rate."""
        if self.printed_amount is None:
            return True
        computed = self.amount
        allowed = max(tolerance, abs(computed) * tolerance_percent)
        return abs(computed - self.printed_amount) <= allowed

    def to_dict(self) -> dict[str, Any]:
        return {
            "description": self.description,
            "quantity": float(self.quantity),
            "unit": self.unit,
            "rate": float(self.rate),
            "amount": float(self.amount),
        }


@dataclass(frozen=True)
class ParsedBOQFields:
    """Structured view of a BOQ description. None means the field is absent."""

    product_name: str | None = None
    thickness: str | None = None
    size: str | None = None
    brand: str | None = None


@dataclass(frozen=True)
class Product:
    """Catalog product as supplied by the collaborator (read-only)."""

    id: int
    name: str
    category: str = ""
    brand: str = ""
    size: str = ""
    thickness: str = ""
    unit: str = ""
    price_per_unit: Decimal = Decimal("0")
    current_stock: Decimal = Decimal("0")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Product:
        """Build a Product from the collaborator's camelCase catalog JSON."""
        return cls(
            id=int(data["id"]),
            name=str(data.get("name") or ""),
            category=str(data.get("category") or ""),
            brand=str(data.get("brand") or ""),
            size=str(data.get("size") or ""),
            thickness=str(data.get("thickness") or ""),
            unit=str(data.get("unit") or ""),
            price_per_unit=_to_decimal(data.get("pricePerUnit")),
            current_stock=_to_decimal(data.get("currentStock")),
        )


@dataclass
class MatchResult:
    """Score of one catalog product against one BOQ item."""

    product_id: int
    confidence: float  # 0.0 to 100.0
    matched_fields: list[str] = field(default_factory=list)  # e.g. "Name: 85%"

    def to_dict(self) -> dict[str, Any]:
        return {
            "productId": self.product_id,
            "confidence": self.confidence,
            "matchedFields": list(self.matched_fields),
        }


@dataclass(frozen=True)
class AutoMatch:
    """A BOQ item linked to its best catalog match without manual review."""

    item: BOQLineItem
    match: MatchResult


@dataclass
class ReconciliationResult:
    """Partition of a batch of BOQ items into auto-matched and unmatched."""

    auto_matched: list[AutoMatch] = field(default_factory=list)
    unmatched: list[BOQLineItem] = field(default_factory=list)
