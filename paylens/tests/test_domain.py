from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from paylens.domain import BOQLineItem, ExtractionResult, MatchResult, Platform, Product


def test_empty_result_uses_default_sentinels() -> None:
    result = ExtractionResult.empty(date(2024, 8, 20))

    assert result.to_dict() == {
        "amount": 0,
        "vendor": "Unknown Vendor",
        "date": "2024-08-20",
        "platform": "generic",
        "description": "Payment",
        "transactionId": "",
        "confidence": 0,
    }


def test_to_dict_keeps_fractional_amounts() -> None:
    result = ExtractionResult(
        amount=Decimal("1250.50"),
        vendor="Ramesh",
        date=date(2024, 8, 12),
        platform=Platform.PHONEPE,
        description="Payment",
        transaction_id="123456789012",
        confidence=80,
    )
    assert result.to_dict()["amount"] == 1250.5
    assert result.to_dict()["platform"] == "phonepe"


@pytest.mark.parametrize("amount", [Decimal("0.5"), Decimal("1000000.01")])
def test_result_rejects_out_of_range_amount(amount: Decimal) -> None:
    with pytest.raises(ValueError):
        ExtractionResult(
            amount=amount,
            vendor="X",
            date=date(2024, 1, 1),
            platform=Platform.GENERIC,
            description="Payment",
            transaction_id="",
            confidence=10,
        )


def test_result_rejects_confidence_above_100() -> None:
    with pytest.raises(ValueError):
        ExtractionResult(
            amount=Decimal("10"),
            vendor="X",
            date=date(2024, 1, 1),
            platform=Platform.GENERIC,
            description="Payment",
            transaction_id="",
            confidence=101,
        )


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("PhonePe", Platform.PHONEPE),
        (" bank_transfer ", Platform.BANK_TRANSFER),
        ("bitcoin", Platform.UNKNOWN),
        (None, Platform.UNKNOWN),
    ],
)
def test_platform_parse(raw: str | None, expected: Platform) -> None:
    assert Platform.parse(raw) is expected


def test_boq_item_amount_tolerance() -> None:
    item = BOQLineItem("Plywood", Decimal("10"), "sheets", Decimal("2500"), printed_amount=Decimal("25150"))
    assert item.amount == Decimal("25000")
    # 1% of 25000 is 250, so a 150 difference is accepted.
    assert item.amount_matches_printed()

    small = BOQLineItem("Screws", Decimal("2"), "box", Decimal("10"), printed_amount=Decimal("21.50"))
    assert not small.amount_matches_printed()


def test_product_from_camel_case_dict() -> None:
    product = Product.from_dict(
        {
            "id": 7,
            "name": "Plywood",
            "category": "Boards",
            "brand": "Gurjan",
            "size": "8x4 feet",
            "thickness": "18mm",
            "unit": "sheets",
            "pricePerUnit": "2,450.00",
            "currentStock": 12,
        }
    )
    assert product.id == 7
    assert product.price_per_unit == Decimal("2450.00")
    assert product.current_stock == Decimal("12")


def test_match_result_to_dict() -> None:
    match = MatchResult(product_id=3, confidence=97.5, matched_fields=["Name: 85%"])
    assert match.to_dict() == {"productId": 3, "confidence": 97.5, "matchedFields": ["Name: 85%"]}
