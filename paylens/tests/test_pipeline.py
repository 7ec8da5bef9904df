from __future__ import annotations

import random
from datetime import date
from decimal import Decimal

from paylens.domain.payment import ExtractionResult, FieldKind, Platform, RawLine
from paylens.extraction import collect_candidates, extract_payment_fields, to_raw_lines
from paylens.extraction.extractors import AmountExtractor


def test_payment_screenshot_lines(reference_date, keyword_rules) -> None:
    result = extract_payment_fields(
        ["₹672", "Paid to FURNILI FURNITURE", "12/08/2024"],
        reference_date=reference_date,
        rules=keyword_rules,
    )

    assert result.amount == Decimal("672")
    assert result.vendor == "Furnili Furniture"
    assert result.date == date(2024, 8, 12)
    assert result.platform in (Platform.UPI, Platform.GENERIC)
    assert result.description == "Paid to FURNILI FURNITURE"
    assert result.confidence == 92
    assert result.to_dict() == {
        "amount": 672,
        "vendor": "Furnili Furniture",
        "date": "2024-08-12",
        "platform": result.platform.value,
        "description": "Paid to FURNILI FURNITURE",
        "transactionId": "",
        "confidence": 92,
    }


def test_full_google_pay_receipt(reference_date, keyword_rules) -> None:
    lines = [
        "Google Pay",
        "₹1,250",
        "Paid to Sharma Traders",
        "Plywood for site office",
        "12 Aug 2024, 10:45 am",
        "UPI transaction ID",
        "412345678901",
    ]
    result = extract_payment_fields(lines, reference_date=reference_date, rules=keyword_rules)

    assert result.amount == Decimal("1250")
    assert result.vendor == "Sharma Traders"
    assert result.date == date(2024, 8, 12)
    assert result.platform is Platform.GOOGLEPAY
    assert result.description == "Plywood for site office"
    assert result.transaction_id == "412345678901"


def test_empty_input_returns_defaults(reference_date) -> None:
    result = extract_payment_fields([], reference_date=reference_date)

    assert result == ExtractionResult.empty(reference_date)
    assert result.confidence == 0


def test_blank_lines_only_return_defaults(reference_date) -> None:
    assert extract_payment_fields(["  ", ""], reference_date=reference_date).confidence == 0


def test_sent_to_upi_handle_yields_plain_vendor(reference_date, keyword_rules) -> None:
    result = extract_payment_fields(["Rs 500", "Sent to ravi@okaxis"], reference_date=reference_date, rules=keyword_rules)

    assert result.vendor == "Ravi"
    assert result.amount == Decimal("500")


def test_year_on_a_date_line_is_never_the_amount(reference_date, keyword_rules) -> None:
    lines = ["Paid on 12 Aug 2026", "Amount: ₹1,250"]
    candidates = collect_candidates(to_raw_lines(lines), [AmountExtractor()])
    result = extract_payment_fields(lines, reference_date=reference_date, rules=keyword_rules)

    assert Decimal("2026") not in {c.value for c in candidates}
    assert result.amount == Decimal("1250")
    assert result.date == date(2026, 8, 12)


def test_extraction_is_idempotent(reference_date, keyword_rules) -> None:
    lines = ["PhonePe", "₹450", "Paid to Ravi Electricals", "Yesterday", "Ref No 512345678901"]
    first = extract_payment_fields(lines, reference_date=reference_date, rules=keyword_rules)
    second = extract_payment_fields(list(lines), reference_date=reference_date, rules=keyword_rules)
    assert first == second


def test_random_lines_always_produce_valid_record(reference_date, keyword_rules) -> None:
    rng = random.Random(7)
    alphabet = "0123456789 ₹,.:/-abcdefghijklmnopqrstuvwxyzPTR@"
    for _ in range(100):
        lines = ["".join(rng.choice(alphabet) for _ in range(rng.randint(0, 30))) for _ in range(rng.randint(0, 6))]
        result = extract_payment_fields(lines, reference_date=reference_date, rules=keyword_rules)
        assert result.amount == 0 or Decimal("1") <= result.amount <= Decimal("1000000")
        assert 0 <= result.confidence <= 100


class _BrokenExtractor:
    field = FieldKind.VENDOR

    def scan(self, lines):
        raise RuntimeError("boom")


def test_failing_extractor_contributes_nothing() -> None:
    lines = [RawLine("₹500", 0)]
    candidates = collect_candidates(lines, [_BrokenExtractor(), AmountExtractor()])

    assert candidates
    assert all(c.field is FieldKind.AMOUNT for c in candidates)


def test_to_raw_lines_positions_skip_blanks() -> None:
    raw = to_raw_lines(["a", "  ", " b "], engine="tesseract")
    assert [(line.text, line.position, line.engine) for line in raw] == [("a", 0, "tesseract"), ("b", 1, "tesseract")]
