from __future__ import annotations

import pytest

from paylens.domain.payment import Platform, RawLine
from paylens.extraction.extractors import PlatformDetector, detect_platform


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Google Pay\nPaid to Ramesh", Platform.GOOGLEPAY),
        ("Payment via PhonePe", Platform.PHONEPE),
        ("Paytm Wallet", Platform.PAYTM),
        ("CRED bill payment", Platform.CRED),
        ("UPI transaction ID 1234", Platform.UPI),
        ("Paid in cash", Platform.CASH),
        ("Visa ending 4242", Platform.CARD),
        ("NEFT to HDFC Bank", Platform.BANK_TRANSFER),
    ],
)
def test_keyword_platforms(text: str, expected: Platform) -> None:
    platform, confidence = detect_platform(text)
    assert platform is expected
    assert confidence == pytest.approx(0.9)


def test_priority_order_prefers_app_over_channel() -> None:
    assert detect_platform("GPay UPI payment")[0] is Platform.GOOGLEPAY


def test_credited_is_not_cred() -> None:
    assert detect_platform("Amount credited")[0] is Platform.GENERIC


def test_digital_receipt_without_app_name_defaults_to_upi() -> None:
    assert detect_platform("Paid to Ramesh\n₹500") == (Platform.UPI, pytest.approx(0.4))


def test_plain_text_is_generic() -> None:
    assert detect_platform("Tea and snacks") == (Platform.GENERIC, pytest.approx(0.2))


def test_detector_emits_exactly_one_candidate() -> None:
    lines = [RawLine("₹500", 0), RawLine("Paid using PhonePe", 1)]
    candidates = PlatformDetector().scan(lines)

    assert len(candidates) == 1
    assert candidates[0].value is Platform.PHONEPE
    assert candidates[0].raw_match.position == 1
    assert PlatformDetector().scan([]) == []
