from __future__ import annotations

from decimal import Decimal

from paylens.boq import parse_boq_row, parse_boq_rows


def test_tabular_row_with_currency_and_grouping() -> None:
    item = parse_boq_row("Gurjan Plywood 18mm 10 sheets ₹2,500 ₹25,000")

    assert item is not None
    assert item.description == "Gurjan Plywood 18mm"
    assert item.quantity == Decimal("10")
    assert item.unit == "sheets"
    assert item.rate == Decimal("2500")
    assert item.printed_amount == Decimal("25000")
    assert item.amount_matches_printed()


def test_rs_prefixed_rates() -> None:
    item = parse_boq_row("Hettich hinge 12 Nos. Rs.150 Rs.1800")

    assert item is not None
    assert (item.description, item.unit, item.rate) == ("Hettich hinge", "nos", Decimal("150"))


def test_loose_row_falls_back_to_first_three_numbers() -> None:
    item = parse_boq_row("Hinges 4 5 nos 20")

    assert item is not None
    assert (item.description, item.quantity, item.unit, item.rate, item.printed_amount) == (
        "Hinges",
        Decimal("4"),
        "nos",
        Decimal("5"),
        Decimal("20"),
    )


def test_headers_totals_and_zero_quantity_are_skipped() -> None:
    lines = [
        "Description Qty Unit Rate Amount",
        "Teak Wood 2 cft 1000 5000",
        "Screws 0 box 10 0",
        "Grand Total 5,000",
        "",
    ]
    items = parse_boq_rows(lines)

    assert [item.description for item in items] == ["Teak Wood"]
    # printed 5000 vs computed 2000: kept, but flagged
    assert not items[0].amount_matches_printed()
