"""Turn procurement-document text lines into BOQ line items."""

from __future__ import annotations

import re
from collections.abc import Iterable
from decimal import Decimal, InvalidOperation

from paylens.domain.boq import BOQLineItem
from paylens.extraction.normalize import collapse_whitespace
from paylens.runtime import get_logger

logger = get_logger(__name__)

_MONEY = r"(?:₹|rs\.?)?\s*(\d{1,3}(?:,\d{2,3})+(?:\.\d+)?|\d+(?:\.\d+)?)"

# description  quantity  unit  rate  amount
ROW_PATTERN = re.compile(
    rf"^(?P<description>.+?)\s+(?P<quantity>\d+(?:\.\d+)?)\s+(?P<unit>[A-Za-z][A-Za-z.]*)\s+{_MONEY}\s+{_MONEY}$",
    re.IGNORECASE,
)
_NUMBER = re.compile(r"\d+(?:\.\d+)?")
NON_ITEM_ROW = re.compile(r"^\s*(?:s\.?\s*no\.?|description|item|particulars|sub\s*total|grand\s*total|total)\b", re.IGNORECASE)

DEFAULT_UNIT = "nos"


def _decimal(raw: str) -> Decimal | None:
    try:
        return Decimal(raw.replace(",", ""))
    except InvalidOperation:
        return None


def parse_boq_row(line: str) -> BOQLineItem | None:
    """Parse one row, or return None when the line is not an item row."""
    text = collapse_whitespace(line)
    if not text or NON_ITEM_ROW.match(text):
        return None

    match = ROW_PATTERN.match(text)
    if match:
        quantity = _decimal(match.group("quantity"))
        rate = _decimal(match.group(4))
        amount = _decimal(match.group(5))
        description = match.group("description").strip(" -|:")
        unit = match.group("unit").lower().rstrip(".")
    else:
        # Loose layout: first three numbers are quantity, rate and amount;
        # the last remaining word is the unit.
        numbers = _NUMBER.findall(text)
        words = _NUMBER.sub(" ", text).split()
        if len(numbers) < 3 or not words:
            return None
        quantity, rate, amount = (_decimal(n) for n in numbers[:3])
        description = " ".join(words[:-1]).strip(" -|:") or "Unknown Item"
        unit = words[-1].lower() or DEFAULT_UNIT

    if quantity is None or rate is None or quantity <= 0 or rate < 0:
        return None
    return BOQLineItem(
        description=description,
        quantity=quantity,
        unit=unit,
        rate=rate,
        printed_amount=amount,
    )


def parse_boq_rows(lines: Iterable[str]) -> list[BOQLineItem]:
    """Parse item rows in document order, skipping headers, totals and noise."""
    items: list[BOQLineItem] = []
    for line in lines:
        item = parse_boq_row(line)
        if item is None:
            continue
        if not item.amount_matches_printed():
            logger.warning(
                "BOQ row %r: printed amount %s differs from %s x %s",
                item.description,
                item.printed_amount,
                item.quantity,
                item.rate,
            )
        items.append(item)
    logger.debug("Parsed %d BOQ rows", len(items))
    return items
