"""Split a free-text BOQ description into product name, thickness, size and brand."""

from __future__ import annotations

import re
from collections.abc import Sequence

from paylens.domain.boq import ParsedBOQFields
from paylens.extraction.normalize import collapse_whitespace
from paylens.runtime import load_keyword_rules

THICKNESS_PATTERN = re.compile(r"(\d+)\s*mm", re.IGNORECASE)
SIZE_PATTERN = re.compile(r"(\d+)\s*[x×]\s*(\d+)(\s*feet)?", re.IGNORECASE)
_DASHES = re.compile(r"[-–—]")


def _find_brand(description: str, brands: Sequence[str]) -> str | None:
    for brand in brands:
        match = re.search(re.escape(brand), description, re.IGNORECASE)
        if match:
            return match.group(0)
    return None


def parse_boq_description(description: str, brands: Sequence[str] | None = None) -> ParsedBOQFields:
    """
    Parse "Gurjan Plywood - 18mm - 8 X 4 feet" into its sub-fields.

    Thickness and size are removed from the product name using the exact
    substrings that matched, so nothing else in the text is stripped. Fields
    that cannot be found are None. Never raises.

    Args:
        description: BOQ line description.
        brands: Known brands in priority order; defaults to the configured list.
    """
    if brands is None:
        brands = load_keyword_rules().brands
    description = description or ""

    thickness_match = THICKNESS_PATTERN.search(description)
    size_match = SIZE_PATTERN.search(description)

    thickness = f"{thickness_match.group(1)}mm" if thickness_match else None
    size = None
    if size_match:
        size = f"{size_match.group(1)}x{size_match.group(2)}"
        if size_match.group(3):
            size += " feet"

    product_name = description
    if thickness_match:
        product_name = product_name.replace(thickness_match.group(0), "", 1)
    if size_match:
        product_name = product_name.replace(size_match.group(0), "", 1)
    product_name = collapse_whitespace(_DASHES.sub(" ", product_name))

    return ParsedBOQFields(
        product_name=product_name or None,
        thickness=thickness,
        size=size,
        brand=_find_brand(description, brands),
    )
