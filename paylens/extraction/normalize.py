"""Text normalization shared by the extractors and the BOQ matcher."""

import re

_WHITESPACE = re.compile(r"\s+")
# Keep letters, digits, whitespace and the few symbols that carry meaning in
# payment text (currency, UPI handles, dates, decimals).
_PUNCTUATION_NOISE = re.compile(r"[^\w\s₹@./:\-&]")


def collapse_whitespace(text: str) -> str:
    """Trim and collapse internal whitespace runs to single spaces."""
    return _WHITESPACE.sub(" ", text).strip()


def normalize_for_match(text: str) -> str:
    """Lowercase, trim and collapse whitespace (similarity comparisons)."""
    return collapse_whitespace(text.lower())


def normalize_text(text: str) -> str:
    """Lowercase, strip punctuation noise and collapse whitespace."""
    return collapse_whitespace(_PUNCTUATION_NOISE.sub(" ", text.lower()))


def title_case(text: str) -> str:
    """Capitalize each whitespace-separated word ("FURNILI FURNITURE" -> "Furnili Furniture")."""
    return " ".join(word[:1].upper() + word[1:].lower() for word in collapse_whitespace(text).split(" ") if word)


def clean_lines(texts: list[str]) -> list[str]:
    """Split multi-line blobs, trim each line and drop empties, keeping order."""
    out: list[str] = []
    for text in texts:
        for line in text.splitlines():
            stripped = line.strip()
            if stripped:
                out.append(stripped)
    return out
