"""0-100 string similarity for catalog matching."""

from rapidfuzz.distance import Levenshtein

from paylens.extraction.normalize import normalize_for_match

EXACT_SCORE = 100.0
CONTAINMENT_SCORE = 85.0


def similarity(a: str | None, b: str | None) -> float:
    """
    Score how alike two strings are, from 0 (unrelated) to 100 (identical).

    Both sides are lowercased, trimmed and whitespace-collapsed first. When
    one string contains the other the score is fixed at 85, below an exact
    match. Otherwise the score is the normalized Levenshtein similarity.
    Empty input scores 0, including two empty strings.
    """
    left = normalize_for_match(a or "")
    right = normalize_for_match(b or "")
    if not left or not right:
        return 0.0
    if left == right:
        return EXACT_SCORE
    if left in right or right in left:
        return CONTAINMENT_SCORE
    distance = Levenshtein.distance(left, right)
    return max(0.0, (1 - distance / max(len(left), len(right))) * 100)
