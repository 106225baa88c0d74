"""Normalized edit-distance similarity between two strings."""

from typing import Optional

from rapidfuzz.distance import Levenshtein


def levenshtein(a: str, b: str) -> int:
    """Unit-cost insert/delete/substitute distance over code points."""
    return Levenshtein.distance(a, b)


def similarity(a: Optional[str], b: Optional[str]) -> float:
    """Calculate the normalized similarity of two strings.

    Both inputs are trimmed and compared case-insensitively. The distance
    is divided by the length of the longer trimmed input.

    Args:
        a: First string.
        b: Second string.

    Returns:
        Similarity between 0.0 and 1.0; 0.0 if either input is blank.
    """
    a = (a or '').strip()
    b = (b or '').strip()
    if not a or not b:
        return 0.0

    max_len = max(len(a), len(b))
    distance = levenshtein(a.lower(), b.lower())
    # Lowercasing may lengthen a few code points (e.g. 'İ')
    return max(0.0, 1.0 - distance / max_len)
