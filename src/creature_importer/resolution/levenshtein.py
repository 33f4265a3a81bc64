"""
Edit distance primitive.

Callers normalize case and whitespace before calling.
"""
from rapidfuzz.distance import Levenshtein


def levenshtein_distance(a: str, b: str) -> int:
    """Unit-cost insert/delete/substitute distance between two strings."""
    return Levenshtein.distance(a, b)
