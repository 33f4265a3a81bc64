"""
Fuzzy matching strategy for ability names.

Literal prefix relationships are trusted more than edit distance, because
ability names are often truncated or suffixed variants of each other:

1. normalized equality                  -> 1.0
2. target starts with search            -> [0.9, 1.0)
3. search starts with target            -> 0.8
4. otherwise edit-distance similarity   -> scaled by 0.7
"""
from typing import Callable, Iterable, List, Optional

from ..models import ReferenceLibraryEntry
from ..utils.text import normalize_name
from .levenshtein import levenshtein_distance
from .resolution_result import MatchCandidate

LIST_THRESHOLD = 0.3
BEST_GUESS_THRESHOLD = 0.5


class FuzzyMatcher:
    """
    Scores a search string against catalog entry names.
    
    Usage:
        matcher = FuzzyMatcher()
        matcher.score("Whirlwind", "Whirlwind Strike")   # 0.9 + 9/16 * 0.1
        matcher.rank("Whirlwnd", entries)                 # candidates >= 0.3
    """
    
    def __init__(
        self,
        list_threshold: float = LIST_THRESHOLD,
        best_guess_threshold: float = BEST_GUESS_THRESHOLD,
    ):
        """
        Initialize fuzzy matcher.
        
        :param list_threshold: Minimum score for candidate lists (0.0-1.0)
        :param best_guess_threshold: Minimum score for a single best guess (0.0-1.0)
        """
        for name, value in (("list_threshold", list_threshold), ("best_guess_threshold", best_guess_threshold)):
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be between 0.0 and 1.0, got {value}")
        
        self.list_threshold = list_threshold
        self.best_guess_threshold = best_guess_threshold
    
    @staticmethod
    def score(search: str, target: str) -> float:
        """
        Score how well target matches search.
        
        :return: Score between 0.0 and 1.0
        """
        s = normalize_name(search)
        t = normalize_name(target)
        
        if s == t:
            return 1.0
        
        if t.startswith(s):
            return 0.9 + (len(s) / len(t)) * 0.1
        
        if s.startswith(t):
            return 0.8
        
        max_len = max(len(s), len(t))
        similarity = 1 - levenshtein_distance(s, t) / max_len
        return similarity * 0.7
    
    def rank(
        self,
        search: str,
        entries: Iterable[ReferenceLibraryEntry],
        label: Callable[[ReferenceLibraryEntry], str],
        threshold: Optional[float] = None,
    ) -> List[MatchCandidate]:
        """
        Score entries and keep those at or above threshold.
        
        :param search: Search text
        :param entries: Entries to score
        :param label: Display label for an entry (used as tie-break)
        :param threshold: Acceptance threshold, defaults to list_threshold
        :return: Candidates ordered by score descending, then label
        """
        if threshold is None:
            threshold = self.list_threshold
        
        normalized_search = normalize_name(search)
        candidates = []
        for entry in entries:
            score = self.score(search, entry.name)
            if score >= threshold:
                candidates.append(MatchCandidate(
                    entry=entry,
                    score=score,
                    is_exact=normalize_name(entry.name) == normalized_search,
                    label=label(entry),
                ))
        
        return sort_candidates(candidates)
    
    def best_guess(
        self,
        search: str,
        entries: Iterable[ReferenceLibraryEntry],
        label: Callable[[ReferenceLibraryEntry], str],
    ) -> Optional[MatchCandidate]:
        """Return the single best candidate scoring at least best_guess_threshold."""
        ranked = self.rank(search, entries, label, threshold=self.best_guess_threshold)
        return ranked[0] if ranked else None


def sort_candidates(candidates: List[MatchCandidate]) -> List[MatchCandidate]:
    """Order by score descending, ties alphabetically by display label."""
    return sorted(candidates, key=lambda c: (-c.score, c.label.lower(), c.entry.unique_id))
