"""
Match-selection policy.

Precision first: an ability is bound automatically only when the evidence
is unique, never merely because one candidate scored highest.

1. exactly one exact-or-prefix hit      -> AutoMatched
2. two or more exact-or-prefix hits     -> AmbiguousCandidates
3. no hit, fuzzy candidates >= list
   threshold                            -> AmbiguousCandidates
4. otherwise                            -> NoMatch
"""
import logging
from typing import Callable, List, Optional

from ..catalog.index import IndexHit
from ..models import ReferenceLibraryEntry
from .fuzzy_matcher import FuzzyMatcher, sort_candidates
from .resolution_result import AmbiguousCandidates, AutoMatched, MatchCandidate, NoMatch, Resolution

logger = logging.getLogger(__name__)


class ResolutionPolicy:
    """
    Turns index hits and a fuzzy candidate pool into a Resolution.
    """
    
    def __init__(self, matcher: FuzzyMatcher, label: Callable[[ReferenceLibraryEntry], str]):
        """
        :param matcher: Fuzzy matcher used to score and rank candidates
        :param label: Display label for an entry
        """
        self._matcher = matcher
        self._label = label
    
    def select_from_hits(self, query: str, hits: List[IndexHit]) -> Optional[Resolution]:
        """
        Apply steps 1 and 2.
        
        :return: A Resolution, or None when there were no hits
        """
        if not hits:
            return None
        
        if len(hits) == 1:
            hit = hits[0]
            strategy = "exact" if hit.is_exact else "prefix"
            logger.info(f"Resolved '{query}' -> '{hit.entry.name}' ({strategy} match)")
            return AutoMatched(original_query=query, strategy_used=strategy, entry=hit.entry)
        
        candidates: List[MatchCandidate] = [
            MatchCandidate(
                entry=hit.entry,
                score=1.0 if hit.is_exact else self._matcher.score(query, hit.entry.name),
                is_exact=hit.is_exact,
                label=self._label(hit.entry),
            )
            for hit in hits
        ]
        logger.info(
            f"Multiple matches for '{query}' ({len(hits)}), not auto-assigning: "
            f"{[hit.entry.name for hit in hits]}"
        )
        return AmbiguousCandidates(
            original_query=query,
            strategy_used="exact" if any(hit.is_exact for hit in hits) else "prefix",
            candidates=sort_candidates(candidates),
        )
    
    def select_from_pool(self, query: str, pool: List[ReferenceLibraryEntry]) -> Resolution:
        """Apply steps 3 and 4 over the filtered candidate pool."""
        candidates = self._matcher.rank(query, pool, self._label)
        
        if not candidates:
            logger.info(f"No match found for '{query}'")
            return NoMatch(original_query=query, strategy_used="fuzzy")
        
        logger.info(
            f"Fuzzy candidates for '{query}': "
            f"{[(c.entry.name, round(c.score, 2)) for c in candidates[:5]]}"
        )
        return AmbiguousCandidates(original_query=query, strategy_used="fuzzy", candidates=candidates)
