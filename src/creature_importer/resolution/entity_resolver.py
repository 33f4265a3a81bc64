"""
Entity resolver for imported ability names.

Combines the reference library index, the fuzzy matcher and the
match-selection policy.
"""
import logging
from typing import Dict, Optional

from ..catalog.index import QueryConstraints, ReferenceLibraryIndex
from ..models import AbilityKind, ReferenceLibraryEntry
from .fuzzy_matcher import FuzzyMatcher
from .resolution_policy import ResolutionPolicy
from .resolution_result import MatchCandidate, Resolution

logger = logging.getLogger(__name__)

# Skill hints that mean "no skill filter"
_NO_SKILL_HINTS = {"", "none", "undefined", "null"}


class EntityResolver:
    """
    Resolves a free-text ability name to a catalog entry.
    
    Usage:
        resolver = EntityResolver(index)
        resolution = await resolver.resolve("Whirlwind", AbilityKind.MASTERY, "melee", 3)
        if resolution.is_auto_matched:
            entry = resolution.entry
    """
    
    def __init__(
        self,
        index: ReferenceLibraryIndex,
        matcher: Optional[FuzzyMatcher] = None,
        skill_labels: Optional[Dict[str, str]] = None,
    ):
        """
        :param index: Reference library index to query
        :param matcher: Fuzzy matcher (default thresholds 0.3 / 0.5)
        :param skill_labels: Skill key -> display label, used in candidate labels
        """
        self._index = index
        self._matcher = matcher or FuzzyMatcher()
        self._skill_labels = skill_labels or {}
        self._policy = ResolutionPolicy(self._matcher, self.label_for)
    
    @property
    def index(self) -> ReferenceLibraryIndex:
        return self._index
    
    @property
    def matcher(self) -> FuzzyMatcher:
        return self._matcher
    
    def label_for(self, entry: ReferenceLibraryEntry) -> str:
        """Display label: entry name, plus the skill label when bound to a skill."""
        if not entry.skill:
            return entry.name
        return f"{entry.name} ({self._skill_labels.get(entry.skill, entry.skill)})"
    
    def skill_label(self, skill: Optional[str]) -> str:
        if not skill:
            return ""
        return self._skill_labels.get(skill, skill)
    
    async def resolve(
        self,
        name: str,
        kind: AbilityKind,
        skill_hint: Optional[str] = None,
        level_ceiling: Optional[int] = None,
    ) -> Resolution:
        """
        Resolve an ability name under kind/skill/ceiling constraints.
        
        :param name: Free-text ability name
        :param kind: Mastery or spell
        :param skill_hint: Skill key to restrict to (None for any skill)
        :param level_ceiling: Highest level/grade allowed (None for no limit)
        :return: AutoMatched, AmbiguousCandidates or NoMatch
        """
        constraints = QueryConstraints(
            skill=normalize_skill_hint(skill_hint),
            level_ceiling=level_ceiling,
        )
        
        hits = await self._index.lookup_exact_or_prefix(name, kind, constraints)
        resolution = self._policy.select_from_hits(name, hits)
        if resolution is not None:
            return resolution
        
        pool = await self._index.query(kind, constraints)
        return self._policy.select_from_pool(name, pool)
    
    async def suggest_skill(
        self,
        name: str,
        kind: AbilityKind,
        level_ceiling: Optional[int] = None,
    ) -> Optional[MatchCandidate]:
        """
        Find the single best candidate across all skills.
        
        Used to pre-bind the skill filter when an ability carries no usable
        skill hint. Ties are broken by skill label.
        
        :return: Best candidate scoring at least the best-guess threshold, or None
        """
        pool = await self._index.query(kind, QueryConstraints(level_ceiling=level_ceiling))
        ranked = self._matcher.rank(name, pool, self.label_for, threshold=self._matcher.best_guess_threshold)
        if not ranked:
            return None
        
        top_score = ranked[0].score
        best = min(
            (c for c in ranked if c.score == top_score),
            key=lambda c: (self.skill_label(c.entry.skill).lower(), c.label.lower()),
        )
        logger.info(
            f"Best skill for '{name}': {best.entry.skill} via '{best.entry.name}' (score {best.score:.2f})"
        )
        return best


def normalize_skill_hint(skill_hint: Optional[str]) -> Optional[str]:
    """Treat empty or placeholder hints as "no skill filter"."""
    if skill_hint is None:
        return None
    hint = str(skill_hint).strip().lower()
    return None if hint in _NO_SKILL_HINTS else hint
