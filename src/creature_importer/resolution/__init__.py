"""
Ability name resolution.

Key components:
- levenshtein_distance: edit distance primitive
- FuzzyMatcher: bounded match score with prefix-first heuristics
- ResolutionPolicy: exact -> unique prefix -> fuzzy candidate list
- EntityResolver: resolves names against the reference library index
"""
from .levenshtein import levenshtein_distance
from .resolution_result import (
    MatchCandidate,
    Resolution,
    AutoMatched,
    AmbiguousCandidates,
    NoMatch,
)
from .fuzzy_matcher import FuzzyMatcher, sort_candidates
from .resolution_policy import ResolutionPolicy
from .entity_resolver import EntityResolver, normalize_skill_hint
from .resolver_factory import create_entity_resolver

__all__ = [
    "levenshtein_distance",
    "MatchCandidate",
    "Resolution",
    "AutoMatched",
    "AmbiguousCandidates",
    "NoMatch",
    "FuzzyMatcher",
    "sort_candidates",
    "ResolutionPolicy",
    "EntityResolver",
    "normalize_skill_hint",
    "create_entity_resolver",
]
