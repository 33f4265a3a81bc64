"""
Result types for ability resolution.

A resolution attempt ends in exactly one of AutoMatched,
AmbiguousCandidates or NoMatch. NoMatch is a valid outcome that is shown
to the operator, not an error.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from ..models import ReferenceLibraryEntry


@dataclass(frozen=True)
class MatchCandidate:
    """
    A scored catalog entry produced for one resolution attempt.
    
    Attributes:
        entry: The catalog entry
        score: Match score between 0.0 and 1.0
        is_exact: Whether the normalized names are equal
        label: Display label (entry name plus skill label)
    """
    entry: ReferenceLibraryEntry
    score: float
    is_exact: bool = False
    label: str = ""
    
    def __post_init__(self):
        """Validate score."""
        if not 0.0 <= self.score <= 1.0:
            raise ValueError(f"Score must be between 0.0 and 1.0, got {self.score}")


@dataclass(frozen=True)
class Resolution:
    original_query: str
    strategy_used: str
    
    @property
    def best_guess(self) -> Optional[ReferenceLibraryEntry]:
        return None
    
    @property
    def is_auto_matched(self) -> bool:
        return False


@dataclass(frozen=True)
class AutoMatched(Resolution):
    """Exactly one exact-or-prefix candidate existed; safe to bind without asking."""
    entry: Optional[ReferenceLibraryEntry] = None
    
    @property
    def best_guess(self) -> Optional[ReferenceLibraryEntry]:
        return self.entry
    
    @property
    def is_auto_matched(self) -> bool:
        return True


@dataclass(frozen=True)
class AmbiguousCandidates(Resolution):
    """Several plausible candidates; the operator must choose."""
    candidates: List[MatchCandidate] = field(default_factory=list)
    
    @property
    def best_guess(self) -> Optional[ReferenceLibraryEntry]:
        return self.candidates[0].entry if self.candidates else None


@dataclass(frozen=True)
class NoMatch(Resolution):
    """Nothing in the filtered catalog scored above the list threshold."""
