"""
Resolution session state.

Tracks the queue of unresolved abilities for one creature import, the
cursor into it and the outcome recorded for every item.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from ..models import ReferenceLibraryEntry, UnresolvedAbilityRef


class WorkflowState(str, Enum):
    IDLE = "idle"
    PRESENTING = "presenting"
    COMPLETED = "completed"
    ABORTED = "aborted"


class ItemOutcome(str, Enum):
    ASSIGNED = "assigned"
    SKIPPED = "skipped"        # left as a manually tagged placeholder
    DISCARDED = "discarded"    # not reached because the session was aborted
    REMOVED = "removed"        # removed by someone else before it was presented


@dataclass(frozen=True)
class Assign:
    entry_id: str


@dataclass(frozen=True)
class Skip:
    pass


@dataclass(frozen=True)
class Abort:
    pass


Decision = Union[Assign, Skip, Abort]


@dataclass
class ItemRecord:
    ref: UnresolvedAbilityRef
    outcome: ItemOutcome
    entry: Optional[ReferenceLibraryEntry] = None


@dataclass
class ResolutionSession:
    """
    Session state object.
    
    The cursor only moves forward; an index that has been passed is never
    presented again.
    """
    queue: List[UnresolvedAbilityRef] = field(default_factory=list)
    cursor: int = 0
    state: WorkflowState = WorkflowState.IDLE
    history: List[ItemRecord] = field(default_factory=list)
    
    def current(self) -> Optional[UnresolvedAbilityRef]:
        """Item under the cursor, or None when the queue is exhausted."""
        if self.cursor >= len(self.queue):
            return None
        return self.queue[self.cursor]
    
    def advance(self) -> None:
        self.cursor += 1
    
    def remaining(self) -> List[UnresolvedAbilityRef]:
        return self.queue[self.cursor:]
    
    def record(
        self,
        ref: UnresolvedAbilityRef,
        outcome: ItemOutcome,
        entry: Optional[ReferenceLibraryEntry] = None,
    ) -> None:
        self.history.append(ItemRecord(ref=ref, outcome=outcome, entry=entry))
    
    def is_terminal(self) -> bool:
        return self.state in (WorkflowState.COMPLETED, WorkflowState.ABORTED)
    
    def refs_with(self, outcome: ItemOutcome) -> List[UnresolvedAbilityRef]:
        return [item.ref for item in self.history if item.outcome == outcome]


@dataclass
class WorkflowReport:
    """Summary of a finished (or aborted) session."""
    state: WorkflowState
    assigned: List[ItemRecord] = field(default_factory=list)
    skipped: List[UnresolvedAbilityRef] = field(default_factory=list)
    discarded: List[UnresolvedAbilityRef] = field(default_factory=list)
    removed: List[UnresolvedAbilityRef] = field(default_factory=list)
    
    @property
    def is_partial(self) -> bool:
        return self.state == WorkflowState.ABORTED
    
    @classmethod
    def from_session(cls, session: ResolutionSession) -> "WorkflowReport":
        return cls(
            state=session.state,
            assigned=[item for item in session.history if item.outcome == ItemOutcome.ASSIGNED],
            skipped=session.refs_with(ItemOutcome.SKIPPED),
            discarded=session.refs_with(ItemOutcome.DISCARDED),
            removed=session.refs_with(ItemOutcome.REMOVED),
        )
